# utils/va_stats/table_configs.py
"""Column metadata for the VA Stats table."""

from utils.common.data_table import TableColumn, TableConfig

VA_STATS_CONFIG = TableConfig(
    title="VA Stats",
    columns=[
        TableColumn("va", "VA", "text", width="medium"),
        TableColumn("sites_completed", "Sites Completed", "integer",
                    "Sites completed in the date range"),
        TableColumn("sites_avg_completion_time", "Avg Completion Time (Sites)", "duration",
                    "Average completion time for sites completed in the date range"),
        TableColumn("open_projects", "Open Projects", "integer",
                    "Started sites not yet done"),
        TableColumn("revisions_completed", "Revisions Completed", "integer",
                    "Revisions completed in the date range"),
        TableColumn("revisions_avg_completion_time", "Avg Completion Time (Revisions)", "duration",
                    "Average completion time for revisions completed in the date range"),
        TableColumn("open_revisions", "Open Revisions", "integer",
                    "Revisions not yet finished"),
    ],
    sticky_columns=["va"],
    pin_last_row=True,
)
