# utils/sales_stats/table_configs.py
"""Column metadata for the Sales Stats tables."""

from utils.common.data_table import TableColumn, TableConfig

SETTER_CONFIG = TableConfig(
    title="SETTER",
    columns=[
        TableColumn("setter", "SETTER", "text", "Setter name"),
        TableColumn("time_to_contact", "Time To Contact", "todo", "Time to contact"),
        TableColumn("appts_booked", "Appts Booked", "integer", "Appointments booked"),
        TableColumn("appts_showed", "Appts Showed", "integer", "Appointments that showed"),
        TableColumn("show_rate", "Show Rate %", "percentage",
                    "Percentage of appointments that showed"),
        TableColumn("appts_closed", "Appts Closed", "integer", "Appointments that closed"),
        TableColumn("close_rate", "Close Rate %", "percentage",
                    "Percentage of showed appointments that closed"),
    ],
    sticky_columns=["setter"],
    pin_last_row=True,
)

CLOSER_CONFIG = TableConfig(
    title="CLOSER",
    columns=[
        TableColumn("closer", "CLOSER", "text", "Closer name"),
        TableColumn("appts_taken", "Appts Taken", "integer", "Appointments taken (showed)"),
        TableColumn("show_rate", "Show Rate %", "percentage",
                    "Percentage of appointments that showed"),
        TableColumn("closed_paid", "Closed (Paid)", "integer",
                    "Closed opportunities with paid status"),
        TableColumn("closed_trial", "Closed (Trial)", "integer",
                    "Closed opportunities with trial status"),
        TableColumn("close_rate", "Close Rate %", "percentage",
                    "Percentage of appointments that closed"),
        TableColumn("upgrades", "Upgrades", "integer", "Number of upgrades"),
        TableColumn("upgrade_rate", "Upgrade Rate %", "percentage",
                    "Percentage of closed opportunities that upgraded"),
    ],
    sticky_columns=["closer"],
    pin_last_row=True,
)
