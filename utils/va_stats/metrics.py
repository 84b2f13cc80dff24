# utils/va_stats/metrics.py
"""
VA delivery metrics: websites built from the client list, revisions
from website_revision_logs.

Completion times only count positive durations; a VA with no completed
work in the range shows "0d 0h 0m".
"""

import logging
from typing import Dict, List

import pandas as pd

from utils.common.constants import VA_TOTAL_LABEL
from utils.common.date_range import DateRange, to_timestamps
from utils.common.durations import (
    average_positive_minutes,
    minutes_between,
    minutes_to_duration,
    parse_duration_to_minutes,
)
from .queries import VA_CLIENT_COLUMNS, REVISION_LOG_COLUMNS

logger = logging.getLogger(__name__)


def _prepare(df: pd.DataFrame, columns: List[str], timestamp_columns: List[str]) -> pd.DataFrame:
    df = df.copy() if df is not None else pd.DataFrame()
    for col in columns:
        if col not in df.columns:
            df[col] = None
    for col in timestamp_columns:
        df[col] = to_timestamps(df[col])
    return df


def va_names(clients_df: pd.DataFrame, logs_df: pd.DataFrame, excluded: List[str]) -> List[str]:
    """Union of delivery people and revision assignees, minus blanks and excluded names."""
    excluded = {name.strip() for name in excluded}
    names = set()
    for values in (clients_df["delivery_person"], logs_df["asignee"]):
        for name in values.dropna():
            if not isinstance(name, str):
                continue
            if name.strip() and name.strip() not in excluded:
                names.add(name)
    return sorted(names)


class VAStatsMetrics:
    """
    Per-VA site and revision throughput.

    Usage:
        metrics = VAStatsMetrics(clients_df, logs_df, date_range, excluded_names)
        va_df = metrics.build_table()
    """

    def __init__(
        self,
        clients_df: pd.DataFrame,
        logs_df: pd.DataFrame,
        date_range: DateRange,
        excluded_names: List[str] = None,
    ):
        self.date_range = date_range
        self.clients = _prepare(clients_df, VA_CLIENT_COLUMNS, ["started_on", "site_done_at"])
        self.logs = _prepare(logs_df, REVISION_LOG_COLUMNS, ["created_at", "finished_at"])
        self.va_list = va_names(self.clients, self.logs, excluded_names or [])

    def calculate_row(self, va: str) -> Dict:
        clients = self.clients[self.clients["delivery_person"] == va]
        sites_done = clients[self.date_range.contains(clients["site_done_at"])]
        site_minutes = minutes_between(sites_done["started_on"], sites_done["site_done_at"])
        open_projects = int((clients["site_done_at"].isna() & clients["started_on"].notna()).sum())

        logs = self.logs[self.logs["asignee"] == va]
        revisions_done = logs[self.date_range.contains(logs["finished_at"])]
        revision_minutes = minutes_between(revisions_done["created_at"], revisions_done["finished_at"])
        open_revisions = int(logs["finished_at"].isna().sum())

        return {
            "va": va,
            "sites_completed": len(sites_done),
            "sites_avg_completion_time": minutes_to_duration(average_positive_minutes(site_minutes)),
            "open_projects": open_projects,
            "revisions_completed": len(revisions_done),
            "revisions_avg_completion_time": minutes_to_duration(average_positive_minutes(revision_minutes)),
            "open_revisions": open_revisions,
        }

    @staticmethod
    def calculate_totals(rows: List[Dict]) -> Dict:
        """Sums of counts; completion times are the mean of the positive per-VA averages."""
        def mean_of_averages(field):
            return minutes_to_duration(
                average_positive_minutes(parse_duration_to_minutes(row[field]) for row in rows)
            )

        return {
            "va": VA_TOTAL_LABEL,
            "sites_completed": sum(row["sites_completed"] for row in rows),
            "sites_avg_completion_time": mean_of_averages("sites_avg_completion_time"),
            "open_projects": sum(row["open_projects"] for row in rows),
            "revisions_completed": sum(row["revisions_completed"] for row in rows),
            "revisions_avg_completion_time": mean_of_averages("revisions_avg_completion_time"),
            "open_revisions": sum(row["open_revisions"] for row in rows),
        }

    def build_table(self) -> pd.DataFrame:
        rows = [self.calculate_row(va) for va in self.va_list]
        logger.debug(f"[VAStatsMetrics] {len(rows)} VAs in {self.date_range.label()}")
        return pd.DataFrame(rows + [self.calculate_totals(rows)])
