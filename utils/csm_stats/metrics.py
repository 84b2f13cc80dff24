# utils/csm_stats/metrics.py
"""
CSM Calculations for the CSM Stats page

Two tables, one row per rostered CSM plus a Totals row:
- Client Onboarding: clients whose started_on falls in the date range
- Customer Retention: the CSM's whole client book (churn is date-ranged)

VERSION: 1.0.0
"""

import logging
from typing import Dict, List, Optional

import pandas as pd

from utils.common.calculations import safe_rate, safe_ratio, weighted_average
from utils.common.constants import TOTALS_LABEL
from utils.common.date_range import DateRange, to_timestamps
from utils.common.durations import (
    average_duration,
    minutes_between,
    weighted_average_duration,
)
from .constants import (
    CLIENT_COLUMNS,
    TIMESTAMP_COLUMNS,
    NUMERIC_COLUMNS,
    STATUS_ACTIVE,
    STATUS_CC_DECLINED,
    DEFAULT_INACTIVE_DAYS,
    DEFAULT_ACTIVATION_THRESHOLD_MINUTES,
    ONBOARDING_COUNT_FIELDS,
    RETENTION_COUNT_FIELDS,
    RETENTION_MANAGING_WEIGHTED_FIELDS,
)

logger = logging.getLogger(__name__)


def prepare_clients(clients_df: pd.DataFrame) -> pd.DataFrame:
    """Copy of the client rows with parsed timestamps and numeric counters."""
    df = clients_df.copy() if clients_df is not None else pd.DataFrame()

    for col in CLIENT_COLUMNS:
        if col not in df.columns:
            df[col] = None

    for col in TIMESTAMP_COLUMNS:
        df[col] = to_timestamps(df[col])

    for col in NUMERIC_COLUMNS:
        df[col] = pd.to_numeric(df[col], errors="coerce")

    return df


class CSMStatsMetrics:
    """
    Per-CSM onboarding and retention metrics.

    Usage:
        metrics = CSMStatsMetrics(clients_df, date_range, csm_names)
        onboarding_df = metrics.build_onboarding_table()
        retention_df = metrics.build_retention_table()
    """

    def __init__(
        self,
        clients_df: pd.DataFrame,
        date_range: DateRange,
        csm_names: List[str],
        now: Optional[pd.Timestamp] = None,
        inactive_days: int = DEFAULT_INACTIVE_DAYS,
        activation_threshold_minutes: int = DEFAULT_ACTIVATION_THRESHOLD_MINUTES,
    ):
        """
        Args:
            clients_df: All client rows
            date_range: Range applied to started_on (onboarding) and churned_on
            csm_names: Roster; output rows follow this order
            now: Reference time for inactivity (defaults to current UTC time)
            inactive_days: Days without meaningful activity before a client counts as inactive
            activation_threshold_minutes: Max minutes_to_100_usage for "activated <30d"
        """
        self.date_range = date_range
        self.csm_names = list(csm_names)
        self.inactive_days = inactive_days
        self.activation_threshold_minutes = activation_threshold_minutes

        now = pd.Timestamp(now) if now is not None else pd.Timestamp.now(tz="UTC")
        if now.tzinfo is not None:
            now = now.tz_convert(None)
        self.now = now

        self.clients = prepare_clients(clients_df)
        self.onboarding_clients = self.clients[self.date_range.contains(self.clients["started_on"])]

        logger.debug(
            f"[CSMStatsMetrics] {len(self.clients)} clients, "
            f"{len(self.onboarding_clients)} started in {self.date_range.label()}"
        )

    # =========================================================================
    # CLIENT ONBOARDING
    # =========================================================================

    def calculate_onboarding_row(self, csm_name: str) -> Dict:
        rows = self.onboarding_clients[self.onboarding_clients["csm_name"] == csm_name]
        new_clients = len(rows)

        forms_completed = int(rows["form_complete_time"].notna().sum())
        onboard_call_show = int(rows["onboarding_call_time"].notna().sum())
        launch_call_show = int(rows["launch_call_time"].notna().sum())

        ttfv_minutes = rows["minutes_to_first_value"]
        tta_minutes = rows["minutes_to_100_usage"]
        activated = int((tta_minutes <= self.activation_threshold_minutes).sum())

        return {
            "csm": csm_name,
            "new_clients": new_clients,
            "forms_missing": new_clients - forms_completed,
            "form_complete_pct": safe_rate(forms_completed, new_clients),
            "form_complete_time_avg": average_duration(
                minutes_between(rows["started_on"], rows["form_complete_time"])
            ),
            "onboard_call_show": onboard_call_show,
            "onboard_call_show_pct": safe_rate(onboard_call_show, new_clients),
            "time_to_onboard_call_avg": average_duration(
                minutes_between(rows["started_on"], rows["onboarding_call_time"])
            ),
            "launch_call_show": launch_call_show,
            "launch_call_show_pct": safe_rate(launch_call_show, new_clients),
            "time_to_launch_call_avg": average_duration(
                minutes_between(rows["started_on"], rows["launch_call_time"])
            ),
            "ttfv": average_duration(ttfv_minutes[ttfv_minutes > 0]),
            "tta": average_duration(tta_minutes[tta_minutes > 0]),
            "activated_under_30_days": activated,
            "activated_under_30_days_pct": safe_rate(activated, new_clients),
        }

    @staticmethod
    def calculate_onboarding_totals(rows: List[Dict]) -> Dict:
        """
        Totals across CSMs.

        Percentages are recomputed from summed counts, except Form Complete %
        which is weighted by new clients. Durations are weighted averages.
        """
        totals = {"csm": TOTALS_LABEL}
        for field in ONBOARDING_COUNT_FIELDS:
            totals[field] = int(sum(row[field] for row in rows))

        new_clients = totals["new_clients"]

        totals["form_complete_pct"] = weighted_average(
            (row["form_complete_pct"], row["new_clients"]) for row in rows
        )
        totals["onboard_call_show_pct"] = safe_rate(totals["onboard_call_show"], new_clients)
        totals["launch_call_show_pct"] = safe_rate(totals["launch_call_show"], new_clients)
        totals["activated_under_30_days_pct"] = safe_rate(totals["activated_under_30_days"], new_clients)

        totals["form_complete_time_avg"] = weighted_average_duration(
            (row["form_complete_time_avg"], row["new_clients"]) for row in rows
        )
        totals["time_to_onboard_call_avg"] = weighted_average_duration(
            (row["time_to_onboard_call_avg"], row["onboard_call_show"]) for row in rows
        )
        totals["time_to_launch_call_avg"] = weighted_average_duration(
            (row["time_to_launch_call_avg"], row["launch_call_show"]) for row in rows
        )
        totals["ttfv"] = weighted_average_duration((row["ttfv"], row["new_clients"]) for row in rows)
        totals["tta"] = weighted_average_duration((row["tta"], row["new_clients"]) for row in rows)

        return totals

    def build_onboarding_table(self) -> pd.DataFrame:
        rows = [self.calculate_onboarding_row(name) for name in self.csm_names]
        return pd.DataFrame(rows + [self.calculate_onboarding_totals(rows)])

    # =========================================================================
    # CUSTOMER RETENTION
    # =========================================================================

    def calculate_retention_row(self, csm_name: str) -> Dict:
        rows = self.clients[self.clients["csm_name"] == csm_name]

        active = rows["status"] == STATUS_ACTIVE
        clients_managing = int(active.sum())

        churned = int(self.date_range.contains(rows["churned_on"]).sum())

        cutoff = self.now - pd.Timedelta(days=self.inactive_days)
        last_activity = rows["last_meaningful_activity_time"]
        inactive = int((active & (last_activity.isna() | (last_activity < cutoff))).sum())

        cc_declined = int((rows["status"] == STATUS_CC_DECLINED).sum())

        return {
            "csm": csm_name,
            "clients_managing": clients_managing,
            # No data source yet for health index / CSAT / refunds
            "chi": 0,
            "inactive_clients_pct": safe_rate(inactive, clients_managing),
            "avg_monthly_usage_per_client": safe_ratio(rows["total_usage"].fillna(0).sum(), clients_managing),
            "avg_monthly_reviews": safe_ratio(rows["new_reviews"].fillna(0).sum(), clients_managing),
            "avg_monthly_new_leads": safe_ratio(rows["new_website_leads"].fillna(0).sum(), clients_managing),
            "csat_count": 0,
            "csat_good_pct": 0,
            "cc_declined": cc_declined,
            "cc_declined_rate": safe_rate(cc_declined, clients_managing),
            "refund_dispute_rate": 0,
            "churned": churned,
            "churn_rate": safe_rate(churned, clients_managing),
        }

    @staticmethod
    def calculate_retention_totals(rows: List[Dict]) -> Dict:
        """
        Totals across CSMs.

        Averages are weighted by clients managed (CSAT Good % by CSAT count);
        CC declined and churn rates are recomputed from summed counts.
        """
        totals = {"csm": TOTALS_LABEL}
        for field in RETENTION_COUNT_FIELDS:
            totals[field] = int(sum(row[field] for row in rows))

        for field in RETENTION_MANAGING_WEIGHTED_FIELDS:
            totals[field] = weighted_average((row[field], row["clients_managing"]) for row in rows)

        totals["csat_good_pct"] = weighted_average(
            (row["csat_good_pct"], row["csat_count"]) for row in rows
        )
        totals["cc_declined_rate"] = safe_rate(totals["cc_declined"], totals["clients_managing"])
        totals["churn_rate"] = safe_rate(totals["churned"], totals["clients_managing"])

        return totals

    def build_retention_table(self) -> pd.DataFrame:
        rows = [self.calculate_retention_row(name) for name in self.csm_names]
        return pd.DataFrame(rows + [self.calculate_retention_totals(rows)])

    # =========================================================================
    # ALL TABLES
    # =========================================================================

    def calculate_all(self) -> Dict[str, pd.DataFrame]:
        return {
            "onboarding": self.build_onboarding_table(),
            "retention": self.build_retention_table(),
        }
