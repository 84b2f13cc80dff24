# utils/sales_stats/metrics.py
"""
Setter / Closer Calculations for the Sales Stats page

Appointments are dated by appointment_date, opportunities by updated_at.
Rates are kept as unrounded floats; the table renders two decimals.

VERSION: 1.0.0
"""

import logging
from typing import Dict, List, Set, Tuple

import numpy as np
import pandas as pd

from utils.common.calculations import safe_rate
from utils.common.constants import TOTALS_LABEL
from utils.common.date_range import DateRange, to_timestamps
from .constants import (
    APPOINTMENT_COLUMNS,
    OPPORTUNITY_COLUMNS,
    APPOINTMENT_SHOWED,
    OPPORTUNITY_WON,
    OPPORTUNITY_TRIAL,
    TIME_TO_CONTACT_PLACEHOLDER,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PREPARATION
# =============================================================================

def _ensure_columns(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    df = df.copy() if df is not None else pd.DataFrame()
    for col in columns:
        if col not in df.columns:
            df[col] = None
    return df


def _normalized_status(values: pd.Series) -> pd.Series:
    return values.fillna("").astype(str).str.strip().str.lower()


def _clean(value):
    """NaN → None so missing values compare equal in match keys."""
    if value is None:
        return None
    if isinstance(value, float) and np.isnan(value):
        return None
    return value


def _is_true(value) -> bool:
    return isinstance(value, (bool, np.bool_)) and bool(value)


def prepare_appointments(appointments_df: pd.DataFrame) -> pd.DataFrame:
    df = _ensure_columns(appointments_df, APPOINTMENT_COLUMNS)
    df["appointment_date"] = to_timestamps(df["appointment_date"])
    df["status_norm"] = _normalized_status(df["status"])
    return df


def prepare_opportunities(opportunities_df: pd.DataFrame) -> pd.DataFrame:
    df = _ensure_columns(opportunities_df, OPPORTUNITY_COLUMNS)
    df["updated_at"] = to_timestamps(df["updated_at"])
    df["status_norm"] = _normalized_status(df["status"])
    return df


def roster_names(values: pd.Series, roster: List[str]) -> List[str]:
    """Distinct non-blank names present in both the data and the roster, sorted."""
    allowed = set(roster)
    names = {
        name for name in values.dropna()
        if isinstance(name, str) and name.strip() and name in allowed
    }
    return sorted(names)


# =============================================================================
# METRICS
# =============================================================================

class SalesStatsMetrics:
    """
    Setter and closer performance for a date range.

    Usage:
        metrics = SalesStatsMetrics(opps_df, appts_df, date_range,
                                    setter_roster, closer_roster, excluded_show_closers)
        setter_df = metrics.build_setter_table()
        closer_df = metrics.build_closer_table()
    """

    def __init__(
        self,
        opportunities_df: pd.DataFrame,
        appointments_df: pd.DataFrame,
        date_range: DateRange,
        setter_roster: List[str],
        closer_roster: List[str],
        excluded_show_closers: List[str] = None,
    ):
        self.date_range = date_range
        self.setter_roster = list(setter_roster)
        self.closer_roster = list(closer_roster)
        self.excluded_show_closers = list(excluded_show_closers or [])

        self.opportunities = prepare_opportunities(opportunities_df)
        self.appointments = prepare_appointments(appointments_df)

        self.appointments_in_range = self.appointments[
            self.date_range.contains(self.appointments["appointment_date"])
        ]
        self.opportunities_in_range = self.opportunities[
            self.date_range.contains(self.opportunities["updated_at"])
        ]
        self._won_keys = self._build_won_keys()

        self.setter_names = roster_names(self.appointments["setter"], self.setter_roster)
        self.closer_names = roster_names(self.appointments["closer"], self.closer_roster)

        logger.debug(
            f"[SalesStatsMetrics] {len(self.appointments_in_range)} appointments and "
            f"{len(self.opportunities_in_range)} opportunities in {self.date_range.label()}"
        )

    def _build_won_keys(self) -> Set[Tuple]:
        """(company, name) pairs of won opportunities, any date."""
        won = self.opportunities[self.opportunities["status_norm"] == OPPORTUNITY_WON]
        return {(_clean(c), _clean(n)) for c, n in zip(won["company"], won["name"])}

    # =========================================================================
    # SETTERS
    # =========================================================================

    def calculate_setter_row(self, setter_name: str) -> Dict:
        appts = self.appointments_in_range

        booked = appts[appts["setter"] == setter_name]
        appts_booked = len(booked)

        # Setter field may list several people; match by substring
        setter_contains = appts["setter"].fillna("").astype(str).str.contains(setter_name, regex=False)
        showed_mask = (
            setter_contains
            & (appts["status_norm"] == APPOINTMENT_SHOWED)
            & ~appts["closer"].isin(self.excluded_show_closers)
        )
        appts_showed = int(showed_mask.sum())

        appts_closed = sum(
            1 for company, name in zip(booked["company"], booked["name"])
            if (_clean(company), _clean(name)) in self._won_keys
        )

        return {
            "setter": setter_name,
            "time_to_contact": TIME_TO_CONTACT_PLACEHOLDER,
            "appts_booked": appts_booked,
            "appts_showed": appts_showed,
            "show_rate": safe_rate(appts_showed, appts_booked, rounded=False),
            "appts_closed": appts_closed,
            "close_rate": safe_rate(appts_closed, appts_showed, rounded=False),
        }

    @staticmethod
    def calculate_setter_totals(rows: List[Dict]) -> Dict:
        appts_booked = sum(row["appts_booked"] for row in rows)
        appts_showed = sum(row["appts_showed"] for row in rows)
        appts_closed = sum(row["appts_closed"] for row in rows)

        return {
            "setter": TOTALS_LABEL,
            "time_to_contact": TIME_TO_CONTACT_PLACEHOLDER,
            "appts_booked": appts_booked,
            "appts_showed": appts_showed,
            "show_rate": safe_rate(appts_showed, appts_booked, rounded=False),
            "appts_closed": appts_closed,
            "close_rate": safe_rate(appts_closed, appts_showed, rounded=False),
        }

    def build_setter_table(self) -> pd.DataFrame:
        rows = [self.calculate_setter_row(name) for name in self.setter_names]
        return pd.DataFrame(rows + [self.calculate_setter_totals(rows)])

    # =========================================================================
    # CLOSERS
    # =========================================================================

    def calculate_closer_row(self, closer_name: str) -> Dict:
        appts = self.appointments_in_range[self.appointments_in_range["closer"] == closer_name]
        total_appts = len(appts)
        appts_taken = int((appts["status_norm"] == APPOINTMENT_SHOWED).sum())

        opps = self.opportunities_in_range
        closer_opps = opps[opps["closer"] == closer_name]
        closed_paid = int((closer_opps["status_norm"] == OPPORTUNITY_WON).sum())
        closed_trial = int((closer_opps["status_norm"] == OPPORTUNITY_TRIAL).sum())

        trimmed_closer = opps["closer"].fillna("").astype(str).str.strip()
        upgrade_mask = (trimmed_closer == closer_name.strip()) & opps["upgrade"].map(_is_true).astype(bool)
        upgrades = int(upgrade_mask.sum())

        return {
            "closer": closer_name,
            "appts_taken": appts_taken,
            "total_appts": total_appts,
            "show_rate": safe_rate(appts_taken, total_appts, rounded=False),
            "closed_paid": closed_paid,
            "closed_trial": closed_trial,
            "close_rate": safe_rate(closed_paid, appts_taken, rounded=False),
            "upgrades": upgrades,
            "upgrade_rate": safe_rate(upgrades, closed_paid, rounded=False),
        }

    def calculate_closer_totals(self, rows: List[Dict]) -> Dict:
        """
        Totals across closers.

        Show rate uses every in-range appointment held by a rostered closer
        as the denominator, not only the closers listed above.
        """
        appts_taken = sum(row["appts_taken"] for row in rows)
        closed_paid = sum(row["closed_paid"] for row in rows)
        closed_trial = sum(row["closed_trial"] for row in rows)
        upgrades = sum(row["upgrades"] for row in rows)

        appts = self.appointments_in_range
        total_appts = int(appts["closer"].isin(self.closer_roster).sum())

        return {
            "closer": TOTALS_LABEL,
            "appts_taken": appts_taken,
            "total_appts": total_appts,
            "show_rate": safe_rate(appts_taken, total_appts, rounded=False),
            "closed_paid": closed_paid,
            "closed_trial": closed_trial,
            "close_rate": safe_rate(closed_paid, appts_taken, rounded=False),
            "upgrades": upgrades,
            "upgrade_rate": safe_rate(upgrades, closed_paid, rounded=False),
        }

    def build_closer_table(self) -> pd.DataFrame:
        rows = [self.calculate_closer_row(name) for name in self.closer_names]
        return pd.DataFrame(rows + [self.calculate_closer_totals(rows)])

    # =========================================================================
    # ALL TABLES
    # =========================================================================

    def calculate_all(self) -> Dict[str, pd.DataFrame]:
        return {
            "setters": self.build_setter_table(),
            "closers": self.build_closer_table(),
        }
