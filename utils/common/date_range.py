# utils/common/date_range.py
"""
Date range used by every stats page.

A range covers whole days: [start 00:00, end + 1 day 00:00).
Timestamps from the database are normalised to naive UTC before
they are compared against the range.
"""

import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Tuple

import pandas as pd
import streamlit as st

logger = logging.getLogger(__name__)


def to_timestamps(values) -> pd.Series:
    """Parse a Series of timestamps/strings into naive UTC datetimes (NaT when invalid)."""
    parsed = pd.to_datetime(values, errors="coerce", utc=True, format="mixed")
    return parsed.dt.tz_convert(None)


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""
    start_date: date
    end_date: date

    @classmethod
    def current_month(cls, today: date = None) -> "DateRange":
        """First to last day of the month containing today."""
        today = today or date.today()
        last_day = calendar.monthrange(today.year, today.month)[1]
        return cls(date(today.year, today.month, 1), date(today.year, today.month, last_day))

    def bounds(self) -> Tuple[pd.Timestamp, pd.Timestamp]:
        """Half-open timestamp bounds; the end date is included in full."""
        start = pd.Timestamp(self.start_date)
        end = pd.Timestamp(self.end_date) + pd.Timedelta(days=1)
        return start, end

    def contains(self, timestamps: pd.Series) -> pd.Series:
        """Boolean mask of the timestamps falling inside the range. NaT is never inside."""
        start, end = self.bounds()
        return (timestamps >= start) & (timestamps < end)

    def label(self) -> str:
        return f"{self.start_date:%Y-%m-%d} → {self.end_date:%Y-%m-%d}"


def render_date_range_picker(key: str, default: DateRange = None) -> DateRange:
    """
    Start/end date inputs. Returns the selected DateRange.

    An end date before the start date is swapped rather than rejected.
    """
    default = default or DateRange.current_month()

    col1, col2, _ = st.columns([1, 1, 3])
    with col1:
        start = st.date_input("Start Date", value=default.start_date, key=f"{key}_start")
    with col2:
        end = st.date_input("End Date", value=default.end_date, key=f"{key}_end")

    if end < start:
        st.warning("End date is before start date - the range has been swapped.")
        start, end = end, start

    return DateRange(start, end)
