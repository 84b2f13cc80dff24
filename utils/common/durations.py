# utils/common/durations.py
"""
Duration helpers for onboarding and delivery metrics.

Durations are carried as whole minutes and displayed as "2d 3h 15m".
"""

import logging
import re
from typing import Iterable, Optional, Tuple, Union

import numpy as np
import pandas as pd

from .calculations import round_half_up

logger = logging.getLogger(__name__)

ZERO_DURATION = "0d 0h 0m"
MINUTES_PER_DAY = 24 * 60

_DURATION_PATTERN = re.compile(r"(\d+)d\s*(\d+)h\s*(\d+)m")

DurationLike = Union[str, int, float]


def minutes_to_duration(total_minutes: float) -> str:
    """Format a number of minutes as "{d}d {h}h {m}m"."""
    if total_minutes is None or not np.isfinite(total_minutes) or total_minutes <= 0:
        return ZERO_DURATION

    total_minutes = int(total_minutes)
    days = total_minutes // MINUTES_PER_DAY
    hours = (total_minutes % MINUTES_PER_DAY) // 60
    minutes = total_minutes % 60
    return f"{days}d {hours}h {minutes}m"


def parse_duration_to_minutes(duration: str) -> int:
    """Parse "{d}d {h}h {m}m" back to minutes. Unparseable text gives 0."""
    if not isinstance(duration, str):
        return 0
    match = _DURATION_PATTERN.search(duration)
    if not match:
        return 0
    days, hours, minutes = (int(part) for part in match.groups())
    return days * MINUTES_PER_DAY + hours * 60 + minutes


def _as_minutes(duration: DurationLike) -> float:
    if isinstance(duration, str):
        return parse_duration_to_minutes(duration)
    if duration is None or pd.isna(duration):
        return 0
    return float(duration)


def diff_minutes(start, end) -> Optional[int]:
    """
    Whole minutes from start to end.

    Returns None when either timestamp is missing or invalid, or when
    end is before start.
    """
    start_ts = pd.to_datetime(start, errors="coerce", utc=True)
    end_ts = pd.to_datetime(end, errors="coerce", utc=True)
    if pd.isna(start_ts) or pd.isna(end_ts):
        return None

    delta = (end_ts - start_ts).total_seconds()
    if delta < 0:
        return None
    return int(delta // 60)


def minutes_between(start: pd.Series, end: pd.Series) -> pd.Series:
    """
    Vectorised diff_minutes over two datetime Series.

    Missing timestamps and negative differences become NaN.
    """
    delta = (end - start).dt.total_seconds()
    minutes = np.floor(delta / 60)
    return minutes.where(delta >= 0)


def average_duration(minutes: Iterable[float]) -> str:
    """Mean of the given minute values, rounded to the minute and formatted."""
    values = [float(m) for m in minutes if m is not None and not pd.isna(m)]
    if not values:
        return ZERO_DURATION
    return minutes_to_duration(round_half_up(sum(values) / len(values)))


def average_positive_minutes(values: Iterable[float]) -> int:
    """Mean over the strictly positive values only, rounded to the minute."""
    valid = [float(v) for v in values if v is not None and not pd.isna(v) and v > 0]
    if not valid:
        return 0
    return int(round_half_up(sum(valid) / len(valid)))


def weighted_average_duration(pairs: Iterable[Tuple[DurationLike, float]]) -> str:
    """
    Σ(minutes × weight) / Σ(weight) over entries with a positive weight.

    Each duration may be a formatted string or a number of minutes.
    """
    valid = [(duration, weight) for duration, weight in pairs if weight and weight > 0]
    if not valid:
        return ZERO_DURATION

    total_weight = sum(weight for _, weight in valid)
    weighted_minutes = sum(_as_minutes(duration) * weight for duration, weight in valid)
    return minutes_to_duration(round_half_up(weighted_minutes / total_weight))
