# utils/common/calculations.py
"""
Small numeric helpers shared by the stats modules.

Percentages and averages are displayed with two decimals and rounded
half-up, so 0.125 becomes 0.13 rather than the banker's 0.12.
"""

import math
from typing import Iterable, Tuple

import numpy as np


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round half-up to the given number of decimals."""
    if value is None or not np.isfinite(value):
        return 0
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def round2(value: float) -> float:
    return round_half_up(value, 2)


def safe_rate(numerator: float, denominator: float, rounded: bool = True) -> float:
    """numerator / denominator * 100, 0 when the denominator is 0."""
    if not denominator:
        return 0
    rate = numerator / denominator * 100
    return round2(rate) if rounded else rate


def safe_ratio(numerator: float, denominator: float) -> float:
    """numerator / denominator rounded to 2 decimals, 0 when the denominator is 0."""
    if not denominator:
        return 0
    return round2(numerator / denominator)


def weighted_average(pairs: Iterable[Tuple[float, float]]) -> float:
    """
    Σ(value × weight) / Σ(weight), rounded to 2 decimals.

    Returns 0 when the total weight is 0.
    """
    total_weight = 0.0
    weighted_sum = 0.0
    for value, weight in pairs:
        total_weight += weight
        weighted_sum += (value or 0) * weight
    if not total_weight:
        return 0
    return round2(weighted_sum / total_weight)
