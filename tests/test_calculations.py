"""
Tests for rounding, rates and weighted averages.
"""

import numpy as np

from utils.common.calculations import (
    round_half_up,
    round2,
    safe_rate,
    safe_ratio,
    weighted_average,
)


class TestRounding:

    def test_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.125, 2) == 0.13

    def test_non_finite(self):
        assert round_half_up(np.nan) == 0
        assert round2(None) == 0


class TestRates:

    def test_safe_rate(self):
        assert safe_rate(2, 3) == 66.67

    def test_unrounded_rate(self):
        assert safe_rate(2, 3, rounded=False) == 2 / 3 * 100

    def test_zero_denominator(self):
        assert safe_rate(5, 0) == 0
        assert safe_ratio(5, 0) == 0

    def test_safe_ratio(self):
        assert safe_ratio(22, 3) == 7.33


class TestWeightedAverage:

    def test_weighted(self):
        assert weighted_average([(50, 2), (100, 1)]) == 66.67

    def test_zero_weight(self):
        assert weighted_average([(50, 0), (100, 0)]) == 0
        assert weighted_average([]) == 0
