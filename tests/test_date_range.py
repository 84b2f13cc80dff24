"""
Tests for DateRange bounds and timestamp normalisation.
"""

from datetime import date

import pandas as pd

from utils.common.date_range import DateRange, to_timestamps


class TestDateRange:

    def test_current_month(self):
        dr = DateRange.current_month(today=date(2024, 2, 14))
        assert dr.start_date == date(2024, 2, 1)
        assert dr.end_date == date(2024, 2, 29)

    def test_bounds_include_whole_end_day(self, june_range):
        start, end = june_range.bounds()
        assert start == pd.Timestamp("2025-06-01")
        assert end == pd.Timestamp("2025-07-01")

    def test_contains(self, june_range):
        values = to_timestamps(pd.Series([
            "2025-06-01T00:00:00Z",
            "2025-06-30T23:59:59Z",
            "2025-07-01T00:00:00Z",
            "2025-05-31T23:59:59Z",
            None,
        ]))

        mask = june_range.contains(values)

        assert mask.tolist() == [True, True, False, False, False]

    def test_label(self, june_range):
        assert june_range.label() == "2025-06-01 → 2025-06-30"


class TestToTimestamps:

    def test_offsets_are_normalised_to_utc(self):
        values = to_timestamps(pd.Series(["2025-06-01T02:00:00+02:00"]))
        assert values.iloc[0] == pd.Timestamp("2025-06-01 00:00:00")

    def test_invalid_becomes_nat(self):
        values = to_timestamps(pd.Series(["garbage", None]))
        assert values.isna().all()
