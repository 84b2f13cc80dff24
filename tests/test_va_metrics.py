"""
Tests for VA site / revision metrics.
"""

import pandas as pd
import pytest

from utils.va_stats.metrics import VAStatsMetrics, va_names


EXCLUDED = ["Yennifer", "No match"]


@pytest.fixture
def metrics(va_clients_df, revision_logs_df, june_range):
    return VAStatsMetrics(va_clients_df, revision_logs_df, june_range, excluded_names=EXCLUDED)


def _row(df: pd.DataFrame, va: str) -> dict:
    return df[df["va"] == va].iloc[0].to_dict()


class TestVANames:

    def test_union_without_blank_or_excluded(self, metrics):
        assert metrics.va_list == ["Ana", "Luis", "Marco"]

    def test_exclusion_ignores_padding(self):
        clients = pd.DataFrame({"delivery_person": [" Yennifer ", "Ana"]})
        logs = pd.DataFrame({"asignee": [None]})
        assert va_names(clients, logs, ["Yennifer"]) == ["Ana"]


class TestVARows:

    def test_sites_and_revisions(self, metrics):
        ana = _row(metrics.build_table(), "Ana")

        assert ana["sites_completed"] == 2
        # 48h and 36h
        assert ana["sites_avg_completion_time"] == "1d 18h 0m"
        # unstarted projects are not open
        assert ana["open_projects"] == 1
        assert ana["revisions_completed"] == 1
        assert ana["revisions_avg_completion_time"] == "0d 1h 30m"
        assert ana["open_revisions"] == 1

    def test_negative_completion_time_ignored(self, metrics):
        luis = _row(metrics.build_table(), "Luis")

        assert luis["sites_completed"] == 1
        assert luis["sites_avg_completion_time"] == "0d 0h 0m"
        assert luis["revisions_completed"] == 0

    def test_revisions_only_va(self, metrics):
        marco = _row(metrics.build_table(), "Marco")

        assert marco["sites_completed"] == 0
        assert marco["sites_avg_completion_time"] == "0d 0h 0m"
        assert marco["revisions_completed"] == 1
        assert marco["revisions_avg_completion_time"] == "1d 0h 0m"


class TestVATotals:

    def test_total_row(self, metrics):
        table = metrics.build_table()
        total = table.iloc[-1].to_dict()

        assert total["va"] == "TOTAL"
        assert total["sites_completed"] == 3
        assert total["open_projects"] == 1
        assert total["revisions_completed"] == 2
        assert total["open_revisions"] == 1

    def test_total_times_average_positive_rows(self, metrics):
        total = metrics.build_table().iloc[-1]

        assert total["sites_avg_completion_time"] == "1d 18h 0m"
        # (90 + 1440) / 2
        assert total["revisions_avg_completion_time"] == "0d 12h 45m"

    def test_no_data(self, june_range):
        table = VAStatsMetrics(pd.DataFrame(), pd.DataFrame(), june_range).build_table()

        assert table["va"].tolist() == ["TOTAL"]
        assert table["sites_completed"].iloc[0] == 0
        assert table["sites_avg_completion_time"].iloc[0] == "0d 0h 0m"
