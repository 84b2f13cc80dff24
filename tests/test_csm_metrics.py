"""
Tests for CSM onboarding / retention metrics.
"""

import pandas as pd
import pytest

from utils.csm_stats.metrics import CSMStatsMetrics


ROSTER = ["Ben Zazueta", "Ryan Grant"]


@pytest.fixture
def metrics(clients_df, june_range, reference_now):
    return CSMStatsMetrics(clients_df, june_range, ROSTER, now=reference_now)


def _row(df: pd.DataFrame, csm: str) -> dict:
    return df[df["csm"] == csm].iloc[0].to_dict()


class TestClientOnboarding:
    """Onboarding rows only count clients started inside the range."""

    def test_rows_follow_roster_then_totals(self, metrics):
        table = metrics.build_onboarding_table()
        assert table["csm"].tolist() == ["Ben Zazueta", "Ryan Grant", "Totals"]

    def test_counts_and_percentages(self, metrics):
        ben = _row(metrics.build_onboarding_table(), "Ben Zazueta")

        assert ben["new_clients"] == 2
        assert ben["forms_missing"] == 1
        assert ben["form_complete_pct"] == 50.0
        assert ben["onboard_call_show"] == 2
        assert ben["onboard_call_show_pct"] == 100.0
        assert ben["launch_call_show"] == 1
        assert ben["launch_call_show_pct"] == 50.0
        assert ben["activated_under_30_days"] == 1
        assert ben["activated_under_30_days_pct"] == 50.0

    def test_durations(self, metrics):
        ben = _row(metrics.build_onboarding_table(), "Ben Zazueta")

        assert ben["form_complete_time_avg"] == "1d 2h 0m"
        assert ben["time_to_onboard_call_avg"] == "1d 6h 0m"
        assert ben["time_to_launch_call_avg"] == "2d 0h 0m"
        assert ben["ttfv"] == "0d 2h 0m"
        assert ben["tta"] == "17d 17h 0m"

    def test_negative_and_zero_observations_ignored(self, metrics):
        ryan = _row(metrics.build_onboarding_table(), "Ryan Grant")

        # started 2025-07-01 is outside June; started 2025-06-30 is inside
        assert ryan["new_clients"] == 1
        assert ryan["forms_missing"] == 0
        # form completed before the start date
        assert ryan["form_complete_time_avg"] == "0d 0h 0m"
        # minutes_to_first_value of 0 is not an observation
        assert ryan["ttfv"] == "0d 0h 0m"
        # exactly 30 days still counts as activated
        assert ryan["tta"] == "30d 0h 0m"
        assert ryan["activated_under_30_days_pct"] == 100.0

    def test_totals(self, metrics):
        totals = _row(metrics.build_onboarding_table(), "Totals")

        assert totals["new_clients"] == 3
        assert totals["forms_missing"] == 1
        assert totals["form_complete_pct"] == 66.67
        assert totals["onboard_call_show_pct"] == 66.67
        assert totals["launch_call_show_pct"] == 33.33
        assert totals["activated_under_30_days"] == 2
        assert totals["form_complete_time_avg"] == "0d 17h 20m"
        assert totals["time_to_onboard_call_avg"] == "1d 6h 0m"
        assert totals["time_to_launch_call_avg"] == "2d 0h 0m"
        assert totals["ttfv"] == "0d 1h 20m"
        assert totals["tta"] == "21d 19h 20m"

    def test_csm_without_clients(self, clients_df, june_range, reference_now):
        metrics = CSMStatsMetrics(clients_df, june_range, ["Nobody"], now=reference_now)
        row = _row(metrics.build_onboarding_table(), "Nobody")

        assert row["new_clients"] == 0
        assert row["form_complete_pct"] == 0
        assert row["ttfv"] == "0d 0h 0m"


class TestCustomerRetention:
    """Retention rows cover the whole client book."""

    def test_counts_and_rates(self, metrics):
        ben = _row(metrics.build_retention_table(), "Ben Zazueta")

        assert ben["clients_managing"] == 2
        assert ben["churned"] == 1
        assert ben["churn_rate"] == 50.0
        assert ben["cc_declined"] == 1
        assert ben["cc_declined_rate"] == 50.0
        # one active client without any activity
        assert ben["inactive_clients_pct"] == 50.0

    def test_monthly_averages_treat_missing_as_zero(self, metrics):
        ben = _row(metrics.build_retention_table(), "Ben Zazueta")

        assert ben["avg_monthly_usage_per_client"] == 7.5
        assert ben["avg_monthly_reviews"] == 3.0
        assert ben["avg_monthly_new_leads"] == 2.0

    def test_end_day_included_for_churn(self, metrics):
        ryan = _row(metrics.build_retention_table(), "Ryan Grant")

        assert ryan["clients_managing"] == 1
        assert ryan["churned"] == 1
        assert ryan["churn_rate"] == 100.0
        # last activity older than 30 days
        assert ryan["inactive_clients_pct"] == 100.0

    def test_placeholders_are_zero(self, metrics):
        ben = _row(metrics.build_retention_table(), "Ben Zazueta")
        for field in ("chi", "csat_count", "csat_good_pct", "refund_dispute_rate"):
            assert ben[field] == 0

    def test_totals(self, metrics):
        totals = _row(metrics.build_retention_table(), "Totals")

        assert totals["clients_managing"] == 3
        assert totals["churned"] == 2
        assert totals["cc_declined"] == 1
        assert totals["inactive_clients_pct"] == 66.67
        assert totals["avg_monthly_usage_per_client"] == 7.33
        assert totals["churn_rate"] == 66.67
        assert totals["cc_declined_rate"] == 33.33
        assert totals["csat_good_pct"] == 0

    def test_empty_clients(self, june_range, reference_now):
        metrics = CSMStatsMetrics(pd.DataFrame(), june_range, ROSTER, now=reference_now)
        tables = metrics.calculate_all()

        assert tables["retention"]["clients_managing"].tolist() == [0, 0, 0]
        assert tables["onboarding"]["new_clients"].tolist() == [0, 0, 0]
