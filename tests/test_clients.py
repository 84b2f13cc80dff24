"""
Tests for the Clients data layer and filters.
"""

import streamlit as st

import utils.clients.queries as client_queries
from utils.clients.filters import ALL_CSMS, ALL_STATUSES, ClientFilters, selection_to_filter
from utils.clients.queries import ClientQueries
from utils.clients.table_config import CLIENTS_TABLE_CONFIG


class TestFilterClause:

    def test_no_filters(self):
        where, params = ClientQueries.build_filter_clause()
        assert where == "1=1"
        assert params == {}

    def test_both_filters(self):
        where, params = ClientQueries.build_filter_clause("Active", "Ryan Grant")
        assert where == "1=1 AND status = :status AND csm_name = :csm_name"
        assert params == {"status": "Active", "csm_name": "Ryan Grant"}


class TestSelections:

    def test_all_entry_means_no_filter(self):
        assert selection_to_filter(ALL_STATUSES, ALL_STATUSES) is None
        assert selection_to_filter(None, ALL_CSMS) is None
        assert selection_to_filter("Active", ALL_STATUSES) == "Active"

    def test_filters_active(self):
        assert not ClientFilters().is_active
        assert ClientFilters(csm_name="Ben Zazueta").is_active


class TestTableConfig:

    def test_sticky_and_weights(self):
        assert CLIENTS_TABLE_CONFIG.sticky_columns == ["company_name", "status"]
        assert CLIENTS_TABLE_CONFIG.search_weights["company_name"] == 3
        assert CLIENTS_TABLE_CONFIG.show_count_in_title

    def test_weighted_columns_exist(self):
        keys = {column.key for column in CLIENTS_TABLE_CONFIG.columns}
        assert set(CLIENTS_TABLE_CONFIG.search_weights) <= keys


class TestFilterOptions:

    def test_options_degrade_to_empty_on_error(self, monkeypatch):
        def failing(query, params=None):
            raise RuntimeError("backend unavailable")

        monkeypatch.setattr(client_queries, "execute_query", failing)
        st.cache_data.clear()

        queries = ClientQueries()
        assert queries.get_status_options() == []
        assert queries.get_csm_name_options() == []

    def test_options_sorted(self, monkeypatch):
        def fake(query, params=None):
            return [{"value": "Paused"}, {"value": "Active"}, {"value": None}]

        monkeypatch.setattr(client_queries, "execute_query", fake)
        st.cache_data.clear()

        assert ClientQueries().get_status_options() == ["Active", "Paused"]
