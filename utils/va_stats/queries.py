# utils/va_stats/queries.py
"""
VA Stats - Data Layer

Source tables: clients (rows with a delivery person), website_revision_logs
"""

import logging
from typing import Dict

import pandas as pd
import streamlit as st

from utils.db import fetch_all_rows
from utils.common.constants import CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)

VA_CLIENT_COLUMNS = ["id", "company_name", "delivery_person", "started_on", "site_done_at"]
REVISION_LOG_COLUMNS = ["id", "created_at", "task_name", "task_id", "asignee", "finished_at"]


class VAStatsQueries:
    """Data access layer for VA Stats."""

    @st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
    def fetch_delivery_clients(_self) -> pd.DataFrame:
        """Clients assigned to a delivery person."""
        return fetch_all_rows(
            "clients",
            columns=", ".join(VA_CLIENT_COLUMNS),
            where="delivery_person IS NOT NULL",
        )

    @st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
    def fetch_revision_logs(_self) -> pd.DataFrame:
        return fetch_all_rows("website_revision_logs", columns=", ".join(REVISION_LOG_COLUMNS))

    def fetch_all(self) -> Dict[str, pd.DataFrame]:
        """
        Raises:
            DataLoadError: when either table cannot be read
        """
        clients = self.fetch_delivery_clients()
        logs = self.fetch_revision_logs()
        logger.info(f"VA Stats: {len(clients):,} clients, {len(logs):,} revision logs loaded")
        return {"clients": clients, "logs": logs}
