# utils/sales_stats/queries.py
"""
Sales Stats - Data Layer

Opportunities and appointments are read in full (paged) and filtered
by date in memory.
"""

import logging
from typing import Dict

import pandas as pd
import streamlit as st

from utils.db import fetch_all_rows
from utils.common.constants import CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


class SalesStatsQueries:
    """Data access layer for Sales Stats."""

    @st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
    def fetch_opportunities(_self) -> pd.DataFrame:
        return fetch_all_rows("opportunities")

    @st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
    def fetch_appointments(_self) -> pd.DataFrame:
        return fetch_all_rows("appointments")

    def fetch_all(self) -> Dict[str, pd.DataFrame]:
        """
        Both source tables.

        Raises:
            DataLoadError: when either table cannot be read
        """
        opportunities = self.fetch_opportunities()
        appointments = self.fetch_appointments()
        logger.info(
            f"Sales Stats: {len(opportunities):,} opportunities, "
            f"{len(appointments):,} appointments loaded"
        )
        return {"opportunities": opportunities, "appointments": appointments}
