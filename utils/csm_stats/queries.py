# utils/csm_stats/queries.py
"""
CSM Stats - Data Layer

Every client row is read once; the date range is applied in memory
because retention metrics need the full client book.
"""

import logging

import pandas as pd
import streamlit as st

from utils.db import fetch_all_rows
from utils.common.constants import CACHE_TTL_SECONDS
from .constants import CLIENT_COLUMNS

logger = logging.getLogger(__name__)


class CSMStatsQueries:
    """Data access layer for CSM Stats."""

    @st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
    def fetch_clients(_self) -> pd.DataFrame:
        """
        All client rows with the columns the CSM metrics need.

        Raises:
            DataLoadError: when the clients table cannot be read
        """
        df = fetch_all_rows("clients", columns=", ".join(CLIENT_COLUMNS))
        logger.info(f"CSM Stats: {len(df):,} clients loaded")
        return df
