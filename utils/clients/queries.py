# utils/clients/queries.py
"""
Clients - Data Layer
Class-based data access for the client list and its filter dropdowns.

Source table: clients
"""

import logging
from typing import Dict, List, Optional

import pandas as pd
import streamlit as st

from utils.db import execute_query, execute_query_df, DataLoadError
from utils.common.constants import CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


class ClientQueries:
    """Data access layer for the Clients page."""

    # ================================================================
    # Helpers
    # ================================================================

    @staticmethod
    def build_filter_clause(status: Optional[str] = None,
                            csm_name: Optional[str] = None) -> tuple:
        """Equality filters on status / csm_name.
        Returns (where_str, params_dict).
        """
        conditions = ["1=1"]
        params: Dict[str, str] = {}

        if status:
            conditions.append("status = :status")
            params["status"] = status

        if csm_name:
            conditions.append("csm_name = :csm_name")
            params["csm_name"] = csm_name

        return " AND ".join(conditions), params

    # ================================================================
    # Main Data Query
    # ================================================================

    @st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
    def fetch_clients(_self, status: str = None, csm_name: str = None) -> pd.DataFrame:
        """All client rows, optionally filtered by status and CSM."""
        where, params = _self.build_filter_clause(status, csm_name)
        query = f"SELECT * FROM clients WHERE {where} ORDER BY id"

        try:
            df = execute_query_df(query, params)
        except Exception as e:
            logger.error(f"Error fetching clients: {e}")
            raise DataLoadError(f"Failed to fetch clients: {e}") from e

        logger.info(f"Loaded {len(df):,} clients (status={status}, csm={csm_name})")
        return df

    # ================================================================
    # Filter Options
    # ================================================================

    @staticmethod
    def _distinct_values(column: str) -> List[str]:
        rows = execute_query(
            f"SELECT DISTINCT {column} AS value FROM clients "
            f"WHERE {column} IS NOT NULL ORDER BY {column}"
        )
        return sorted(str(row["value"]) for row in rows if row["value"] is not None)

    @st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
    def get_status_options(_self) -> List[str]:
        """Distinct, non-null status values."""
        try:
            return _self._distinct_values("status")
        except Exception as e:
            logger.error(f"Error fetching status options: {e}")
            return []

    @st.cache_data(ttl=CACHE_TTL_SECONDS, show_spinner=False)
    def get_csm_name_options(_self) -> List[str]:
        """Distinct, non-null CSM names."""
        try:
            return _self._distinct_values("csm_name")
        except Exception as e:
            logger.error(f"Error fetching CSM name options: {e}")
            return []
