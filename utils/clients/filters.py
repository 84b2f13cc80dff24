# utils/clients/filters.py
"""
Filter panel for the Clients page.

Renders:
- Status selector ("All Statuses" = no filter)
- CSM Name selector ("All CSMs" = no filter)
- Clear All button resetting both
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st

logger = logging.getLogger(__name__)

ALL_STATUSES = "All Statuses"
ALL_CSMS = "All CSMs"

_STATUS_KEY = "clients_filter_status"
_CSM_KEY = "clients_filter_csm"


@dataclass
class ClientFilters:
    """Equality filters applied to the clients query."""
    status: Optional[str] = None
    csm_name: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(self.status or self.csm_name)

    def __repr__(self) -> str:
        if not self.is_active:
            return "ClientFilters(inactive)"
        return f"ClientFilters(status={self.status}, csm_name={self.csm_name})"


def selection_to_filter(selected: Optional[str], all_label: str) -> Optional[str]:
    """Map a dropdown selection to a filter value; the "All" entry means no filter."""
    if not selected or selected == all_label:
        return None
    return selected


def _clear_filters():
    st.session_state[_STATUS_KEY] = ALL_STATUSES
    st.session_state[_CSM_KEY] = ALL_CSMS


def render_client_filters(status_options: List[str], csm_options: List[str]) -> ClientFilters:
    """Render the filter panel and return the active filters."""
    with st.container(border=True):
        col_title, col_clear = st.columns([5, 1])
        with col_title:
            st.markdown("**Filters**")
        with col_clear:
            st.button("Clear All", key="clients_clear_filters", on_click=_clear_filters)

        col1, col2 = st.columns(2)
        with col1:
            status = st.selectbox(
                "Status",
                options=[ALL_STATUSES] + list(status_options),
                key=_STATUS_KEY,
            )
        with col2:
            csm_name = st.selectbox(
                "CSM Name",
                options=[ALL_CSMS] + list(csm_options),
                key=_CSM_KEY,
            )

    filters = ClientFilters(
        status=selection_to_filter(status, ALL_STATUSES),
        csm_name=selection_to_filter(csm_name, ALL_CSMS),
    )
    logger.debug(f"Client filters: {filters}")
    return filters
