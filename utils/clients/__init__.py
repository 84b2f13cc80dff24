# utils/clients/__init__.py
"""
Clients page modules.

Components:
- ClientQueries: client rows and filter dropdown values
- CLIENTS_TABLE_CONFIG: column metadata and search weights
- render_client_filters: status / CSM filter panel
"""

from .queries import ClientQueries
from .table_config import CLIENTS_TABLE_CONFIG, CLIENTS_SEARCH_WEIGHTS
from .filters import ClientFilters, render_client_filters, selection_to_filter

__all__ = [
    'ClientQueries',
    'CLIENTS_TABLE_CONFIG',
    'CLIENTS_SEARCH_WEIGHTS',
    'ClientFilters',
    'render_client_filters',
    'selection_to_filter',
]
