# utils/csm_stats/__init__.py
"""
CSM Stats page modules.

Components:
- CSMStatsQueries: client rows for all CSMs
- CSMStatsMetrics: onboarding / retention rows and totals
- CLIENT_ONBOARDING_CONFIG, CUSTOMER_RETENTION_CONFIG: table metadata
"""

from .queries import CSMStatsQueries
from .metrics import CSMStatsMetrics, prepare_clients
from .table_configs import CLIENT_ONBOARDING_CONFIG, CUSTOMER_RETENTION_CONFIG

__all__ = [
    'CSMStatsQueries',
    'CSMStatsMetrics',
    'prepare_clients',
    'CLIENT_ONBOARDING_CONFIG',
    'CUSTOMER_RETENTION_CONFIG',
]
