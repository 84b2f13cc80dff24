# utils/sales_stats/__init__.py
"""
Sales Stats page modules.

Components:
- SalesStatsQueries: opportunities and appointments (paged reads)
- SalesStatsMetrics: setter / closer rows and totals
- SETTER_CONFIG, CLOSER_CONFIG: table metadata
"""

from .queries import SalesStatsQueries
from .metrics import (
    SalesStatsMetrics,
    prepare_appointments,
    prepare_opportunities,
    roster_names,
)
from .table_configs import SETTER_CONFIG, CLOSER_CONFIG

__all__ = [
    'SalesStatsQueries',
    'SalesStatsMetrics',
    'prepare_appointments',
    'prepare_opportunities',
    'roster_names',
    'SETTER_CONFIG',
    'CLOSER_CONFIG',
]
