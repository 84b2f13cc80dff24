# utils/va_stats/__init__.py
"""
VA Stats page modules.

Components:
- VAStatsQueries: delivery clients and revision logs
- VAStatsMetrics: per-VA rows and the TOTAL row
- VA_STATS_CONFIG: table metadata
"""

from .queries import VAStatsQueries
from .metrics import VAStatsMetrics, va_names
from .table_configs import VA_STATS_CONFIG

__all__ = [
    'VAStatsQueries',
    'VAStatsMetrics',
    'va_names',
    'VA_STATS_CONFIG',
]
