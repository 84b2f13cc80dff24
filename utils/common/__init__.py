# utils/common/__init__.py
"""Common building blocks shared by all dashboard pages."""

from .calculations import (
    round_half_up,
    round2,
    safe_rate,
    safe_ratio,
    weighted_average,
)

from .durations import (
    ZERO_DURATION,
    minutes_to_duration,
    parse_duration_to_minutes,
    diff_minutes,
    minutes_between,
    average_duration,
    average_positive_minutes,
    weighted_average_duration,
)

from .date_range import (
    DateRange,
    to_timestamps,
    render_date_range_picker,
)

from .data_table import (
    TableColumn,
    TableConfig,
    score_row,
    apply_search,
    sort_rows,
    search_and_sort,
    format_cell,
    to_display_frame,
    style_display_frame,
    build_column_config,
    render_data_table,
)

from .export import TableExport, EXCEL_MIME, render_export_button

from .constants import TOTALS_LABEL, VA_TOTAL_LABEL, CACHE_TTL_SECONDS

__all__ = [
    # Calculations
    'round_half_up', 'round2', 'safe_rate', 'safe_ratio', 'weighted_average',
    # Durations
    'ZERO_DURATION', 'minutes_to_duration', 'parse_duration_to_minutes',
    'diff_minutes', 'minutes_between', 'average_duration',
    'average_positive_minutes', 'weighted_average_duration',
    # Date range
    'DateRange', 'to_timestamps', 'render_date_range_picker',
    # Data table
    'TableColumn', 'TableConfig', 'score_row', 'apply_search', 'sort_rows',
    'search_and_sort', 'format_cell', 'to_display_frame', 'style_display_frame',
    'build_column_config', 'render_data_table',
    # Export
    'TableExport', 'EXCEL_MIME', 'render_export_button',
    # Constants
    'TOTALS_LABEL', 'VA_TOTAL_LABEL', 'CACHE_TTL_SECONDS',
]
