# utils/common/constants.py
"""
Constants shared by all dashboard pages.

VERSION: 1.0.0
"""

# =============================================================================
# CACHE SETTINGS
# =============================================================================
CACHE_TTL_SECONDS = 300  # 5 minutes

# =============================================================================
# TOTALS ROW LABELS
# =============================================================================
TOTALS_LABEL = "Totals"
VA_TOTAL_LABEL = "TOTAL"

# =============================================================================
# COLOR SCHEME
# =============================================================================
COLORS = {
    "primary": "#4f46e5",
    "todo_bg": "#fee2e2",
    "todo_text": "#991b1b",
    "pct_bg": "#dcfce7",
    "pct_text": "#166534",
    "text_dark": "#333333",
    "text_light": "#666666",
}

# =============================================================================
# EXPORT SETTINGS
# =============================================================================
EXCEL_STYLES = {
    "header_fill_color": "4F46E5",
    "header_font_color": "FFFFFF",
    "totals_fill_color": "F3F4F6",
    "integer_format": '#,##0',
    "number_format": '#,##0.0',
    "percent_format": '0.00"%"',
    "date_format": 'M/D/YYYY',
}

MAX_EXCEL_COLUMN_WIDTH = 50
