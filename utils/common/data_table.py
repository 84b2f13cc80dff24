# utils/common/data_table.py
"""
Generic sortable / searchable table used by every page.

Column metadata drives everything: which columns can be searched
(text columns), which can be sorted (numeric and date columns), and
how each cell is formatted.

Usage:
    config = TableConfig(
        title="Clients",
        columns=[TableColumn("company_name", "Company Name", "text"), ...],
        search_weights={"company_name": 3},
    )
    render_data_table(df, config, key="clients")
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import streamlit as st

from .constants import COLORS
from .date_range import to_timestamps

logger = logging.getLogger(__name__)

COLUMN_TYPES = {
    "text", "number", "integer", "percentage",
    "duration", "timestamp", "date", "todo",
}
SORTABLE_TYPES = {"number", "integer", "timestamp", "date"}
NUMERIC_TYPES = {"number", "integer", "percentage"}

MISSING_DISPLAY = "N/A"
TODO_DISPLAY = "TODO"


@dataclass
class TableColumn:
    """Column metadata for a table"""
    key: str
    label: str
    type: str = "text"
    description: str = ""
    width: Optional[str] = None

    def __post_init__(self):
        if self.type not in COLUMN_TYPES:
            raise ValueError(f"Unknown column type '{self.type}' for column '{self.key}'")

    @property
    def sortable(self) -> bool:
        return self.type in SORTABLE_TYPES


@dataclass
class TableConfig:
    """Title, columns and behaviour of a rendered table"""
    title: str
    columns: List[TableColumn]
    search_weights: Dict[str, float] = field(default_factory=dict)
    sticky_columns: List[str] = field(default_factory=list)
    pin_last_row: bool = False
    show_count_in_title: bool = False

    @property
    def searchable(self) -> bool:
        return bool(self.search_weights)

    def column(self, key: str) -> Optional[TableColumn]:
        for col in self.columns:
            if col.key == key:
                return col
        return None

    def sortable_columns(self) -> List[TableColumn]:
        return [col for col in self.columns if col.sortable]


# =============================================================================
# SEARCH
# =============================================================================

def score_row(row: Dict[str, Any], term: str, columns: List[TableColumn],
              weights: Dict[str, float] = None) -> float:
    """
    Weighted text match score for one row.

    Every text column containing the term adds its weight (default 1),
    boosted by 0.5 for a prefix match and by 1 for an exact match.
    """
    if not term:
        return 0
    term = term.lower().strip()
    if not term:
        return 0

    weights = weights or {}
    score = 0.0
    for col in columns:
        if col.type != "text":
            continue
        value = row.get(col.key)
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            continue
        value_str = str(value).lower()
        if not value_str or term not in value_str:
            continue

        weight = weights.get(col.key, 1)
        prefix_boost = 0.5 if value_str.startswith(term) else 0
        exact_boost = 1 if value_str == term else 0
        score += weight * (1 + prefix_boost + exact_boost)
    return score


def apply_search(df: pd.DataFrame, config: TableConfig, term: str,
                 sort_key: str = None) -> pd.DataFrame:
    """
    Keep rows scoring above 0 for the term.

    Without an active sort key the matches are ordered by score, best first.
    """
    if not term or not term.strip() or df.empty:
        return df

    scores = df.apply(
        lambda row: score_row(row.to_dict(), term, config.columns, config.search_weights),
        axis=1,
    )
    matched = df[scores > 0]
    if sort_key:
        return matched

    order = scores[scores > 0].sort_values(ascending=False, kind="mergesort").index
    return matched.loc[order]


# =============================================================================
# SORT
# =============================================================================

def comparable_values(values: pd.Series, column_type: str) -> pd.Series:
    """Numeric / timestamp view of a column for sorting. Invalid values become NaN/NaT."""
    if column_type in ("number", "integer"):
        return pd.to_numeric(values, errors="coerce")
    if column_type in ("timestamp", "date"):
        return to_timestamps(values)
    return pd.Series(np.nan, index=values.index)


def sort_rows(df: pd.DataFrame, config: TableConfig, key: str = None,
              ascending: bool = True) -> pd.DataFrame:
    """
    Sort by a sortable column. Missing or invalid values always go last.

    Non-sortable or unknown keys leave the order unchanged.
    """
    if not key or df.empty or key not in df.columns:
        return df
    column = config.column(key)
    if column is None or not column.sortable:
        return df

    comparable = comparable_values(df[key], column.type)
    order = comparable.sort_values(ascending=ascending, na_position="last", kind="mergesort").index
    return df.loc[order]


def search_and_sort(df: pd.DataFrame, config: TableConfig, term: str = None,
                    sort_key: str = None, ascending: bool = True) -> pd.DataFrame:
    """Search then sort, keeping a pinned totals row at the bottom."""
    if df.empty:
        return df

    pinned = None
    body = df
    if config.pin_last_row:
        body, pinned = df.iloc[:-1], df.iloc[-1:]

    body = apply_search(body, config, term, sort_key=sort_key)
    body = sort_rows(body, config, sort_key, ascending)

    if pinned is not None:
        body = pd.concat([body, pinned])
    return body


# =============================================================================
# FORMATTING
# =============================================================================

def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def format_timestamp(value: Any) -> str:
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return "Invalid Date"
    return f"{ts.month}/{ts.day}/{ts.year}"


def format_cell(value: Any, column_type: str) -> str:
    """Display string for one cell."""
    if column_type == "todo" and (_is_missing(value) or value == TODO_DISPLAY):
        return TODO_DISPLAY
    if _is_missing(value):
        return MISSING_DISPLAY

    if column_type in ("timestamp", "date"):
        return format_timestamp(value)

    if isinstance(value, (int, float, Decimal, np.number)) and not isinstance(value, bool):
        if column_type == "number":
            return f"{float(value):.1f}"
        if column_type == "integer":
            return str(int(np.floor(float(value) + 0.5)))
        if column_type == "percentage":
            return f"{float(value):.2f}%"
    return str(value)


def to_display_frame(df: pd.DataFrame, config: TableConfig) -> pd.DataFrame:
    """Formatted strings with column labels as headers, in column order."""
    data = {}
    for col in config.columns:
        values = df[col.key] if col.key in df.columns else pd.Series([None] * len(df), index=df.index)
        data[col.label] = [format_cell(v, col.type) for v in values]
    return pd.DataFrame(data, index=range(len(df)))


def style_display_frame(display_df: pd.DataFrame, config: TableConfig):
    """
    Highlight TODO cells, percentage cells and the pinned totals row.

    Rows are matched by position, so the frame must keep the RangeIndex
    from to_display_frame (Styler rejects duplicate index values).
    """
    labels_by_type = {col.label: col.type for col in config.columns}
    last_index = display_df.index[-1] if config.pin_last_row and not display_df.empty else None

    def _cell_style(value, label):
        if value == TODO_DISPLAY:
            return f"background-color: {COLORS['todo_bg']}; color: {COLORS['todo_text']}"
        if labels_by_type.get(label) == "percentage":
            return f"background-color: {COLORS['pct_bg']}; color: {COLORS['pct_text']}"
        return ""

    def _row_style(row):
        styles = [_cell_style(v, label) for label, v in row.items()]
        if row.name == last_index:
            styles = [f"{s}; font-weight: bold" if s else "font-weight: bold" for s in styles]
        return styles

    return display_df.style.apply(_row_style, axis=1)


def sticky_labels(config: TableConfig) -> List[str]:
    return [config.column(k).label for k in config.sticky_columns if config.column(k)]


def build_column_config(config: TableConfig) -> Dict[str, Any]:
    """st.dataframe column settings; sticky columns are pinned to the left."""
    pinned = set(sticky_labels(config))
    return {
        col.label: st.column_config.Column(
            col.label,
            help=col.description or None,
            width=col.width,
            pinned=col.label in pinned,
        )
        for col in config.columns
    }


# =============================================================================
# RENDERING
# =============================================================================

def render_data_table(df: pd.DataFrame, config: TableConfig, key: str,
                      height: int = None):
    """
    Render a table with search box, sort selector and formatted cells.

    Sticky columns are pinned so they stay visible while scrolling
    horizontally.
    """
    df = df if df is not None else pd.DataFrame()

    term = None
    sort_key = None
    ascending = True

    controls = st.columns([3, 2, 1]) if config.searchable else st.columns([2, 1, 3])
    if config.searchable:
        with controls[0]:
            term = st.text_input(
                "🔍 Search",
                placeholder="Search...",
                key=f"{key}_search",
            )
        sort_col, dir_col = controls[1], controls[2]
    else:
        sort_col, dir_col = controls[0], controls[1]

    sortable = config.sortable_columns()
    if sortable:
        labels = {col.key: col.label for col in sortable}
        with sort_col:
            sort_key = st.selectbox(
                "Sort by",
                options=[None] + [col.key for col in sortable],
                format_func=lambda k: "—" if k is None else labels[k],
                key=f"{key}_sort",
            )
        with dir_col:
            direction = st.radio(
                "Direction",
                options=["▲ Asc", "▼ Desc"],
                horizontal=True,
                key=f"{key}_dir",
                disabled=sort_key is None,
            )
            ascending = direction.startswith("▲")

    view = search_and_sort(df, config, term=term, sort_key=sort_key, ascending=ascending)

    title = config.title
    if config.show_count_in_title:
        row_count = len(view) - (1 if config.pin_last_row and not view.empty else 0)
        title = f"{title} ({row_count:,})"
    st.markdown(f"#### {title}")

    if view.empty:
        st.info("No data found")
        return

    display_df = to_display_frame(view, config)

    st.dataframe(
        style_display_frame(display_df, config),
        column_config=build_column_config(config),
        use_container_width=True,
        hide_index=True,
        height=height or min(len(display_df) * 35 + 40, 600),
    )
