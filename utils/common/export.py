# utils/common/export.py
"""
Formatted Excel Export for dashboard tables

Creates Excel workbooks with:
- Cover sheet (report title, date range, generation time)
- One sheet per table, headers and number formats taken from TableConfig
- Bold shaded totals row for tables with a pinned last row

Uses openpyxl for formatting capabilities.
"""

import logging
from datetime import datetime
from io import BytesIO
from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill
from openpyxl.utils import get_column_letter

from .constants import EXCEL_STYLES, MAX_EXCEL_COLUMN_WIDTH
from .data_table import TableConfig, NUMERIC_TYPES
from .date_range import DateRange, to_timestamps

logger = logging.getLogger(__name__)

EXCEL_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Sheet names are limited to 31 chars and a few forbidden characters
_FORBIDDEN_SHEET_CHARS = set('[]:*?/\\')


def _sheet_title(title: str) -> str:
    cleaned = "".join(ch for ch in title if ch not in _FORBIDDEN_SHEET_CHARS).strip()
    return (cleaned or "Sheet")[:31]


class TableExport:
    """
    Excel report generator for TableConfig-driven tables.

    Usage:
        exporter = TableExport()
        excel_bytes = exporter.create_workbook(
            sheets=[(onboarding_config, onboarding_df)],
            report_title="CSM Stats",
            date_range=date_range,
        )

        st.download_button(
            label="📥 Export Excel",
            data=excel_bytes,
            file_name="csm_stats.xlsx",
            mime=EXCEL_MIME,
        )
    """

    def __init__(self):
        """Initialize with default styles."""
        self.wb = None
        self._init_styles()

    def _init_styles(self):
        """Initialize reusable styles."""
        self.header_fill = PatternFill(
            start_color=EXCEL_STYLES['header_fill_color'],
            end_color=EXCEL_STYLES['header_fill_color'],
            fill_type='solid'
        )
        self.totals_fill = PatternFill(
            start_color=EXCEL_STYLES['totals_fill_color'],
            end_color=EXCEL_STYLES['totals_fill_color'],
            fill_type='solid'
        )

        self.header_font = Font(
            bold=True,
            color=EXCEL_STYLES['header_font_color'],
            size=11
        )
        self.title_font = Font(bold=True, size=16)
        self.bold_font = Font(bold=True, size=11)

        thin_border = Side(style='thin', color='000000')
        self.cell_border = Border(
            left=thin_border,
            right=thin_border,
            top=thin_border,
            bottom=thin_border
        )

        self.center_align = Alignment(horizontal='center', vertical='center', wrap_text=True)
        self.right_align = Alignment(horizontal='right', vertical='center')
        self.left_align = Alignment(horizontal='left', vertical='center')

    # =========================================================================
    # MAIN EXPORT METHOD
    # =========================================================================

    def create_workbook(
        self,
        sheets: List[Tuple[TableConfig, pd.DataFrame]],
        report_title: str,
        date_range: Optional[DateRange] = None,
    ) -> BytesIO:
        """
        Create formatted Excel workbook with a cover sheet and one sheet per table.

        Returns:
            BytesIO containing Excel file
        """
        self.wb = Workbook()

        self._create_cover_sheet(report_title, date_range, sheets)
        for table_config, df in sheets:
            self._create_table_sheet(table_config, df)

        output = BytesIO()
        self.wb.save(output)
        output.seek(0)

        logger.info(f"Excel report '{report_title}' created with {len(sheets)} table(s)")
        return output

    # =========================================================================
    # COVER SHEET
    # =========================================================================

    def _create_cover_sheet(self, report_title: str, date_range: Optional[DateRange], sheets):
        ws = self.wb.active
        ws.title = "Summary"

        row = 1
        ws.cell(row=row, column=1, value=report_title)
        ws.cell(row=row, column=1).font = self.title_font
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=3)
        row += 2

        if date_range is not None:
            ws.cell(row=row, column=1, value="Date Range:")
            ws.cell(row=row, column=2, value=date_range.label())
            row += 1

        ws.cell(row=row, column=1, value="Generated:")
        ws.cell(row=row, column=2, value=datetime.now().strftime('%Y-%m-%d %H:%M'))
        row += 2

        ws.cell(row=row, column=1, value="Tables")
        ws.cell(row=row, column=1).font = self.bold_font
        row += 1
        for table_config, df in sheets:
            ws.cell(row=row, column=1, value=table_config.title)
            ws.cell(row=row, column=2, value=f"{len(df):,} rows")
            ws.cell(row=row, column=2).alignment = self.right_align
            row += 1

        ws.column_dimensions['A'].width = 25
        ws.column_dimensions['B'].width = 30

    # =========================================================================
    # TABLE SHEETS
    # =========================================================================

    def _create_table_sheet(self, table_config: TableConfig, df: pd.DataFrame):
        ws = self.wb.create_sheet(_sheet_title(table_config.title))

        widths = {}
        for col_idx, column in enumerate(table_config.columns, 1):
            cell = ws.cell(row=1, column=col_idx, value=column.label)
            cell.fill = self.header_fill
            cell.font = self.header_font
            cell.alignment = self.center_align
            cell.border = self.cell_border
            widths[col_idx] = len(column.label)

        if df is None or df.empty:
            ws.cell(row=2, column=1, value="No data found")
            self._apply_widths(ws, widths)
            return

        last_row_idx = len(df) + 1
        for row_idx, (_, record) in enumerate(df.iterrows(), 2):
            is_totals = table_config.pin_last_row and row_idx == last_row_idx
            for col_idx, column in enumerate(table_config.columns, 1):
                value = self._cell_value(record.get(column.key), column.type)
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = self.cell_border

                if column.type in NUMERIC_TYPES:
                    cell.alignment = self.right_align
                    if column.type == "integer":
                        cell.number_format = EXCEL_STYLES['integer_format']
                    elif column.type == "number":
                        cell.number_format = EXCEL_STYLES['number_format']
                    else:
                        cell.number_format = EXCEL_STYLES['percent_format']
                elif column.type in ("timestamp", "date"):
                    cell.number_format = EXCEL_STYLES['date_format']
                else:
                    cell.alignment = self.left_align

                if is_totals:
                    cell.font = self.bold_font
                    cell.fill = self.totals_fill

                widths[col_idx] = max(widths[col_idx], len(str(value)) if value is not None else 0)

        ws.freeze_panes = "B2"
        self._apply_widths(ws, widths)

    @staticmethod
    def _cell_value(value, column_type: str):
        """Excel-friendly value: NaN → None, timestamps → naive datetimes."""
        if value is None:
            return "TODO" if column_type == "todo" else None
        if isinstance(value, str):
            return value
        if pd.isna(value):
            return "TODO" if column_type == "todo" else None
        if column_type in ("timestamp", "date"):
            ts = to_timestamps(pd.Series([value])).iloc[0]
            return None if pd.isna(ts) else ts.to_pydatetime()
        if hasattr(value, "item"):
            return value.item()
        return value

    @staticmethod
    def _apply_widths(ws, widths):
        for col_idx, width in widths.items():
            ws.column_dimensions[get_column_letter(col_idx)].width = min(width + 2, MAX_EXCEL_COLUMN_WIDTH)


# =============================================================================
# STREAMLIT DOWNLOAD BUTTON
# =============================================================================

def render_export_button(
    sheets: List[Tuple[TableConfig, pd.DataFrame]],
    report_title: str,
    file_prefix: str,
    key: str,
    date_range: Optional[DateRange] = None,
):
    """Export the given tables to Excel via a download button."""
    if all(df is None or df.empty for _, df in sheets):
        return

    col1, _ = st.columns([1, 4])
    with col1:
        try:
            excel_data = TableExport().create_workbook(sheets, report_title, date_range)
            st.download_button(
                "📥 Export Excel",
                data=excel_data,
                file_name=f"{file_prefix}_{datetime.now().strftime('%Y%m%d_%H%M')}.xlsx",
                mime=EXCEL_MIME,
                use_container_width=True,
                key=key,
            )
        except Exception as e:
            logger.error(f"Export failed for {report_title}: {e}", exc_info=True)
            st.error(f"Export failed: {e}")
