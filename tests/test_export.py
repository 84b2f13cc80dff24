"""
Tests for the Excel workbook builder.
"""

import pandas as pd
import pytest
from openpyxl import load_workbook

from utils.common.data_table import TableColumn, TableConfig
from utils.common.export import TableExport, _sheet_title
from utils.sales_stats.metrics import SalesStatsMetrics
from utils.sales_stats.table_configs import SETTER_CONFIG, CLOSER_CONFIG


@pytest.fixture
def sales_tables(opportunities_df, appointments_df, june_range):
    metrics = SalesStatsMetrics(
        opportunities_df, appointments_df, june_range,
        setter_roster=["Javier Ulloa", "Juan Parada"],
        closer_roster=["Dale Kelley", "Jay Rojas"],
        excluded_show_closers=["Melo Moore"],
    )
    return metrics.calculate_all()


@pytest.fixture
def workbook(sales_tables, june_range):
    output = TableExport().create_workbook(
        [(SETTER_CONFIG, sales_tables["setters"]), (CLOSER_CONFIG, sales_tables["closers"])],
        report_title="Sales Stats",
        date_range=june_range,
    )
    return load_workbook(output)


class TestWorkbook:

    def test_sheets(self, workbook):
        assert workbook.sheetnames == ["Summary", "SETTER", "CLOSER"]

    def test_cover_sheet(self, workbook):
        ws = workbook["Summary"]
        assert ws["A1"].value == "Sales Stats"
        assert ws["B3"].value == "2025-06-01 → 2025-06-30"

    def test_headers_use_labels(self, workbook):
        ws = workbook["SETTER"]
        headers = [cell.value for cell in ws[1]]
        assert headers == [column.label for column in SETTER_CONFIG.columns]

    def test_totals_row_is_bold(self, workbook, sales_tables):
        ws = workbook["SETTER"]
        last_row = len(sales_tables["setters"]) + 1

        assert ws.cell(row=last_row, column=1).value == "Totals"
        assert ws.cell(row=last_row, column=1).font.bold
        assert not ws.cell(row=2, column=1).font.bold

    def test_number_formats(self, workbook):
        ws = workbook["SETTER"]
        # Javier Ulloa row: booked, show rate
        assert ws.cell(row=2, column=3).value == 3
        assert ws.cell(row=2, column=3).number_format == "#,##0"
        assert ws.cell(row=2, column=5).number_format == '0.00"%"'
        assert ws.cell(row=2, column=2).value == "TODO"

    def test_empty_table_sheet(self):
        config = TableConfig("Empty", [TableColumn("a", "A")])
        wb = load_workbook(TableExport().create_workbook([(config, pd.DataFrame())], "Report"))

        assert wb["Empty"]["A2"].value == "No data found"


class TestSheetTitle:

    def test_forbidden_characters_and_length(self):
        assert _sheet_title("Sales / Stats [June]") == "Sales  Stats June"
        assert len(_sheet_title("x" * 40)) == 31
        assert _sheet_title("???") == "Sheet"
