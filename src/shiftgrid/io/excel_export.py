"""Excel export of a built grid."""
import io
from pathlib import Path
from typing import Dict, Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from shiftgrid.grid.builder import GridStructure
from shiftgrid.grid.schedule import month_spans
from shiftgrid.models.shift import PLACEHOLDER_CODE
from shiftgrid.utils.logging_setup import get_logger

logger = get_logger("shiftgrid.io.excel_export")

# Fill per shift code; unlisted codes get DEFAULT_FILL
SHIFT_COLORS: Dict[str, str] = {
    "C": "DDEEFF",
    "D": "DDEEFF",
    "N": "E6CCFF",
    "S": "FFE4CC",
    "V": "D4EDDA",
    "O": "EEEEEE",
}
DEFAULT_FILL = "FFF3CD"

THIN = Side(border_style="thin", color="CCCCCC")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)
MONTH_EDGE = Side(border_style="medium", color="000000")

FIRST_DATA_COL = 2


def _write_month_headers(ws, grid: GridStructure, row: int = 1):
    """Write month labels merged over each month's columns."""
    ws.cell(row=row, column=1, value=grid.month_row[0].display_text or None)
    for label, first, last in month_spans(grid.columns):
        start = FIRST_DATA_COL + first
        end = FIRST_DATA_COL + last
        if end > start:
            ws.merge_cells(start_row=row, start_column=start, end_row=row, end_column=end)
        cell = ws.cell(row=row, column=start, value=label)
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", vertical="center")


def _write_days_row(ws, grid: GridStructure, row: int = 2):
    ws.cell(row=row, column=1, value=grid.date_row[0].display_text or None).font = Font(bold=True)
    for i, col in enumerate(grid.columns):
        cell = ws.cell(row=row, column=FIRST_DATA_COL + i, value=col.day)
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", vertical="center")


def _apply_month_separators(ws, grid: GridStructure):
    """Draw a left edge at the first column of every month after the first."""
    for _, first, _ in month_spans(grid.columns)[1:]:
        c = FIRST_DATA_COL + first
        for r in range(1, ws.max_row + 1):
            cell = ws.cell(row=r, column=c)
            b = cell.border
            cell.border = Border(left=MONTH_EDGE, right=b.right, top=b.top, bottom=b.bottom)


def export_to_excel(
    grid: GridStructure,
    output: Union[str, Path, io.BytesIO],
    sheet_title: Optional[str] = None,
) -> None:
    """
    Export the grid to an Excel workbook.

    Args:
        grid: Structure returned by build_grid
        output: File path or BytesIO buffer
        sheet_title: Worksheet name (default "Roster")
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title or "Roster"

    _write_month_headers(ws, grid, row=1)
    _write_days_row(ws, grid, row=2)
    ws.freeze_panes = "B3"

    for r, row in enumerate(grid.body, start=3):
        name = row[0]
        ws.cell(row=r, column=1, value=name.text).font = Font(bold=True)
        for c, cell_data in enumerate(row[1:], start=FIRST_DATA_COL):
            code = cell_data.text
            cell = ws.cell(row=r, column=c, value=code)
            if code != PLACEHOLDER_CODE:
                color = SHIFT_COLORS.get(code, DEFAULT_FILL)
                cell.fill = PatternFill(start_color=color, end_color=color, fill_type="solid")
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = BORDER_THIN

    _apply_month_separators(ws, grid)

    ws.column_dimensions["A"].width = 24
    for i in range(len(grid.columns)):
        ws.column_dimensions[get_column_letter(FIRST_DATA_COL + i)].width = 4.5

    if isinstance(output, io.BytesIO):
        wb.save(output)
    else:
        wb.save(str(output))
    logger.info(f"Excel export complete: {len(grid.body)} rows, {len(grid.columns)} columns")
