"""
PDF Export for Roster Grids
===========================
A4 landscape rendering of the grid, split across pages by date columns.
Uses fpdf2 for lightweight PDF generation.
"""
import io
from datetime import datetime
from pathlib import Path
from typing import List, Union

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from shiftgrid.grid.builder import GridStructure
from shiftgrid.grid.schedule import Column
from shiftgrid.models.shift import PLACEHOLDER_CODE
from shiftgrid.utils.logging_setup import get_logger

logger = get_logger("shiftgrid.io.pdf_export")

# Colors (RGB)
COLORS = {
    "header_bg": (68, 114, 196),
    "header_text": (255, 255, 255),
    "shift": (221, 238, 255),
    "empty": (255, 255, 255),
}

NAME_WIDTH = 40
CELL_WIDTH = 7
COLUMNS_PER_PAGE = 31


def _latin1(text: str) -> str:
    # Core fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


class RosterPDF(FPDF):
    """PDF with a title header and page-numbered footer."""

    def __init__(self, title: str = "Shift Roster"):
        super().__init__(orientation="L", unit="mm", format="A4")
        self.title = title
        self.set_auto_page_break(auto=True, margin=15)

    def header(self):
        self.set_font("Helvetica", "B", 12)
        self.cell(0, 10, _latin1(self.title), border=0, align="C")
        self.ln(5)
        self.set_font("Helvetica", "", 8)
        self.cell(0, 5, f"Generated {datetime.now().strftime('%Y-%m-%d %H:%M')}", border=0, align="C")
        self.ln(10)

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")


def _column_pages(columns: List[Column], per_page: int) -> List[range]:
    if not columns:
        return [range(0)]
    return [range(i, min(i + per_page, len(columns))) for i in range(0, len(columns), per_page)]


def export_to_pdf(
    grid: GridStructure,
    output: Union[str, Path, io.BytesIO],
    title: str = "Shift Roster",
    columns_per_page: int = COLUMNS_PER_PAGE,
) -> None:
    """
    Export the grid to PDF, one page per block of date columns.

    Args:
        grid: Structure returned by build_grid
        output: File path or BytesIO buffer
        title: Page title
        columns_per_page: Date columns per page
    """
    pdf = RosterPDF(title=title)
    pdf.alias_nb_pages()

    for cols in _column_pages(grid.columns, columns_per_page):
        pdf.add_page()

        # Month row
        pdf.set_font("Helvetica", "B", 7)
        pdf.set_fill_color(*COLORS["header_bg"])
        pdf.set_text_color(*COLORS["header_text"])
        pdf.cell(NAME_WIDTH, 6, _latin1(grid.month_row[0].display_text), border=1, fill=True)
        for i, c in enumerate(cols):
            label = grid.columns[c].month_label
            # Repeat the month on continuation pages
            if i == 0 and not grid.columns[c].opens_month:
                label = _month_at(grid.columns, c)
            pdf.cell(CELL_WIDTH, 6, _latin1(label.strip()), border=1, align="C", fill=True)
        pdf.ln()

        # Date row
        pdf.cell(NAME_WIDTH, 6, _latin1(grid.date_row[0].display_text), border=1, fill=True)
        for c in cols:
            pdf.cell(CELL_WIDTH, 6, str(grid.columns[c].day), border=1, align="C", fill=True)
        pdf.ln()

        pdf.set_text_color(0, 0, 0)
        pdf.set_font("Helvetica", "", 7)
        for row in grid.body:
            pdf.cell(NAME_WIDTH, 5, _latin1(row[0].text[:24]), border=1)
            for c in cols:
                idx = c + 1
                code = row[idx].text if idx < len(row) else ""
                if code and code != PLACEHOLDER_CODE:
                    pdf.set_fill_color(*COLORS["shift"])
                else:
                    pdf.set_fill_color(*COLORS["empty"])
                pdf.cell(CELL_WIDTH, 5, _latin1(code), border=1, align="C", fill=True)
            pdf.ln()

    if isinstance(output, (str, Path)):
        pdf.output(str(output))
    else:
        output.write(pdf.output())
        output.seek(0)

    logger.info(f"PDF export complete: {len(grid.body)} rows, {len(grid.columns)} columns")


def _month_at(columns: List[Column], index: int) -> str:
    """Label of the month run containing column ``index``."""
    for c in range(index, -1, -1):
        if columns[c].opens_month:
            return columns[c].month_label
    return ""
