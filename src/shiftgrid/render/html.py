"""Materialize a GridStructure as an HTML table."""
import html
import re
from typing import Iterable, List

from shiftgrid.grid.builder import GridStructure
from shiftgrid.grid.cells import Cell
from shiftgrid.models.shift import NBSP

# Class of the inert activation target wrapped around shift codes
LINK_CLASS = "shift-link"

_CAMEL = re.compile(r"(?<!^)(?=[A-Z])")


def data_attr_name(name: str) -> str:
    """``shiftDate`` -> ``data-shift-date``."""
    return "data-" + _CAMEL.sub("-", name).lower()


def esc(text) -> str:
    return html.escape(str(text), quote=True)


def _class_attr(css_class: str) -> str:
    return f' class="{esc(css_class)}"' if css_class else ""


def _cell_content(cell: Cell) -> str:
    if cell.text == NBSP:
        return "&nbsp;"
    if cell.actionable:
        return f'<a href="#" role="button" class="{LINK_CLASS}">{esc(cell.text)}</a>'
    return esc(cell.text)


def render_cell(cell: Cell) -> str:
    attrs = _class_attr(cell.css_class)
    attrs += "".join(f' {data_attr_name(k)}="{esc(v)}"' for k, v in cell.data)
    return f"<{cell.tag}{attrs}>{_cell_content(cell)}</{cell.tag}>"


def render_row(cells: Iterable[Cell]) -> str:
    return "<tr>" + "".join(render_cell(c) for c in cells) + "</tr>"


def render_html(grid: GridStructure, indent: bool = False) -> str:
    """
    Render the grid as a ``<table>`` element.

    Args:
        grid: Structure returned by build_grid
        indent: Put each row on its own line

    Returns:
        HTML fragment ready for insertion into a page
    """
    sep = "\n" if indent else ""
    s = grid.styling
    parts: List[str] = [f"<table{_class_attr(s.table)}>"]
    parts.append(f"<thead{_class_attr(s.thead)}>")
    parts.extend(render_row(row) for row in grid.header)
    parts.append("</thead>")
    parts.append(f"<tbody{_class_attr(s.tbody)}>")
    parts.extend(render_row(row) for row in grid.body)
    parts.append("</tbody>")
    parts.append("</table>")
    return sep.join(parts)
