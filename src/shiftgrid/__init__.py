"""shiftgrid - render staff rosters as calendar-style shift grids."""
from .config import AlignMode, GridConfig, GridStyling
from .errors import MalformedInputError, ShiftGridError
from .grid import Cell, GridStructure, build_grid, normalize_roster
from .models import ShiftEntry, StaffEntry, StaffRoster
from .render import render_html

__version__ = "0.3.0"

__all__ = [
    "build_grid", "normalize_roster", "render_html",
    "GridStructure", "Cell",
    "GridStyling", "GridConfig", "AlignMode",
    "StaffRoster", "StaffEntry", "ShiftEntry",
    "MalformedInputError", "ShiftGridError",
]
