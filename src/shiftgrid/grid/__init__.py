# shiftgrid/grid - Roster to grid transformation
from .builder import DEFAULT_LOCALE, GridStructure, build_grid
from .cells import Cell, date_head_cell, empty_head_cell, month_head_cell, name_head_cell, shift_cell
from .normalize import normalize_roster
from .schedule import Column, MonthState, advance, build_schedule, is_new_month, month_spans

__all__ = [
    "build_grid", "GridStructure", "DEFAULT_LOCALE",
    "Cell", "empty_head_cell", "month_head_cell", "date_head_cell", "name_head_cell", "shift_cell",
    "normalize_roster",
    "Column", "MonthState", "advance", "build_schedule", "is_new_month", "month_spans",
]
