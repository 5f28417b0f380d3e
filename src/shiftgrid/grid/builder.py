"""
Grid Builder
============
Turns a roster into header rows and one body row per staff entry.

Columns come from a reference staff entry (the first by default). In
``date`` alignment every other entry is matched to those columns by
normalized date; ``position`` alignment places shifts in iteration order
as the legacy table did.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from shiftgrid.config import (
    AlignMode,
    GridConfig,
    GridStyling,
    coerce_config,
    coerce_styling,
)
from shiftgrid.models.shift import placeholder_shift
from shiftgrid.models.staff import StaffEntry
from shiftgrid.utils.logging_setup import get_logger, log_function_call

from .cells import (
    Cell,
    date_head_cell,
    empty_head_cell,
    month_head_cell,
    name_head_cell,
    shift_cell,
)
from .normalize import normalize_roster
from .schedule import Column, build_schedule

logger = get_logger("shiftgrid.grid.builder")

DEFAULT_LOCALE = "en-US"

Row = List[Cell]


@dataclass
class GridStructure:
    """Abstract table: two header rows, one body row per staff entry."""
    header: List[Row]
    body: List[Row]
    columns: List[Column] = field(default_factory=list)
    styling: GridStyling = field(default_factory=GridStyling)
    locale: str = DEFAULT_LOCALE

    @property
    def month_row(self) -> Row:
        return self.header[0]

    @property
    def date_row(self) -> Row:
        return self.header[1]

    def month_labels(self) -> List[str]:
        return [c.display_text for c in self.month_row]

    def date_labels(self) -> List[str]:
        return [c.display_text for c in self.date_row]

    def body_texts(self) -> List[List[str]]:
        return [[c.display_text for c in row] for row in self.body]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form for an external scripting layer."""
        return {
            "locale": self.locale,
            "styling": self.styling.to_dict(),
            "thead": [[c.to_dict() for c in row] for row in self.header],
            "tbody": [[c.to_dict() for c in row] for row in self.body],
        }

    def to_html(self) -> str:
        from shiftgrid.render.html import render_html
        return render_html(self)


def _aligned_shifts(staff: StaffEntry, columns: List[Column]):
    """Yield one shift per column, a placeholder where the entry has none."""
    by_date = {}
    for shift in staff.shifts:
        if shift.iso_date in by_date:
            logger.warning(
                f"Staff {staff.id} ({staff.name}): duplicate shift on {shift.iso_date}, keeping first"
            )
            continue
        by_date[shift.iso_date] = shift

    known = {c.iso_date for c in columns}
    dropped = [d for d in by_date if d not in known]
    if dropped:
        logger.warning(
            f"Staff {staff.id} ({staff.name}): {len(dropped)} shift(s) outside the column schedule dropped"
        )

    for col in columns:
        shift = by_date.get(col.iso_date)
        if shift is None:
            logger.debug(f"Staff {staff.id}: no shift on {col.iso_date}, using placeholder")
            shift = placeholder_shift(col.date)
        yield shift


def _body_row(staff: StaffEntry, columns: List[Column], styling: GridStyling,
              align: AlignMode, is_reference: bool = False) -> Row:
    row = [name_head_cell(styling, staff)]
    if not staff.shifts:
        return row
    # The reference entry defines the columns one-to-one
    if align is AlignMode.POSITION or is_reference:
        shifts = staff.shifts
    else:
        shifts = _aligned_shifts(staff, columns)
    row.extend(shift_cell(styling, s) for s in shifts)
    return row


@log_function_call
def build_grid(
    roster: Any,
    styling: Optional[Union[GridStyling, Mapping[str, Any]]] = None,
    locale: str = DEFAULT_LOCALE,
    config: Optional[Union[GridConfig, Mapping[str, Any]]] = None,
) -> GridStructure:
    """
    Build the grid structure for a roster.

    Args:
        roster: Payload with a ``staff`` collection, or a StaffRoster
        styling: Class names for table parts (GridStyling or mapping)
        locale: Locale identifier used for month names
        config: Alignment mode, reference entry and corner captions

    Returns:
        GridStructure with month row, date row and one body row per staff

    Raises:
        MalformedInputError: payload has no ``staff`` collection
        ValueError: reference_index outside a non-empty roster
    """
    staff_roster = normalize_roster(roster)
    styling = coerce_styling(styling)
    config = coerce_config(config)

    if staff_roster.staff and config.reference_index >= len(staff_roster):
        raise ValueError(
            f"reference_index {config.reference_index} out of range for {len(staff_roster)} staff entries"
        )

    reference = staff_roster.staff[config.reference_index].shifts if staff_roster.staff else []
    columns = build_schedule(reference, locale)
    logger.debug(
        f"Column schedule: {len(columns)} columns"
        + (f" from {columns[0].iso_date} to {columns[-1].iso_date}" if columns else "")
    )

    month_row = [empty_head_cell(styling, config.month_caption)]
    month_row.extend(month_head_cell(styling, c) for c in columns)
    date_row = [empty_head_cell(styling, config.date_caption)]
    date_row.extend(date_head_cell(styling, c) for c in columns)

    body = [
        _body_row(s, columns, styling, config.align, is_reference=(i == config.reference_index))
        for i, s in enumerate(staff_roster)
    ]

    logger.info(f"Grid built: {len(body)} rows x {len(columns)} columns ({config.align.value} alignment)")
    return GridStructure(
        header=[month_row, date_row],
        body=body,
        columns=columns,
        styling=styling,
        locale=locale,
    )
