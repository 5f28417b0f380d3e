"""Cell construction for header and body rows."""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from shiftgrid.config import GridStyling
from shiftgrid.models.shift import NBSP, ShiftEntry
from shiftgrid.models.staff import StaffEntry

from .schedule import Column

EMPTY = "empty"
MONTH = "month"
DATE = "date"
NAME = "name"
SHIFT = "shift"


@dataclass(frozen=True)
class Cell:
    """
    One rendered cell: visible text, class and data attributes.

    ``data`` keeps attribute order stable; names are camelCase
    (``shiftDate``, ``staffId``...) and become ``data-*`` attributes
    when materialized.
    """
    kind: str
    tag: str
    text: str
    css_class: str = ""
    data: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    actionable: bool = False

    @property
    def attrs(self) -> Dict[str, str]:
        return dict(self.data)

    @property
    def display_text(self) -> str:
        """Visible text with the non-breaking blank read as empty."""
        return "" if self.text == NBSP else self.text

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "tag": self.tag,
            "text": self.display_text,
            "class": self.css_class,
            "data": self.attrs,
            "actionable": self.actionable,
        }


def _value(v: Optional[object]) -> str:
    return "" if v is None else str(v)


def empty_head_cell(styling: GridStyling, caption: str = NBSP) -> Cell:
    """Corner cell of a header row."""
    return Cell(kind=EMPTY, tag="th", text=caption or NBSP, css_class=styling.dateHeader)


def month_head_cell(styling: GridStyling, column: Column) -> Cell:
    return Cell(
        kind=MONTH,
        tag="th",
        text=column.month_label,
        css_class=styling.dateHeader,
        data=(("shiftDate", column.iso_date),),
    )


def date_head_cell(styling: GridStyling, column: Column) -> Cell:
    return Cell(
        kind=DATE,
        tag="th",
        text=str(column.day),
        css_class=styling.dateHeader,
        data=(("shiftDate", column.iso_date),),
    )


def name_head_cell(styling: GridStyling, staff: StaffEntry) -> Cell:
    """Row header carrying the staff identity."""
    return Cell(
        kind=NAME,
        tag="th",
        text=staff.name,
        css_class=styling.rowHeader,
        data=(("staffName", staff.name), ("staffId", _value(staff.id))),
    )


def shift_cell(styling: GridStyling, shift: ShiftEntry) -> Cell:
    """
    Data cell for one shift.

    The ``-`` placeholder is plain text; any other code is an actionable
    target for the scripting layer.
    """
    return Cell(
        kind=SHIFT,
        tag="td",
        text=shift.code,
        css_class=styling.cell,
        data=(
            ("shiftDate", shift.iso_date),
            ("shiftId", _value(shift.id)),
            ("shiftCode", shift.code),
        ),
        actionable=not shift.is_placeholder,
    )
