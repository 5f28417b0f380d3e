"""Column schedule and month-header detection."""
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import List, Sequence, Tuple

from babel import Locale
from babel.dates import format_date

from shiftgrid.models.shift import NBSP, ShiftEntry


def is_new_month(day: date, last: date) -> bool:
    """True iff ``day`` falls in a later (year, month) than ``last``."""
    if day.year > last.year:
        return True
    return day.year == last.year and day.month > last.month


@dataclass(frozen=True)
class MonthState:
    """Fold state carried across header columns."""
    last_date: date = date.min


def advance(state: MonthState, day: date) -> Tuple[bool, MonthState]:
    """Visit one column: report whether it opens a month, return the next state."""
    return is_new_month(day, state.last_date), MonthState(last_date=day)


@lru_cache(maxsize=32)
def parse_locale(identifier: str) -> Locale:
    """Parse ``en-US``, ``en_US`` or ``fr`` style identifiers."""
    return Locale.parse(identifier.replace("_", "-"), sep="-")


def short_month_name(day: date, locale: str) -> str:
    """Abbreviated month name in the given locale (``Jan`` in en-US)."""
    return format_date(day, "MMM", locale=parse_locale(locale))


@dataclass(frozen=True)
class Column:
    """One date column of the grid."""
    date: date
    month_label: str  # Localized short month, or NBSP when not a new month

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def opens_month(self) -> bool:
        return self.month_label != NBSP


def build_schedule(shifts: Sequence[ShiftEntry], locale: str) -> List[Column]:
    """
    Build the column schedule from a reference shift sequence.

    Input order is trusted: a date that does not move forward in
    (year, month) never opens a month.
    """
    columns = []
    state = MonthState()
    for shift in shifts:
        new_month, state = advance(state, shift.date)
        label = short_month_name(shift.date, locale) if new_month else NBSP
        columns.append(Column(date=shift.date, month_label=label))
    return columns


def month_spans(columns: Sequence[Column]) -> List[Tuple[str, int, int]]:
    """
    Group columns under their month labels.

    Returns (label, first_index, last_index) for each labelled run, the
    run extending until the next labelled column.
    """
    spans = []
    for i, col in enumerate(columns):
        if col.opens_month:
            spans.append([col.month_label, i, i])
        elif spans:
            spans[-1][2] = i
    return [tuple(s) for s in spans]
