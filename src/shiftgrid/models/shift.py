"""Shift entry model and date normalization."""
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Optional, Union

# Code rendered for "no shift scheduled"
PLACEHOLDER_CODE = "-"

# Non-breaking blank used for empty header labels
NBSP = "\u00a0"

DateLike = Union[date, datetime, str]


def to_utc_date(value: DateLike) -> date:
    """
    Normalize a date-like value to its UTC calendar date.

    Aware datetimes are converted to UTC first; naive datetimes and plain
    ``yyyy-mm-dd`` strings are taken as UTC already.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        s = value.strip()
        if len(s) == 10:
            return date.fromisoformat(s)
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        return to_utc_date(datetime.fromisoformat(s))
    raise TypeError(f"Cannot interpret {type(value).__name__} as a date")


def iso_date(value: DateLike) -> str:
    """Canonical yyyy-mm-dd form of the UTC calendar date."""
    return to_utc_date(value).isoformat()


@dataclass(frozen=True)
class ShiftEntry:
    """One scheduled day for a staff member."""
    id: Optional[int]
    date: date
    code: str = PLACEHOLDER_CODE

    def __post_init__(self):
        if not isinstance(self.date, date) or isinstance(self.date, datetime):
            object.__setattr__(self, "date", to_utc_date(self.date))

    @property
    def is_placeholder(self) -> bool:
        """True when no shift is scheduled on this day."""
        return self.code == PLACEHOLDER_CODE

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"id": self.id, "date": self.iso_date, "code": self.code}

    @classmethod
    def from_dict(cls, d: Any) -> "ShiftEntry":
        """
        Create from a payload mapping.

        Accepts ``id``/``date``/``code`` as well as the ``shift_id``/
        ``shift_date``/``shift_code`` names served by the legacy endpoint.
        Missing fields surface as ``KeyError``.
        """
        shift_id = d["id"] if "id" in d else d["shift_id"]
        raw_date = d["date"] if "date" in d else d["shift_date"]
        code = d["code"] if "code" in d else d["shift_code"]
        return cls(
            id=int(shift_id) if shift_id is not None else None,
            date=to_utc_date(raw_date),
            code=str(code),
        )


def placeholder_shift(day: date) -> ShiftEntry:
    """Shift entry standing in for a date missing from a staff entry."""
    return ShiftEntry(id=None, date=day, code=PLACEHOLDER_CODE)
