# shiftgrid/models - Roster data models
from .shift import NBSP, PLACEHOLDER_CODE, ShiftEntry, iso_date, placeholder_shift, to_utc_date
from .staff import StaffEntry, StaffRoster

__all__ = [
    "ShiftEntry", "StaffEntry", "StaffRoster",
    "PLACEHOLDER_CODE", "NBSP",
    "to_utc_date", "iso_date", "placeholder_shift",
]
