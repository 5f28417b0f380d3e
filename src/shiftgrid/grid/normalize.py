"""Input normalization: turn a roster payload into model objects."""
from collections.abc import Mapping
from typing import Any

from shiftgrid.errors import MalformedInputError
from shiftgrid.models.staff import StaffEntry, StaffRoster
from shiftgrid.utils.logging_setup import get_logger

logger = get_logger("shiftgrid.grid.normalize")


def _staff_collection(payload: Any):
    if isinstance(payload, Mapping):
        if "staff" not in payload:
            raise MalformedInputError(payload_type=type(payload).__name__)
        return payload["staff"]
    if payload is None or not hasattr(payload, "staff"):
        raise MalformedInputError(payload_type=type(payload).__name__)
    return payload.staff


def normalize_roster(payload: Any) -> StaffRoster:
    """
    Validate a roster payload and convert it to a StaffRoster.

    Only the presence of the top-level ``staff`` collection is checked.
    Missing staff or shift fields surface as the KeyError/TypeError of the
    field access. The collection may be a list or a mapping of staff
    objects; mapping values are taken in insertion order.

    Raises:
        MalformedInputError: payload has no ``staff`` key or attribute
    """
    if isinstance(payload, StaffRoster):
        return payload

    staff = _staff_collection(payload)
    if isinstance(staff, Mapping):
        staff = list(staff.values())

    entries = [
        s if isinstance(s, StaffEntry) else StaffEntry.from_dict(s)
        for s in staff
    ]
    logger.debug(f"Normalized roster: {len(entries)} staff entries")
    return StaffRoster(staff=entries)
