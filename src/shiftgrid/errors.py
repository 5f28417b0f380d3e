"""Exception types raised by shiftgrid."""
from typing import Optional


class ShiftGridError(Exception):
    """Base class for shiftgrid errors."""


class MalformedInputError(ShiftGridError, ValueError):
    """Roster payload is missing its top-level ``staff`` collection."""

    def __init__(self, message: str = "roster payload has no 'staff' collection",
                 payload_type: Optional[str] = None):
        super().__init__(message)
        self.payload_type = payload_type
