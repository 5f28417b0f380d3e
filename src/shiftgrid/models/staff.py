"""Staff entry and roster models."""
from dataclasses import dataclass, field
from typing import Any, Iterator, List

from .shift import ShiftEntry


@dataclass
class StaffEntry:
    """A staff member with their shifts in ascending date order."""
    id: int
    name: str
    shifts: List[ShiftEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "shifts": [s.to_dict() for s in self.shifts],
        }

    @classmethod
    def from_dict(cls, d: Any) -> "StaffEntry":
        """Create from a payload mapping."""
        return cls(
            id=int(d["id"]),
            name=str(d["name"]),
            shifts=[ShiftEntry.from_dict(s) for s in d["shifts"]],
        )


@dataclass
class StaffRoster:
    """Ordered staff entries for one rendering."""
    staff: List[StaffEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[StaffEntry]:
        return iter(self.staff)

    def __len__(self) -> int:
        return len(self.staff)

    def to_dict(self) -> dict:
        return {"staff": [s.to_dict() for s in self.staff]}
