"""Grid styling and builder configuration."""
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from shiftgrid.models.shift import NBSP


class AlignMode(str, Enum):
    """How body cells are matched to the column schedule."""
    DATE = "date"          # Look up each column's shift by normalized date
    POSITION = "position"  # Place shifts in iteration order, no alignment check


@dataclass(frozen=True)
class GridStyling:
    """Class names applied verbatim to the parts of the rendered table."""
    table: str = ""
    thead: str = ""
    tbody: str = ""
    dateHeader: str = ""
    rowHeader: str = ""
    cell: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "GridStyling":
        """Create from a mapping, rejecting unknown keys."""
        from shiftgrid.models.validated import ValidatedStyling
        return ValidatedStyling(**dict(d)).to_dataclass()


@dataclass(frozen=True)
class GridConfig:
    """Builder options beyond styling and locale."""
    align: AlignMode = AlignMode.DATE
    reference_index: int = 0  # Staff entry whose shifts define the columns
    month_caption: str = NBSP  # Corner cell of the month row
    date_caption: str = "Date"  # Corner cell of the date row

    def __post_init__(self):
        if not isinstance(self.align, AlignMode):
            object.__setattr__(self, "align", AlignMode(self.align))
        if self.reference_index < 0:
            raise ValueError("reference_index must be >= 0")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "align": self.align.value,
            "reference_index": self.reference_index,
            "month_caption": self.month_caption,
            "date_caption": self.date_caption,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "GridConfig":
        """Create from a mapping, rejecting unknown keys."""
        from shiftgrid.models.validated import ValidatedGridConfig
        return ValidatedGridConfig(**dict(d)).to_dataclass()


def coerce_styling(styling: Optional[Union[GridStyling, Mapping[str, Any]]]) -> GridStyling:
    """Accept a GridStyling, a mapping, or None."""
    if styling is None:
        return GridStyling()
    if isinstance(styling, GridStyling):
        return styling
    return GridStyling.from_dict(styling)


def coerce_config(config: Optional[Union[GridConfig, Mapping[str, Any]]]) -> GridConfig:
    """Accept a GridConfig, a mapping, or None."""
    if config is None:
        return GridConfig()
    if isinstance(config, GridConfig):
        return config
    return GridConfig.from_dict(config)
