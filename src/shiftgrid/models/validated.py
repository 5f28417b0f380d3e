"""
Pydantic Validated Models
=========================
Validation layer for styling and builder options arriving as plain
mappings (JSON config files, CLI flags, callers passing dicts).

Usage:
    from shiftgrid.models.validated import ValidatedStyling

    styling = ValidatedStyling(table="table table-sm").to_dataclass()

The frozen dataclasses in ``shiftgrid.config`` stay the types the builder
works with; these models only guard the boundary.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shiftgrid.models.shift import NBSP


class AlignModeEnum(str, Enum):
    """Body alignment modes."""
    DATE = "date"
    POSITION = "position"


class ValidatedStyling(BaseModel):
    """
    Class-name configuration for the rendered table.

    Every key is a free-form class string; unknown keys are an error.
    """
    model_config = ConfigDict(extra="forbid")

    table: str = Field(default="", description="Class of the <table> element")
    thead: str = Field(default="")
    tbody: str = Field(default="")
    dateHeader: str = Field(default="", description="Class of month/date header cells")
    rowHeader: str = Field(default="", description="Class of staff name cells")
    cell: str = Field(default="", description="Class of shift data cells")

    @field_validator("*", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        """Treat null as the empty class string."""
        return "" if v is None else v

    def to_dataclass(self):
        """Convert to the GridStyling dataclass."""
        from shiftgrid.config import GridStyling

        return GridStyling(**self.model_dump())


class ValidatedGridConfig(BaseModel):
    """Builder options with range checks."""
    model_config = ConfigDict(extra="forbid")

    align: AlignModeEnum = Field(default=AlignModeEnum.DATE)
    reference_index: int = Field(default=0, ge=0)
    month_caption: str = Field(default=NBSP)
    date_caption: str = Field(default="Date")

    def to_dataclass(self):
        """Convert to the GridConfig dataclass."""
        from shiftgrid.config import AlignMode, GridConfig

        return GridConfig(
            align=AlignMode(self.align.value),
            reference_index=self.reference_index,
            month_caption=self.month_caption,
            date_caption=self.date_caption,
        )
