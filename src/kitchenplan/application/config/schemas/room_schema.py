"""Room geometry configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kitchenplan.application.config.schemas.base import OpeningTypeConfig


class OpeningConfig(BaseModel):
    """A door, window or open passage on one of the four walls.

    Attributes:
        id: Unique opening identifier.
        type: Opening type.
        wall_index: 0 = back, 1 = right, 2 = front, 3 = left.
        offset: Distance from the wall's start in millimetres.
        width: Opening width in millimetres.
        height: Opening height in millimetres.
        elevation: Sill height in millimetres.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    type: OpeningTypeConfig
    wall_index: int = Field(..., ge=0, le=3)
    offset: float = Field(default=0.0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    elevation: float = Field(default=0.0)


class RoomConfig(BaseModel):
    """Rectangular room centred on the origin.

    Attributes:
        width: Extent along X in millimetres.
        depth: Extent along Z in millimetres.
        height: Ceiling height in millimetres.
        openings: Wall openings.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=6000.0, ge=1000.0, le=50000.0)
    depth: float = Field(default=4000.0, ge=1000.0, le=50000.0)
    height: float = Field(default=2600.0, ge=2000.0, le=10000.0)
    openings: list[OpeningConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_opening_ids(self) -> "RoomConfig":
        """Ensure opening ids are unique."""
        ids = [opening.id for opening in self.openings]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate opening ids: {', '.join(duplicates)}")
        return self
