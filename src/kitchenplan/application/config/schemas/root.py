"""Root configuration schema.

This module contains the root SceneConfiguration model, the top-level
structure of a kitchen scene file.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from kitchenplan.application.config.schemas.base import SUPPORTED_VERSIONS
from kitchenplan.application.config.schemas.room_schema import RoomConfig
from kitchenplan.application.config.schemas.scene_schema import (
    ComponentConfig,
    PlacedObjectConfig,
)
from kitchenplan.application.config.schemas.settings_schema import (
    LegsConfigSchema,
    OutputConfig,
    PlacementConfigSchema,
    PlinthConfigSchema,
    WorktopConfigSchema,
)


class SceneConfiguration(BaseModel):
    """Root configuration model for a kitchen scene.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        room: Room geometry and openings
        components: Component catalog
        objects: Placed objects
        placement: Snap and collision settings
        worktop: Worktop generation parameters
        plinth: Plinth generation parameters
        legs: Global leg style rule
        output: Export settings

    Example:
        >>> config = SceneConfiguration(
        ...     schema_version="1.0",
        ...     room=RoomConfig(width=4000, depth=3000),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    room: RoomConfig = Field(default_factory=RoomConfig)
    components: list[ComponentConfig] = Field(default_factory=list)
    objects: list[PlacedObjectConfig] = Field(default_factory=list)
    placement: PlacementConfigSchema = Field(default_factory=PlacementConfigSchema)
    worktop: WorktopConfigSchema = Field(default_factory=WorktopConfigSchema)
    plinth: PlinthConfigSchema = Field(default_factory=PlinthConfigSchema)
    legs: LegsConfigSchema = Field(default_factory=LegsConfigSchema)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "SceneConfiguration":
        """Component ids and object ids must each be unique."""
        for label, ids in (
            ("component", [c.id for c in self.components]),
            ("object", [o.id for o in self.objects]),
        ):
            duplicates = sorted({i for i in ids if ids.count(i) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {label} ids: {', '.join(duplicates)}")
        return self
