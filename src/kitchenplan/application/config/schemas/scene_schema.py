"""Component catalog and placed object configuration schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kitchenplan.application.config.schemas.base import (
    ComponentKindConfig,
    DimensionsConfig,
    LegStyleConfig,
    ObjectCategoryConfig,
    RotationConfig,
    Vector3Config,
)


class ComponentConfig(BaseModel):
    """A component that can be installed into an object slot.

    Attributes:
        id: Unique component id. Leg ids containing ``leg_standard`` are
            standard legs unless ``leg_style`` says otherwise.
        kind: Component role.
        name: Display name.
        width: Width in millimetres (corpus components).
        height: Height in millimetres (corpus and leg components).
        depth: Depth in millimetres (corpus components).
        leg_style: Explicit leg style for leg components.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    kind: ComponentKindConfig
    name: str = ""
    width: float | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    depth: float | None = Field(default=None, ge=0)
    leg_style: LegStyleConfig | None = None


class PlacedObjectConfig(BaseModel):
    """An object placed in the scene.

    Attributes:
        id: Scene-unique object id.
        category: Object category.
        position: Pivot position (centre of the carcass back face) in metres.
        rotation: Rotation in degrees.
        components: Slot id to component id (null for an empty slot).
        model_dimensions: Raw model bounds in millimetres, used when no
            corpus component is installed.
        elevation_override: Fixed elevation in metres.
        has_sink: Cut a sink hole into the worktop above this object.
        has_hob: Cut a hob hole into the worktop above this object.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    category: ObjectCategoryConfig
    position: Vector3Config = Field(default_factory=Vector3Config)
    rotation: RotationConfig = Field(default_factory=RotationConfig)
    components: dict[str, str | None] = Field(default_factory=dict)
    model_dimensions: DimensionsConfig | None = None
    elevation_override: float | None = Field(default=None, ge=0)
    has_sink: bool = False
    has_hob: bool = False

    @field_validator("components")
    @classmethod
    def validate_slot_ids(cls, v: dict[str, str | None]) -> dict[str, str | None]:
        """Slot ids must not be blank."""
        for slot in v:
            if not slot.strip():
                raise ValueError("Component slot ids must not be empty")
        return v
