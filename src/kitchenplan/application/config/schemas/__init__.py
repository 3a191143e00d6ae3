"""Configuration schema models for kitchen scene files.

The schemas are organized into the following modules:
- base.py: Enums and shared base models
- room_schema.py: Room geometry and openings
- scene_schema.py: Component catalog and placed objects
- settings_schema.py: Placement, worktop, plinth, leg and output settings
- root.py: Root configuration model
"""

from kitchenplan.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    ComponentKindConfig as ComponentKindConfig,
    DimensionsConfig as DimensionsConfig,
    FallbackStepConfig as FallbackStepConfig,
    LegStyleConfig as LegStyleConfig,
    ObjectCategoryConfig as ObjectCategoryConfig,
    OpeningTypeConfig as OpeningTypeConfig,
    RotationConfig as RotationConfig,
    Vector3Config as Vector3Config,
)
from kitchenplan.application.config.schemas.room_schema import (
    OpeningConfig as OpeningConfig,
    RoomConfig as RoomConfig,
)
from kitchenplan.application.config.schemas.scene_schema import (
    ComponentConfig as ComponentConfig,
    PlacedObjectConfig as PlacedObjectConfig,
)
from kitchenplan.application.config.schemas.settings_schema import (
    LegsConfigSchema as LegsConfigSchema,
    OutputConfig as OutputConfig,
    PlacementConfigSchema as PlacementConfigSchema,
    PlinthConfigSchema as PlinthConfigSchema,
    WorktopConfigSchema as WorktopConfigSchema,
)
from kitchenplan.application.config.schemas.root import (
    SceneConfiguration as SceneConfiguration,
)
