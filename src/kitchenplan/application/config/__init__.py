"""Configuration schema and loading system for kitchen scenes.

Public API:
    - SceneConfiguration: Root configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_scene: Convert a configuration into a domain Scene
    - config_to_placement_settings / config_to_fallback_policy
    - config_to_worktop_params / config_to_plinth_params
    - validate_config: Scene advisory checks (overlaps, unknown components)

Example:
    >>> from pathlib import Path
    >>> from kitchenplan.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ...     print(f"Room: {config.room.width}x{config.room.depth}mm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from kitchenplan.application.config.adapter import (
    config_to_catalog,
    config_to_fallback_policy,
    config_to_object,
    config_to_placement_settings,
    config_to_plinth_params,
    config_to_room,
    config_to_scene,
    config_to_worktop_params,
)
from kitchenplan.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from kitchenplan.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)
from kitchenplan.application.config.schemas import (
    SUPPORTED_VERSIONS,
    ComponentConfig,
    DimensionsConfig,
    LegsConfigSchema,
    OpeningConfig,
    OutputConfig,
    PlacedObjectConfig,
    PlacementConfigSchema,
    PlinthConfigSchema,
    RoomConfig,
    RotationConfig,
    SceneConfiguration,
    Vector3Config,
    WorktopConfigSchema,
)

__all__ = [
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Schemas
    "SUPPORTED_VERSIONS",
    "ComponentConfig",
    "DimensionsConfig",
    "LegsConfigSchema",
    "OpeningConfig",
    "OutputConfig",
    "PlacedObjectConfig",
    "PlacementConfigSchema",
    "PlinthConfigSchema",
    "RoomConfig",
    "RotationConfig",
    "SceneConfiguration",
    "Vector3Config",
    "WorktopConfigSchema",
    # Adapters
    "config_to_catalog",
    "config_to_fallback_policy",
    "config_to_object",
    "config_to_placement_settings",
    "config_to_plinth_params",
    "config_to_room",
    "config_to_scene",
    "config_to_worktop_params",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
]
