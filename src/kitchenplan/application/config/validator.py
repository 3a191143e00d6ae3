"""Validation structures and scene advisory checks.

Schema validation only guarantees a well-formed file. These checks look at
the scene the file describes: components that cannot be resolved, objects
that overlap or stick out of the room, and openings the layout rules had
to move or resize.
"""

from dataclasses import dataclass, field
from typing import Any

from kitchenplan.application.config.adapter import (
    config_to_placement_settings,
    config_to_room,
    config_to_scene,
    config_to_worktop_params,
)
from kitchenplan.application.config.schemas import SceneConfiguration
from kitchenplan.domain.services import (
    CollisionResolver,
    FootprintService,
    RoomConstraint,
    VerticalPositionResolver,
)
from kitchenplan.domain.value_objects import ComponentKind, ObjectCategory

# Distance (scene units) an object may sit outside the room before it is reported.
POSITION_TOLERANCE: float = 1e-6

# Opening changes smaller than this (mm) are not reported.
OPENING_TOLERANCE: float = 1e-6


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "objects[0].position")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_components(config: SceneConfiguration) -> ValidationResult:
    """Warn about unknown component ids and objects without a carcass."""
    result = ValidationResult()
    known = {c.id for c in config.components}
    corpus_ids = {c.id for c in config.components if c.kind is ComponentKind.CORPUS}

    for i, obj in enumerate(config.objects):
        for slot, component_id in obj.components.items():
            if component_id and component_id not in known:
                result.add_warning(
                    path=f"objects[{i}].components.{slot}",
                    message=f"Unknown component '{component_id}' is ignored",
                    suggestion="Add it to the components list or clear the slot",
                )
        has_corpus = any(cid in corpus_ids for cid in obj.components.values() if cid)
        if not has_corpus and obj.model_dimensions is None:
            result.add_warning(
                path=f"objects[{i}]",
                message=(
                    f"Object '{obj.id}' has no corpus component and no "
                    "model_dimensions; it will not snap, collide or carry a worktop"
                ),
            )
        if (obj.has_sink or obj.has_hob) and obj.category != ObjectCategory.BASE_CABINET:
            result.add_warning(
                path=f"objects[{i}]",
                message=f"Cutout on '{obj.id}' is ignored: only base cabinets carry a worktop",
            )
    return result


def check_placement(config: SceneConfiguration) -> ValidationResult:
    """Report overlapping objects and objects outside the room.

    Objects are checked at their leg-driven elevation, the same way the
    placement resolver sees them.
    """
    result = ValidationResult()
    scene = config_to_scene(config)
    worktop = config_to_worktop_params(config)
    footprints = FootprintService(
        scene.catalog,
        side_overhang=worktop.side_overhang,
        default_depth=worktop.default_depth,
    )
    resolver = VerticalPositionResolver(
        scene.catalog,
        plinth_height=config.plinth.height,
        global_leg_style=config.legs.global_style,
    )
    for obj in scene.objects:
        resolver.apply(obj)

    collisions = CollisionResolver(
        footprints, settings=config_to_placement_settings(config)
    )
    constraint = RoomConstraint(footprints)

    for i, obj in enumerate(scene.objects):
        earlier = scene.objects[:i]
        if earlier and collisions.collides(obj, obj.position, None, earlier):
            result.add_error(
                path=f"objects[{i}].position",
                message=f"Object '{obj.uuid}' overlaps another object",
                value=obj.position.as_tuple(),
            )
        clamped = constraint.clamp(obj, obj.position, scene.room)
        if clamped.distance_to(obj.position) > POSITION_TOLERANCE:
            result.add_warning(
                path=f"objects[{i}].position",
                message=f"Object '{obj.uuid}' extends past the room walls",
                suggestion=(
                    f"Move it to x={clamped.x:.3f}, z={clamped.z:.3f} "
                    "(placement will clamp it there)"
                ),
            )
    return result


def check_openings(config: SceneConfiguration) -> ValidationResult:
    """Warn about openings that normalisation moved or resized."""
    result = ValidationResult()
    normalized = {op.opening_id: op for op in config_to_room(config.room).openings}
    for i, opening in enumerate(config.room.openings):
        fixed = normalized.get(opening.id)
        if fixed is None:
            continue
        changed = [
            name
            for name, before, after in (
                ("offset", opening.offset, fixed.offset),
                ("width", opening.width, fixed.width),
                ("height", opening.height, fixed.height),
                ("elevation", opening.elevation, fixed.elevation),
            )
            if abs(before - after) > OPENING_TOLERANCE
        ]
        if changed:
            result.add_warning(
                path=f"room.openings[{i}]",
                message=f"Opening '{opening.id}' adjusted: {', '.join(changed)}",
                suggestion="Openings need 100 mm minimum size and may not overlap",
            )
    return result


def validate_config(config: SceneConfiguration) -> ValidationResult:
    """Run every scene advisory check.

    Args:
        config: A schema-valid configuration.

    Returns:
        Combined errors and warnings.
    """
    result = ValidationResult()
    result.merge(check_components(config))
    result.merge(check_placement(config))
    result.merge(check_openings(config))
    return result
