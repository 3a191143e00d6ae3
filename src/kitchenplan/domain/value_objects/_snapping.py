"""Snapping, collision fallback and placement result value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from ._core_geometry import Axis, Rotation, Vector3


class SnapPriority(IntEnum):
    """Snap candidate priority. Lower values win.

    Attributes:
        STRUCTURAL: Room walls.
        ALIGNMENT: Neighbour edges and vertical bottom/top alignment.
        STACKING: Stacking one wall cabinet above or below another.
    """

    STRUCTURAL = 0
    ALIGNMENT = 1
    STACKING = 2


class SnapSource(str, Enum):
    """What produced a snap candidate."""

    WALL = "wall"
    NEIGHBOR_LEFT = "neighbor_left"
    NEIGHBOR_RIGHT = "neighbor_right"
    NEIGHBOR_BACK = "neighbor_back"
    ALIGN_BOTTOM = "align_bottom"
    ALIGN_TOP = "align_top"
    STACK_UNDER = "stack_under"
    STACK_OVER = "stack_over"


@dataclass(frozen=True)
class SnapCandidate:
    """A proposed alignment value on a single axis.

    Attributes:
        axis: Axis the value applies to.
        priority: Candidate priority (lower wins).
        value: Target pivot coordinate on ``axis``.
        snap_edge: Coordinate of the edge or plane being snapped against,
            used only for visual feedback.
        distance: Absolute distance between ``value`` and the proposed value.
        source: What produced the candidate.
        reference: Identifier of the wall or object snapped against.
        forced_yaw: Yaw the object must take when this candidate is used.
    """

    axis: Axis
    priority: SnapPriority
    value: float
    snap_edge: float
    distance: float
    source: SnapSource
    reference: str = ""
    forced_yaw: float | None = None

    @property
    def sort_key(self) -> tuple[int, float]:
        return (int(self.priority), self.distance)


@dataclass(frozen=True)
class SnapSelection:
    """Best candidate per axis plus the axis that owns the forced rotation."""

    x: SnapCandidate | None = None
    y: SnapCandidate | None = None
    z: SnapCandidate | None = None
    rotation_axis: Axis | None = None

    def for_axis(self, axis: Axis) -> SnapCandidate | None:
        return getattr(self, axis.value)

    @property
    def forced_yaw(self) -> float | None:
        if self.rotation_axis is None:
            return None
        candidate = self.for_axis(self.rotation_axis)
        return candidate.forced_yaw if candidate else None

    @property
    def is_empty(self) -> bool:
        return self.x is None and self.y is None and self.z is None


class FallbackStep(str, Enum):
    """Ordered collision fallback policy.

    Each step states which axes keep their snapped value. Unsnapped axes use
    the raw proposed value.
    """

    FULL_SNAP = "full_snap"
    X_SNAP_ONLY = "x_snap_only"
    Z_SNAP_ONLY = "z_snap_only"
    VERTICAL_SNAP_ONLY = "vertical_snap_only"
    NO_SNAP = "no_snap"
    LAST_VALID = "last_valid"

    @property
    def snapped_axes(self) -> frozenset[Axis]:
        return _SNAPPED_AXES[self]


_SNAPPED_AXES: dict[FallbackStep, frozenset[Axis]] = {
    FallbackStep.FULL_SNAP: frozenset({Axis.X, Axis.Y, Axis.Z}),
    FallbackStep.X_SNAP_ONLY: frozenset({Axis.X, Axis.Y}),
    FallbackStep.Z_SNAP_ONLY: frozenset({Axis.Z, Axis.Y}),
    FallbackStep.VERTICAL_SNAP_ONLY: frozenset({Axis.Y}),
    FallbackStep.NO_SNAP: frozenset(),
    FallbackStep.LAST_VALID: frozenset(),
}

DEFAULT_FALLBACK_POLICY: tuple[FallbackStep, ...] = tuple(FallbackStep)


@dataclass(frozen=True)
class SnapFeedback:
    """Advisory visual feedback for the winning snap.

    Attributes:
        axis: Axis of the winning candidate.
        edge: Coordinate of the snapped-against edge or plane.
        target: Resolved pivot coordinate on that axis.
        source: What produced the candidate.
        reference: Wall or object identifier.
    """

    axis: Axis
    edge: float
    target: float
    source: SnapSource
    reference: str


@dataclass(frozen=True)
class PlacementResult:
    """Fully resolved transform for a moved object.

    Attributes:
        position: Final pivot position.
        rotation: Forced rotation, or None when the object keeps its own.
        step: Fallback step that produced the position.
        feedback: Advisory snap feedback for the accepted step.
    """

    position: Vector3
    rotation: Rotation | None
    step: FallbackStep
    feedback: tuple[SnapFeedback, ...] = ()

    @property
    def collided(self) -> bool:
        """True when every snapping step collided and the last valid pose was kept."""
        return self.step is FallbackStep.LAST_VALID


@dataclass(frozen=True)
class PlacementSettings:
    """Tunable thresholds for placement resolution, in scene units.

    Attributes:
        wall_snap_threshold: Maximum pivot-to-wall distance for a wall snap.
        neighbor_snap_distance: Maximum distance for a neighbour candidate.
        neighbor_center_tolerance: Depth-axis centre distance that still
            counts as "in line" with a neighbour.
        vertical_snap_distance: Maximum distance for vertical candidates.
        stacking_radius: Horizontal radius for vertical candidates.
        collision_tolerance: Symmetric shrink applied before collision tests.
        grid_increment: Grid step for unsnapped axes; None disables it.
    """

    wall_snap_threshold: float = 0.2
    neighbor_snap_distance: float = 0.25
    neighbor_center_tolerance: float = 0.5
    vertical_snap_distance: float = 0.15
    stacking_radius: float = 3.0
    collision_tolerance: float = 0.002
    grid_increment: float | None = None

    def __post_init__(self) -> None:
        if self.wall_snap_threshold < 0 or self.neighbor_snap_distance < 0:
            raise ValueError("Snap distances must be non-negative")
        if self.collision_tolerance < 0:
            raise ValueError("Collision tolerance must be non-negative")
        if self.grid_increment is not None and self.grid_increment <= 0:
            raise ValueError("Grid increment must be positive")
