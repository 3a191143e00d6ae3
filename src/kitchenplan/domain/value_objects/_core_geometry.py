"""Core geometry value objects and unit conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

# Room and component dimensions are stored in millimetres, the scene works in metres.
UNIT_SCALE = 0.001


def mm_to_units(value_mm: float) -> float:
    """Convert a millimetre value to scene units."""
    return value_mm * UNIT_SCALE


class Axis(str, Enum):
    """Scene axes used for snapping."""

    X = "x"
    Y = "y"
    Z = "z"


@dataclass(frozen=True)
class Vector3:
    """3D point or offset in scene units (Y-up)."""

    x: float
    y: float
    z: float

    def with_axis(self, axis: Axis, value: float) -> Vector3:
        """Return a copy with a single axis replaced."""
        if axis is Axis.X:
            return Vector3(value, self.y, self.z)
        if axis is Axis.Y:
            return Vector3(self.x, value, self.z)
        return Vector3(self.x, self.y, value)

    def get(self, axis: Axis) -> float:
        return getattr(self, axis.value)

    def distance_to(self, other: Vector3) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Point2D:
    """2D point on the room floor plane (world x, world z)."""

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rotation:
    """Euler rotation in degrees. Yaw (about +Y) is the dominant component."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_yaw(cls, yaw: float) -> Rotation:
        return cls(0.0, yaw, 0.0)

    @property
    def yaw(self) -> float:
        return self.y

    def rotate_local(self, x: float, z: float) -> tuple[float, float]:
        """Rotate a local plan offset (x, z) by the yaw into world plan space.

        Uses the right-handed rotation about +Y: a yaw of +90 degrees maps
        local -Z (the back of an object) onto world -X.
        """
        rad = math.radians(self.y)
        # Rounded so right-angle yaws give exact offsets.
        cos_y = round(math.cos(rad), 12)
        sin_y = round(math.sin(rad), 12)
        return (x * cos_y + z * sin_y, -x * sin_y + z * cos_y)


@dataclass(frozen=True)
class Dimensions:
    """Immutable carcass dimensions in millimetres."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")

    def to_units(self) -> tuple[float, float, float]:
        """Return (width, height, depth) converted to scene units."""
        return (
            mm_to_units(self.width),
            mm_to_units(self.height),
            mm_to_units(self.depth),
        )


@dataclass(frozen=True)
class AxisAlignedBox:
    """World-space axis-aligned bounding box in scene units."""

    min_x: float
    min_y: float
    min_z: float
    max_x: float
    max_y: float
    max_z: float

    def __post_init__(self) -> None:
        if self.max_x < self.min_x or self.max_y < self.min_y or self.max_z < self.min_z:
            raise ValueError("Box maximum must not be below its minimum")

    @property
    def size_x(self) -> float:
        return self.max_x - self.min_x

    @property
    def size_y(self) -> float:
        return self.max_y - self.min_y

    @property
    def size_z(self) -> float:
        return self.max_z - self.min_z

    @property
    def center(self) -> Vector3:
        return Vector3(
            (self.min_x + self.max_x) / 2,
            (self.min_y + self.max_y) / 2,
            (self.min_z + self.max_z) / 2,
        )

    def min_on(self, axis: Axis) -> float:
        return getattr(self, f"min_{axis.value}")

    def max_on(self, axis: Axis) -> float:
        return getattr(self, f"max_{axis.value}")

    def shrunk(self, amount: float) -> AxisAlignedBox:
        """Return the box shrunk by ``amount`` on every side.

        Axes thinner than twice the amount collapse to their centre instead
        of inverting.
        """

        def _shrink(lo: float, hi: float) -> tuple[float, float]:
            if hi - lo <= 2 * amount:
                mid = (lo + hi) / 2
                return mid, mid
            return lo + amount, hi - amount

        min_x, max_x = _shrink(self.min_x, self.max_x)
        min_y, max_y = _shrink(self.min_y, self.max_y)
        min_z, max_z = _shrink(self.min_z, self.max_z)
        return AxisAlignedBox(min_x, min_y, min_z, max_x, max_y, max_z)

    def intersects(self, other: AxisAlignedBox) -> bool:
        """Strict overlap test; boxes sharing only a face do not intersect."""
        return (
            self.min_x < other.max_x
            and self.max_x > other.min_x
            and self.min_y < other.max_y
            and self.max_y > other.min_y
            and self.min_z < other.max_z
            and self.max_z > other.min_z
        )

    def overlaps_on(self, other: AxisAlignedBox, axis: Axis) -> bool:
        """Check whether the projections onto one axis overlap."""
        return self.min_on(axis) < other.max_on(axis) and self.max_on(axis) > other.min_on(
            axis
        )
