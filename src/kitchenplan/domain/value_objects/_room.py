"""Room geometry value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from ._core_geometry import Axis, mm_to_units


class WallIndex(IntEnum):
    """Wall numbering used by room openings and wall snapping.

    Attributes:
        BACK: Wall at z = -depth/2.
        RIGHT: Wall at x = +width/2.
        FRONT: Wall at z = +depth/2.
        LEFT: Wall at x = -width/2.
    """

    BACK = 0
    RIGHT = 1
    FRONT = 2
    LEFT = 3

    @property
    def axis(self) -> Axis:
        """The axis perpendicular to the wall plane."""
        return Axis.Z if self in (WallIndex.BACK, WallIndex.FRONT) else Axis.X

    @property
    def facing_yaw(self) -> float:
        """Yaw that points an object's back face through this wall."""
        return {
            WallIndex.BACK: 0.0,
            WallIndex.RIGHT: -90.0,
            WallIndex.FRONT: 180.0,
            WallIndex.LEFT: 90.0,
        }[self]


class OpeningType(str, Enum):
    """Kinds of wall openings."""

    DOOR = "door"
    WINDOW = "window"
    OPENING = "opening"


@dataclass(frozen=True)
class WallOpening:
    """A door, window or open passage cut into a wall.

    All values are in millimetres and measured along the wall from its
    left end (offset) and from the floor (elevation).
    """

    opening_type: OpeningType
    wall_index: WallIndex
    offset: float
    width: float
    height: float
    elevation: float = 0.0
    opening_id: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Opening size must be positive")

    @property
    def end(self) -> float:
        return self.offset + self.width


@dataclass(frozen=True)
class RoomDescriptor:
    """Rectangular room, centred on the scene origin.

    Attributes:
        width: Extent along X in millimetres.
        depth: Extent along Z in millimetres.
        height: Ceiling height in millimetres.
        openings: Doors and windows on the four walls.
    """

    width: float
    depth: float
    height: float
    openings: tuple[WallOpening, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.depth <= 0 or self.height <= 0:
            raise ValueError("Room dimensions must be positive")

    @property
    def half_width(self) -> float:
        """Half of the room width in scene units."""
        return mm_to_units(self.width) / 2

    @property
    def half_depth(self) -> float:
        """Half of the room depth in scene units."""
        return mm_to_units(self.depth) / 2

    def half_extent(self, axis: Axis) -> float:
        if axis is Axis.X:
            return self.half_width
        if axis is Axis.Z:
            return self.half_depth
        raise ValueError(f"Room has no horizontal extent on axis {axis.value}")

    def wall_coordinate(self, wall: WallIndex) -> float:
        """Scene coordinate of a wall plane on its perpendicular axis."""
        return {
            WallIndex.BACK: -self.half_depth,
            WallIndex.RIGHT: self.half_width,
            WallIndex.FRONT: self.half_depth,
            WallIndex.LEFT: -self.half_width,
        }[wall]

    def wall_length(self, wall: WallIndex) -> float:
        """Length of a wall in millimetres."""
        return self.width if wall.axis is Axis.Z else self.depth

    def openings_on(self, wall: WallIndex) -> list[WallOpening]:
        return [op for op in self.openings if op.wall_index == wall]
