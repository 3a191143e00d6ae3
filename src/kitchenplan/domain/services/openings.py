"""Wall opening normalisation and best-gap insertion.

Openings are kept valid on their wall: a minimum size, a small margin to
the wall ends and to other openings, and no part above the ceiling.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace

from ..value_objects import OpeningType, RoomDescriptor, WallIndex, WallOpening

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_OPENING_SIZES",
    "MIN_OPENING_SIZE",
    "OPENING_MARGIN",
    "NoWallSpaceError",
    "OpeningLayoutService",
    "OpeningSize",
]

MIN_OPENING_SIZE = 100.0
OPENING_MARGIN = 2.0


@dataclass(frozen=True)
class OpeningSize:
    """Default size of a new opening in millimetres."""

    width: float
    height: float
    elevation: float


DEFAULT_OPENING_SIZES: dict[OpeningType, OpeningSize] = {
    OpeningType.DOOR: OpeningSize(width=900.0, height=2100.0, elevation=0.0),
    OpeningType.WINDOW: OpeningSize(width=1200.0, height=1200.0, elevation=900.0),
    OpeningType.OPENING: OpeningSize(width=2000.0, height=3000.0, elevation=0.0),
}


class NoWallSpaceError(ValueError):
    """Raised when a wall has no gap wide enough for a new opening."""

    def __init__(self, wall_index: WallIndex, largest_gap: float) -> None:
        self.wall_index = wall_index
        self.largest_gap = largest_gap
        super().__init__(
            f"No room for a new opening on wall {int(wall_index)}: "
            f"largest gap is {largest_gap:.0f}mm, need {MIN_OPENING_SIZE:.0f}mm"
        )


class OpeningLayoutService:
    """Keeps wall openings inside their walls and apart from each other."""

    def __init__(self, margin: float = OPENING_MARGIN) -> None:
        self.margin = margin

    def normalize(self, opening: WallOpening, room: RoomDescriptor) -> WallOpening:
        """Return a corrected copy of ``opening`` for the given room.

        Steps: enforce the minimum size and a non-negative elevation, push
        the opening off any overlapping neighbour (toward the side its
        centre is on), then clamp it to the wall length and room height.

        Args:
            opening: Opening to check. Other openings with the same id are
                ignored when looking for neighbours.
            room: Room whose other openings are the neighbours.

        Returns:
            The normalised opening.
        """
        margin = self.margin
        wall_length = room.wall_length(opening.wall_index)
        offset = opening.offset
        width = max(opening.width, MIN_OPENING_SIZE)
        height = max(opening.height, MIN_OPENING_SIZE)
        elevation = max(opening.elevation, 0.0)

        for neighbor in room.openings_on(opening.wall_index):
            if opening.opening_id and neighbor.opening_id == opening.opening_id:
                continue
            if offset < neighbor.end + margin and offset + width > neighbor.offset - margin:
                center = offset + width / 2
                neighbor_center = neighbor.offset + neighbor.width / 2
                if center < neighbor_center:
                    offset = neighbor.offset - width - margin
                else:
                    offset = neighbor.end + margin

        width = min(width, wall_length - margin * 2)
        offset = max(offset, margin)
        if offset + width > wall_length - margin:
            offset = wall_length - width - margin
        if elevation + height > room.height:
            height = min(height, room.height)
            elevation = room.height - height

        return replace(
            opening, offset=offset, width=width, height=height, elevation=elevation
        )

    def largest_gap(self, room: RoomDescriptor, wall: WallIndex) -> tuple[float, float]:
        """Find the widest free span on a wall.

        Returns:
            ``(start, length)`` of the widest gap, margins already applied.
        """
        margin = self.margin
        best_start, best_length = margin, 0.0
        cursor = margin
        for item in sorted(room.openings_on(wall), key=lambda o: o.offset):
            gap = item.offset - margin - cursor
            if gap > best_length:
                best_start, best_length = cursor, gap
            cursor = item.end + margin

        tail = room.wall_length(wall) - margin - cursor
        if tail > best_length:
            best_start, best_length = cursor, tail
        return best_start, best_length

    def add_opening(
        self,
        room: RoomDescriptor,
        opening_type: OpeningType,
        wall: WallIndex = WallIndex.BACK,
        opening_id: str | None = None,
    ) -> tuple[RoomDescriptor, WallOpening]:
        """Insert a default-sized opening centred in the widest free gap.

        Args:
            room: Current room.
            opening_type: Door, window or open passage.
            wall: Wall to add the opening to.
            opening_id: Id for the new opening; generated when omitted.

        Returns:
            The updated room and the inserted opening.

        Raises:
            NoWallSpaceError: If no gap is at least the minimum size.
        """
        start, length = self.largest_gap(room, wall)
        if length < MIN_OPENING_SIZE:
            raise NoWallSpaceError(wall, length)

        size = DEFAULT_OPENING_SIZES[opening_type]
        width = min(size.width, length)
        opening = WallOpening(
            opening_type=opening_type,
            wall_index=wall,
            offset=start + length / 2 - width / 2,
            width=width,
            height=size.height,
            elevation=size.elevation,
            opening_id=opening_id or f"{opening_type.value}_{uuid.uuid4().hex[:8]}",
        )
        opening = self.normalize(opening, room)
        logger.info(
            f"Added {opening_type.value} {opening.opening_id} on wall {int(wall)} "
            f"at {opening.offset:.0f}mm"
        )
        return replace(room, openings=(*room.openings, opening)), opening

    def update_opening(
        self, room: RoomDescriptor, opening_id: str, **changes: object
    ) -> RoomDescriptor:
        """Apply changes to an opening and normalise the result.

        Raises:
            KeyError: If no opening has ``opening_id``.
        """
        for index, existing in enumerate(room.openings):
            if existing.opening_id == opening_id:
                updated = self.normalize(replace(existing, **changes), room)
                openings = list(room.openings)
                openings[index] = updated
                return replace(room, openings=tuple(openings))
        raise KeyError(opening_id)

    def remove_opening(self, room: RoomDescriptor, opening_id: str) -> RoomDescriptor:
        return replace(
            room,
            openings=tuple(o for o in room.openings if o.opening_id != opening_id),
        )

    def normalize_all(self, room: RoomDescriptor) -> RoomDescriptor:
        """Re-validate every opening, e.g. after the room was resized."""
        openings: list[WallOpening] = []
        for opening in room.openings:
            current = replace(room, openings=tuple(openings))
            openings.append(self.normalize(opening, current))
        return replace(room, openings=tuple(openings))
