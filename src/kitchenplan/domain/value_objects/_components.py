"""Component composition value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ObjectCategory(str, Enum):
    """Categories of placeable objects.

    Attributes:
        BASE_CABINET: Floor standing cabinet that carries the worktop.
        WALL_CABINET: Wall mounted upper cabinet.
        OTHER: Anything else (appliances, free standing furniture).
    """

    BASE_CABINET = "base_cabinet"
    WALL_CABINET = "wall_cabinet"
    OTHER = "other"

    @property
    def is_upper(self) -> bool:
        return self is ObjectCategory.WALL_CABINET


class ComponentKind(str, Enum):
    """Role a component plays inside a cabinet."""

    CORPUS = "corpus"
    LEG = "leg"
    FRONT = "front"
    HANDLE = "handle"
    OTHER = "other"


class LegStyle(str, Enum):
    """Mutually exclusive support styles.

    Attributes:
        STANDARD: Cabinet sits on the shared plinth height; the procedural
            plinth replaces the per-object leg parts.
        DESIGN: Visible designer legs; their own height sets the elevation.
    """

    STANDARD = "standard"
    DESIGN = "design"


STANDARD_LEG_MARKER = "leg_standard"


@dataclass(frozen=True)
class LegVisibility:
    """Visibility of the leg parts of an object."""

    standard_parts_visible: bool = True
    design_leg_visible: bool = False
