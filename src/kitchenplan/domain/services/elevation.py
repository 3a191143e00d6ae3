"""Leg-driven elevation and leg visibility."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..value_objects import Axis, LegStyle, LegVisibility, mm_to_units

if TYPE_CHECKING:
    from kitchenplan.contracts import ComponentLookup

    from ..entities import PlacedObject

logger = logging.getLogger(__name__)

__all__ = ["VerticalPositionResolver"]


class VerticalPositionResolver:
    """Derives object elevation from the installed leg components.

    Rules, in order:

    1. ``elevation_override`` wins when set.
    2. Wall cabinets keep their current elevation.
    3. Standard legs (by component or by the global style rule) put the
       object on the shared plinth height. Leg parts are hidden because the
       procedural plinth replaces them.
    4. Design legs put the object on the tallest installed leg and show it.
    5. Objects without legs sit on the floor.

    Each object is resolved on its own; the plinth height is the only
    shared input.

    Attributes:
        lookup: Component lookup.
        plinth_height: Shared plinth height in scene units.
        global_leg_style: Optional style rule applied to every object that
            has legs installed.
    """

    def __init__(
        self,
        lookup: ComponentLookup,
        plinth_height: float = 0.1,
        global_leg_style: LegStyle | None = None,
    ) -> None:
        if plinth_height < 0:
            raise ValueError("Plinth height must be non-negative")
        self.lookup = lookup
        self.plinth_height = plinth_height
        self.global_leg_style = global_leg_style

    def leg_style(self, obj: PlacedObject) -> LegStyle | None:
        """Active leg style of an object, or None when it has no legs."""
        legs = obj.legs(self.lookup)
        if not legs:
            return None
        if self.global_leg_style is not None:
            return self.global_leg_style
        if any(leg.resolved_leg_style is LegStyle.STANDARD for leg in legs):
            return LegStyle.STANDARD
        return LegStyle.DESIGN

    def should_show_standard_leg(self, obj: PlacedObject) -> bool:
        """True when the object stands on the standard (plinth) legs.

        Callers use this to decide whether the object contributes to the
        plinth surface instead of rendering its own leg parts.
        """
        return self.leg_style(obj) is LegStyle.STANDARD

    def resolve_elevation(self, obj: PlacedObject) -> float:
        """Compute the elevation (pivot Y) for an object in scene units."""
        if obj.elevation_override is not None:
            return obj.elevation_override
        if obj.category.is_upper:
            return obj.position.y

        style = self.leg_style(obj)
        if style is LegStyle.STANDARD:
            return self.plinth_height
        if style is LegStyle.DESIGN:
            heights = [leg.height or 0.0 for leg in obj.legs(self.lookup)]
            return mm_to_units(max(heights))
        return 0.0

    def leg_visibility(self, obj: PlacedObject) -> LegVisibility:
        style = self.leg_style(obj)
        if style is LegStyle.STANDARD:
            return LegVisibility(standard_parts_visible=False, design_leg_visible=False)
        if style is LegStyle.DESIGN:
            return LegVisibility(standard_parts_visible=False, design_leg_visible=True)
        return LegVisibility()

    def apply(self, obj: PlacedObject) -> float:
        """Write the resolved elevation and leg visibility onto the object.

        The last valid position follows the new elevation so that a later
        collision revert does not undo a composition change.

        Returns:
            The applied elevation.
        """
        elevation = self.resolve_elevation(obj)
        obj.position = obj.position.with_axis(Axis.Y, elevation)
        if obj.last_valid_position is not None:
            obj.last_valid_position = obj.last_valid_position.with_axis(Axis.Y, elevation)
        obj.leg_visibility = self.leg_visibility(obj)
        logger.debug(f"Elevation of {obj.uuid} set to {elevation:.3f}")
        return elevation
