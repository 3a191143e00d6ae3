"""Unit tests for leg-driven elevation."""

from collections.abc import Callable

import pytest

from kitchenplan.domain.entities import ComponentCatalog, PlacedObject
from kitchenplan.domain.services import VerticalPositionResolver
from kitchenplan.domain.value_objects import LegStyle, LegVisibility

ObjectFactory = Callable[..., PlacedObject]


@pytest.fixture
def resolver(catalog: ComponentCatalog) -> VerticalPositionResolver:
    return VerticalPositionResolver(catalog, plinth_height=0.1)


class TestResolveElevation:
    """Tests for elevation rules."""

    def test_standard_leg_uses_plinth_height(
        self, resolver: VerticalPositionResolver, make_base: ObjectFactory
    ) -> None:
        """Standard legs put the cabinet on the shared plinth height."""
        obj = make_base("a", leg="leg_standard_100")
        assert resolver.resolve_elevation(obj) == pytest.approx(0.1)
        assert resolver.should_show_standard_leg(obj)

    def test_design_leg_uses_leg_height(
        self, resolver: VerticalPositionResolver, make_base: ObjectFactory
    ) -> None:
        """Design legs raise the cabinet to their own height."""
        obj = make_base("a", leg="leg_design_150")
        assert resolver.resolve_elevation(obj) == pytest.approx(0.15)
        assert not resolver.should_show_standard_leg(obj)

    def test_plinth_height_is_configurable(
        self, catalog: ComponentCatalog, make_base: ObjectFactory
    ) -> None:
        """The shared plinth height is a resolver parameter, not the leg height."""
        resolver = VerticalPositionResolver(catalog, plinth_height=0.12)
        assert resolver.resolve_elevation(
            make_base("a", leg="leg_standard_100")
        ) == pytest.approx(0.12)

    def test_global_style_overrides_components(
        self, catalog: ComponentCatalog, make_base: ObjectFactory
    ) -> None:
        """A global standard rule turns design legs into plinth legs."""
        resolver = VerticalPositionResolver(
            catalog, plinth_height=0.1, global_leg_style=LegStyle.STANDARD
        )
        obj = make_base("a", leg="leg_design_150")
        assert resolver.resolve_elevation(obj) == pytest.approx(0.1)
        assert resolver.leg_style(obj) is LegStyle.STANDARD

    def test_global_style_needs_legs(
        self, catalog: ComponentCatalog, make_base: ObjectFactory
    ) -> None:
        """Objects without legs stay on the floor even with a global style."""
        resolver = VerticalPositionResolver(catalog, global_leg_style=LegStyle.STANDARD)
        assert resolver.resolve_elevation(make_base("a")) == 0.0

    def test_override_wins(
        self, resolver: VerticalPositionResolver, make_base: ObjectFactory
    ) -> None:
        """An explicit override bypasses the leg rules."""
        obj = make_base("a", leg="leg_design_150", elevation_override=0.3)
        assert resolver.resolve_elevation(obj) == pytest.approx(0.3)

    def test_wall_cabinet_keeps_elevation(
        self, resolver: VerticalPositionResolver, make_wall: ObjectFactory
    ) -> None:
        """Wall cabinets are positioned by the user, not by legs."""
        assert resolver.resolve_elevation(make_wall("w", y=1.4)) == pytest.approx(1.4)

    def test_no_legs_on_floor(
        self, resolver: VerticalPositionResolver, make_base: ObjectFactory
    ) -> None:
        """Objects without legs sit at zero."""
        assert resolver.resolve_elevation(make_base("a")) == 0.0

    def test_negative_plinth_height_raises(self, catalog: ComponentCatalog) -> None:
        """The plinth height cannot be negative."""
        with pytest.raises(ValueError):
            VerticalPositionResolver(catalog, plinth_height=-0.1)


class TestApply:
    """Tests for writing elevation and visibility onto objects."""

    def test_apply_sets_position_and_visibility(
        self, resolver: VerticalPositionResolver, make_base: ObjectFactory
    ) -> None:
        """Standard legs hide the per-object parts."""
        obj = make_base("a", x=1.0, z=-1.5, leg="leg_standard_100")
        resolver.apply(obj)

        assert obj.position.as_tuple() == pytest.approx((1.0, 0.1, -1.5))
        assert obj.last_valid_position.y == pytest.approx(0.1)
        assert obj.leg_visibility == LegVisibility(
            standard_parts_visible=False, design_leg_visible=False
        )

    def test_design_leg_visible(
        self, resolver: VerticalPositionResolver, make_base: ObjectFactory
    ) -> None:
        """Design legs are shown."""
        obj = make_base("a", leg="leg_design_150")
        resolver.apply(obj)
        assert obj.leg_visibility.design_leg_visible
        assert not obj.leg_visibility.standard_parts_visible

    def test_objects_resolve_independently(
        self, resolver: VerticalPositionResolver, make_base: ObjectFactory
    ) -> None:
        """Changing one object's legs does not move another."""
        a = make_base("a", leg="leg_standard_100")
        b = make_base("b", x=0.6, leg="leg_design_150")
        resolver.apply(a)
        resolver.apply(b)

        a.component_state["legs"] = None
        resolver.apply(a)

        assert a.position.y == 0.0
        assert b.position.y == pytest.approx(0.15)
