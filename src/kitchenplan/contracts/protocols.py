"""Collaborator protocols consumed by the placement and surface services.

The core never reaches into the asset system or the renderer directly. It
depends on these narrow contracts instead, which keeps the resolvers pure
and unit-testable without a live scene.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from kitchenplan.domain.entities import ComponentSpec
    from kitchenplan.domain.value_objects import SnapFeedback


@runtime_checkable
class ComponentLookup(Protocol):
    """Read-only composition lookup (component id -> component record).

    ``ComponentCatalog`` implements this protocol. Unknown ids return None.

    Example:
        ```python
        class AssetBackedLookup:
            def get(self, component_id: str) -> ComponentSpec | None:
                return self._records.get(component_id)
        ```
    """

    def get(self, component_id: str) -> ComponentSpec | None:
        """Look up a component by id.

        Args:
            component_id: Id stored in an object's component state.

        Returns:
            The component record, or None when the id is unknown.
        """
        ...


@runtime_checkable
class SnapFeedbackSink(Protocol):
    """Receiver for advisory snap feedback (e.g. a snap-line renderer).

    Feedback is published after every resolved move. An empty tuple means
    no snap was applied and any previous indicator should be cleared.
    """

    def publish(self, object_uuid: str, feedback: tuple[SnapFeedback, ...]) -> None:
        """Show the winning snap edges for the moved object.

        Args:
            object_uuid: Object that was resolved.
            feedback: Winning candidates of the accepted fallback step.
        """
        ...
