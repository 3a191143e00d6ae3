"""Contracts module - protocols for cross-layer communication.

By depending on protocols rather than concrete implementations, the domain
services stay decoupled from the asset system and the renderer.

Example:
    ```python
    from kitchenplan.contracts import ComponentLookup

    def footprint_for(lookup: ComponentLookup, component_id: str) -> ...:
        ...
    ```
"""

from .protocols import (
    ComponentLookup as ComponentLookup,
    SnapFeedbackSink as SnapFeedbackSink,
)

__all__ = [
    "ComponentLookup",
    "SnapFeedbackSink",
]
