"""Application layer - sessions, configuration and orchestration."""

from .dtos import PlacementOutput, SurfaceOutput
from .factory import ServiceFactory
from .session import (
    DragInProgressError,
    NoActiveDragError,
    SceneSession,
    UnknownObjectError,
)

__all__ = [
    "DragInProgressError",
    "NoActiveDragError",
    "PlacementOutput",
    "SceneSession",
    "ServiceFactory",
    "SurfaceOutput",
    "UnknownObjectError",
]
