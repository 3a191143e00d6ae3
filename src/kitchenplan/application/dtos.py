"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kitchenplan.domain.value_objects import (
    GeneratedSurfaceMesh,
    PlacementResult,
    SurfaceKind,
)


@dataclass
class PlacementOutput:
    """Output DTO for a resolved placement.

    Attributes:
        object_id: The moved object.
        position: Final pivot position (x, y, z) in scene units.
        yaw: Final yaw in degrees.
        rotation_forced: True when a wall snap forced the yaw.
        step: Fallback step that produced the position.
        collided: True when every snapping step collided.
        feedback: Snap feedback entries (axis, edge, target, source, reference).
    """

    object_id: str
    position: tuple[float, float, float]
    yaw: float
    rotation_forced: bool
    step: str
    collided: bool
    feedback: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_result(
        cls, object_id: str, result: PlacementResult, current_yaw: float = 0.0
    ) -> PlacementOutput:
        """Build the DTO from a placement result.

        Args:
            object_id: The moved object.
            result: Resolver output.
            current_yaw: Yaw reported when the result does not force one.
        """
        return cls(
            object_id=object_id,
            position=result.position.as_tuple(),
            yaw=result.rotation.yaw if result.rotation else current_yaw,
            rotation_forced=result.rotation is not None,
            step=result.step.value,
            collided=result.collided,
            feedback=[
                {
                    "axis": fb.axis.value,
                    "edge": fb.edge,
                    "target": fb.target,
                    "source": fb.source.value,
                    "reference": fb.reference,
                }
                for fb in result.feedback
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        x, y, z = self.position
        return {
            "object_id": self.object_id,
            "position": {"x": x, "y": y, "z": z},
            "yaw": self.yaw,
            "rotation_forced": self.rotation_forced,
            "step": self.step,
            "collided": self.collided,
            "feedback": list(self.feedback),
        }


@dataclass
class SurfaceOutput:
    """Output DTO summarising a generated surface mesh.

    Outline coordinates are plan coordinates (world x, world z) in scene
    units.
    """

    kind: SurfaceKind
    elevation: float
    thickness: float
    outlines: list[dict[str, Any]]
    vertex_count: int
    face_count: int
    source_ids: list[str]

    @classmethod
    def from_mesh(cls, mesh: GeneratedSurfaceMesh) -> SurfaceOutput:
        return cls(
            kind=mesh.kind,
            elevation=mesh.elevation,
            thickness=mesh.thickness,
            outlines=[
                {
                    "exterior": [list(p) for p in outline.exterior],
                    "holes": [[list(p) for p in hole] for hole in outline.holes],
                }
                for outline in mesh.outlines
            ],
            vertex_count=int(len(mesh.vertices)),
            face_count=int(len(mesh.faces)),
            source_ids=list(mesh.source_uuids),
        )

    @property
    def top_elevation(self) -> float:
        return self.elevation + self.thickness

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "elevation": self.elevation,
            "thickness": self.thickness,
            "top_elevation": self.top_elevation,
            "outline_count": len(self.outlines),
            "hole_count": sum(len(o["holes"]) for o in self.outlines),
            "outlines": self.outlines,
            "vertex_count": self.vertex_count,
            "face_count": self.face_count,
            "source_ids": self.source_ids,
        }
