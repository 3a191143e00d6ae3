"""STL format exporter for generated surfaces using numpy-stl."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import numpy as np
from stl import mesh

from kitchenplan.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from kitchenplan.domain.value_objects import GeneratedSurfaceMesh

logger = logging.getLogger(__name__)

# Scene Y-up (x, y, z) to STL Z-up (x, -z, y); a proper rotation, so the
# winding of every face is preserved.
_Y_UP_TO_Z_UP = np.array(
    [
        [1.0, 0.0, 0.0],
        [0.0, 0.0, -1.0],
        [0.0, 1.0, 0.0],
    ]
)


@ExporterRegistry.register("stl")
class StlSurfaceExporter:
    """Exports surfaces as one combined binary STL mesh.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(self, scale: float = 1000.0) -> None:
        """Initialize the STL exporter.

        Args:
            scale: Factor from scene units to file units (default mm).
        """
        self.scale = scale

    def build_mesh(self, surfaces: Sequence[GeneratedSurfaceMesh]) -> mesh.Mesh:
        """Combine every surface into a single numpy-stl mesh."""
        triangles = [
            (surface.vertices @ _Y_UP_TO_Z_UP.T)[surface.faces] * self.scale
            for surface in surfaces
            if len(surface.faces)
        ]
        total_faces = sum(len(t) for t in triangles)
        combined = mesh.Mesh(np.zeros(total_faces, dtype=mesh.Mesh.dtype))
        if triangles:
            combined.vectors[:] = np.concatenate(triangles)
        return combined

    def export(self, surfaces: Sequence[GeneratedSurfaceMesh], path: Path) -> None:
        stl_mesh = self.build_mesh(surfaces)
        stl_mesh.save(str(path))
        logger.debug(f"Wrote {len(stl_mesh.vectors)} triangles to {path}")
