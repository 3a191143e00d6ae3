"""JSON exporter for generated surfaces.

Writes each surface's outlines (exterior and holes, plan x/z in scene
units) together with its elevation, thickness and mesh statistics. The
full vertex buffers are only included on request.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from kitchenplan.application.dtos import SurfaceOutput
from kitchenplan.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from kitchenplan.domain.value_objects import GeneratedSurfaceMesh


@ExporterRegistry.register("json")
class JsonSurfaceExporter:
    """Exports surfaces to JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_mesh: bool = False, indent: int = 2) -> None:
        """Initialize the JSON exporter.

        Args:
            include_mesh: Also write vertices, faces and UVs.
            indent: JSON indentation level (default 2 spaces).
        """
        self.include_mesh = include_mesh
        self.indent = indent

    def export(self, surfaces: Sequence[GeneratedSurfaceMesh], path: Path) -> None:
        path.write_text(self.export_string(surfaces), encoding="utf-8")

    def export_string(self, surfaces: Sequence[GeneratedSurfaceMesh]) -> str:
        return json.dumps(self.to_dict(surfaces), indent=self.indent)

    def to_dict(self, surfaces: Sequence[GeneratedSurfaceMesh]) -> dict[str, Any]:
        entries = []
        for surface in surfaces:
            entry = SurfaceOutput.from_mesh(surface).to_dict()
            if self.include_mesh:
                entry["vertices"] = surface.vertices.tolist()
                entry["faces"] = surface.faces.tolist()
                entry["uvs"] = surface.uvs.tolist()
            entries.append(entry)
        return {"surfaces": entries}
