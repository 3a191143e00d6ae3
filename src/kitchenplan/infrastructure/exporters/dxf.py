"""DXF format exporter for generated surfaces.

Generates a 2D plan drawing (R2010) of the worktop and plinth outlines,
with sink and hob cutouts on their own layer. Coordinates are in
millimetres, seen from above with the back wall at the top.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf

from kitchenplan.domain.value_objects import SurfaceKind
from kitchenplan.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from kitchenplan.domain.value_objects import GeneratedSurfaceMesh


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "WORKTOP": {"color": 7},  # White - worktop outlines
    "PLINTH": {"color": 8},  # Grey - plinth outlines
    "CUTOUTS": {"color": 1},  # Red - sink and hob cutouts
}

_LAYER_FOR_KIND = {
    SurfaceKind.WORKTOP: "WORKTOP",
    SurfaceKind.PLINTH: "PLINTH",
}


@ExporterRegistry.register("dxf")
class DxfSurfaceExporter:
    """Exports surface outlines to DXF for templating and cutting.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, scale: float = 1000.0) -> None:
        """Initialize the DXF exporter.

        Args:
            scale: Factor from scene units to drawing units (default mm).
        """
        self.scale = scale

    def export(self, surfaces: Sequence[GeneratedSurfaceMesh], path: Path) -> None:
        doc = self._create_document()
        self._draw_surfaces(doc.modelspace(), surfaces)
        doc.saveas(path)
        logger.debug(f"Wrote DXF plan with {len(surfaces)} surface(s) to {path}")

    def export_string(self, surfaces: Sequence[GeneratedSurfaceMesh]) -> str:
        doc = self._create_document()
        self._draw_surfaces(doc.modelspace(), surfaces)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def _create_document(self) -> Drawing:
        doc = ezdxf.new("R2010")
        for name, props in LAYERS.items():
            doc.layers.add(name, color=cast(int, props["color"]))
        return doc

    def _draw_surfaces(
        self, msp: Modelspace, surfaces: Sequence[GeneratedSurfaceMesh]
    ) -> None:
        for surface in surfaces:
            layer = _LAYER_FOR_KIND[surface.kind]
            for outline in surface.outlines:
                self._draw_ring(msp, outline.exterior, layer)
                for hole in outline.holes:
                    self._draw_ring(msp, hole, "CUTOUTS")

    def _draw_ring(
        self,
        msp: Modelspace,
        ring: Sequence[tuple[float, float]],
        layer: str,
    ) -> None:
        """Draw one ring as a closed polyline.

        Plan z grows toward the front wall, so it is negated to put the
        back wall at the top of the drawing.
        """
        points = [(x * self.scale, -z * self.scale) for x, z in ring]
        msp.add_lwpolyline(points, close=True, dxfattribs={"layer": layer})
