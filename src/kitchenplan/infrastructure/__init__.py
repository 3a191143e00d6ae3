"""Infrastructure layer - file exporters."""

from kitchenplan.infrastructure.exporters import (
    DxfSurfaceExporter,
    ExporterRegistry,
    ExportManager,
    JsonSurfaceExporter,
    StlSurfaceExporter,
)

__all__ = [
    "DxfSurfaceExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonSurfaceExporter",
    "StlSurfaceExporter",
]
