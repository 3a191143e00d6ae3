"""Exporter framework for generated surfaces.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: 2D plan of worktop and plinth outlines with cutouts, in millimetres
- json: Outlines, elevations and mesh statistics
- stl: Combined triangle mesh of all surfaces

Usage:
    from kitchenplan.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    manager = ExportManager(Path("out"))
    paths = manager.export_all(["json", "stl"], [worktop, plinth])
"""

from kitchenplan.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from kitchenplan.infrastructure.exporters.dxf import DxfSurfaceExporter
from kitchenplan.infrastructure.exporters.json_exporter import JsonSurfaceExporter
from kitchenplan.infrastructure.exporters.stl import StlSurfaceExporter

__all__ = [
    "DxfSurfaceExporter",
    "Exporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonSurfaceExporter",
    "StlSurfaceExporter",
]
