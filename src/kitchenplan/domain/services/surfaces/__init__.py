"""Procedural surface generation (worktops and plinths)."""

from .bridging import BRIDGE_MAX_CENTER_DISTANCE, BRIDGE_MIN_GAP, build_bridges
from .extrusion import (
    ExtrudedSolid,
    extrude_outlines,
    inject_holes,
    merge_polygons,
    to_surface_outlines,
)
from .generator import MIN_WORKTOP_ELEVATION, ProceduralSurfaceGenerator
from .polygons import CUTOUT_INSET, NeighborSides, SurfacePolygonBuilder

__all__ = [
    "BRIDGE_MAX_CENTER_DISTANCE",
    "BRIDGE_MIN_GAP",
    "CUTOUT_INSET",
    "MIN_WORKTOP_ELEVATION",
    "ExtrudedSolid",
    "NeighborSides",
    "ProceduralSurfaceGenerator",
    "SurfacePolygonBuilder",
    "build_bridges",
    "extrude_outlines",
    "inject_holes",
    "merge_polygons",
    "to_surface_outlines",
]
