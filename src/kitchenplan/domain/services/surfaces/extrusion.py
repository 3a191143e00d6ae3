"""2D union, hole injection and 3D extrusion of surface outlines.

The union is computed with shapely, the extrusion with trimesh (earcut
triangulation). Outlines live on the floor plane as (world x, world z);
the extruded mesh is mapped back into the Y-up scene.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import shapely
import trimesh
from shapely.geometry import MultiPolygon, Polygon

from ...value_objects import SurfaceOutline, SurfacePolygon

logger = logging.getLogger(__name__)

# Union precision. Edges closer than this are treated as touching.
UNION_GRID_SIZE = 1e-6

__all__ = [
    "UNION_GRID_SIZE",
    "ExtrudedSolid",
    "extrude_outlines",
    "inject_holes",
    "merge_polygons",
    "to_surface_outlines",
]


def merge_polygons(polygons: list[SurfacePolygon]) -> list[Polygon]:
    """Union footprint and bridge polygons into disjoint outlines.

    Args:
        polygons: Closed rectangles and bridge quads.

    Returns:
        One shapely polygon per island, each possibly carrying holes.
    """
    shapes = [Polygon(p.coords()) for p in polygons]
    merged = shapely.union_all(shapes, grid_size=UNION_GRID_SIZE)
    if merged.is_empty:
        return []
    if isinstance(merged, Polygon):
        return [merged]
    if isinstance(merged, MultiPolygon):
        return [geom for geom in merged.geoms if not geom.is_empty]
    # Degenerate input can collapse into lines or points.
    return [geom for geom in getattr(merged, "geoms", []) if isinstance(geom, Polygon)]


def inject_holes(outlines: list[Polygon], holes: list[SurfacePolygon]) -> list[Polygon]:
    """Add each hole to the outline that fully contains it.

    Holes that no outline contains are skipped with a warning.
    """
    result = list(outlines)
    for hole in holes:
        hole_shape = Polygon(hole.coords())
        for index, outline in enumerate(result):
            if outline.contains(hole_shape):
                interiors = [list(ring.coords) for ring in outline.interiors]
                interiors.append(list(hole_shape.exterior.coords))
                result[index] = Polygon(outline.exterior.coords, interiors)
                break
        else:
            logger.warning(
                f"Cutout of {hole.source_uuid} is not inside any outline, skipping"
            )
    return result


def to_surface_outlines(outlines: list[Polygon]) -> tuple[SurfaceOutline, ...]:
    """Convert shapely polygons into plain coordinate outlines (open rings)."""
    return tuple(
        SurfaceOutline(
            exterior=tuple(tuple(c) for c in outline.exterior.coords[:-1]),
            holes=tuple(
                tuple(tuple(c) for c in ring.coords[:-1]) for ring in outline.interiors
            ),
        )
        for outline in outlines
    )


@dataclass(eq=False)
class ExtrudedSolid:
    """Vertices, faces and planar UVs of an extruded surface.

    Attributes:
        vertices: (n, 3) world-space vertices.
        faces: (m, 3) triangle indices.
        uvs: (n, 2) planar texture coordinates.
    """

    vertices: np.ndarray
    faces: np.ndarray
    uvs: np.ndarray


def extrude_outlines(
    outlines: list[Polygon],
    thickness: float,
    elevation: float,
    uv_scale: float = 1.0,
) -> ExtrudedSolid:
    """Extrude every outline and merge the parts into one solid.

    trimesh extrudes along +Z from the polygon plane. The plane's (x, y) is
    the floor plan (world x, world z), so vertices are remapped to
    (x, elevation + z, y). That remap mirrors the mesh, hence the face
    winding is reversed to keep normals pointing outward.

    Args:
        outlines: Polygons with holes, in plan coordinates.
        thickness: Extrusion height.
        elevation: World Y of the bottom face.
        uv_scale: Texture repeats per scene unit.

    Returns:
        The merged solid.

    Raises:
        ValueError: If there is nothing to extrude.
    """
    if not outlines:
        raise ValueError("No outlines to extrude")

    parts = []
    for outline in outlines:
        mesh = trimesh.creation.extrude_polygon(outline, thickness, engine="earcut")
        plan = np.asarray(mesh.vertices, dtype=float)
        vertices = np.column_stack([plan[:, 0], plan[:, 2] + elevation, plan[:, 1]])
        faces = np.asarray(mesh.faces, dtype=np.int64)[:, ::-1]
        parts.append(trimesh.Trimesh(vertices=vertices, faces=faces, process=False))

    solid = parts[0] if len(parts) == 1 else trimesh.util.concatenate(parts)
    vertices = np.asarray(solid.vertices, dtype=float)
    faces = np.asarray(solid.faces, dtype=np.int64)
    uvs = vertices[:, [0, 2]] * uv_scale
    return ExtrudedSolid(vertices=vertices, faces=faces, uvs=uvs)
