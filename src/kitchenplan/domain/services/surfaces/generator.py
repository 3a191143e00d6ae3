"""Procedural worktop and plinth generation.

Each call builds the surface from scratch: per-object polygons, bridges
across small gaps, a boolean union, cutout holes, then an extrusion with
planar UVs. Nothing is patched incrementally, so the caller simply
replaces (or drops) the previous mesh with whatever comes back.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...value_objects import (
    GeneratedSurfaceMesh,
    ObjectCategory,
    PlinthParams,
    Point2D,
    SurfaceKind,
    SurfacePolygon,
    WorktopParams,
)
from ..elevation import VerticalPositionResolver
from ..geometry import FootprintService
from .bridging import build_bridges
from .extrusion import extrude_outlines, inject_holes, merge_polygons, to_surface_outlines
from .polygons import SurfacePolygonBuilder

if TYPE_CHECKING:
    from kitchenplan.contracts import ComponentLookup

    from ...entities import PlacedObject

logger = logging.getLogger(__name__)

__all__ = [
    "MIN_WORKTOP_ELEVATION",
    "ProceduralSurfaceGenerator",
]

# Cabinet tops at or below this are not trusted as a worktop height.
MIN_WORKTOP_ELEVATION = 0.5


class ProceduralSurfaceGenerator:
    """Generates continuous worktop and plinth meshes for base cabinets.

    Attributes:
        lookup: Component lookup shared with the placement services.
        legs: Resolver deciding which objects stand on standard legs.

    Example:
        ```python
        generator = ProceduralSurfaceGenerator(catalog)
        worktop = generator.regenerate_worktop(scene.objects, WorktopParams())
        if worktop is not None:
            print(worktop.outline_count, worktop.top_elevation)
        ```
    """

    def __init__(
        self,
        lookup: ComponentLookup,
        legs: VerticalPositionResolver | None = None,
    ) -> None:
        self.lookup = lookup
        self.legs = legs or VerticalPositionResolver(lookup)

    def regenerate(
        self,
        kind: SurfaceKind,
        objects: list[PlacedObject],
        params: WorktopParams | PlinthParams | None = None,
    ) -> GeneratedSurfaceMesh | None:
        """Regenerate one surface kind.

        Args:
            kind: Worktop or plinth.
            objects: Current object set.
            params: Parameters matching ``kind``; defaults when omitted.

        Returns:
            The new mesh, or None when there is nothing to build or the
            build failed.

        Raises:
            TypeError: If ``params`` does not match ``kind``.
        """
        if kind is SurfaceKind.WORKTOP:
            if params is not None and not isinstance(params, WorktopParams):
                raise TypeError("Worktop regeneration needs WorktopParams")
            return self.regenerate_worktop(objects, params)
        if params is not None and not isinstance(params, PlinthParams):
            raise TypeError("Plinth regeneration needs PlinthParams")
        return self.regenerate_plinth(objects, params)

    def regenerate_worktop(
        self,
        objects: list[PlacedObject],
        params: WorktopParams | None = None,
    ) -> GeneratedSurfaceMesh | None:
        """Build the merged worktop over every base cabinet with a carcass."""
        params = params or WorktopParams()
        footprints = FootprintService(
            self.lookup,
            side_overhang=params.side_overhang,
            default_depth=params.default_depth,
        )
        builder = SurfacePolygonBuilder(footprints)
        cabinets = [
            obj
            for obj in objects
            if obj.category is ObjectCategory.BASE_CABINET
            and footprints.local_extents(obj, exclude_overhang=True) is not None
        ]
        if not cabinets:
            logger.debug("No base cabinets, no worktop")
            return None

        polygons: list[tuple[SurfacePolygon, Point2D]] = []
        holes: list[SurfacePolygon] = []
        top = 0.0
        for obj in cabinets:
            sides = builder.neighbor_sides(obj, cabinets, params.gap_threshold)
            polygon = builder.worktop_polygon(obj, params, sides)
            if polygon is None:
                continue
            polygons.append((polygon, Point2D(obj.position.x, obj.position.z)))
            extents = footprints.local_extents(obj, exclude_overhang=True)
            top = max(top, obj.position.y + extents.height)
            if obj.has_cutout:
                hole = builder.cutout_polygon(obj)
                if hole is not None:
                    holes.append(hole)

        elevation = top if top > MIN_WORKTOP_ELEVATION else params.elevation_fallback
        return self._build(
            SurfaceKind.WORKTOP,
            polygons,
            holes,
            gap_threshold=params.gap_threshold,
            thickness=params.thickness,
            elevation=elevation,
            uv_scale=params.uv_scale,
        )

    def regenerate_plinth(
        self,
        objects: list[PlacedObject],
        params: PlinthParams | None = None,
    ) -> GeneratedSurfaceMesh | None:
        """Build the merged plinth under every standard-leg base cabinet."""
        params = params or PlinthParams()
        builder = SurfacePolygonBuilder(FootprintService(self.lookup))
        polygons: list[tuple[SurfacePolygon, Point2D]] = []
        for obj in objects:
            if obj.category is not ObjectCategory.BASE_CABINET:
                continue
            if not self.legs.should_show_standard_leg(obj):
                continue
            polygon = builder.plinth_polygon(obj, params)
            if polygon is not None:
                polygons.append((polygon, Point2D(obj.position.x, obj.position.z)))

        if not polygons:
            logger.debug("No standard-leg cabinets, no plinth")
            return None

        return self._build(
            SurfaceKind.PLINTH,
            polygons,
            [],
            gap_threshold=params.gap_threshold,
            thickness=params.height,
            elevation=0.0,
            uv_scale=params.uv_scale,
        )

    def _build(
        self,
        kind: SurfaceKind,
        polygons: list[tuple[SurfacePolygon, Point2D]],
        holes: list[SurfacePolygon],
        gap_threshold: float,
        thickness: float,
        elevation: float,
        uv_scale: float,
    ) -> GeneratedSurfaceMesh | None:
        """Union, cut and extrude. Failures are logged and yield no mesh."""
        if not polygons:
            return None
        bridges = build_bridges(polygons, gap_threshold)
        sources = tuple(dict.fromkeys(p.source_uuid for p, _ in polygons))
        try:
            outlines = merge_polygons([p for p, _ in polygons] + bridges)
            outlines = inject_holes(outlines, holes)
            solid = extrude_outlines(outlines, thickness, elevation, uv_scale)
        except Exception:
            logger.exception(f"Failed to generate {kind.value} surface")
            return None

        mesh = GeneratedSurfaceMesh(
            kind=kind,
            outlines=to_surface_outlines(outlines),
            vertices=solid.vertices,
            faces=solid.faces,
            uvs=solid.uvs,
            thickness=thickness,
            elevation=elevation,
            source_uuids=sources,
        )
        logger.info(
            f"Generated {kind.value}: {mesh.outline_count} outline(s), "
            f"{mesh.hole_count} hole(s), {len(mesh.faces)} faces"
        )
        return mesh
