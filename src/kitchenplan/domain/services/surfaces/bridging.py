"""Bridge quads that close small gaps between neighbouring polygons."""

from __future__ import annotations

import logging

from ...value_objects import Point2D, PolygonRole, SurfacePolygon

logger = logging.getLogger(__name__)

__all__ = [
    "BRIDGE_MAX_CENTER_DISTANCE",
    "BRIDGE_MIN_GAP",
    "build_bridges",
]

# Pairs whose pivots are further apart than this are never bridged.
BRIDGE_MAX_CENTER_DISTANCE = 1.5
# Gaps below 1 mm already touch; the union merges them without help.
BRIDGE_MIN_GAP = 0.001


def _bridge(right_of: SurfacePolygon, left_of: SurfacePolygon) -> SurfacePolygon:
    """Quad between the right side of one polygon and the left side of another."""
    return SurfacePolygon(
        points=(
            right_of.back_right,
            left_of.back_left,
            left_of.front_left,
            right_of.front_right,
        ),
        source_uuid=f"{right_of.source_uuid}:{left_of.source_uuid}",
        role=PolygonRole.BRIDGE,
    )


def build_bridges(
    polygons: list[tuple[SurfacePolygon, Point2D]],
    gap_threshold: float,
    max_center_distance: float = BRIDGE_MAX_CENTER_DISTANCE,
) -> list[SurfacePolygon]:
    """Synthesize connecting quads for near-adjacent polygon pairs.

    For every pair the back-right corner of one polygon is compared with
    the back-left corner of the other, in both directions. A gap strictly
    between ``BRIDGE_MIN_GAP`` and ``gap_threshold`` produces a quad that
    spans the gap from back to front.

    Args:
        polygons: Footprint polygons paired with their object's pivot.
        gap_threshold: Largest gap that is still bridged.
        max_center_distance: Pivot distance beyond which pairs are skipped.

    Returns:
        Bridge polygons, possibly empty.
    """
    bridges: list[SurfacePolygon] = []
    for i, (poly_a, center_a) in enumerate(polygons):
        for poly_b, center_b in polygons[i + 1 :]:
            if center_a.distance_to(center_b) > max_center_distance:
                continue

            gap = poly_a.back_right.distance_to(poly_b.back_left)
            if BRIDGE_MIN_GAP < gap < gap_threshold:
                bridges.append(_bridge(poly_a, poly_b))

            gap = poly_b.back_right.distance_to(poly_a.back_left)
            if BRIDGE_MIN_GAP < gap < gap_threshold:
                bridges.append(_bridge(poly_b, poly_a))

    if bridges:
        logger.debug(f"Created {len(bridges)} bridge polygons")
    return bridges
