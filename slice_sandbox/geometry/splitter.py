"""Cuts a polygon into pieces with a thin synthetic blade.

The blade is a finite-width rectangle subtracted from the polygon with a
general boolean clip, so cuts through non-convex outlines may yield more than
two disjoint pieces.
"""

import logging
from typing import List, NamedTuple, Sequence

from pymunk import Vec2d
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry
from shapely.validation import make_valid

from slice_sandbox.geometry.generators import blade_points
from slice_sandbox.geometry.metrics import bounding_box, translate
from slice_sandbox.utils.config import Config

logger = logging.getLogger(__name__)


class CutLine(NamedTuple):
    """A cut described by a point on the line and its direction (any length)."""

    start: Vec2d
    direction: Vec2d


def _polygon_parts(geometry: BaseGeometry) -> List[ShapelyPolygon]:
    """Flattens a clip result into its polygonal members."""
    if geometry.is_empty:
        return []
    if isinstance(geometry, ShapelyPolygon):
        return [geometry]
    if hasattr(geometry, "geoms"):
        return [part for member in geometry.geoms for part in _polygon_parts(member)]
    return []


def _to_vertices(polygon: ShapelyPolygon) -> List[Vec2d]:
    # Shapely repeats the first vertex at the end of a ring.
    coords = list(polygon.exterior.coords)[:-1]
    return [Vec2d(float(x), float(y)) for x, y in coords]


def split_polygon(
    polygon: Sequence[Sequence[float]],
    line: CutLine,
    blade_width: float = Config.SLICE_WIDTH,
) -> List[List[Vec2d]]:
    """Clips a blade along ``line`` out of ``polygon``.

    The blade starts ``Config.SPLIT_LENGTH_MARGIN`` behind the line start and is
    as long as the polygon's bounding box diagonal plus the margin, so it crosses
    the whole polygon from any entry point.

    Args:
        polygon (Sequence[Sequence[float]]): Vertex loop to cut, in the same frame as ``line``.
        line (CutLine): Start point and direction of the cut.
        blade_width (float): Width of the material removed by the cut.

    Returns:
        List[List[Vec2d]]: Remaining pieces. A blade that misses returns the
        original outline as a single piece; a blade covering the whole polygon
        returns no pieces.
    """
    if len(polygon) < 3:
        logger.debug("Skipping split of polygon with %d vertices.", len(polygon))
        return []

    direction = Vec2d(float(line.direction[0]), float(line.direction[1]))
    if direction.length == 0:
        logger.debug("Zero-length cut direction; polygon left whole.")
        return [translate(polygon, (0.0, 0.0))]
    direction = direction.normalized()

    furthest_possible_distance = bounding_box(polygon).length
    start = Vec2d(float(line.start[0]), float(line.start[1])) - direction * Config.SPLIT_LENGTH_MARGIN

    blade = blade_points(direction, blade_width, furthest_possible_distance + Config.SPLIT_LENGTH_MARGIN)
    blade = translate(blade, start)

    subject = ShapelyPolygon([(float(x), float(y)) for x, y in polygon])
    if not subject.is_valid:
        subject = make_valid(subject)
    cutter = ShapelyPolygon(blade)
    if not cutter.is_valid:
        cutter = make_valid(cutter)

    pieces = [_to_vertices(part) for part in _polygon_parts(subject.difference(cutter))]
    logger.debug("Split produced %d piece(s).", len(pieces))
    return pieces


__all__ = ["CutLine", "split_polygon"]
