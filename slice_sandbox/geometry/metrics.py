"""Area, extent and centre-of-mass helpers for vertex loops.

Polygons are closed loops: edge ``i`` joins vertex ``i`` to vertex
``(i + 1) % n``. No winding order is assumed.
"""

from typing import List, Sequence

import numpy as np
from pymunk import Vec2d

from slice_sandbox.utils.config import Config


def _as_array(polygon: Sequence[Sequence[float]]) -> np.ndarray:
    return np.asarray(polygon, dtype=float).reshape(-1, 2)


def _edge_cross(points: np.ndarray) -> np.ndarray:
    """Cross product of each edge's endpoints."""
    following = np.roll(points, -1, axis=0)
    return points[:, 0] * following[:, 1] - following[:, 0] * points[:, 1]


def signed_area(polygon: Sequence[Sequence[float]]) -> float:
    """Shoelace area without the absolute value; the sign encodes winding."""
    points = _as_array(polygon)
    if len(points) == 0:
        return 0.0
    return float(_edge_cross(points).sum() * 0.5)


def calculate_area(polygon: Sequence[Sequence[float]]) -> float:
    """Returns the unsigned area of a simple polygon."""
    return abs(signed_area(polygon))


def bounding_box(polygon: Sequence[Sequence[float]]) -> Vec2d:
    """Returns the axis-aligned extents of the polygon.

    Args:
        polygon (Sequence[Sequence[float]]): Vertex loop.

    Returns:
        Vec2d: ``(max_x - min_x, max_y - min_y)``; ``.length`` is the diagonal.
    """
    points = _as_array(polygon)
    if len(points) == 0:
        return Vec2d(0.0, 0.0)
    extents = points.max(axis=0) - points.min(axis=0)
    return Vec2d(float(extents[0]), float(extents[1]))


def relative_center_of_mass(polygon: Sequence[Sequence[float]]) -> Vec2d:
    """Returns the area-weighted centroid of the polygon.

    Each edge's endpoints are weighted by the edge cross product. The signed
    area is used as the denominator so either winding gives the same point.
    A polygon with exactly zero signed area uses 1 as the denominator; the
    result is then meaningless and callers must check ``calculate_area`` first.

    Args:
        polygon (Sequence[Sequence[float]]): Vertex loop.

    Returns:
        Vec2d: Centroid in the polygon's own frame.
    """
    points = _as_array(polygon)
    if len(points) == 0:
        return Vec2d(0.0, 0.0)
    following = np.roll(points, -1, axis=0)
    cross = _edge_cross(points)
    area = cross.sum() * 0.5
    if area == 0:
        area = 1.0
    weighted = ((points + following) * cross[:, np.newaxis]).sum(axis=0)
    centroid = weighted / (6.0 * area)
    return Vec2d(float(centroid[0]), float(centroid[1]))


def translate(polygon: Sequence[Sequence[float]], offset: Sequence[float]) -> List[Vec2d]:
    """Returns a new polygon with every vertex moved by ``offset``."""
    offset = Vec2d(float(offset[0]), float(offset[1]))
    return [Vec2d(float(x), float(y)) + offset for x, y in polygon]


def is_degenerate(polygon: Sequence[Sequence[float]], minimum_area: float = Config.MINIMUM_AREA) -> bool:
    """True when the polygon has fewer than three vertices or too little area."""
    return len(polygon) < 3 or calculate_area(polygon) < minimum_area


__all__ = [
    "signed_area",
    "calculate_area",
    "bounding_box",
    "relative_center_of_mass",
    "translate",
    "is_degenerate",
]
