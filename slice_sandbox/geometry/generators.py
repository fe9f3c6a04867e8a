"""Vertex generators for the primitive shapes used by the sandbox.

All generators return new lists of ``pymunk.Vec2d`` centred on (or starting
at) the origin. Angles follow the screen convention where Y grows downward, so
increasing angles sweep clockwise on screen.
"""

import math
from typing import List, Sequence

from pymunk import Vec2d

from slice_sandbox.utils.config import Config


def rectangle_points(half_extents: Sequence[float]) -> List[Vec2d]:
    """Returns the four corners of an axis-aligned rectangle centred at the origin.

    The traversal starts at the max corner and flips one axis sign per step, so the
    result always has exactly four points even for zero extents.

    Args:
        half_extents (Sequence[float]): Half width and half height of the rectangle.

    Returns:
        List[Vec2d]: Corners in traversal order.
    """
    corner = Vec2d(float(half_extents[0]), float(half_extents[1]))
    return [
        corner,
        Vec2d(-corner.x, corner.y),
        Vec2d(-corner.x, -corner.y),
        Vec2d(corner.x, -corner.y),
    ]


def circle_edge_count(radius: float) -> int:
    """Number of edges used to approximate a circle of the given radius.

    Grows logarithmically so that both small and large circles look smooth.
    Radii of one or less (including non-positive ones) use the minimum.
    """
    if radius <= 1.0:
        return Config.CIRCLE_MIN_EDGES
    edges = int(math.floor(math.log(radius))) * Config.CIRCLE_EDGES_PER_LOG_RADIUS
    return max(Config.CIRCLE_MIN_EDGES, edges)


def circle_points(radius: float) -> List[Vec2d]:
    """Returns a regular polygon approximating a circle centred at the origin.

    Args:
        radius (float): Circle radius.

    Returns:
        List[Vec2d]: Vertices placed at equal angular steps starting at angle 0.
    """
    edge_count = circle_edge_count(radius)
    step = 2.0 * math.pi / edge_count
    return [Vec2d(math.cos(i * step), math.sin(i * step)) * radius for i in range(edge_count)]


def blade_points(
    direction: Sequence[float],
    width: float,
    length: float,
    normal_angle: float = Config.BLADE_NORMAL_ANGLE,
) -> List[Vec2d]:
    """Returns a thin rectangle whose short edge sits on the origin.

    The long axis runs along ``direction * length`` and the width is centred on
    that axis, offset along ``direction`` rotated by ``normal_angle``.

    Args:
        direction (Sequence[float]): Unit direction of the cut.
        width (float): Blade width.
        length (float): Blade length.
        normal_angle (float): Rotation from the direction to the width offset axis.
            ``math.pi`` reproduces the legacy generator, which collapses the blade
            onto its own axis.

    Returns:
        List[Vec2d]: Four vertices of a simple quadrilateral.
    """
    direction = Vec2d(float(direction[0]), float(direction[1]))
    normal = direction.rotated(normal_angle)
    end = direction * length
    width_offset = normal * (width / 2.0)
    return [
        width_offset,
        -width_offset,
        end - width_offset,
        end + width_offset,
    ]


__all__ = ["rectangle_points", "circle_edge_count", "circle_points", "blade_points"]
