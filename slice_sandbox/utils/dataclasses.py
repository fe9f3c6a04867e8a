"""Shared dataclass definitions for geometry exported by the physics engine.

These structures abstract pymunk shapes and query results into plain
primitives that can be reused by input handling or logging utilities without
depending on pymunk internals.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

import pymunk

if TYPE_CHECKING:  # pragma: no cover - assist typing only
    from slice_sandbox.bodies.base_body import SliceableBody


@dataclass
class BodyPolygon:
    """Polygon primitive exported by ``get_world_polygons``.

    Attributes:
        vertices (List[Tuple[float, float]]): Polygon vertices in world space.
        kind (str): Registry tag of the owning body ("rectangle", "boundary", etc.).
    """

    vertices: List[Tuple[float, float]]
    kind: str


@dataclass(frozen=True)
class RayHit:
    """Nearest intersection reported by ``PhysicsEngine.cast_ray``.

    Attributes:
        obj (SliceableBody): Object whose collider was struck.
        point (pymunk.Vec2d): World-space point where the ray entered the collider.
        alpha (float): Normalised distance along the ray (0 at the start, 1 at the end).
    """

    obj: "SliceableBody"
    point: pymunk.Vec2d
    alpha: float


__all__ = ["BodyPolygon", "RayHit"]
