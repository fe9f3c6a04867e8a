"""Physics engine utilities for the slicing sandbox.

This module defines the ``PhysicsEngine`` class that owns the pymunk space,
keeps the index of live sliceable objects, creates and destroys them on
request, and answers the spatial queries the slicer and input handling need
(ray casts, point probes and overlap tests).
"""

import logging
from typing import AbstractSet, Dict, List, Optional, Sequence, Tuple

import pymunk
from pymunk import Vec2d
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry import box
from shapely.geometry.base import BaseGeometry

from slice_sandbox.bodies import PhysicsObject, get_body_factory
from slice_sandbox.utils.config import Config
from slice_sandbox.utils.dataclasses import BodyPolygon, RayHit

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """Manages the Chipmunk2D/pymunk-based simulation for the sandbox.

    Screen coordinates are used throughout, so gravity points along +Y.

    Attributes:
        space (pymunk.Space): The physics simulation space.
        viewport (Optional[Tuple[float, float]]): Size of the walled area once
            :meth:`create_boundaries` has been called.
    """

    def __init__(self, gravity: float = Config.GRAVITY):
        """Initialises an empty space.

        Args:
            gravity (float): Downward (screen-space) gravitational acceleration.
        """
        self.space = pymunk.Space()
        self.space.gravity = (0.0, gravity)
        self.viewport: Optional[Tuple[float, float]] = None
        self._objects: Dict[pymunk.Body, PhysicsObject] = {}
        self._boundary_shapes: List[pymunk.Poly] = []

    # ---------------------------
    # Lifecycle
    # ---------------------------
    @property
    def objects(self) -> List[PhysicsObject]:
        """Live objects currently in the space, in insertion order."""
        return [obj for obj in self._objects.values() if obj.alive]

    def object_for_body(self, body: pymunk.Body) -> Optional[PhysicsObject]:
        return self._objects.get(body)

    def spawn(self, kind: str = "object", **kwargs) -> PhysicsObject:
        """Creates an object of the given kind through the body registry.

        Args:
            kind (str): Registry tag of the body kind.
            **kwargs: Keyword arguments forwarded to the factory.

        Returns:
            PhysicsObject: The new object. It is already destroyed when its
            outline was below the minimum area.
        """
        factory = get_body_factory(kind)
        return factory(self, **kwargs)

    def attach(self, obj: PhysicsObject) -> None:
        """Adds the object's body (if needed) and current shapes to the space."""
        if obj.body.space is None:
            self.space.add(obj.body)
            self._objects[obj.body] = obj
        self.space.add(*obj.shapes)

    def detach_shapes(self, obj: PhysicsObject) -> None:
        """Removes the object's shapes from the space, keeping the body."""
        shapes = [shape for shape in obj.shapes if shape.space is not None]
        if shapes:
            self.space.remove(*shapes)

    def detach(self, obj: PhysicsObject) -> None:
        """Removes the object's shapes and body from the space and the index."""
        self.detach_shapes(obj)
        if obj.body.space is not None:
            self.space.remove(obj.body)
        self._objects.pop(obj.body, None)

    def destroy(self, obj: PhysicsObject) -> None:
        obj.destroy()

    def reindex(self, obj: PhysicsObject) -> None:
        """Refreshes cached collider data after the object was moved directly."""
        if obj.body.space is not None:
            self.space.reindex_shapes_for_body(obj.body)

    def clear(self) -> None:
        """Destroys every object; boundaries are kept."""
        for obj in list(self._objects.values()):
            obj.destroy()

    # ---------------------------
    # World
    # ---------------------------
    def create_boundaries(self, width: float, height: float, depth: float = Config.BOUNDARY_DEPTH) -> None:
        """Surrounds the viewport with static walls just outside its edges.

        Calling again replaces the previous walls, e.g. after a resize.

        Args:
            width (float): Viewport width (clamped to ``Config.MIN_VIEWPORT_SIZE``).
            height (float): Viewport height (clamped to ``Config.MIN_VIEWPORT_SIZE``).
            depth (float): Thickness of each wall.
        """
        if self._boundary_shapes:
            self.space.remove(*self._boundary_shapes)
            self._boundary_shapes = []

        width = max(float(width), Config.MIN_VIEWPORT_SIZE)
        height = max(float(height), Config.MIN_VIEWPORT_SIZE)
        walls = [
            (-depth, -depth, width + depth, 0.0),  # N
            (width, 0.0, width + depth, height),  # E
            (-depth, height, width + depth, height + depth),  # S
            (-depth, 0.0, 0.0, height),  # W
        ]
        for left, top, right, bottom in walls:
            shape = pymunk.Poly(
                self.space.static_body,
                [(right, bottom), (left, bottom), (left, top), (right, top)],
            )
            shape.friction = Config.BODY_FRICTION
            shape.elasticity = Config.BODY_ELASTICITY
            self._boundary_shapes.append(shape)
        self.space.add(*self._boundary_shapes)
        self.viewport = (width, height)
        logger.debug("Boundaries created for %.0fx%.0f viewport.", width, height)

    def step(self, dt: float = Config.TIME_STEP) -> None:
        """Advances the simulation and culls objects that left the viewport.

        Args:
            dt (float): Time step in seconds.
        """
        self.space.step(dt)
        if self.viewport is None:
            return
        width, height = self.viewport
        for obj in self.objects:
            x, y = obj.position
            if (
                x < -Config.CULL_MARGIN
                or y < -Config.CULL_MARGIN
                or x > width + Config.CULL_MARGIN
                or y > height + Config.CULL_MARGIN
            ):
                logger.debug("Culling %s that left the viewport at (%.1f, %.1f).", obj.kind, x, y)
                obj.destroy()

    # ---------------------------
    # Queries
    # ---------------------------
    def cast_ray(
        self,
        start: Sequence[float],
        end: Sequence[float],
        exclude: AbstractSet[PhysicsObject] = frozenset(),
        hit_from_inside: bool = False,
    ) -> Optional[RayHit]:
        """Returns the nearest object struck by the segment from ``start`` to ``end``.

        Args:
            start (Sequence[float]): World-space ray origin.
            end (Sequence[float]): World-space ray end.
            exclude (AbstractSet[PhysicsObject]): Objects ignored by this cast.
            hit_from_inside (bool): When False, objects that already contain
                ``start`` are not reported.

        Returns:
            Optional[RayHit]: The nearest hit, or ``None``.
        """
        start = Vec2d(float(start[0]), float(start[1]))
        end = Vec2d(float(end[0]), float(end[1]))
        nearest: Optional[RayHit] = None
        for info in self.space.segment_query(start, end, 0.0, pymunk.ShapeFilter()):
            obj = self._objects.get(info.shape.body)
            if obj is None or not obj.alive or obj in exclude:
                continue
            if nearest is not None and info.alpha >= nearest.alpha:
                continue
            if not hit_from_inside and obj.contains_point(start):
                continue
            # A segment starting on a shape reports alpha 0 with the end as its point.
            nearest = RayHit(obj=obj, point=start + (end - start) * info.alpha, alpha=float(info.alpha))
        return nearest

    def object_at_point(self, point: Sequence[float]) -> Optional[PhysicsObject]:
        """Returns the object whose collider contains ``point``, if any."""
        point = Vec2d(float(point[0]), float(point[1]))
        best = None
        best_distance = 0.0
        for info in self.space.point_query(point, 0.0, pymunk.ShapeFilter()):
            obj = self._objects.get(info.shape.body)
            if obj is None or not obj.alive:
                continue
            if best is None or info.distance < best_distance:
                best = obj
                best_distance = info.distance
        return best

    def _overlapping_objects(self, area: BaseGeometry) -> List[PhysicsObject]:
        return [obj for obj in self.objects if area.intersects(ShapelyPolygon(obj.world_polygon()))]

    def _overlaps(self, area: BaseGeometry, include_boundaries: bool) -> bool:
        if include_boundaries:
            for shape in self._boundary_shapes:
                if area.intersects(ShapelyPolygon(shape.get_vertices())):
                    return True
        return bool(self._overlapping_objects(area))

    def objects_in_rect(self, corner_a: Sequence[float], corner_b: Sequence[float]) -> List[PhysicsObject]:
        """Objects overlapping the axis-aligned rectangle spanned by two corners."""
        return self._overlapping_objects(_rect(corner_a, corner_b))

    def rect_has_overlap(
        self, corner_a: Sequence[float], corner_b: Sequence[float], include_boundaries: bool = True
    ) -> bool:
        """True when the rectangle touches any object (or wall, if requested)."""
        return self._overlaps(_rect(corner_a, corner_b), include_boundaries)

    def circle_has_overlap(self, center: Sequence[float], radius: float, include_boundaries: bool = True) -> bool:
        """True when the circle touches any object (or wall, if requested)."""
        area = ShapelyPoint(float(center[0]), float(center[1])).buffer(radius)
        return self._overlaps(area, include_boundaries)

    def get_world_polygons(self, boundaries: bool = False) -> List[BodyPolygon]:
        """Collects world-space outlines of live objects.

        Args:
            boundaries (bool): Include the viewport walls when ``True``.

        Returns:
            List[BodyPolygon]: One entry per object (and wall).
        """
        polys = [
            BodyPolygon(vertices=[(float(v.x), float(v.y)) for v in obj.world_polygon()], kind=obj.kind)
            for obj in self.objects
        ]
        if boundaries:
            for shape in self._boundary_shapes:
                vertices = [(float(v.x), float(v.y)) for v in shape.get_vertices()]
                polys.append(BodyPolygon(vertices=vertices, kind="boundary"))
        return polys


def _rect(corner_a: Sequence[float], corner_b: Sequence[float]) -> ShapelyPolygon:
    return box(
        min(corner_a[0], corner_b[0]),
        min(corner_a[1], corner_b[1]),
        max(corner_a[0], corner_b[0]),
        max(corner_a[1], corner_b[1]),
    )


__all__ = ["PhysicsEngine"]
