from abc import ABC, abstractmethod
import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

import pymunk
from pymunk import Vec2d
from pymunk.autogeometry import convex_decomposition
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from slice_sandbox.geometry import (
    CutLine,
    calculate_area,
    is_degenerate,
    relative_center_of_mass,
    signed_area,
    split_polygon,
    translate,
)
from slice_sandbox.utils.config import Config

if TYPE_CHECKING:  # pragma: no cover - assist typing only
    from slice_sandbox.physics import PhysicsEngine

logger = logging.getLogger(__name__)


class SliceableBody(ABC):
    """Capability shared by every body the slicer is allowed to cut.

    The slicer only talks to this interface; it never inspects concrete body
    classes.
    """

    @property
    @abstractmethod
    def polygon(self) -> List[Vec2d]:
        """Outline in the body's local frame, with the centre of mass at the origin."""
        pass

    @property
    @abstractmethod
    def position(self) -> Vec2d:
        pass

    @property
    @abstractmethod
    def angle(self) -> float:
        pass

    @property
    @abstractmethod
    def alive(self) -> bool:
        pass

    @abstractmethod
    def contains_point(self, point: Sequence[float]) -> bool:
        """Returns True when the world-space ``point`` lies strictly inside the outline."""
        pass

    @abstractmethod
    def split(
        self,
        local_start: Sequence[float],
        local_direction: Sequence[float],
        blade_width: float = Config.SLICE_WIDTH,
    ) -> List["SliceableBody"]:
        """Cuts the body along a line expressed in its local, unrotated frame.

        Args:
            local_start (Sequence[float]): Point on the cut line.
            local_direction (Sequence[float]): Direction of the cut.
            blade_width (float): Width of the removed strip.

        Returns:
            List[SliceableBody]: Replacement bodies that survived the minimum area check.
        """
        pass

    @abstractmethod
    def destroy(self) -> None:
        pass


def _is_convex(vertices: List[Vec2d]) -> bool:
    outline = ShapelyPolygon(vertices)
    if not outline.is_valid:
        return False
    return outline.convex_hull.area - outline.area <= 1e-9 * max(outline.area, 1.0)


def _convex_parts(vertices: List[Vec2d]) -> List[List[Vec2d]]:
    """Decomposes a simple polygon into convex pieces pymunk can collide with."""
    loop = list(vertices)
    # Chipmunk expects a closed, positively wound loop.
    if signed_area(loop) < 0:
        loop.reverse()
    loop.append(loop[0])
    return [list(part) for part in convex_decomposition(loop, Config.CONVEX_DECOMPOSITION_TOLERANCE)]


class PhysicsObject(SliceableBody):
    """Dynamic pymunk body whose collider is an arbitrary polygon.

    The body's local origin is its centre of mass, so polygons assigned through
    :meth:`set_polygon` are expected to be centred on their centroid. The mass
    equals the polygon area; objects with less than ``Config.MINIMUM_AREA``
    destroy themselves instead of joining the space.

    Attributes:
        engine (PhysicsEngine): Engine providing lifecycle and spatial queries.
        body (pymunk.Body): Underlying rigid body.
        shapes (List[pymunk.Poly]): Convex collider pieces attached to ``body``.
        mass (float): Current mass (polygon area).
    """

    kind = "object"

    def __init__(
        self,
        engine: "PhysicsEngine",
        polygon: Optional[Sequence[Sequence[float]]] = None,
        position: Sequence[float] = (0.0, 0.0),
        angle: float = 0.0,
        velocity: Sequence[float] = (0.0, 0.0),
        angular_velocity: float = 0.0,
    ):
        """Creates the body; it joins the space once a large enough polygon is set.

        Args:
            engine (PhysicsEngine): Owning physics engine.
            polygon (Optional[Sequence[Sequence[float]]]): Initial local outline.
            position (Sequence[float]): World-space position of the centre of mass.
            angle (float): Rotation in radians.
            velocity (Sequence[float]): Initial linear velocity.
            angular_velocity (float): Initial angular velocity.
        """
        self.engine = engine
        self.body = pymunk.Body(body_type=pymunk.Body.DYNAMIC)
        self.body.position = (float(position[0]), float(position[1]))
        self.body.angle = float(angle)
        self.body.velocity = (float(velocity[0]), float(velocity[1]))
        self.body.angular_velocity = float(angular_velocity)
        self.shapes: List[pymunk.Poly] = []
        self.mass = 0.0
        self._polygon: List[Vec2d] = []
        self._alive = True

        if polygon is not None:
            self.set_polygon(polygon)

    @property
    def polygon(self) -> List[Vec2d]:
        return list(self._polygon)

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def position(self) -> Vec2d:
        return self.body.position

    @position.setter
    def position(self, value: Sequence[float]):
        self.body.position = (float(value[0]), float(value[1]))
        self.engine.reindex(self)

    @property
    def angle(self) -> float:
        return self.body.angle

    @angle.setter
    def angle(self, value: float):
        self.body.angle = float(value)
        self.engine.reindex(self)

    @property
    def velocity(self) -> Vec2d:
        return self.body.velocity

    @velocity.setter
    def velocity(self, value: Sequence[float]):
        self.body.velocity = (float(value[0]), float(value[1]))

    @property
    def angular_velocity(self) -> float:
        return self.body.angular_velocity

    @angular_velocity.setter
    def angular_velocity(self, value: float):
        self.body.angular_velocity = float(value)

    def set_polygon(self, polygon: Sequence[Sequence[float]]) -> bool:
        """Replaces the collider outline and updates mass data.

        Args:
            polygon (Sequence[Sequence[float]]): New local outline.

        Returns:
            bool: ``False`` when the outline was too small and the object was destroyed.
        """
        if not self._alive:
            return False

        vertices = [Vec2d(float(x), float(y)) for x, y in polygon]
        if is_degenerate(vertices, Config.MINIMUM_AREA):
            logger.debug("Destroying degenerate %s with %d vertices.", self.kind, len(vertices))
            self.destroy()
            return False
        mass = calculate_area(vertices)

        self.engine.detach_shapes(self)
        self._polygon = vertices
        self.mass = mass
        self.body.mass = mass
        self.body.moment = pymunk.moment_for_poly(mass, vertices)
        self.shapes = self._build_shapes(vertices)
        self.engine.attach(self)
        return True

    def _build_shapes(self, vertices: List[Vec2d]) -> List[pymunk.Poly]:
        parts = [vertices] if _is_convex(vertices) else _convex_parts(vertices)
        shapes = []
        for part in parts:
            shape = pymunk.Poly(self.body, part)
            shape.friction = Config.BODY_FRICTION
            shape.elasticity = Config.BODY_ELASTICITY
            shapes.append(shape)
        return shapes

    def world_polygon(self) -> List[Vec2d]:
        """Returns the outline transformed into world space."""
        return [self.body.local_to_world(vertex) for vertex in self._polygon]

    def contains_point(self, point: Sequence[float]) -> bool:
        if not self._polygon:
            return False
        # Tested against the full outline; seams between convex parts are interior.
        outline = ShapelyPolygon(self.world_polygon())
        return outline.contains(ShapelyPoint(float(point[0]), float(point[1])))

    def split(
        self,
        local_start: Sequence[float],
        local_direction: Sequence[float],
        blade_width: float = Config.SLICE_WIDTH,
    ) -> List[SliceableBody]:
        if not self._alive:
            return []

        line = CutLine(
            Vec2d(float(local_start[0]), float(local_start[1])),
            Vec2d(float(local_direction[0]), float(local_direction[1])),
        )
        pieces = split_polygon(self._polygon, line, blade_width)

        if len(pieces) == 1:
            # The blade missed or only notched the outline; keep the original body.
            logger.debug("Single-piece clip on %s treated as a no-op.", self.kind)
            return []
        if not pieces:
            if self.mass < Config.MINIMUM_AREA:
                self.destroy()
            return []

        spawned: List[SliceableBody] = []
        for piece in pieces:
            center_of_mass = relative_center_of_mass(piece)
            obj = self.engine.spawn(
                "object",
                polygon=translate(piece, -center_of_mass),
                position=self.position + center_of_mass.rotated(self.angle),
                angle=self.angle,
                velocity=self.velocity,
                angular_velocity=self.angular_velocity,
            )
            if obj.alive:
                spawned.append(obj)

        logger.info("Split %s into %d piece(s), %d kept.", self.kind, len(pieces), len(spawned))
        self.destroy()
        return spawned

    def destroy(self) -> None:
        if not self._alive:
            return
        self._alive = False
        self.engine.detach(self)

