from typing import Sequence

from pymunk import Vec2d

from slice_sandbox.geometry import rectangle_points
from slice_sandbox.utils.config import Config

from .base_body import PhysicsObject


class PhysicsRectangle(PhysicsObject):
    """Physics object spawned from a rectangle but simulated as a polygon.

    Assigning ``half_extents`` regenerates the outline.
    """

    kind = "rectangle"

    def __init__(self, engine, half_extents: Sequence[float] = Config.DEFAULT_RECTANGLE_HALF_EXTENTS, **kwargs):
        """Creates the rectangle.

        Args:
            engine (PhysicsEngine): Owning physics engine.
            half_extents (Sequence[float]): Half width and half height.
            **kwargs: Keyword arguments forwarded to :class:`PhysicsObject`.
        """
        super().__init__(engine, **kwargs)
        self._half_extents = Vec2d(float(half_extents[0]), float(half_extents[1]))
        self.set_polygon(rectangle_points(self._half_extents))

    @property
    def half_extents(self) -> Vec2d:
        return self._half_extents

    @half_extents.setter
    def half_extents(self, value: Sequence[float]):
        value = Vec2d(float(value[0]), float(value[1]))
        if value != self._half_extents:
            self._half_extents = value
            self.set_polygon(rectangle_points(value))
