from slice_sandbox.geometry import circle_points
from slice_sandbox.utils.config import Config

from .base_body import PhysicsObject


class PhysicsCircle(PhysicsObject):
    """Physics object spawned from a circle but simulated as a regular polygon.

    Assigning ``radius`` regenerates the outline.
    """

    kind = "circle"

    def __init__(self, engine, radius: float = Config.DEFAULT_CIRCLE_RADIUS, **kwargs):
        super().__init__(engine, **kwargs)
        self._radius = float(radius)
        self.set_polygon(circle_points(self._radius))

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float):
        value = float(value)
        if value != self._radius:
            self._radius = value
            self.set_polygon(circle_points(value))
