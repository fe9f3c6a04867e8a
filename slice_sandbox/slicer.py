"""Slices every body crossed by a world-space line.

A single ray cast only reports the first body it meets. ``Slicer`` repeats the
cast, excluding each body it has already recorded, until nothing else is hit,
then cuts every recorded body in the order it was found.
"""

from enum import Enum
import logging
from typing import TYPE_CHECKING, Dict, List, Sequence, Set

from pymunk import Vec2d

from slice_sandbox.bodies import SliceableBody
from slice_sandbox.utils.config import Config

if TYPE_CHECKING:  # pragma: no cover - assist typing only
    from slice_sandbox.physics import PhysicsEngine

logger = logging.getLogger(__name__)


class SlicerPhase(Enum):
    IDLE = "idle"
    CASTING = "casting"
    RESOLVING = "resolving"


class Slicer:
    """Multi-body slice orchestrator.

    Attributes:
        engine (PhysicsEngine): Engine answering ray casts and point probes.
        blade_width (float): Width of the strip removed from each body.
        phase (SlicerPhase): Current stage of the running operation.
    """

    def __init__(self, engine: "PhysicsEngine", blade_width: float = Config.SLICE_WIDTH):
        self.engine = engine
        self.blade_width = blade_width
        self.phase = SlicerPhase.IDLE

    def is_colliding(self, start: Sequence[float], end: Sequence[float]) -> bool:
        """True when the ray from ``start`` to ``end`` enters at least one body."""
        return self.engine.cast_ray(start, end) is not None

    def get_all_colliding_objects(self, start: Sequence[float], end: Sequence[float]) -> Dict[SliceableBody, Vec2d]:
        """Finds every body the ray enters, nearest first.

        A body that contains ``end`` stops the search when the ray reaches it and
        is not recorded, so a slice never ends inside the body it would cut.

        Args:
            start (Sequence[float]): World-space start of the cut.
            end (Sequence[float]): World-space end of the cut.

        Returns:
            Dict[SliceableBody, Vec2d]: Entry point of each body, in discovery order.
        """
        end_object = self.engine.object_at_point(end)
        colliding: Dict[SliceableBody, Vec2d] = {}
        excluded: Set[SliceableBody] = set()

        hit = self.engine.cast_ray(start, end, exclude=frozenset(excluded))
        while hit is not None:
            if hit.obj is end_object:
                break
            colliding[hit.obj] = hit.point
            excluded.add(hit.obj)
            hit = self.engine.cast_ray(start, end, exclude=frozenset(excluded))

        return colliding

    def slice_all(self, start: Sequence[float], end: Sequence[float]) -> List[SliceableBody]:
        """Splits every body crossed by the segment from ``start`` to ``end``.

        Args:
            start (Sequence[float]): World-space start of the cut.
            end (Sequence[float]): World-space end of the cut.

        Returns:
            List[SliceableBody]: Replacement bodies that were spawned.

        Raises:
            RuntimeError: If called while another slice is still running.
        """
        if self.phase is not SlicerPhase.IDLE:
            raise RuntimeError(f"Slice already in progress ({self.phase.value}).")

        start = Vec2d(float(start[0]), float(start[1]))
        end = Vec2d(float(end[0]), float(end[1]))
        spawned: List[SliceableBody] = []
        try:
            self.phase = SlicerPhase.CASTING
            colliding = self.get_all_colliding_objects(start, end)

            target = end - start
            if target.length == 0:
                return spawned
            cut_direction = target.normalized()

            self.phase = SlicerPhase.RESOLVING
            for obj, hit_point in colliding.items():
                local_start = (hit_point - obj.position).rotated(-obj.angle)
                local_direction = cut_direction.rotated(-obj.angle)
                spawned.extend(obj.split(local_start, local_direction, self.blade_width))
        finally:
            self.phase = SlicerPhase.IDLE

        logger.info("Slice crossed %d body(ies) and spawned %d.", len(colliding), len(spawned))
        return spawned


__all__ = ["Slicer", "SlicerPhase"]
