"""Registry of sliceable body kinds.

Body kinds are looked up by tag so that scenes and input handling can spawn
objects without importing concrete classes. Unknown tags fall back to the
generic polygon object.
"""

import logging
from typing import Callable, Dict

from .base_body import PhysicsObject, SliceableBody
from .circle import PhysicsCircle
from .rectangle import PhysicsRectangle

logger = logging.getLogger(__name__)

BODY_FACTORIES: Dict[str, Callable[..., PhysicsObject]] = {
    PhysicsObject.kind: PhysicsObject,
    PhysicsRectangle.kind: PhysicsRectangle,
    PhysicsCircle.kind: PhysicsCircle,
}


def get_body_factory(kind: str = "object") -> Callable[..., PhysicsObject]:
    """Returns the factory registered for ``kind``.

    Args:
        kind (str): Body kind tag, e.g. "rectangle" or "circle".

    Returns:
        Callable[..., PhysicsObject]: Factory taking the engine followed by keyword arguments.
    """
    key = (kind or "object").lower()
    factory = BODY_FACTORIES.get(key)
    if factory is None:
        logger.warning("Body kind '%s' not found; using object.", kind)
        factory = PhysicsObject
    return factory


__all__ = [
    "SliceableBody",
    "PhysicsObject",
    "PhysicsRectangle",
    "PhysicsCircle",
    "BODY_FACTORIES",
    "get_body_factory",
]
