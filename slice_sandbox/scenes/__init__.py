"""Starting layouts for the sandbox, loaded from JSON presets.

Each preset names a viewport size and a list of bodies. Bodies are spawned
through the body registry by their ``kind`` tag; every other key is passed to
the body factory.
"""

from pathlib import Path
from typing import Any, Dict, List

import json
import logging

from slice_sandbox.bodies import PhysicsObject
from slice_sandbox.physics import PhysicsEngine
from slice_sandbox.utils.config import Config

logger = logging.getLogger(__name__)

SCENES_DIR = Path(__file__).resolve().parent


def load_scene_payload(name: str) -> Dict[str, Any]:
    """Reads the viewport and body list of a preset shipped with the package.

    Args:
        name (str): Preset name, e.g. ``"default"`` for ``scenes/default.json``.

    Returns:
        Dict[str, Any]: The preset with its ``viewport`` and ``bodies`` entries.

    Raises:
        FileNotFoundError: If no preset of that name ships with the package.
    """
    preset = SCENES_DIR / f"{name}.json"
    if not preset.is_file():
        raise FileNotFoundError(f"No scene preset named '{name}' in {SCENES_DIR}")
    return json.loads(preset.read_text(encoding="utf-8"))


def populate(engine: PhysicsEngine, name: str = "default") -> List[PhysicsObject]:
    """Builds the walls and bodies of a scene preset inside ``engine``.

    Args:
        engine (PhysicsEngine): Engine receiving the scene.
        name (str): Preset name.

    Returns:
        List[PhysicsObject]: Spawned objects that passed the minimum area check.

    Raises:
        ValueError: If a body entry has no ``kind``.
    """
    payload = load_scene_payload(name)
    viewport = payload.get("viewport", [Config.VIEWPORT_WIDTH, Config.VIEWPORT_HEIGHT])
    engine.create_boundaries(viewport[0], viewport[1])

    spawned = []
    for entry in payload.get("bodies", []):
        if "kind" not in entry:
            raise ValueError(f"Scene '{name}' has a body without a kind: {entry}")
        kwargs = {k: v for k, v in entry.items() if k != "kind"}
        obj = engine.spawn(entry["kind"], **kwargs)
        if obj.alive:
            spawned.append(obj)
    logger.info("Scene '%s' populated with %d bodies.", name, len(spawned))
    return spawned


__all__ = ["load_scene_payload", "populate"]
