#!/usr/bin/env python3
"""
main.py

Entry point for the slicing sandbox. Loads a scene preset into a fresh
physics engine and opens the interactive pygame window.
"""
import argparse
import logging
import sys

from slice_sandbox.gui import SandboxGUI
from slice_sandbox.physics import PhysicsEngine
from slice_sandbox.scenes import populate
from slice_sandbox.slicer import Slicer
from slice_sandbox.utils.config import Config

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="2D physics sandbox for slicing polygon bodies")
    parser.add_argument("--scene", type=str, default="default",
                        help="Scene preset to load (a JSON file in slice_sandbox/scenes)")
    parser.add_argument("--fps", type=int, default=Config.FPS,
                        help="Frame rate limit of the window")
    parser.add_argument("--blade_width", type=float, default=Config.SLICE_WIDTH,
                        help="Width of the strip removed by the slice tool")
    return parser.parse_args(argv)


def main(argv=None):
    """Builds the engine from the chosen scene and runs the window until it is closed."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s: %(message)s", stream=sys.stdout)
    args = parse_args(argv)

    engine = PhysicsEngine()
    try:
        populate(engine, args.scene)
    except FileNotFoundError as e:
        logger.error(e)
        sys.exit(1)
    slicer = Slicer(engine, blade_width=args.blade_width)

    SandboxGUI(engine, slicer).run(fps=args.fps)


if __name__ == "__main__":
    main()
