"""Pointer input handling for the sandbox tools.

The interaction state lives in an explicit :class:`ControllerState` that is
passed to :func:`handle_event` together with the engine and slicer it acts
on. Left-button drags use the selected tool (slice, draw rectangle, draw
circle); right-button drags delete every object inside the dragged rectangle.
"""

from dataclasses import dataclass, replace
from enum import Enum
import logging
import math
from typing import Optional, Sequence

import pygame
from pymunk import Vec2d

from slice_sandbox.physics import PhysicsEngine
from slice_sandbox.slicer import Slicer
from slice_sandbox.utils.config import Config

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1
RIGHT_BUTTON = 3


class Action(Enum):
    IDLE = "idle"
    USING_TOOL = "using_tool"
    DELETING = "deleting"


class Tool(Enum):
    SLICE = "slice"
    DRAW_RECTANGLE = "draw_rectangle"
    DRAW_CIRCLE = "draw_circle"


TOOL_KEYS = {
    pygame.K_1: Tool.SLICE,
    pygame.K_2: Tool.DRAW_RECTANGLE,
    pygame.K_3: Tool.DRAW_CIRCLE,
}


@dataclass(frozen=True)
class ControllerState:
    """Snapshot of the pointer interaction.

    Attributes:
        action (Action): Action currently in progress.
        tool (Tool): Tool used by left-button drags.
        action_start (Optional[Vec2d]): Pointer position when the action began.
        pointer (Vec2d): Latest pointer position.
    """

    action: Action = Action.IDLE
    tool: Tool = Tool.SLICE
    action_start: Optional[Vec2d] = None
    pointer: Vec2d = Vec2d(0.0, 0.0)

    @property
    def tool_locked(self) -> bool:
        """The selected tool cannot change while an action is in progress."""
        return self.action is not Action.IDLE


def _vec(position: Sequence[float]) -> Vec2d:
    return Vec2d(float(position[0]), float(position[1]))


def select_tool(state: ControllerState, tool: Tool) -> ControllerState:
    """Returns a state using ``tool``; ignored while the tool is locked."""
    if state.tool_locked:
        logger.debug("Tool change to %s ignored during %s.", tool.value, state.action.value)
        return state
    return replace(state, tool=tool)


def begin_tool(state: ControllerState, position: Sequence[float]) -> ControllerState:
    if state.action is not Action.IDLE:
        return state
    position = _vec(position)
    return replace(state, action=Action.USING_TOOL, action_start=position, pointer=position)


def begin_delete(state: ControllerState, position: Sequence[float]) -> ControllerState:
    if state.action is not Action.IDLE:
        return state
    position = _vec(position)
    return replace(state, action=Action.DELETING, action_start=position, pointer=position)


def spawn_rectangle(engine: PhysicsEngine, corner_a: Sequence[float], corner_b: Sequence[float]):
    """Spawns a rectangle spanning two corners if it is large enough and free.

    Returns:
        Optional[PhysicsObject]: The new rectangle, or ``None`` when rejected.
    """
    corner_a = _vec(corner_a)
    difference = _vec(corner_b) - corner_a
    if abs(difference.x * difference.y) <= Config.MINIMUM_AREA:
        return None
    if engine.rect_has_overlap(corner_a, corner_b):
        return None
    half_extents = Vec2d(abs(difference.x), abs(difference.y)) / 2
    return engine.spawn("rectangle", half_extents=half_extents, position=corner_a + difference / 2)


def spawn_circle(engine: PhysicsEngine, corner_a: Sequence[float], corner_b: Sequence[float]):
    """Spawns a circle inscribed in the square dragged between two corners.

    Returns:
        Optional[PhysicsObject]: The new circle, or ``None`` when rejected.
    """
    corner_a = _vec(corner_a)
    difference = _vec(corner_b) - corner_a
    radius = max(abs(difference.x), abs(difference.y)) / 2
    if math.pi * radius * radius <= Config.MINIMUM_AREA:
        return None
    center = corner_a + difference / 2
    if engine.circle_has_overlap(center, radius):
        return None
    return engine.spawn("circle", radius=radius, position=center)


def end_tool(
    state: ControllerState, position: Sequence[float], engine: PhysicsEngine, slicer: Slicer
) -> ControllerState:
    """Completes a tool drag at ``position`` and applies its effect.

    Args:
        state (ControllerState): Current state; must be using a tool.
        position (Sequence[float]): Pointer position on release.
        engine (PhysicsEngine): Engine receiving spawned objects.
        slicer (Slicer): Slicer used by the slice tool.

    Returns:
        ControllerState: The idle state.
    """
    if state.action is not Action.USING_TOOL:
        return state
    position = _vec(position)
    start = state.action_start

    if state.tool is Tool.SLICE:
        if slicer.is_colliding(start, position):
            slicer.slice_all(start, position)
    elif state.tool is Tool.DRAW_RECTANGLE:
        spawn_rectangle(engine, start, position)
    elif state.tool is Tool.DRAW_CIRCLE:
        spawn_circle(engine, start, position)

    return replace(state, action=Action.IDLE, action_start=None, pointer=position)


def end_delete(state: ControllerState, position: Sequence[float], engine: PhysicsEngine) -> ControllerState:
    """Destroys every object overlapping the dragged rectangle."""
    if state.action is not Action.DELETING:
        return state
    position = _vec(position)
    doomed = engine.objects_in_rect(state.action_start, position)
    for obj in doomed:
        obj.destroy()
    logger.debug("Deleted %d object(s).", len(doomed))
    return replace(state, action=Action.IDLE, action_start=None, pointer=position)


def handle_event(
    state: ControllerState, event: pygame.event.Event, engine: PhysicsEngine, slicer: Slicer
) -> ControllerState:
    """Feeds one pygame input event through the state machine.

    Number keys 1 to 3 select the slice, rectangle and circle tools.

    Args:
        state (ControllerState): Current interaction state.
        event (pygame.event.Event): Mouse or keyboard event.
        engine (PhysicsEngine): Engine the tools act on.
        slicer (Slicer): Slicer used by the slice tool.

    Returns:
        ControllerState: The next state. Unhandled events return ``state`` unchanged.
    """
    if event.type == pygame.KEYDOWN and event.key in TOOL_KEYS:
        return select_tool(state, TOOL_KEYS[event.key])

    if event.type == pygame.MOUSEMOTION:
        return replace(state, pointer=_vec(event.pos))

    if event.type == pygame.MOUSEBUTTONDOWN:
        if event.button == LEFT_BUTTON:
            return begin_tool(state, event.pos)
        if event.button == RIGHT_BUTTON:
            return begin_delete(state, event.pos)
    elif event.type == pygame.MOUSEBUTTONUP:
        if event.button == LEFT_BUTTON:
            return end_tool(state, event.pos, engine, slicer)
        if event.button == RIGHT_BUTTON:
            return end_delete(state, event.pos, engine)

    return state


__all__ = [
    "Action",
    "Tool",
    "TOOL_KEYS",
    "ControllerState",
    "select_tool",
    "begin_tool",
    "begin_delete",
    "end_tool",
    "end_delete",
    "spawn_rectangle",
    "spawn_circle",
    "handle_event",
]
