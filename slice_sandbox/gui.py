"""
SandboxGUI Module

Opens a pygame window onto a :class:`PhysicsEngine`, draws every live object
and the drag in progress, and feeds input events to the controller state
machine.
"""

import logging

import pygame

from slice_sandbox.controller import Action, ControllerState, Tool, handle_event
from slice_sandbox.physics import PhysicsEngine
from slice_sandbox.slicer import Slicer
from slice_sandbox.utils.config import Config

logger = logging.getLogger(__name__)

# Colour constants
WHITE = (255, 255, 255)
LIGHT_BLUE = (128, 200, 255)
DARK_GREY = (50, 50, 50)
BLACK = (0, 0, 0)
ORANGE = (255, 165, 0)
RED = (220, 60, 60)

KIND_COLOURS = {
    "rectangle": LIGHT_BLUE,
    "circle": ORANGE,
}


class SandboxGUI:
    """Manages the pygame window for the slicing sandbox.

    Attributes:
        engine (PhysicsEngine): Simulation being displayed.
        slicer (Slicer): Slicer driven by the slice tool.
        state (ControllerState): Current pointer interaction.
        screen (pygame.Surface): The main display surface.
        clock (pygame.time.Clock): Clock used for regulating frame rate.
        font (pygame.font.Font): Font used for the status line.
        running (bool): Cleared when the window is closed.
    """

    def __init__(self, engine: PhysicsEngine, slicer: Slicer):
        self.engine = engine
        self.slicer = slicer
        self.state = ControllerState()
        self.running = True

        pygame.init()
        pygame.display.set_caption("Slice Sandbox")
        width, height = engine.viewport or (Config.VIEWPORT_WIDTH, Config.VIEWPORT_HEIGHT)
        self.screen = pygame.display.set_mode((int(width), int(height)))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 24)

    def process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            else:
                self.state = handle_event(self.state, event, self.engine, self.slicer)

    def render(self) -> None:
        """Draws the objects, the active drag and a status line, then flips the display."""
        self.screen.fill(BLACK)

        for polygon in self.engine.get_world_polygons():
            colour = KIND_COLOURS.get(polygon.kind, WHITE)
            pygame.draw.polygon(self.screen, colour, polygon.vertices)
            pygame.draw.polygon(self.screen, DARK_GREY, polygon.vertices, 1)

        self._draw_drag()

        fps = self.clock.get_fps()
        status = f"Tool={self.state.tool.value}, Objects={len(self.engine.objects)}, FPS={fps:.1f}"
        self.screen.blit(self.font.render(status, True, WHITE), (10, 10))
        pygame.display.flip()

    def _draw_drag(self) -> None:
        start, pointer = self.state.action_start, self.state.pointer
        if start is None:
            return
        if self.state.action is Action.DELETING:
            rect = pygame.Rect(min(start.x, pointer.x), min(start.y, pointer.y),
                               abs(pointer.x - start.x), abs(pointer.y - start.y))
            pygame.draw.rect(self.screen, RED, rect, 1)
        elif self.state.tool is Tool.SLICE:
            pygame.draw.line(self.screen, WHITE, start, pointer, int(Config.SLICE_WIDTH))
        elif self.state.tool is Tool.DRAW_RECTANGLE:
            rect = pygame.Rect(min(start.x, pointer.x), min(start.y, pointer.y),
                               abs(pointer.x - start.x), abs(pointer.y - start.y))
            pygame.draw.rect(self.screen, LIGHT_BLUE, rect, 1)
        elif self.state.tool is Tool.DRAW_CIRCLE:
            difference = pointer - start
            radius = max(abs(difference.x), abs(difference.y)) / 2
            pygame.draw.circle(self.screen, ORANGE, start + difference / 2, int(radius), 1)

    def run(self, fps: int = Config.FPS) -> None:
        """Steps, draws and handles input until the window is closed."""
        try:
            while self.running:
                self.process_events()
                self.engine.step(Config.TIME_STEP)
                self.render()
                self.clock.tick(fps)
        finally:
            pygame.quit()
            logger.info("Sandbox window closed.")
