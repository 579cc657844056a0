from __future__ import annotations
import logging
import pygame
from typing import Optional

from .canvas import GlCanvas, SurfaceCanvas
from .config import WINDOW_TITLE, Settings
from .draw import Canvas, Frame, draw_frame
from .engine import EngineState, tick
from .gl_utils import describe_context, setup_opengl
from .grid import Grid
from .input_handler import InputHandler

logger = logging.getLogger(__name__)

RENDERERS = ("surface", "gl")


class App:
    """Pygame host: owns the window, clock and input, drives engine ticks."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        renderer: str = "surface",
        grid: Optional[Grid] = None,
        clock: Optional[pygame.time.Clock] = None,
    ) -> None:
        if renderer not in RENDERERS:
            raise ValueError(f"renderer must be one of {RENDERERS}, got {renderer!r}")
        self.settings = settings or Settings()
        self.state = EngineState.initial(self.settings, grid=grid)
        pygame.init()
        size = (self.settings.screen_width, self.settings.screen_height)
        if renderer == "gl":
            self.screen = pygame.display.set_mode(
                size, pygame.OPENGL | pygame.DOUBLEBUF
            )
            setup_opengl(*size)
            logger.info("OpenGL context: %s", describe_context())
            self.canvas: Canvas = GlCanvas()
        else:
            self.screen = pygame.display.set_mode(size)
            self.canvas = SurfaceCanvas(self.screen)
        pygame.display.set_caption(WINDOW_TITLE)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.input = InputHandler()
        self.running = True
        logger.info(
            "started %dx%d, renderer=%s, grid=%r",
            size[0],
            size[1],
            renderer,
            self.state.grid,
        )

    def handle_events(self) -> None:
        self.input.process_events()
        if self.input.should_quit():
            self.running = False

    def step(self, dt: float) -> Frame:
        """Run one engine tick with this frame's key events and draw it."""
        self.state, frame = tick(self.state, dt, self.input.key_events())
        draw_frame(self.canvas, frame)
        return frame

    def run(self) -> None:
        """Main loop: handle events, tick, draw; until quit is requested."""
        try:
            while self.running:
                dt = self.clock.tick(self.settings.fps) / 1000.0
                self.handle_events()
                if not self.running:
                    break
                self.step(dt)
        finally:
            logger.info("shutting down after %d frames", self.state.frame_count)
            pygame.quit()
