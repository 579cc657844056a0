"""
Host canvases that paint core Frames: a plain pygame Surface canvas and an
OpenGL canvas for windows opened with pygame.OPENGL.
"""

from __future__ import annotations
import pygame
import OpenGL.GL as gl  # noqa: N811
from typing import Tuple

from .draw import Color, Line, Rect


def to_rgba255(color: Color) -> Tuple[int, int, int, int]:
    """Convert an RGBA float color in [0, 1] to 0-255 ints."""
    return tuple(  # type: ignore[return-value]
        max(0, min(255, int(round(c * 255)))) for c in color
    )


class SurfaceCanvas:
    """Draws onto a pygame Surface with pygame.draw."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def clear(self, color: Color) -> None:
        self.surface.fill(to_rgba255(color))

    def fill_rect(self, rect: Rect) -> None:
        rgba = to_rgba255(rect.color)
        area = pygame.Rect(
            int(rect.x), int(rect.y), int(round(rect.width)), int(round(rect.height))
        )
        if rgba[3] == 255:
            pygame.draw.rect(self.surface, rgba, area)
            return
        # pygame.draw ignores alpha; blend through a per-pixel alpha surface
        clipped = area.clip(self.surface.get_rect())
        if clipped.width == 0 or clipped.height == 0:
            return
        overlay = pygame.Surface(clipped.size, pygame.SRCALPHA)
        overlay.fill(rgba)
        self.surface.blit(overlay, clipped.topleft)

    def draw_line(self, line: Line) -> None:
        pygame.draw.line(
            self.surface,
            to_rgba255(line.color),
            (line.x1, line.y1),
            (line.x2, line.y2),
            max(1, int(round(line.width))),
        )

    def present(self) -> None:
        pygame.display.flip()


class GlCanvas:
    """Immediate-mode OpenGL canvas; expects setup_opengl() to have run."""

    def clear(self, color: Color) -> None:
        gl.glClearColor(*color)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)

    def fill_rect(self, rect: Rect) -> None:
        gl.glColor4f(*rect.color)
        gl.glRectf(rect.x, rect.y, rect.x + rect.width, rect.y + rect.height)

    def draw_line(self, line: Line) -> None:
        gl.glColor4f(*line.color)
        gl.glLineWidth(line.width)
        gl.glBegin(gl.GL_LINES)
        gl.glVertex2f(line.x1, line.y1)
        gl.glVertex2f(line.x2, line.y2)
        gl.glEnd()

    def present(self) -> None:
        pygame.display.flip()
