"""
Draw primitives handed from the core to a host canvas.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, NamedTuple, Protocol, Tuple

Color = Tuple[float, float, float, float]


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float
    color: Color


class Line(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    color: Color


@dataclass
class Frame:
    """Everything to draw for one tick, in paint order."""

    clear_color: Color
    rects: List[Rect] = field(default_factory=list)
    lines: List[Line] = field(default_factory=list)
    # Rects at or past this index are painted after the lines
    overlay_start: int = -1
    # Lines painted last, over the overlay rects
    overlay_lines: List[Line] = field(default_factory=list)

    def underlay(self) -> List[Rect]:
        if self.overlay_start < 0:
            return self.rects
        return self.rects[: self.overlay_start]

    def overlay(self) -> List[Rect]:
        if self.overlay_start < 0:
            return []
        return self.rects[self.overlay_start :]


class Canvas(Protocol):
    """Narrow drawing surface a host provides."""

    def clear(self, color: Color) -> None: ...

    def fill_rect(self, rect: Rect) -> None: ...

    def draw_line(self, line: Line) -> None: ...

    def present(self) -> None: ...


def draw_frame(canvas: Canvas, frame: Frame) -> None:
    """
    Paint a frame: clear, rects under the lines, lines, rects over them,
    then the overlay lines.
    """
    canvas.clear(frame.clear_color)
    for rect in frame.underlay():
        canvas.fill_rect(rect)
    for line in frame.lines:
        canvas.draw_line(line)
    for rect in frame.overlay():
        canvas.fill_rect(rect)
    for line in frame.overlay_lines:
        canvas.draw_line(line)
    canvas.present()
