from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Tuple

from .config import FACING_DELTA_FACTOR, PLAYER_SIZE

TWO_PI = 2.0 * math.pi


def wrap_heading(heading: float) -> float:
    """Fold a heading that drifted by less than one turn back into [0, 2*pi)."""
    if heading >= TWO_PI:
        heading -= TWO_PI
    if heading < 0.0:
        heading += TWO_PI
    # -tiny + 2*pi can round up to exactly 2*pi
    if heading >= TWO_PI:
        heading = 0.0
    return heading


@dataclass(frozen=True)
class Avatar:
    """Player viewpoint: position in world units and heading in radians."""

    x: float
    y: float
    heading: float = 0.0

    SIZE = PLAYER_SIZE

    def __post_init__(self) -> None:
        # Arbitrary starting headings are reduced fully; per-tick turns only
        # ever need wrap_heading.
        object.__setattr__(self, "heading", wrap_heading(self.heading % TWO_PI))

    @classmethod
    def centered(cls, screen_width: float, screen_height: float) -> Avatar:
        """Avatar placed in the middle of the world, facing +x."""
        return cls(
            x=(screen_width - cls.SIZE) / 2.0,
            y=(screen_height - cls.SIZE) / 2.0,
        )

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def facing_delta(self) -> Tuple[float, float]:
        """Decorative vector derived from the heading."""
        angle = self.heading * FACING_DELTA_FACTOR
        return (math.cos(angle), math.sin(angle))

    def direction(self) -> Tuple[float, float]:
        """Unit vector along the heading."""
        return (math.cos(self.heading), math.sin(self.heading))

    def moved_to(self, x: float, y: float) -> Avatar:
        return replace(self, x=x, y=y)

    def turned_to(self, heading: float) -> Avatar:
        return replace(self, heading=heading)

    def in_bounds(self, width: float, height: float) -> bool:
        return 0.0 <= self.x <= width and 0.0 <= self.y <= height
