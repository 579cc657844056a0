"""
Fixed-step ray marching against a Grid.

Each ray is marched independently: cast_ray reads only the grid and its own
arguments and returns a fresh RayResult, so rays could be farmed out to
workers writing disjoint slots. cast() itself runs them one after another.
"""

from __future__ import annotations
import math
from typing import Iterator, NamedTuple, Optional, Tuple

import numpy as np

from .config import STEP_SIZE
from .errors import InvalidConfiguration
from .grid import Grid


class RayResult(NamedTuple):
    index: int
    angle: float
    hit_point: Tuple[float, float]
    distance: float
    # True when the march stopped on a blocked cell, False on leaving the world
    hit: bool
    # Sample number (0 = origin) of the hit point along the ray
    steps: int


class RayCaster:
    """Marches rays from a point across a world rectangle overlaid by a Grid."""

    def __init__(
        self,
        grid: Grid,
        world_size: Tuple[float, float],
        cell_size: Optional[Tuple[float, float]] = None,
        step_size: float = STEP_SIZE,
    ) -> None:
        """
        grid: occupancy map to test samples against.
        world_size: (width, height) of the world rectangle; samples outside
        [0, width] x [0, height] end the march.
        cell_size: world units per grid cell along x and y. Defaults to
        stretching the grid over the whole world.
        step_size: march increment in world units.
        """
        width, height = world_size
        if width <= 0 or height <= 0:
            raise InvalidConfiguration(
                f"world size must be positive, got {width}x{height}"
            )
        if not step_size > 0:
            raise InvalidConfiguration(
                f"step_size must be positive, got {step_size}"
            )
        if cell_size is None:
            cell_size = (width / grid.width, height / grid.height)
        if cell_size[0] <= 0 or cell_size[1] <= 0:
            raise InvalidConfiguration(
                f"cell size must be positive, got {cell_size}"
            )
        self.grid = grid
        self.width = float(width)
        self.height = float(height)
        self.cell_size = (float(cell_size[0]), float(cell_size[1]))
        self.step_size = float(step_size)
        # Upper bound on samples for any ray that starts inside the world
        self.max_steps = int(math.ceil(math.hypot(width, height) / step_size)) + 1

    def in_world(self, x: float, y: float) -> bool:
        return 0.0 <= x <= self.width and 0.0 <= y <= self.height

    @staticmethod
    def ray_angles(heading: float, fov: float, ray_count: int) -> np.ndarray:
        """Angles of a fan of ray_count rays centred on heading."""
        return heading - fov / 2.0 + np.arange(ray_count) * (fov / ray_count)

    def cast_ray(
        self, origin: Tuple[float, float], angle: float, index: int = 0
    ) -> RayResult:
        """March a single ray from origin until it hits a wall or leaves the world."""
        ox, oy = origin
        if not self.in_world(ox, oy):
            return RayResult(index, angle, (ox, oy), 0.0, False, 0)
        dx = math.cos(angle) * self.step_size
        dy = math.sin(angle) * self.step_size
        hit_x, hit_y = ox, oy
        hit = False
        k = 0
        while k <= self.max_steps:
            x = ox + dx * k
            y = oy + dy * k
            # World bounds first so the cell index below is always computed
            # from an in-world point.
            if not self.in_world(x, y):
                k -= 1
                break
            hit_x, hit_y = x, y
            col, row = Grid.cell_of(x, y, self.cell_size)
            if self.grid.is_blocked(col, row):
                hit = True
                break
            k += 1
        distance = math.hypot(hit_x - ox, hit_y - oy)
        return RayResult(index, angle, (hit_x, hit_y), distance, hit, k)

    def cast(
        self,
        origin: Tuple[float, float],
        heading: float,
        fov: float,
        ray_count: int,
    ) -> Iterator[RayResult]:
        """
        Cast ray_count rays spread over fov around heading.

        Arguments are validated immediately; the rays themselves are marched
        lazily, one per item, and the iterator can only be consumed once.
        """
        if ray_count <= 0:
            raise InvalidConfiguration(
                f"ray_count must be positive, got {ray_count}"
            )
        if not fov > 0:
            raise InvalidConfiguration(f"fov must be positive, got {fov}")
        angles = self.ray_angles(heading, fov, ray_count)
        return self._march_all(origin, angles)

    def _march_all(
        self, origin: Tuple[float, float], angles: np.ndarray
    ) -> Iterator[RayResult]:
        for i, angle in enumerate(angles.tolist()):
            yield self.cast_ray(origin, angle, i)


def cast(
    grid: Grid,
    origin: Tuple[float, float],
    heading: float,
    fov: float,
    ray_count: int,
    world_size: Tuple[float, float],
    cell_size: Optional[Tuple[float, float]] = None,
    step_size: float = STEP_SIZE,
) -> Iterator[RayResult]:
    """Convenience wrapper: build a RayCaster and cast one fan of rays."""
    return RayCaster(grid, world_size, cell_size, step_size).cast(
        origin, heading, fov, ray_count
    )
