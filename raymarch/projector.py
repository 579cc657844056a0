"""
Projection of ray results into screen-space draw primitives: the
first-person wall columns and the top-down minimap overlay.
"""

from __future__ import annotations
from typing import Iterable, List, NamedTuple, Sequence, Tuple

from .avatar import Avatar
from .config import (
    BACKGROUND_COLOR,
    CELL_COLOR,
    HEADING_COLOR,
    HEADING_LINE_LENGTH,
    HEADING_LINE_WIDTH,
    MIN_DISTANCE,
    MINIMAP_BACKGROUND_COLOR,
    PLAYER_COLOR,
    RAY_COLOR,
    RAY_LINE_MAX_WIDTH,
    RAY_LINE_WIDTH,
    Settings,
)
from .draw import Color, Frame, Line, Rect
from .grid import Grid
from .raycaster import RayResult


class MinimapLayers(NamedTuple):
    """Minimap primitives grouped by paint order."""

    cells: List[Rect]
    rays: List[Line]
    marker: List[Rect]
    heading: List[Line]


class Projector:
    """Pure mapping from (rays, avatar, grid) to draw primitives."""

    def __init__(self, settings: Settings, cell_size: Tuple[float, float]) -> None:
        self.settings = settings
        self.w = float(settings.screen_width)
        self.h = float(settings.screen_height)
        self.cell_size = cell_size
        self.map_scale = settings.minimap_size / self.w
        self.minimap_origin = settings.minimap_origin

    # -- first-person view ----------------------------------------------

    def shading(self, distance: float) -> float:
        """Distance fog: 1 at the eye, 0 at screen_width away."""
        return min(1.0, max(0.0, 1.0 - distance / self.w))

    def wall_column(self, result: RayResult, ray_count: int) -> Rect:
        distance = max(result.distance, MIN_DISTANCE)
        wall_height = (self.h / distance) * self.settings.height_scale
        wall_width = self.w / ray_count
        shade = self.shading(result.distance)
        return Rect(
            result.index * wall_width,
            (self.h - wall_height) / 2.0,
            wall_width,
            wall_height,
            (shade, shade, shade, 1.0),
        )

    # -- minimap ---------------------------------------------------------

    def project_point(self, x: float, y: float) -> Tuple[float, float]:
        ox, oy = self.minimap_origin
        return (ox + x * self.map_scale, oy + y * self.map_scale)

    def minimap_bounds(self) -> Rect:
        ox, oy = self.minimap_origin
        return Rect(
            ox,
            oy,
            self.w * self.map_scale,
            self.h * self.map_scale,
            MINIMAP_BACKGROUND_COLOR,
        )

    def grid_cells(self, grid: Grid) -> List[Rect]:
        cw = self.cell_size[0] * self.map_scale
        ch = self.cell_size[1] * self.map_scale
        rects = []
        for col, row in grid.blocked_cells():
            mx, my = self.project_point(
                col * self.cell_size[0], row * self.cell_size[1]
            )
            rects.append(Rect(mx, my, cw, ch, CELL_COLOR))
        return rects

    def ray_line(self, origin: Tuple[float, float], result: RayResult) -> Line:
        x1, y1 = self.project_point(*origin)
        x2, y2 = self.project_point(*result.hit_point)
        return Line(x1, y1, x2, y2, self.ray_width(result.distance), RAY_COLOR)

    def ray_width(self, distance: float) -> float:
        """Thicker overlay lines for nearer hits."""
        width = (self.w / 2.0) / max(distance, MIN_DISTANCE) * self.map_scale
        return min(RAY_LINE_MAX_WIDTH, max(RAY_LINE_WIDTH, width))

    def avatar_marker(self, avatar: Avatar) -> List[Rect]:
        """Marker rect for the avatar, or nothing when it is outside the world."""
        if not avatar.in_bounds(self.w, self.h):
            return []
        mx, my = self.project_point(avatar.x, avatar.y)
        size = Avatar.SIZE * self.map_scale
        return [Rect(mx, my, size, size, PLAYER_COLOR)]

    def heading_line(self, avatar: Avatar) -> List[Line]:
        """Pointer from the marker centre along the heading; empty off-world."""
        if not avatar.in_bounds(self.w, self.h):
            return []
        cx = avatar.x + Avatar.SIZE / 2.0
        cy = avatar.y + Avatar.SIZE / 2.0
        dir_x, dir_y = avatar.direction()
        x1, y1 = self.project_point(cx, cy)
        x2, y2 = self.project_point(
            cx + dir_x * HEADING_LINE_LENGTH, cy + dir_y * HEADING_LINE_LENGTH
        )
        return [Line(x1, y1, x2, y2, HEADING_LINE_WIDTH, HEADING_COLOR)]

    def minimap(
        self, grid: Grid, avatar: Avatar, results: Iterable[RayResult]
    ) -> MinimapLayers:
        """
        Minimap layers: background and cells, ray overlay lines, then the
        avatar marker and its heading pointer on top of the rays.
        """
        rects = [self.minimap_bounds()]
        rects.extend(self.grid_cells(grid))
        lines = [self.ray_line(avatar.position, r) for r in results]
        return MinimapLayers(
            rects, lines, self.avatar_marker(avatar), self.heading_line(avatar)
        )

    # -- full frame ------------------------------------------------------

    def project(
        self,
        grid: Grid,
        avatar: Avatar,
        results: Iterable[RayResult],
        clear_color: Color = BACKGROUND_COLOR,
    ) -> Frame:
        """
        Build the frame for one tick. results is consumed exactly once and
        feeds both the wall columns and the minimap ray overlay.
        """
        rays: Sequence[RayResult] = list(results)
        ray_count = len(rays)
        frame = Frame(clear_color)
        frame.rects.extend(self.wall_column(r, ray_count) for r in rays)
        layers = self.minimap(grid, avatar, rays)
        frame.rects.extend(layers.cells)
        frame.lines.extend(layers.rays)
        frame.overlay_start = len(frame.rects)
        frame.rects.extend(layers.marker)
        frame.overlay_lines.extend(layers.heading)
        return frame
