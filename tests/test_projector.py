from dataclasses import replace

import pytest

from raymarch.avatar import Avatar
from raymarch.config import (
    CELL_COLOR,
    HEADING_COLOR,
    HEADING_LINE_LENGTH,
    MIN_DISTANCE,
    PLAYER_COLOR,
    RAY_COLOR,
    RAY_LINE_MAX_WIDTH,
    RAY_LINE_WIDTH,
    Settings,
)
from raymarch.engine import EngineState, render
from raymarch.grid import Grid
from raymarch.projector import Projector
from raymarch.raycaster import RayResult


@pytest.fixture
def settings():
    return Settings(screen_width=1000, screen_height=500, ray_count=4, minimap_size=200.0)


@pytest.fixture
def projector(settings):
    return Projector(settings, cell_size=(100.0, 50.0))


def ray(index, distance, hit_point=(0.0, 0.0)):
    return RayResult(index, 0.0, hit_point, distance, True, int(distance))


def test_wall_column_geometry(projector):
    rect = projector.wall_column(ray(2, 100.0), ray_count=4)
    # wall height = 500 / 100 * 1.0
    assert rect.height == pytest.approx(5.0)
    assert rect.width == pytest.approx(250.0)
    assert rect.x == pytest.approx(500.0)
    assert rect.y == pytest.approx((500 - 5.0) / 2)


def test_wall_column_height_scale():
    settings = Settings(screen_width=1000, screen_height=500, height_scale=2.5)
    rect = Projector(settings, (100.0, 50.0)).wall_column(ray(0, 100.0), 1)
    assert rect.height == pytest.approx(12.5)


def test_wall_column_shading_is_uniform_gray(projector):
    rect = projector.wall_column(ray(0, 250.0), ray_count=4)
    r, g, b, a = rect.color
    assert r == g == b == pytest.approx(0.75)
    assert a == 1.0


def test_zero_distance_does_not_divide_by_zero(projector):
    rect = projector.wall_column(ray(0, 0.0), ray_count=4)
    assert rect.height == pytest.approx(500 / MIN_DISTANCE)
    assert rect.color[0] == 1.0


@pytest.mark.parametrize(
    "distance,expected",
    [(0.0, 1.0), (500.0, 0.5), (1000.0, 0.0), (5000.0, 0.0), (-10.0, 1.0)],
)
def test_shading_clamped(projector, distance, expected):
    assert projector.shading(distance) == pytest.approx(expected)


def test_shading_monotonic(projector):
    distances = [0.0, 1.0, 10.0, 99.5, 400.0, 999.0, 1000.0]
    shades = [projector.shading(d) for d in distances]
    assert all(a >= b for a, b in zip(shades, shades[1:]))


def test_map_scale_and_point_projection(projector):
    assert projector.map_scale == pytest.approx(0.2)
    ox, oy = projector.minimap_origin
    assert projector.project_point(0.0, 0.0) == (ox, oy)
    assert projector.project_point(1000.0, 500.0) == pytest.approx((ox + 200.0, oy + 100.0))


@pytest.mark.parametrize(
    "x,y",
    [(0.0, 0.0), (1000.0, 500.0), (0.0, 500.0), (1000.0, 0.0), (437.5, 212.25)],
)
def test_in_world_avatar_projects_inside_minimap(projector, x, y):
    bounds = projector.minimap_bounds()
    mx, my = projector.project_point(x, y)
    assert bounds.x <= mx <= bounds.x + bounds.width
    assert bounds.y <= my <= bounds.y + bounds.height


def test_avatar_marker_only_inside_world(projector):
    inside = projector.avatar_marker(Avatar(500.0, 250.0))
    assert len(inside) == 1
    marker = inside[0]
    assert marker.color == PLAYER_COLOR
    assert marker.width == pytest.approx(Avatar.SIZE * 0.2)
    assert projector.avatar_marker(Avatar(-1.0, 250.0)) == []
    assert projector.avatar_marker(Avatar(500.0, 501.0)) == []


def test_grid_cells_scaled(projector):
    grid = Grid.from_rows([[0, 1], [1, 0]])
    cells = projector.grid_cells(grid)
    ox, oy = projector.minimap_origin
    assert [c.x for c in cells] == pytest.approx([ox + 20.0, ox])
    assert [c.y for c in cells] == pytest.approx([oy, oy + 10.0])
    assert all(c.width == pytest.approx(20.0) and c.height == pytest.approx(10.0) for c in cells)
    assert all(c.color == CELL_COLOR for c in cells)


def test_ray_line_scaled(projector):
    line = projector.ray_line((100.0, 50.0), ray(0, 10.0, hit_point=(600.0, 50.0)))
    ox, oy = projector.minimap_origin
    assert (line.x1, line.y1) == pytest.approx((ox + 20.0, oy + 10.0))
    assert (line.x2, line.y2) == pytest.approx((ox + 120.0, oy + 10.0))
    assert line.color == RAY_COLOR


def test_project_consumes_rays_once_and_orders_layers(projector):
    grid = Grid.from_rows([[1, 0], [0, 0]])
    avatar = Avatar(500.0, 250.0)
    rays = iter([ray(i, 100.0 * (i + 1), hit_point=(600.0, 250.0)) for i in range(4)])
    frame = projector.project(grid, avatar, rays)
    # 4 walls + minimap background + 1 cell, then the avatar marker
    assert len(frame.underlay()) == 6
    assert len(frame.lines) == 4
    assert frame.overlay() == projector.avatar_marker(avatar)
    walls = frame.rects[:4]
    assert [w.x for w in walls] == pytest.approx([0.0, 250.0, 500.0, 750.0])
    assert frame.rects[4] == projector.minimap_bounds()


def test_project_without_visible_avatar(projector):
    grid = Grid.from_rows([[0]])
    frame = projector.project(grid, Avatar(-50.0, -50.0), [ray(0, 0.0)])
    assert frame.overlay() == []
    assert len(frame.lines) == 1


def test_heading_line_points_along_heading(projector):
    avatar = Avatar(500.0, 250.0, heading=0.0)
    (line,) = projector.heading_line(avatar)
    ox, oy = projector.minimap_origin
    centre = (ox + 512.5 * 0.2, oy + 262.5 * 0.2)
    assert (line.x1, line.y1) == pytest.approx(centre)
    assert line.x2 - line.x1 == pytest.approx(HEADING_LINE_LENGTH * 0.2)
    assert line.y2 == pytest.approx(line.y1)
    assert line.color == HEADING_COLOR


def test_heading_line_hidden_off_world(projector):
    assert projector.heading_line(Avatar(-1.0, 250.0)) == []


def test_different_headings_give_different_overlays():
    state = EngineState.initial()
    turned = replace(state, avatar=replace(state.avatar, heading=2.0))
    facing_east = render(state)
    facing_away = render(turned)
    # Marker square is the same; the pointer is not
    assert facing_east.overlay() == facing_away.overlay()
    assert facing_east.overlay_lines != facing_away.overlay_lines
    assert len(facing_east.overlay_lines) == 1


@pytest.mark.parametrize(
    "distance,expected",
    [
        (50.0, 2.0),  # 500 / 50 * 0.2
        (1000.0, RAY_LINE_WIDTH),  # thin far rays clamp up
        (1.0, RAY_LINE_MAX_WIDTH),  # very near rays clamp down
        (0.0, RAY_LINE_MAX_WIDTH),
    ],
)
def test_ray_width_shrinks_with_distance(projector, distance, expected):
    assert projector.ray_width(distance) == pytest.approx(expected)


def test_ray_line_uses_distance_width(projector):
    near = projector.ray_line((0.0, 0.0), ray(0, 40.0))
    far = projector.ray_line((0.0, 0.0), ray(0, 400.0))
    assert near.width > far.width
