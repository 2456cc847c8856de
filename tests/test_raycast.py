import math

import pytest

from raymarch3d.constants import COLOR_CEILING, COLOR_FLOOR, COLOR_WALL, FOV
from raymarch3d.models import Grid, Tile
from raymarch3d.raycast import column_angle, march_ray, project_column

OPEN = Tile()
WALL = Tile(wall_height=1.0)


def fixture_grid() -> Grid:
    # 3x3, only (2, 1) is solid.
    cols = [[OPEN] * 3 for _ in range(3)]
    cols[2][1] = WALL
    return Grid(cols)


def open_grid(w: int, h: int) -> Grid:
    return Grid([[OPEN] * h for _ in range(w)])


def test_march_ray_hits_wall_east_of_center() -> None:
    ray = march_ray(fixture_grid(), 1.5, 1.5, 0.0)
    assert ray.hit
    assert ray.cell == (2, 1)
    assert ray.tile == WALL
    assert ray.distance == pytest.approx(0.5, abs=0.051)


def test_march_ray_leaving_the_grid_is_out_of_bounds() -> None:
    ray = march_ray(fixture_grid(), 1.5, 1.5, math.pi)
    assert not ray.hit
    assert ray.reason == "out_of_bounds"
    assert ray.tile is None
    assert ray.distance == pytest.approx(1.5, abs=0.051)


def test_march_ray_stops_at_max_range() -> None:
    ray = march_ray(open_grid(50, 50), 25.5, 25.5, 0.3)
    assert ray.reason == "max_range"
    assert ray.distance == pytest.approx(20.0, abs=0.051)


def test_march_ray_honours_custom_step_and_range() -> None:
    ray = march_ray(open_grid(50, 50), 25.5, 25.5, 0.0, step=0.5, max_dist=3.0)
    assert ray.reason == "max_range"
    assert ray.distance == pytest.approx(3.0)


def test_march_ray_samples_after_first_step() -> None:
    # Standing inside a solid cell: the first sample is still in it.
    cols = [[OPEN] * 3 for _ in range(3)]
    cols[1][1] = WALL
    ray = march_ray(Grid(cols), 1.5, 1.5, 0.0)
    assert ray.hit
    assert ray.cell == (1, 1)
    assert ray.distance == pytest.approx(0.05)


def test_march_ray_floors_negative_coordinates() -> None:
    # -0.01 floors to -1, which is outside even though int() would give 0.
    ray = march_ray(open_grid(3, 3), 0.04, 1.5, math.pi)
    assert ray.reason == "out_of_bounds"
    assert ray.distance == pytest.approx(0.05)


def test_column_angle_spans_the_field_of_view() -> None:
    assert column_angle(0.0, 0, 8, FOV) == pytest.approx(-FOV / 2)
    assert column_angle(0.0, 4, 8, FOV) == 0.0
    assert column_angle(1.0, 8, 8, FOV) == pytest.approx(1.0 + FOV / 2)


def test_project_column_default_tile_at_eye_level() -> None:
    span = project_column(20, WALL, 1.0, 0.0)
    assert span.wall_px == 20
    assert span.floor_y == 10
    assert span.ceiling_y == 0
    assert (span.top, span.bottom) == (0, 10)


def test_project_column_follows_vertical_offset() -> None:
    span = project_column(20, WALL, 4.0, 0.5)
    assert span.floor_y == pytest.approx(15.0)
    assert span.ceiling_y == pytest.approx(5.0)
    assert span.wall_px == pytest.approx(10.0)


def test_project_column_clamps_to_screen() -> None:
    tile = Tile(wall_height=1.0, floor_height=-2.0, ceiling_height=3.0)
    span = project_column(20, tile, 2.0, 0.0)
    assert span.ceiling_y == pytest.approx(-20.0)
    assert span.floor_y == pytest.approx(30.0)
    assert (span.top, span.bottom) == (0.0, 20)


def test_project_column_perspective_mode_scales_with_distance() -> None:
    near = project_column(60, WALL, 4.0, 0.0, band_mode="perspective")
    far = project_column(60, WALL, 8.0, 0.0, band_mode="perspective")
    assert near.bottom - near.top > far.bottom - far.top

    ref_near = project_column(60, WALL, 4.0, 0.0)
    ref_far = project_column(60, WALL, 8.0, 0.0)
    assert (ref_near.top, ref_near.bottom) == (ref_far.top, ref_far.bottom)


def test_column_span_color_at_classifies_rows() -> None:
    span = project_column(20, WALL, 1.0, 0.5)  # top 5, bottom 15
    assert span.color_at(4) == COLOR_CEILING
    assert span.color_at(5) == COLOR_WALL
    assert span.color_at(15) == COLOR_WALL
    assert span.color_at(16) == COLOR_FLOOR
    assert span.color_at(16, floor=7) == 7
