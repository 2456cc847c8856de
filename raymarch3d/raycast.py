"""Ray marching and column projection helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .constants import (
    COLOR_CEILING,
    COLOR_FLOOR,
    COLOR_WALL,
    HEIGHT_SCALE,
    MAX_RENDER_DIST,
    RAY_STEP,
    WALL_SCALE,
    BandMode,
    RayReason,
)
from .models import Grid, Tile


@dataclass(frozen=True)
class RayResult:
    reason: RayReason
    distance: float
    tile: Optional[Tile] = None
    cell: Optional[tuple[int, int]] = None

    @property
    def hit(self) -> bool:
        return self.reason == "hit"


@dataclass(frozen=True)
class ColumnSpan:
    """Vertical layout of one hit column, in (fractional) screen rows."""

    top: float
    bottom: float
    floor_y: float
    ceiling_y: float
    wall_px: float  # perspective height; rows are placed by floor_y/ceiling_y

    def color_at(
        self,
        y: int,
        wall: int = COLOR_WALL,
        floor: int = COLOR_FLOOR,
        ceiling: int = COLOR_CEILING,
    ) -> int:
        if self.top <= y <= self.bottom:
            return wall
        if y > self.bottom:
            return floor
        return ceiling


def column_angle(ang: float, i: int, width: int, fov: float) -> float:
    return ang - fov / 2.0 + (i / width) * fov


def march_ray(
    grid: Grid,
    px: float,
    py: float,
    ang: float,
    step: float = RAY_STEP,
    max_dist: float = MAX_RENDER_DIST,
) -> RayResult:
    """Step from ``(px, py)`` along ``ang`` until a solid tile, the grid edge or ``max_dist``.

    The ray advances before sampling, so the origin cell itself never blocks.
    """
    dx = step * math.cos(ang)
    dy = step * math.sin(ang)
    w = grid.width
    h = grid.height
    columns = grid.columns

    rx = px
    ry = py
    dist = 0.0
    while dist < max_dist:
        rx += dx
        ry += dy
        dist += step

        map_x = math.floor(rx)
        map_y = math.floor(ry)
        if map_x < 0 or map_x >= w or map_y < 0 or map_y >= h:
            return RayResult("out_of_bounds", dist)

        tile = columns[map_x][map_y]
        if tile.wall_height > 0:
            return RayResult("hit", dist, tile, (map_x, map_y))

    return RayResult("max_range", dist)


def project_column(
    screen_h: int,
    tile: Tile,
    dist: float,
    cam_z: float,
    height_scale: float = HEIGHT_SCALE,
    wall_scale: float = WALL_SCALE,
    band_mode: BandMode = "heights",
) -> ColumnSpan:
    """Place the wall band of a hit column.

    In ``"heights"`` mode the band runs from the ceiling line to the floor
    line and ``wall_px`` only rides along. ``"perspective"`` widens both lines
    by half of ``wall_px`` so nearer walls draw taller.
    """
    wall_px = min(screen_h, (screen_h / dist) * tile.wall_height * wall_scale)
    mid = screen_h / 2.0
    floor_y = mid + (cam_z - tile.floor_height) * height_scale
    ceiling_y = mid - (tile.ceiling_height - cam_z) * height_scale
    if band_mode == "perspective":
        floor_y += wall_px / 2.0
        ceiling_y -= wall_px / 2.0
    return ColumnSpan(
        top=max(0.0, ceiling_y),
        bottom=min(screen_h, floor_y),
        floor_y=floor_y,
        ceiling_y=ceiling_y,
        wall_px=wall_px,
    )
