# -*- coding: utf-8 -*-
"""Core data models (tiles, grid, pose, render configuration)."""
from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Literal, Optional

from .constants import (
    COLOR_BACKGROUND,
    COLOR_CEILING,
    COLOR_FLOOR,
    COLOR_WALL,
    FOV,
    HEIGHT_SCALE,
    MAX_RENDER_DIST,
    RAY_STEP,
    WALL_SCALE,
    BandMode,
    ViewerMode,
)
from .errors import InvalidGrid


@dataclass(frozen=True)
class Stair:
    """Optional stair elevation delta carried by a tile.

    ``present`` tells an absent stair apart from a stair of delta ``0.0``.
    The renderer does not read it.
    """

    present: bool = False
    delta: float = 0.0

    @classmethod
    def of(cls, delta: float) -> Stair:
        return cls(present=True, delta=float(delta))


NO_STAIR = Stair()


@dataclass(frozen=True)
class Tile:
    wall_height: float = 0.0  # 0 means passable
    floor_height: float = 0.0
    ceiling_height: float = 1.0
    stair: Stair = NO_STAIR

    @property
    def is_solid(self) -> bool:
        return self.wall_height > 0


class Grid:
    """Rectangular, read-only table of tiles indexed ``tiles[x][y]``.

    ``width`` is the outer dimension and ``height`` the inner one. The table
    is copied into tuples on construction, so later changes to the caller's
    lists never leak into a grid that is already in use.
    """

    __slots__ = ("_tiles", "width", "height")

    def __init__(self, tiles: Sequence[Sequence[Tile]]) -> None:
        if isinstance(tiles, (str, bytes)):
            raise InvalidGrid("grid must be a 2D sequence of tiles, not a string")
        try:
            columns = tuple(tuple(col) for col in tiles)
        except TypeError as exc:
            raise InvalidGrid(f"grid must be a 2D sequence of tiles: {exc}") from exc

        if not columns:
            raise InvalidGrid("grid has no columns")
        height = len(columns[0])
        if height == 0:
            raise InvalidGrid("grid column 0 is empty")

        for x, col in enumerate(columns):
            if len(col) != height:
                raise InvalidGrid(
                    f"grid is not rectangular: column {x} has {len(col)} tiles, expected {height}"
                )
            for y, tile in enumerate(col):
                if not isinstance(tile, Tile):
                    raise InvalidGrid(f"cell ({x}, {y}) is {type(tile).__name__}, not Tile")
                for name in ("wall_height", "floor_height", "ceiling_height"):
                    value = getattr(tile, name)
                    if not isinstance(value, (int, float)):
                        raise InvalidGrid(f"cell ({x}, {y}) {name} is {type(value).__name__}, not a number")
                if tile.wall_height < 0:
                    raise InvalidGrid(f"cell ({x}, {y}) has negative wall height {tile.wall_height}")

        self._tiles = columns
        self.width = len(columns)
        self.height = height

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self._tiles[x][y]

    def cells(self) -> Iterator[tuple[int, int, Tile]]:
        for x, col in enumerate(self._tiles):
            for y, tile in enumerate(col):
                yield x, y, tile

    @property
    def columns(self) -> tuple[tuple[Tile, ...], ...]:
        return self._tiles


@dataclass(frozen=True)
class Pose:
    x: float
    y: float
    z: float  # vertical eye offset (stairs)
    ang: float


@dataclass(frozen=True)
class RenderSettings:
    fov: float = FOV
    ray_step: float = RAY_STEP
    max_dist: float = MAX_RENDER_DIST
    height_scale: float = HEIGHT_SCALE
    wall_scale: float = WALL_SCALE
    band_mode: BandMode = "heights"

    background: int = COLOR_BACKGROUND
    ceiling_color: int = COLOR_CEILING
    floor_color: int = COLOR_FLOOR
    wall_color: int = COLOR_WALL

    def __post_init__(self) -> None:
        if not self.fov > 0 or not math.isfinite(self.fov):
            raise ValueError(f"fov must be a positive angle, got {self.fov!r}")
        if not self.ray_step > 0:
            raise ValueError(f"ray_step must be > 0, got {self.ray_step!r}")
        if not self.max_dist > 0:
            raise ValueError(f"max_dist must be > 0, got {self.max_dist!r}")
        if self.band_mode not in ("heights", "perspective"):
            raise ValueError(f"unknown band_mode {self.band_mode!r}")


@dataclass
class ViewerSettings:
    size: int = 20
    seed: Optional[int] = None
    mode: ViewerMode = "auto"
    unicode: Literal["auto", "on", "off"] = "auto"
    colors: bool = True
    band_mode: BandMode = "heights"
    scale: int = 4  # window viewer: screen pixels per rendered pixel
    frame_delay: float = 0.01
