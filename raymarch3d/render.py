# -*- coding: utf-8 -*-
"""First-person column renderer and the world context it reads from.

A frame is produced in one pass over the surface columns:
- march a ray from the pose through the grid
- on a hit, split the column into ceiling / wall / floor bands
- on a miss (grid edge or max range), paint the plain ceiling/floor split
"""
from __future__ import annotations

import logging
import math
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional, Union

from .errors import NotInitialized
from .models import Grid, Pose, RenderSettings, Tile
from .raycast import column_angle, march_ray, project_column
from .surface import PixelSurface, check_surface

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = RenderSettings()


@dataclass
class FrameStats:
    """Per-frame summary of how each column's ray ended."""

    columns: int = 0
    hits: int = 0
    out_of_bounds: int = 0
    max_range: int = 0
    hit_cells: set[tuple[int, int]] = field(default_factory=set)

    @property
    def misses(self) -> int:
        return self.out_of_bounds + self.max_range


def render_view(
    surface: PixelSurface,
    grid: Grid,
    pose: Pose,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> FrameStats:
    """Repaint every pixel of ``surface`` with the view from ``pose``.

    Reads ``grid`` and ``pose`` only; the surface is the sole thing written.
    """
    w, h = check_surface(surface)
    s = settings
    stats = FrameStats(columns=w)

    surface.fill(s.background)

    half = h / 2.0
    miss_column = [s.floor_color if y > half else s.ceiling_color for y in range(h)]

    for i in range(w):
        ray_ang = column_angle(pose.ang, i, w, s.fov)
        ray = march_ray(grid, pose.x, pose.y, ray_ang, s.ray_step, s.max_dist)

        if ray.hit:
            stats.hits += 1
            stats.hit_cells.add(ray.cell)
            span = project_column(
                h, ray.tile, ray.distance, pose.z, s.height_scale, s.wall_scale, s.band_mode
            )
            for y in range(h):
                surface.set_pixel(i, y, span.color_at(y, s.wall_color, s.floor_color, s.ceiling_color))
            continue

        if ray.reason == "out_of_bounds":
            stats.out_of_bounds += 1
        else:
            stats.max_range += 1
        for y in range(h):
            surface.set_pixel(i, y, miss_column[y])

    return stats


class World:
    """The grid and pose a caller renders from.

    Each caller owns its own ``World``. Replacing the grid or pose and taking
    the render snapshot share one lock, so a frame never mixes an old grid
    with a new pose.
    """

    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self._grid: Optional[Grid] = None
        self._pose: Optional[Pose] = None
        self._lock = threading.Lock()

    @property
    def grid(self) -> Optional[Grid]:
        return self._grid

    @property
    def pose(self) -> Optional[Pose]:
        return self._pose

    def set_grid(self, tiles: Union[Grid, Sequence[Sequence[Tile]]]) -> Grid:
        # Validation happens before the swap; a bad table leaves the old grid.
        grid = tiles if isinstance(tiles, Grid) else Grid(tiles)
        with self._lock:
            self._grid = grid
        logger.debug("grid set: %dx%d", grid.width, grid.height)
        return grid

    def set_pose(
        self,
        x: Union[float, Pose],
        y: Optional[float] = None,
        z: Optional[float] = None,
        ang: Optional[float] = None,
    ) -> Pose:
        if isinstance(x, Pose):
            pose = x
        else:
            if y is None or z is None or ang is None:
                raise TypeError("set_pose() needs x, y, z and ang, or a single Pose")
            pose = Pose(float(x), float(y), float(z), float(ang))
        for name in ("x", "y", "z", "ang"):
            value = getattr(pose, name)
            if not math.isfinite(value):
                raise ValueError(f"pose {name} must be finite, got {value!r}")
        with self._lock:
            self._pose = pose
        logger.debug("pose set: %s", pose)
        return pose

    def snapshot(self) -> tuple[Grid, Pose]:
        with self._lock:
            grid, pose = self._grid, self._pose
        if grid is None:
            raise NotInitialized("render() called before set_grid()")
        if pose is None:
            raise NotInitialized("render() called before set_pose()")
        return grid, pose

    def render(self, surface: PixelSurface) -> FrameStats:
        grid, pose = self.snapshot()
        stats = render_view(surface, grid, pose, self.settings)
        logger.debug(
            "frame %dx%d: %d hit, %d out of bounds, %d max range",
            surface.width,
            surface.height,
            stats.hits,
            stats.out_of_bounds,
            stats.max_range,
        )
        return stats
