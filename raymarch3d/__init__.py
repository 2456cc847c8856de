"""Ray-marching first-person renderer for tile grids."""

from .constants import COLOR_BACKGROUND, COLOR_CEILING, COLOR_FLOOR, COLOR_WALL, FOV
from .errors import InvalidGrid, InvalidSurface, NotInitialized, RaycastError
from .maze import grid_from_records, grid_from_rows, tile_from_record
from .models import NO_STAIR, Grid, Pose, RenderSettings, Stair, Tile
from .raycast import ColumnSpan, RayResult, column_angle, march_ray, project_column
from .render import FrameStats, World, render_view
from .surface import PixelBuffer, PixelSurface

__all__ = [
    "COLOR_BACKGROUND",
    "COLOR_CEILING",
    "COLOR_FLOOR",
    "COLOR_WALL",
    "FOV",
    "NO_STAIR",
    "ColumnSpan",
    "FrameStats",
    "Grid",
    "InvalidGrid",
    "InvalidSurface",
    "NotInitialized",
    "PixelBuffer",
    "PixelSurface",
    "Pose",
    "RayResult",
    "RaycastError",
    "RenderSettings",
    "Stair",
    "Tile",
    "World",
    "column_angle",
    "grid_from_records",
    "grid_from_rows",
    "march_ray",
    "project_column",
    "render_view",
    "tile_from_record",
]
