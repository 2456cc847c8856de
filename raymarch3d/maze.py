"""Grid ingestion helpers and sample world generation."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from .constants import (
    HIGH_CEILING,
    OPEN,
    OPEN_ALT,
    STAIR,
    STAIR_DELTA,
    SUNKEN,
    TALL_WALL,
    WALL,
)
from .errors import InvalidGrid
from .models import NO_STAIR, Grid, Stair, Tile
from .util import clamp

logger = logging.getLogger(__name__)

DEFAULT_LEGEND: dict[str, Tile] = {
    WALL: Tile(wall_height=1.0),
    TALL_WALL: Tile(wall_height=2.0),
    OPEN: Tile(),
    OPEN_ALT: Tile(),
    SUNKEN: Tile(floor_height=-0.5),
    STAIR: Tile(floor_height=STAIR_DELTA, stair=Stair.of(STAIR_DELTA)),
    HIGH_CEILING: Tile(ceiling_height=2.0),
}

# camelCase names are the ones map records are usually authored with.
_RECORD_FIELDS = {
    "wall_height": ("wallHeight", "wall_height"),
    "floor_height": ("floorHeight", "floor_height"),
    "ceiling_height": ("ceilingHeight", "ceiling_height"),
}
_STAIR_FIELDS = ("stairHeight", "stair_height")


def _pick(record: Mapping[str, Any], names: tuple[str, ...]) -> Optional[Any]:
    for name in names:
        if name in record:
            return record[name]
    return None


def tile_from_record(record: Mapping[str, Any]) -> Tile:
    """Build a tile from a plain mapping.

    Accepts ``wallHeight``/``floorHeight``/``ceilingHeight``/``stairHeight``
    or their snake_case spellings. A missing or ``None`` stair height means
    "no stair".
    """
    values: dict[str, float] = {}
    for field, names in _RECORD_FIELDS.items():
        raw = _pick(record, names)
        if raw is None:
            raise InvalidGrid(f"tile record is missing {names[0]!r}: {dict(record)!r}")
        try:
            values[field] = float(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidGrid(f"tile field {names[0]!r} is not a number: {raw!r}") from exc

    stair_raw = _pick(record, _STAIR_FIELDS)
    if stair_raw is None:
        stair = NO_STAIR
    else:
        try:
            stair = Stair.of(float(stair_raw))
        except (TypeError, ValueError) as exc:
            raise InvalidGrid(f"tile field 'stairHeight' is not a number: {stair_raw!r}") from exc

    return Tile(stair=stair, **values)


def grid_from_records(table: Sequence[Sequence[Mapping[str, Any]]]) -> Grid:
    """Convert a ``table[x][y]`` of tile records into a grid."""
    return Grid([[tile_from_record(rec) for rec in col] for col in table])


def grid_from_rows(rows: Sequence[str], legend: Optional[Mapping[str, Tile]] = None) -> Grid:
    """Build a grid from an ASCII map.

    Rows are read top to bottom as ``rows[y][x]``, which is transposed into
    the grid's ``[x][y]`` order.
    """
    legend = DEFAULT_LEGEND if legend is None else legend
    if not rows:
        raise InvalidGrid("map has no rows")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise InvalidGrid(f"map row {y} has length {len(row)}, expected {width}")

    columns: list[list[Tile]] = [[] for _ in range(width)]
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            try:
                columns[x].append(legend[ch])
            except KeyError:
                raise InvalidGrid(f"unknown map glyph {ch!r} at ({x}, {y})") from None
    return Grid(columns)


def generate_maze(cell_w: int, cell_h: int, rng: random.Random) -> list[str]:
    cell_w = max(2, int(cell_w))
    cell_h = max(2, int(cell_h))
    W = cell_w * 2 + 1
    H = cell_h * 2 + 1
    grid = [[WALL] * W for _ in range(H)]
    visited = [[False] * cell_w for _ in range(cell_h)]

    def cell_to_map(cx: int, cy: int) -> tuple[int, int]:
        return 2 * cx + 1, 2 * cy + 1

    stack = [(0, 0)]
    visited[0][0] = True
    sx, sy = cell_to_map(0, 0)
    grid[sy][sx] = OPEN

    while stack:
        cx, cy = stack[-1]
        neigh = []
        for dx, dy in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nx, ny = cx + dx, cy + dy
            if 0 <= nx < cell_w and 0 <= ny < cell_h and not visited[ny][nx]:
                neigh.append((nx, ny))
        if neigh:
            nx, ny = rng.choice(neigh)
            visited[ny][nx] = True
            x1, y1 = cell_to_map(cx, cy)
            x2, y2 = cell_to_map(nx, ny)
            grid[y2][x2] = OPEN
            grid[(y1 + y2) // 2][(x1 + x2) // 2] = OPEN
            stack.append((nx, ny))
        else:
            stack.pop()

    return ["".join(row) for row in grid]


def sprinkle_features(rows: Sequence[str], rng: random.Random, density: float = 0.12) -> list[str]:
    """Swap some open cells for stairs/sunken floors and some walls for tall ones.

    The start cell ``(1, 1)`` and the outer border keep their glyph.
    """
    density = clamp(density, 0.0, 1.0)
    out = [list(row) for row in rows]
    H = len(out)
    W = len(out[0]) if H else 0
    for y in range(1, H - 1):
        for x in range(1, W - 1):
            if (x, y) == (1, 1) or rng.random() >= density:
                continue
            ch = out[y][x]
            if ch == OPEN:
                out[y][x] = rng.choice((STAIR, SUNKEN, HIGH_CEILING))
            elif ch == WALL:
                out[y][x] = TALL_WALL
    return ["".join(row) for row in out]


def difficulty_to_size(d: int) -> tuple[int, int]:
    d = int(clamp(d, 1, 100))
    cw = 4 + int(d * 0.25)
    ch = 4 + int(d * 0.20)
    return cw, ch


def build_world_grid(size: int, seed: Optional[int] = None) -> Grid:
    rng = random.Random(seed)
    cw, ch = difficulty_to_size(size)
    rows = sprinkle_features(generate_maze(cw, ch, rng), rng)
    grid = grid_from_rows(rows)
    logger.debug("generated %s from seed %r (size %d)", grid, seed, size)
    return grid


def floor_height_at(grid: Grid, x: float, y: float) -> float:
    fx = int(x // 1)
    fy = int(y // 1)
    if not grid.in_bounds(fx, fy):
        return 0.0
    return grid.tile_at(fx, fy).floor_height
