# -*- coding: utf-8 -*-
"""Project-wide constants for the ray-marching renderer."""
from __future__ import annotations

import math
from typing import Literal

# ----- Projection -----
FOV = math.pi / 3.0  # 60°
RAY_STEP = 0.05
MAX_RENDER_DIST = 20.0

HEIGHT_SCALE = 10.0  # world height units -> pixels
WALL_SCALE = 2.0

# ----- Palette indices (the surface owns the RGB mapping) -----
COLOR_BACKGROUND = 0
COLOR_CEILING = 1
COLOR_FLOOR = 3
COLOR_WALL = 15

# 16-entry palette used by the surfaces that need real colours.
PALETTE: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),
    (190, 190, 190),
    (255, 33, 33),
    (90, 90, 90),
    (255, 147, 196),
    (255, 129, 53),
    (255, 246, 9),
    (36, 156, 163),
    (120, 220, 82),
    (0, 63, 173),
    (135, 242, 255),
    (142, 46, 196),
    (164, 131, 159),
    (92, 64, 108),
    (229, 205, 196),
    (255, 255, 255),
)

# ----- ASCII map legend -----
WALL = "#"
TALL_WALL = "H"
OPEN = " "
OPEN_ALT = "."
SUNKEN = "_"
STAIR = "^"
HIGH_CEILING = "="

STAIR_DELTA = 0.5

# ----- Viewers -----
MOVE_SPEED = 2.5
ROT_SPEED = 2.0
HOLD_TIMEOUT = 0.14

# Text fallback: one glyph per palette index, unknown indices use "?"
TEXT_GLYPHS = {
    COLOR_BACKGROUND: " ",
    COLOR_CEILING: " ",
    COLOR_FLOOR: ".",
    COLOR_WALL: "#",
}

RayReason = Literal["hit", "out_of_bounds", "max_range"]
BandMode = Literal["heights", "perspective"]
ViewerMode = Literal["auto", "text", "half"]
