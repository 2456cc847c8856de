# -*- coding: utf-8 -*-
"""Viewer-side pose updates (no collision: the pose may enter walls)."""
from __future__ import annotations

import math

from .constants import MOVE_SPEED, ROT_SPEED
from .maze import floor_height_at
from .models import Grid, Pose
from .util import clamp, normalize_angle


def step_pose(grid: Grid, pose: Pose, move_dir: int, rot_dir: int, dt: float) -> Pose:
    """Turn, walk, keep the pose inside the grid and put the eye on the local floor."""
    ang = pose.ang
    if rot_dir:
        ang = normalize_angle(ang + rot_dir * ROT_SPEED * dt)

    x, y = pose.x, pose.y
    if move_dir:
        move = move_dir * MOVE_SPEED * dt
        x = clamp(x + math.cos(ang) * move, 0.0, grid.width - 1e-6)
        y = clamp(y + math.sin(ang) * move, 0.0, grid.height - 1e-6)

    return Pose(x, y, floor_height_at(grid, x, y), ang)
