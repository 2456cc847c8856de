# -*- coding: utf-8 -*-
"""Small helpers used across modules."""
from __future__ import annotations

import curses
import math


def safe_addstr(stdscr, y: int, x: int, s: str, attr: int = 0) -> None:
    # Writing the bottom-right cell always raises; the text still lands.
    try:
        stdscr.addstr(y, x, s, attr)
    except curses.error:
        pass


def clamp(v: float, lo: float, hi: float) -> float:
    return lo if v < lo else hi if v > hi else v


def normalize_angle(a: float) -> float:
    while a < -math.pi:
        a += 2 * math.pi
    while a > math.pi:
        a -= 2 * math.pi
    return a
