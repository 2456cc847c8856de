"""Terminal capabilities and palette-to-curses styling."""

from __future__ import annotations

import curses
import locale
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Literal

from .constants import PALETTE

logger = logging.getLogger(__name__)

SHADE_RAMP = " .:-=+*#%@"

# 8-colour fallback, indexed like PALETTE.
_BASIC_COLORS = (
    curses.COLOR_BLACK,
    curses.COLOR_WHITE,
    curses.COLOR_RED,
    curses.COLOR_BLACK,
    curses.COLOR_MAGENTA,
    curses.COLOR_RED,
    curses.COLOR_YELLOW,
    curses.COLOR_CYAN,
    curses.COLOR_GREEN,
    curses.COLOR_BLUE,
    curses.COLOR_CYAN,
    curses.COLOR_MAGENTA,
    curses.COLOR_MAGENTA,
    curses.COLOR_BLUE,
    curses.COLOR_WHITE,
    curses.COLOR_WHITE,
)


def luminance(idx: int) -> float:
    if not 0 <= idx < len(PALETTE):
        return 0.0
    r, g, b = PALETTE[idx]
    return 0.299 * r + 0.587 * g + 0.114 * b


def shade_glyph(idx: int) -> str:
    t = luminance(idx) / 256.0
    return SHADE_RAMP[min(len(SHADE_RAMP) - 1, int(t * len(SHADE_RAMP)))]


def rgb_to_xterm(r: int, g: int, b: int) -> int:
    """Nearest entry of the 6x6x6 xterm colour cube (or its grey ramp)."""
    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return 232 + round((r - 8) / 247 * 23)

    def q(v: int) -> int:
        return 0 if v < 48 else 1 if v < 115 else (v - 35) // 40

    return 16 + 36 * q(r) + 6 * q(g) + q(b)


@dataclass
class Style:
    unicode_ok: bool
    colors_ok: bool
    color_mode: Literal["none", "basic", "256"]
    max_pairs: int = 0
    pairs: dict[tuple[int, int], int] = field(default_factory=dict)

    def terminal_color(self, idx: int) -> int:
        if idx < 0:
            return -1
        if self.color_mode == "256" and idx < len(PALETTE):
            return rgb_to_xterm(*PALETTE[idx])
        return _BASIC_COLORS[idx % len(_BASIC_COLORS)]

    def pair_attr(self, fg: int, bg: int = -1) -> int:
        """Colour-pair attribute for palette indices ``fg``/``bg`` (-1 = default)."""
        if not self.colors_ok:
            return curses.A_NORMAL
        key = (fg, bg)
        pid = self.pairs.get(key)
        if pid is None:
            pid = len(self.pairs) + 1
            if pid >= self.max_pairs:
                return curses.A_NORMAL
            try:
                curses.init_pair(pid, self.terminal_color(fg), self.terminal_color(bg))
            except curses.error:
                logger.debug("init_pair(%d) failed for %r", pid, key)
                return curses.A_NORMAL
            self.pairs[key] = pid
        return curses.color_pair(pid)


def init_style(stdscr, unicode: Literal["auto", "on", "off"] = "auto", colors: bool = True) -> Style:
    unicode_ok = prefer_utf8() if unicode == "auto" else unicode == "on"

    colors_ok = False
    color_mode: Literal["none", "basic", "256"] = "none"
    max_pairs = 0

    if colors and curses.has_colors():
        try:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            colors_ok = True
        except curses.error:
            colors_ok = False

    if colors_ok:
        n_colors = getattr(curses, "COLORS", 0) or 0
        max_pairs = getattr(curses, "COLOR_PAIRS", 0) or 0
        color_mode = "256" if n_colors >= 256 and max_pairs >= 64 else "basic"

    logger.debug("terminal style: unicode=%s colors=%s (%s)", unicode_ok, colors_ok, color_mode)
    return Style(
        unicode_ok=unicode_ok,
        colors_ok=colors_ok,
        color_mode=color_mode,
        max_pairs=max_pairs,
    )


def prefer_utf8() -> bool:
    enc = (
        (sys.stdout.encoding or "")
        + "|"
        + locale.getpreferredencoding(False)
        + "|"
        + (os.environ.get("LC_ALL") or "")
        + "|"
        + (os.environ.get("LANG") or "")
    ).upper()
    return ("UTF-8" in enc) or ("UTF8" in enc)
