"""Plain text presenter: one pixel per terminal cell."""

from __future__ import annotations

from .style import Style, shade_glyph
from .surface import PixelBuffer
from .util import safe_addstr


def text_cell(idx: int, style: Style) -> tuple[str, int]:
    # With colours the background carries the pixel; ASCII stays readable.
    if style.colors_ok:
        return " ", style.pair_attr(-1, idx)
    return shade_glyph(idx), 0


def render_text(stdscr, buf: PixelBuffer, style: Style, y0: int = 0, x0: int = 0) -> None:
    for y, row in enumerate(buf.rows()):
        x = 0
        w = len(row)
        while x < w:
            ch, attr = text_cell(row[x], style)
            start = x
            chars = [ch]
            x += 1
            while x < w and row[x] == row[start]:
                chars.append(ch)
                x += 1
            safe_addstr(stdscr, y0 + y, x0 + start, "".join(chars), attr)
