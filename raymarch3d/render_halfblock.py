"""Half-block presenter: two pixel rows per terminal row."""

from __future__ import annotations

from .style import Style, luminance, shade_glyph
from .surface import PixelBuffer
from .util import safe_addstr


def halfblock_cell(top: int, bot: int, style: Style) -> tuple[str, int, int]:
    """Glyph plus foreground/background palette indices for one text cell.

    A background of -1 means the terminal default.
    """
    if style.colors_ok:
        if top == bot:
            return " ", -1, top
        return "▀", top, bot
    if top == bot:
        return shade_glyph(top), -1, -1
    return ("▀" if luminance(top) > luminance(bot) else "▄"), -1, -1


def render_halfblock(stdscr, buf: PixelBuffer, style: Style, y0: int = 0, x0: int = 0) -> None:
    h = buf.height
    w = buf.width
    rows = list(buf.rows())

    for ty in range(0, h, 2):
        top_row = rows[ty]
        bot_row = rows[ty + 1] if ty + 1 < h else top_row

        def cell(xi: int) -> tuple[str, int]:
            ch, fg, bg = halfblock_cell(top_row[xi], bot_row[xi], style)
            return ch, style.pair_attr(fg, bg)

        x = 0
        while x < w:
            ch, attr = cell(x)
            start = x
            buf_chars = [ch]
            x += 1
            while x < w:
                ch2, attr2 = cell(x)
                if attr2 != attr:
                    break
                buf_chars.append(ch2)
                x += 1
            safe_addstr(stdscr, y0 + ty // 2, x0 + start, "".join(buf_chars), attr)
