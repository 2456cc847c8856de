import curses

from raymarch3d.models import ViewerSettings
from raymarch3d.game import choose_presenter, make_world
from raymarch3d.render_halfblock import halfblock_cell, render_halfblock
from raymarch3d.render_text import render_text, text_cell
from raymarch3d.style import Style, rgb_to_xterm, shade_glyph
from raymarch3d.surface import PixelBuffer


def dummy_style(*, unicode_ok: bool = True, colors_ok: bool = False) -> Style:
    # Colour pairs are never allocated, so no curses initialization is needed.
    return Style(unicode_ok=unicode_ok, colors_ok=colors_ok, color_mode="none")


class FakeScreen:
    def __init__(self) -> None:
        self.calls: list[tuple[int, int, str, int]] = []

    def addstr(self, y: int, x: int, s: str, attr: int = 0) -> None:
        self.calls.append((y, x, s, attr))

    def line(self, y: int) -> str:
        parts = sorted((x, s) for yy, x, s, _ in self.calls if yy == y)
        return "".join(s for _, s in parts)


def test_shade_glyph_orders_by_brightness() -> None:
    assert shade_glyph(0) == " "
    assert shade_glyph(15) == "@"
    assert shade_glyph(3) == "-"
    assert shade_glyph(1) == "#"


def test_rgb_to_xterm() -> None:
    assert rgb_to_xterm(0, 0, 0) == 16
    assert rgb_to_xterm(255, 255, 255) == 231
    assert rgb_to_xterm(255, 0, 0) == 196


def test_halfblock_cell_mono() -> None:
    style = dummy_style()
    assert halfblock_cell(15, 15, style) == ("@", -1, -1)
    assert halfblock_cell(15, 3, style) == ("▀", -1, -1)
    assert halfblock_cell(3, 15, style) == ("▄", -1, -1)


def test_halfblock_cell_color() -> None:
    style = dummy_style(colors_ok=True)
    assert halfblock_cell(1, 1, style) == (" ", -1, 1)
    assert halfblock_cell(15, 3, style) == ("▀", 15, 3)


def test_text_cell_mono() -> None:
    assert text_cell(15, dummy_style(unicode_ok=False)) == ("@", 0)


def test_render_halfblock_packs_two_rows_per_line() -> None:
    buf = PixelBuffer(4, 3)
    buf.fill(1)
    for x in range(4):
        buf.set_pixel(x, 1, 15)
    scr = FakeScreen()
    render_halfblock(scr, buf, dummy_style())

    assert scr.line(0) == "▄▄▄▄"
    assert scr.line(1) == "####"  # odd last row pairs with itself
    assert all(attr == curses.A_NORMAL for *_, attr in scr.calls)


def test_render_text_one_line_per_row() -> None:
    buf = PixelBuffer(3, 2)
    buf.fill(3)
    buf.set_pixel(1, 0, 15)
    scr = FakeScreen()
    render_text(scr, buf, dummy_style(unicode_ok=False), y0=2)

    assert scr.line(2) == "-@-"
    assert scr.line(3) == "---"


def test_choose_presenter() -> None:
    utf = dummy_style()
    ascii_only = dummy_style(unicode_ok=False)
    assert choose_presenter(ViewerSettings(), utf) == "half"
    assert choose_presenter(ViewerSettings(), ascii_only) == "text"
    assert choose_presenter(ViewerSettings(mode="half"), ascii_only) == "text"
    assert choose_presenter(ViewerSettings(mode="text"), utf) == "text"


def test_make_world_is_ready_to_render() -> None:
    world = make_world(ViewerSettings(size=1, seed=7))
    assert world.pose.x == 1.5 and world.pose.y == 1.5
    buf = PixelBuffer(10, 8)
    stats = world.render(buf)
    assert stats.columns == 10
