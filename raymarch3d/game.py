"""Terminal viewer loop and curses entrypoint.

Each frame:
- input: read keys and refresh the hold timers
- update: step the pose and hand it to the world
- render: draw the world into a pixel buffer and present it as text
"""

from __future__ import annotations

import curses
import logging
import math
import time
from dataclasses import dataclass

from .constants import HOLD_TIMEOUT
from .maze import build_world_grid, floor_height_at
from .models import RenderSettings, ViewerSettings
from .movement import step_pose
from .render import FrameStats, World
from .render_halfblock import render_halfblock
from .render_text import render_text
from .style import Style, init_style
from .surface import PixelBuffer
from .util import safe_addstr

logger = logging.getLogger(__name__)


@dataclass
class ControlState:
    """Transient controls driven by key holds."""

    move_dir: int = 0
    rot_dir: int = 0

    move_until: float = 0.0
    rot_until: float = 0.0


def choose_presenter(settings: ViewerSettings, style: Style) -> str:
    if settings.mode != "auto":
        if settings.mode == "half" and not style.unicode_ok:
            return "text"
        return settings.mode
    return "half" if style.unicode_ok else "text"


def make_world(settings: ViewerSettings) -> World:
    world = World(RenderSettings(band_mode=settings.band_mode))
    grid = world.set_grid(build_world_grid(settings.size, settings.seed))
    world.set_pose(1.5, 1.5, floor_height_at(grid, 1.5, 1.5), 0.0)
    return world


def _read_input(stdscr, ctrl: ControlState, now: float) -> bool:
    """Consume pending keys. Returns False when the user asked to quit."""
    while True:
        chkey = stdscr.getch()
        if chkey == -1:
            return True
        if chkey in (ord("q"), ord("Q"), 27):
            return False
        if chkey in (curses.KEY_UP, ord("w"), ord("W")):
            ctrl.move_dir, ctrl.move_until = 1, now + HOLD_TIMEOUT
        elif chkey in (curses.KEY_DOWN, ord("s"), ord("S")):
            ctrl.move_dir, ctrl.move_until = -1, now + HOLD_TIMEOUT
        elif chkey in (curses.KEY_LEFT, ord("a"), ord("A")):
            ctrl.rot_dir, ctrl.rot_until = -1, now + HOLD_TIMEOUT
        elif chkey in (curses.KEY_RIGHT, ord("d"), ord("D")):
            ctrl.rot_dir, ctrl.rot_until = 1, now + HOLD_TIMEOUT


def _expire_controls(ctrl: ControlState, now: float) -> None:
    if now > ctrl.move_until:
        ctrl.move_dir = 0
    if now > ctrl.rot_until:
        ctrl.rot_dir = 0


def _draw_hud(stdscr, world: World, stats: FrameStats, presenter: str) -> None:
    h, w = stdscr.getmaxyx()
    pose = world.pose
    line = (
        f"x={pose.x:5.2f} y={pose.y:5.2f} z={pose.z:+.2f} "
        f"ang={math.degrees(pose.ang):6.1f}  hit {stats.hits}/{stats.columns}  "
        f"[{presenter}]  WASD/arrows move, q quits"
    )
    safe_addstr(stdscr, h - 1, 0, line[: max(0, w - 1)], curses.A_BOLD)


def main(stdscr, settings: ViewerSettings) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.nodelay(True)
    stdscr.keypad(True)

    style = init_style(stdscr, settings.unicode, settings.colors)
    presenter = choose_presenter(settings, style)
    world = make_world(settings)
    ctrl = ControlState()
    last_tick = time.monotonic()

    while True:
        now = time.monotonic()
        dt = min(0.1, now - last_tick)
        last_tick = now

        if not _read_input(stdscr, ctrl, now):
            break
        _expire_controls(ctrl, now)
        if ctrl.move_dir or ctrl.rot_dir:
            world.set_pose(step_pose(world.grid, world.pose, ctrl.move_dir, ctrl.rot_dir, dt))

        h, w = stdscr.getmaxyx()
        view_h = max(1, h - 1)
        view_w = max(1, w - 1)
        rows = view_h * 2 if presenter == "half" else view_h
        buf = PixelBuffer(view_w, rows)
        stats = world.render(buf)

        stdscr.erase()
        if presenter == "half":
            render_halfblock(stdscr, buf, style)
        else:
            render_text(stdscr, buf, style)
        _draw_hud(stdscr, world, stats, presenter)
        stdscr.refresh()
        time.sleep(settings.frame_delay)

    logger.info("terminal viewer closed at %s", world.pose)


def run(settings: ViewerSettings) -> None:
    curses.wrapper(main, settings)
