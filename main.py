#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ray-marched first-person view of a generated tile world.

Views:
- terminal (default): curses, half-block or plain text output.
- window (--window): pygame, low-res frame scaled up.

Run:
  python3 main.py [--window] [--seed N] [--size N] [--debug FILE]
"""

from __future__ import annotations

import argparse
import locale
import logging
from typing import Optional, Sequence

from raymarch3d.models import ViewerSettings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--window", action="store_true", help="open a pygame window instead of the terminal view")
    parser.add_argument("--seed", type=int, default=None, help="world generation seed")
    parser.add_argument("--size", type=int, default=20, help="world size, 1-100")
    parser.add_argument("--mode", choices=("auto", "text", "half"), default="auto", help="terminal presenter")
    parser.add_argument("--no-color", action="store_true", help="monochrome terminal output")
    parser.add_argument(
        "--band",
        choices=("heights", "perspective"),
        default="heights",
        help="wall band placement",
    )
    parser.add_argument("--scale", type=int, default=4, help="window pixels per rendered pixel")
    parser.add_argument("--debug", metavar="FILE", default=None, help="write debug log to FILE")
    return parser.parse_args(argv)


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    if args.debug:
        # curses owns the terminal, so logs go to a file.
        logging.basicConfig(
            filename=args.debug,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    settings = ViewerSettings(
        size=args.size,
        seed=args.seed,
        mode=args.mode,
        colors=not args.no_color,
        band_mode=args.band,
        scale=args.scale,
    )

    if args.window:
        from raymarch3d.window import run_window

        run_window(settings)
        return

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
    from raymarch3d.game import run as run_terminal

    run_terminal(settings)


if __name__ == "__main__":
    run()
