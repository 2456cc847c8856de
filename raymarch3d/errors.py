"""Exceptions raised by the grid model and the renderer."""

from __future__ import annotations


class RaycastError(Exception):
    """Base class for every error this package raises."""


class InvalidGrid(RaycastError, ValueError):
    """The tile table is empty, ragged or holds something that is not a tile."""


class NotInitialized(RaycastError, RuntimeError):
    """``render`` was called before both a grid and a pose were set."""


class InvalidSurface(RaycastError, ValueError):
    """The target surface reports a zero (or negative) width or height."""
