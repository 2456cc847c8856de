"""Pixel surfaces the renderer draws into."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Optional, Protocol, runtime_checkable

from .constants import COLOR_BACKGROUND, TEXT_GLYPHS
from .errors import InvalidSurface


@runtime_checkable
class PixelSurface(Protocol):
    """Anything with a size that accepts palette-indexed pixel writes."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def fill(self, color: int) -> None: ...

    def set_pixel(self, x: int, y: int, color: int) -> None: ...


def check_surface(surface: PixelSurface) -> tuple[int, int]:
    w = int(surface.width)
    h = int(surface.height)
    if w < 1 or h < 1:
        raise InvalidSurface(f"surface must be at least 1x1, got {w}x{h}")
    return w, h


class PixelBuffer:
    """In-memory surface: one ``bytearray`` of palette indices per row."""

    __slots__ = ("_w", "_h", "_rows")

    def __init__(self, width: int, height: int, color: int = COLOR_BACKGROUND) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"buffer size must not be negative, got {width}x{height}")
        self._w = width
        self._h = height
        self._rows = [bytearray([color]) * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def fill(self, color: int) -> None:
        for row in self._rows:
            row[:] = bytes([color]) * self._w

    def set_pixel(self, x: int, y: int, color: int) -> None:
        self._rows[y][x] = color

    def get_pixel(self, x: int, y: int) -> int:
        return self._rows[y][x]

    def column(self, x: int) -> list[int]:
        return [row[x] for row in self._rows]

    def rows(self) -> Iterator[bytes]:
        for row in self._rows:
            yield bytes(row)

    def copy(self) -> PixelBuffer:
        out = PixelBuffer(self._w, self._h)
        out._rows = [bytearray(row) for row in self._rows]
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (self._w, self._h) == (other._w, other._h) and self._rows == other._rows

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"PixelBuffer({self._w}x{self._h})"

    def to_text(self, glyphs: Optional[Mapping[int, str]] = None) -> str:
        glyphs = TEXT_GLYPHS if glyphs is None else glyphs
        return "\n".join("".join(glyphs.get(c, "?") for c in row) for row in self._rows)
