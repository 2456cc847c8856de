import pytest

from raymarch3d.errors import InvalidSurface
from raymarch3d.surface import PixelBuffer, PixelSurface, check_surface


def test_pixel_buffer_fill_and_write() -> None:
    buf = PixelBuffer(3, 2)
    assert (buf.width, buf.height) == (3, 2)
    assert list(buf.rows()) == [bytes(3), bytes(3)]

    buf.fill(1)
    buf.set_pixel(2, 1, 15)
    assert buf.get_pixel(2, 1) == 15
    assert buf.get_pixel(0, 0) == 1
    assert buf.column(2) == [1, 15]


def test_pixel_buffer_copy_is_independent() -> None:
    buf = PixelBuffer(2, 2, color=3)
    dup = buf.copy()
    assert dup == buf
    dup.set_pixel(0, 0, 1)
    assert dup != buf
    assert buf.get_pixel(0, 0) == 3


def test_pixel_buffer_equality_checks_size() -> None:
    assert PixelBuffer(2, 3) != PixelBuffer(3, 2)
    assert PixelBuffer(0, 4) != PixelBuffer(0, 5)


def test_pixel_buffer_rejects_out_of_range_writes() -> None:
    buf = PixelBuffer(2, 2)
    with pytest.raises(IndexError):
        buf.set_pixel(0, 2, 1)


def test_pixel_buffer_to_text() -> None:
    buf = PixelBuffer(3, 2)
    buf.fill(1)
    buf.set_pixel(1, 0, 15)
    buf.set_pixel(0, 1, 3)
    buf.set_pixel(2, 1, 7)
    assert buf.to_text() == " # \n. ?"
    assert buf.to_text({1: "c", 3: "f", 15: "W"}) == "cWc\nfc?"


def test_pixel_buffer_is_a_pixel_surface() -> None:
    assert isinstance(PixelBuffer(1, 1), PixelSurface)


def test_check_surface() -> None:
    assert check_surface(PixelBuffer(4, 3)) == (4, 3)
    with pytest.raises(InvalidSurface):
        check_surface(PixelBuffer(0, 3))
    with pytest.raises(ValueError):
        check_surface(PixelBuffer(4, 0))
