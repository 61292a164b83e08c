"""In-memory 32-bit pixel images and colour packing helpers."""

from __future__ import annotations

import re

BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8


class Image:
    """A 32 bits-per-pixel image buffer with rows stored top to bottom.

    ``endian`` is 0 for little-endian pixel storage, 1 for big-endian.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        self.width = width
        self.height = height
        self.bpp = BITS_PER_PIXEL
        self.size_line = width * _BYTES_PER_PIXEL
        self.endian = 0
        self.data = bytearray(self.size_line * height)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.size_line + x * (self.bpp // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` as an unsigned 32-bit value at (x, y)."""
        offset = self._offset(x, y)
        value = color & 0xFFFFFFFF
        self.data[offset:offset + _BYTES_PER_PIXEL] = value.to_bytes(
            _BYTES_PER_PIXEL, self._byteorder
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(
            self.data[offset:offset + _BYTES_PER_PIXEL], self._byteorder
        )

    def get_rgb(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the (red, green, blue) components of the pixel at (x, y)."""
        pixel = self.get_pixel(x, y)
        return (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF


def mask_shifts(
    red_mask: int, green_mask: int, blue_mask: int
) -> tuple[int, int, int, int, int, int]:
    """Return (shift, bits) for each of the red, green and blue masks."""
    result: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        if mask <= 0:
            raise ValueError(f"invalid colour mask {mask:#x}")
        shift = 0
        while not mask & 1:
            mask >>= 1
            shift += 1
        bits = 0
        while mask & 1:
            mask >>= 1
            bits += 1
        result.extend((shift, bits))
    return tuple(result)  # type: ignore[return-value]


def pack_color(
    color: int, depth: int, shifts: tuple[int, int, int, int, int, int]
) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth."""
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )


def rgb_to_int(r: int, g: int, b: int) -> int:
    """Combine components into a 0xRRGGBB value."""
    return r << 16 | g << 8 | b


def parse_rgb(text: str) -> int:
    """Read the first three digit runs of ``text`` as red, green and blue."""
    parts = [part for part in re.split(r"[^0-9]+", text) if part]
    if len(parts) < 3:
        raise ValueError(f"expected three colour components in {text!r}")
    r, g, b = (int(part) for part in parts[:3])
    return rgb_to_int(r, g, b)