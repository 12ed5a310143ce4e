"""A memory-mapped RGB screen buffer for simple 6502 games."""

from __future__ import annotations

from typing import Callable

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_GREY = (128, 128, 128)
_RED = (255, 0, 0)
_GREEN = (0, 255, 0)
_BLUE = (0, 0, 255)
_MAGENTA = (255, 0, 255)
_YELLOW = (255, 255, 0)
_CYAN = (0, 255, 255)

_COLORS = {
    0: _BLACK,
    1: _WHITE,
    2: _GREY,
    9: _GREY,
    3: _RED,
    10: _RED,
    4: _GREEN,
    11: _GREEN,
    5: _BLUE,
    12: _BLUE,
    6: _MAGENTA,
    13: _MAGENTA,
    7: _YELLOW,
    14: _YELLOW,
}

BYTES_PER_PIXEL = 3


def color(byte: int) -> tuple[int, int, int]:
    """Return the (r, g, b) colour a memory byte is drawn with."""
    return _COLORS.get(byte, _CYAN)


class ScreenBuffer:
    """RGB pixel data mirroring a square region of memory, one byte per pixel."""

    def __init__(
        self, window_size: int = 32, mem_offset: tuple[int, int] = (0x200, 0x600)
    ) -> None:
        start, end = mem_offset
        if end - start != window_size * window_size:
            raise ValueError("The mem_offset was not the correct size for the buffer")
        self.window_size = window_size
        self.mem_offset = (start, end)
        self.texture_row_size = window_size * BYTES_PER_PIXEL
        self.texture_data = bytearray(window_size * window_size * BYTES_PER_PIXEL)

    def update(self, read_u8: Callable[[int], int]) -> bool:
        """Refresh the pixels from memory; return True if any pixel changed."""
        dirty = False
        start, end = self.mem_offset
        for pixel, address in enumerate(range(start, end)):
            rgb = bytes(color(read_u8(address)))
            offset = pixel * BYTES_PER_PIXEL
            if self.texture_data[offset : offset + BYTES_PER_PIXEL] != rgb:
                self.texture_data[offset : offset + BYTES_PER_PIXEL] = rgb
                dirty = True
        return dirty