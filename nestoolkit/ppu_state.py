"""Nametable, character table and palette state for rendering PPU images."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .palette import ATTRIBUTES_OFFSET, NAMETABLE_H, NAMETABLE_W, ntsc_color

TILE_PIXEL_WIDTH = 8
BYTES_PER_BIT_PLANE = 8
BYTES_PER_CH_TILE = 2 * BYTES_PER_BIT_PLANE
CHAR_TILES_PER_SIDE = 16
CHARTABLE_BYTES = CHAR_TILES_PER_SIDE * CHAR_TILES_PER_SIDE * BYTES_PER_CH_TILE
PALETTE_FILE_BYTES = 16
NAMETABLE_MIN_BYTES = ATTRIBUTES_OFFSET + 64

CHAR_IMAGE_SIZE = CHAR_TILES_PER_SIDE * TILE_PIXEL_WIDTH
VIEW_IMAGE_WIDTH = NAMETABLE_W * TILE_PIXEL_WIDTH
VIEW_IMAGE_HEIGHT = NAMETABLE_H * TILE_PIXEL_WIDTH

_GRAY_LEVELS = (0, 85, 170, 255)

DEFAULT_PALETTES = (
    (0x22, 0x29, 0x1A, 0x0F),
    (0x22, 0x36, 0x17, 0x0F),
    (0x22, 0x30, 0x21, 0x0F),
    (0x22, 0x27, 0x17, 0x0F),
)


class BinaryFileId(enum.Enum):
    """Which kind of binary file a BinaryFile holds."""

    NAME_TABLE = enum.auto()
    CHAR_TABLE = enum.auto()
    PALETTE_FILE = enum.auto()


class View(enum.Enum):
    """Top-level view of the PPU tool."""

    FILE_VIEWER = enum.auto()
    ROM_EXPLORER = enum.auto()


@dataclass
class PaletteChange:
    """Which palette entry the user is about to change."""

    palette_index: int = 0
    color_index: int = 0
    is_open: bool = False


@dataclass
class BinaryFile:
    """A binary file chosen by the user, with its contents."""

    id: BinaryFileId
    extensions: tuple[str, ...]
    description: str
    filename: str | None = None
    data: bytes = b""

    def load(self, path: str | PathLike[str]) -> None:
        """Read the file at path; raises OSError when it cannot be read."""
        path = Path(path)
        self.data = path.read_bytes()
        self.filename = path.name or None


def tile_pixel_values(plane_1: bytes, plane_2: bytes) -> tuple[tuple[int, ...], ...]:
    """Combine two 8-byte bit planes into 8 rows of 2-bit pixel values."""
    if len(plane_1) != BYTES_PER_BIT_PLANE or len(plane_2) != BYTES_PER_BIT_PLANE:
        raise ValueError("Each bit plane must hold exactly 8 bytes")
    return tuple(
        tuple(
            ((low >> (7 - x)) & 1) | (((high >> (7 - x)) & 1) << 1)
            for x in range(TILE_PIXEL_WIDTH)
        )
        for low, high in zip(plane_1, plane_2)
    )


class PpuState:
    """Loaded PPU files and the RGBA images built from them."""

    def __init__(
        self,
        nametable: str | PathLike[str] | None = None,
        chartable: str | PathLike[str] | None = None,
        palette: str | PathLike[str] | None = None,
    ) -> None:
        self.view = View.FILE_VIEWER
        self.palette_change = PaletteChange()
        self.palettes: list[list[int]] = [list(row) for row in DEFAULT_PALETTES]
        self.image: bytes | None = None
        self.char_image: bytes | None = None
        self.files = {
            BinaryFileId.NAME_TABLE: BinaryFile(
                BinaryFileId.NAME_TABLE, ("nam",), "NES Nametable"
            ),
            BinaryFileId.CHAR_TABLE: BinaryFile(
                BinaryFileId.CHAR_TABLE, ("chr",), "NES Chartable"
            ),
            BinaryFileId.PALETTE_FILE: BinaryFile(
                BinaryFileId.PALETTE_FILE, ("pal",), "NES Palette File"
            ),
        }
        for file_id, path in (
            (BinaryFileId.NAME_TABLE, nametable),
            (BinaryFileId.CHAR_TABLE, chartable),
            (BinaryFileId.PALETTE_FILE, palette),
        ):
            if path is not None:
                self.files[file_id].load(path)

        self.build_palettes()
        self.build_view_image()
        self.build_chartable_image()

    @property
    def nametable(self) -> BinaryFile:
        return self.files[BinaryFileId.NAME_TABLE]

    @property
    def chartable(self) -> BinaryFile:
        return self.files[BinaryFileId.CHAR_TABLE]

    @property
    def palettes_file(self) -> BinaryFile:
        return self.files[BinaryFileId.PALETTE_FILE]

    def load(self, file_id: BinaryFileId, path: str | PathLike[str]) -> None:
        """Load a new file of the given kind and rebuild the images."""
        self.files[file_id].load(path)
        if file_id is BinaryFileId.PALETTE_FILE:
            self.build_palettes()
        self.build_view_image()
        self.build_chartable_image()

    def build_palettes(self) -> None:
        """Copy the palette file's 16 bytes into the four palettes."""
        data = self.palettes_file.data
        if not data:
            return
        if len(data) != PALETTE_FILE_BYTES:
            raise ValueError(
                "Invalid palette file. Expected a 16 byte file but a "
                f"{len(data)} byte file was received."
            )
        self.palettes = [list(data[row * 4 : row * 4 + 4]) for row in range(4)]

    def build_chartable_image(self) -> bytes | None:
        """Render the character table as a 128x128 grayscale RGBA image."""
        data = self.chartable.data
        if not data:
            return None
        if len(data) != CHARTABLE_BYTES:
            raise ValueError(
                f"Char data has size {len(data)} bytes, "
                f"expected {CHARTABLE_BYTES} bytes"
            )
        row_bytes = CHAR_IMAGE_SIZE * 4
        image = bytearray(CHAR_IMAGE_SIZE * row_bytes)
        for tile_index in range(CHAR_TILES_PER_SIDE * CHAR_TILES_PER_SIDE):
            start = tile_index * BYTES_PER_CH_TILE
            pixels = tile_pixel_values(
                data[start : start + BYTES_PER_BIT_PLANE],
                data[start + BYTES_PER_BIT_PLANE : start + BYTES_PER_CH_TILE],
            )
            tile_y, tile_x = divmod(tile_index, CHAR_TILES_PER_SIDE)
            for ch_y, row in enumerate(pixels):
                y = tile_y * TILE_PIXEL_WIDTH + ch_y
                for ch_x, value in enumerate(row):
                    x = tile_x * TILE_PIXEL_WIDTH + ch_x
                    offset = y * row_bytes + x * 4
                    gray = _GRAY_LEVELS[value]
                    image[offset : offset + 4] = bytes((gray, gray, gray, 0xFF))
        self.char_image = bytes(image)
        return self.char_image

    def build_view_image(self) -> bytes | None:
        """Render the nametable as a 256x240 RGBA image using the palettes."""
        names = self.nametable.data
        chars = self.chartable.data
        if not names or not chars:
            return None
        if len(names) < NAMETABLE_MIN_BYTES:
            raise ValueError(
                f"Nametable data has {len(names)} bytes, "
                f"expected at least {NAMETABLE_MIN_BYTES}"
            )
        row_bytes = VIEW_IMAGE_WIDTH * 4
        image = bytearray(VIEW_IMAGE_HEIGHT * row_bytes)
        for tile_y in range(NAMETABLE_H):
            for tile_x in range(NAMETABLE_W):
                start = names[tile_y * NAMETABLE_W + tile_x] * BYTES_PER_CH_TILE
                if start + BYTES_PER_CH_TILE > len(chars):
                    raise ValueError(
                        f"Chartable data has {len(chars)} bytes, too few for "
                        f"tile {start // BYTES_PER_CH_TILE}"
                    )
                pixels = tile_pixel_values(
                    chars[start : start + BYTES_PER_BIT_PLANE],
                    chars[start + BYTES_PER_BIT_PLANE : start + BYTES_PER_CH_TILE],
                )
                palette = self.lookup_attribute_palette(tile_x, tile_y)
                for ch_y, row in enumerate(pixels):
                    y = tile_y * TILE_PIXEL_WIDTH + ch_y
                    for ch_x, value in enumerate(row):
                        x = tile_x * TILE_PIXEL_WIDTH + ch_x
                        offset = y * row_bytes + x * 4
                        r, g, b = ntsc_color(palette[value])
                        image[offset : offset + 4] = bytes((r, g, b, 0xFF))
        self.image = bytes(image)
        return self.image

    def lookup_attribute_palette(self, tile_x: int, tile_y: int) -> tuple[int, ...]:
        """Return the four-colour palette the attribute table gives a tile."""
        index = ATTRIBUTES_OFFSET + (tile_x >> 2) + (tile_y >> 2) * 8
        byte = self.nametable.data[index]
        # Bits 1-0: top left, 3-2: top right, 5-4: bottom left, 7-6: bottom right.
        quadrant = ((tile_x >> 1) & 1) | (((tile_y >> 1) & 1) << 1)
        attribute = (byte >> (quadrant * 2)) & 0b11
        return tuple(self.palettes[attribute])

    def set_palette_color(
        self, palette_index: int, color_index: int, ntsc_index: int
    ) -> None:
        """Set one palette entry to an NTSC colour and rebuild the view image."""
        ntsc_color(ntsc_index)
        self.palettes[palette_index][color_index] = ntsc_index
        self.palette_change.is_open = False
        self.build_view_image()