"""NTSC colour palette of the 2C02 PPU and layout constants for PPU tools."""

from __future__ import annotations

NTSC_PALETTE: tuple[tuple[int, int, int], ...] = (
    # 0x00
    (84, 84, 84), (0, 30, 116), (8, 16, 144), (48, 0, 136),
    (68, 0, 100), (92, 0, 48), (84, 4, 0), (60, 24, 0),
    # 0x08
    (32, 42, 0), (8, 58, 0), (0, 64, 0), (0, 60, 0),
    (0, 50, 60), (0, 0, 0), (0, 0, 0), (0, 0, 0),
    # 0x10
    (152, 150, 152), (8, 76, 196), (48, 50, 236), (92, 30, 228),
    (136, 20, 176), (160, 20, 100), (152, 34, 32), (120, 60, 0),
    # 0x18
    (84, 90, 0), (40, 114, 0), (8, 124, 0), (0, 118, 40),
    (0, 102, 120), (0, 0, 0), (0, 0, 0), (0, 0, 0),
    # 0x20
    (236, 238, 236), (76, 154, 236), (120, 124, 236), (176, 98, 236),
    (228, 84, 236), (236, 88, 180), (236, 106, 100), (212, 136, 32),
    # 0x28
    (160, 170, 0), (116, 196, 0), (76, 208, 32), (56, 204, 108),
    (56, 180, 204), (60, 60, 60), (0, 0, 0), (0, 0, 0),
    # 0x30
    (236, 238, 236), (168, 204, 236), (188, 188, 236), (212, 178, 236),
    (236, 174, 236), (236, 174, 212), (236, 180, 176), (228, 196, 144),
    # 0x38
    (204, 210, 120), (180, 222, 120), (168, 226, 144), (152, 226, 180),
    (160, 214, 228), (160, 162, 160), (0, 0, 0), (0, 0, 0),
)

NAMETABLE_W = 32
NAMETABLE_H = 30

# NTSC 720x480 display, shown as 720x534 because of the 0.9 pixel aspect ratio.
TEXTURE_DISPLAY_W = 720.0
TEXTURE_DISPLAY_H = 534.0
SIDE_PANEL_INNER_WIDTH = 256.0
SIDE_PANEL_MARGIN = 7.0
SIDE_PANEL_WIDTH = SIDE_PANEL_INNER_WIDTH + SIDE_PANEL_MARGIN + SIDE_PANEL_MARGIN
PALETTE_SWATCH_SIZE = 22.0
# Where the attribute bytes start within nametable data.
ATTRIBUTES_OFFSET = 0x3C0
MENU_HEIGHT = 24.0


def ntsc_color(index: int) -> tuple[int, int, int]:
    """Return the (r, g, b) colour for a palette index 0x00-0x3f."""
    if not 0 <= index < len(NTSC_PALETTE):
        raise ValueError(f"NTSC palette index out of range: {index}")
    return NTSC_PALETTE[index]