"""Command-line viewer for NES nametable (.nam) files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

NAMETABLE_FILE_BYTES = 1024
NAMETABLE_TILE_BYTES = 960

_RESET = "\x1b[0m"
_DIM = "2"
_UNDERLINE = "4"
_GREEN = "32"
_YELLOW = "33"
_BLUE = "34"
_MAGENTA = "35"
_CYAN = "36"

# Byte ranges of 32 values each, alternating dimmed and bright per hue.
_BYTE_STYLES = (
    (_DIM, _MAGENTA),
    (_MAGENTA,),
    (_DIM, _BLUE),
    (_BLUE,),
    (_DIM, _CYAN),
    (_CYAN,),
    (_DIM, _GREEN),
    (_GREEN,),
)

_ATTRIBUTE_COLORS = (_MAGENTA, _BLUE, _CYAN, _GREEN)


def _style(text: str, *codes: str) -> str:
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def _dim(text: str) -> str:
    return _style(text, _DIM)


def format_byte(byte: int) -> str:
    """Return a byte as two hex digits, coloured by its value."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"Byte out of range: {byte}")
    return _style(f"{byte:02x}", *_BYTE_STYLES[byte // 32])


def format_attribute(attribute: int) -> str:
    """Return a palette attribute 0-3 as one hex digit, coloured by value."""
    if not 0 <= attribute <= 3:
        raise ValueError(f"Unexpected attribute value: {attribute}")
    return _style(f"{attribute:x}", _ATTRIBUTE_COLORS[attribute])


def _chunks(data: bytes, size: int) -> list[bytes]:
    return [data[start : start + size] for start in range(0, len(data), size)]


def render_nametable(data: bytes) -> str:
    """Render the tile part of a nametable as a coloured hex grid."""
    lines = [
        _style(
            "\n\n┣━━━━┫ Nametable ┣━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┫\n",
            _CYAN,
        ),
        "The nametable is the tilemap data that is stored in the PPU memory.",
        "It is used to draw the background on the NES. Each byte references",
        "a tile in the character data.",
        "",
        _style("https://www.nesdev.org/wiki/PPU_nametables", _UNDERLINE),
        "",
        "PPU Nametable 0 = $2000 - $20bf",
        "PPU Nametable 1 = $2400 - $24bf",
        "PPU Nametable 2 = $2800 - $28bf",
        "PPU Nametable 3 = $2c00 - $2cbf",
        "",
        _dim("     00  10  20  30  40  50  60  70  80  90  a0  b0  c0  d0  e0  f0    "),
        _dim("   ┌──────────────────────────────────────────────────────────────────┐"),
    ]
    for row, window in enumerate(_chunks(bytes(data), 32)):
        cells = "".join(format_byte(byte) for byte in window)
        lines.append(_dim(f"{row * 8:02x} │ ") + cells + _dim(" │"))
    lines.append(
        _dim("   └──────────────────────────────────────────────────────────────────┘")
    )
    return "\n".join(lines) + "\n"


def render_attributes(data: bytes) -> str:
    """Render the attribute part of a nametable, packed and unpacked."""
    lines = [
        _style(
            "\n\n┣━━━━┫ Attributes ┣━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┫\n",
            _CYAN,
        ),
        "The attributes are stored in the nametable packed into the last",
        "64 bytes. The attribute picks palettes 0, 1, 2, or 3. Each attribute",
        "affects a 2x2 tile group in the nametable.",
        "",
        _style("https://www.nesdev.org/wiki/PPU_attribute_tables", _UNDERLINE),
        "",
        "PPU Nametable 0 = $20c0 - $20ff",
        "PPU Nametable 1 = $24c0 - $24ff",
        "PPU Nametable 2 = $28c0 - $28ff",
        "PPU Nametable 3 = $2cc0 - $2cff",
        "",
        _style("       Byte View", _YELLOW),
        _dim("     x0  x2  x4  x6"),
        _dim("   ┌──────────────────┐"),
    ]
    windows = _chunks(bytes(data), 8)
    for row, window in enumerate(windows):
        label = (row * 8 + 0xC0) & 0xFF
        cells = "".join(format_byte(byte) for byte in window)
        lines.append(_dim(f"{label:02x} │ ") + cells + _dim(" │"))
    lines += [
        _dim("   └──────────────────┘"),
        "",
        _style("         Unpacked Attribute View", _YELLOW),
        _dim("      x0  x1  x2  x3  x4  x5  x6  x7"),
        _dim("   ┌─────────────────────────────────┐"),
    ]
    for row, window in enumerate(windows):
        label = (row * 8 + 0xC0) & 0xFF
        # Bits 1-0: top left, 3-2: top right, 5-4: bottom left, 7-6: bottom right.
        top = "".join(
            f"{format_attribute(byte & 0b11)} {format_attribute((byte >> 2) & 0b11)} "
            for byte in window
        )
        bottom = "".join(
            f"{format_attribute((byte >> 4) & 0b11)} {format_attribute(byte >> 6)} "
            for byte in window
        )
        lines.append(_dim(f"{label:02x} │ ") + top + _dim("│"))
        lines.append(_dim("   │ ") + bottom + _dim("│"))
    lines.append(_dim("   └─────────────────────────────────┘"))
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a nametable file's tiles and attributes; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(
            "The nametable file viewer expects the first argument to be a path "
            "to a .nam file.",
            file=sys.stderr,
        )
        print("python -m nestoolkit.nametable_viewer map.nam", file=sys.stderr)
        return 1

    filename = args[0]
    print(f"Loading file {filename}")
    try:
        data = Path(filename).read_bytes()
    except OSError as err:
        print(f"Failed to read the file: {err}", file=sys.stderr)
        return 1

    if len(data) != NAMETABLE_FILE_BYTES:
        print(
            "Expected the nametable file to contain 1024 bytes. "
            f"Instead {len(data)} were found.",
            file=sys.stderr,
        )
        return 1

    sys.stdout.write(render_nametable(data[:NAMETABLE_TILE_BYTES]))
    sys.stdout.write(render_attributes(data[NAMETABLE_TILE_BYTES:]))
    return 0


if __name__ == "__main__":
    sys.exit(main())