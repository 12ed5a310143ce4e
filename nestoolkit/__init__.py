"""NES helpers: 6502 opcode tables, the NTSC palette, PPU image rendering, a nametable viewer, terminal widgets and a memory-mapped screen buffer."""

__version__ = "0.1.0"

__all__ = [
    "opcodes",
    "opcode_tables",
    "palette",
    "ppu_state",
    "nametable_viewer",
    "widgets",
    "screen",
]