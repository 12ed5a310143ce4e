# nestoolkit

Small helpers for working with NES data and 6502 machine code. The package has
no dependencies outside the standard library.

## Modules

- `nestoolkit.opcodes`: the enumerations `Mode`, `TokenMode`, `Instruction`
  and `OpCode`. `OpCode` is an `IntEnum` that names all 256 byte values.
  - `match_instruction(string)` returns the `Instruction` for a mnemonic. Case
    does not matter. It returns `None` for an unknown mnemonic. It also returns
    `None` for the undocumented mnemonics other than `kil`, such as `lax` and
    `slo`.
  - `instruction_mode_to_op_code(instruction, mode)` returns the `OpCode` for an
    instruction in a `TokenMode`. It raises `OpcodeMatchError`, a subclass of
    `ValueError`, when no such opcode exists.
- `nestoolkit.opcode_tables`: lookups by opcode byte 0x00–0xff.
  - `cycle_count(opcode)` gives the base cycle count, which is 0 for the KIL
    opcodes.
  - `addressing_mode(opcode)` returns a `Mode`.
  - `opcode_name(opcode)` returns the lower-case mnemonic.
  - Each function raises `ValueError` for a value outside 0–255.
- `nestoolkit.palette`: `NTSC_PALETTE`, the 64-colour 2C02 palette.
  - `ntsc_color(index)` returns an `(r, g, b)` tuple and raises `ValueError`
    when the index is out of range.
  - The module also holds the nametable layout constants: `NAMETABLE_W`,
    `NAMETABLE_H` and `ATTRIBUTES_OFFSET`.
- `nestoolkit.ppu_state`: rendering of PPU data.
  - `tile_pixel_values(plane_1, plane_2)` decodes one 8×8 pattern tile from
    its two 8-byte bit planes into 2-bit pixel values.
  - `PpuState(nametable, chartable, palette)` loads a nametable (`.nam`), a
    character table (`.chr`) and a 16-byte palette file (`.pal`). Any of the
    three paths may be `None`. It builds raw RGBA images from them:
    - `build_view_image()` returns the 256×240 nametable picture, coloured
      through the attribute table and the four palettes.
    - `build_chartable_image()` returns a 128×128 grayscale view of the
      4096-byte character table.
    - Both return `None` while the files they need are missing. Both raise
      `ValueError` when a file has the wrong size.
  - `load(file_id, path)` replaces a file, chosen by `BinaryFileId`, and
    rebuilds the images.
  - `set_palette_color(palette_index, color_index, ntsc_index)` changes one
    palette entry and rebuilds the view image.
  - `lookup_attribute_palette(tile_x, tile_y)` returns the palette that
    applies to a tile.
- `nestoolkit.nametable_viewer`: a coloured terminal dump of a nametable file.
  - `render_nametable(data)` renders the tile part and
    `render_attributes(data)` renders the attribute part. The attribute output
    shows the bytes both packed and unpacked.
  - `format_byte()` and `format_attribute()` colour single values with ANSI
    escape codes.
- `nestoolkit.widgets`: small state helpers for terminal interfaces.
  - `SinSignal` is an endless iterator of sine points.
  - `TabsState` holds tab titles and a selection that wraps at both ends.
  - `StatefulList` is a list with an optional selection that wraps.
- `nestoolkit.screen`: a memory-mapped screen.
  - `ScreenBuffer(window_size, mem_offset)` mirrors a square region of memory
    as RGB bytes, one memory byte per pixel. The default region is 32×32 pixels
    read from `0x200`–`0x600`.
  - `update(read_u8)` reads each address through the callable you pass. It
    returns `True` if any pixel changed.
  - `color(byte)` gives the colour of a memory byte.

## Installation

```
pip install .
```

## Command line

View a nametable file:

```
nes-nametable map.nam
```

The file must contain exactly 1024 bytes: 960 bytes of tile indices followed by
64 bytes of attributes. The command prints both sections. It exits with status
1 in three cases: the argument is missing, the file cannot be read, or the file
has the wrong size.

## Library examples

```python
from nestoolkit.opcodes import Instruction, TokenMode, instruction_mode_to_op_code
from nestoolkit.opcode_tables import cycle_count, opcode_name

op = instruction_mode_to_op_code(Instruction.LDA, TokenMode.IMMEDIATE)
print(hex(op), opcode_name(op), cycle_count(op))   # 0xa9 lda 2
```

```python
from nestoolkit.ppu_state import PpuState

state = PpuState("level.nam", "tiles.chr", None)
image = state.build_view_image()   # 256x240 RGBA bytes
```

## What it does not do

- It does not execute 6502 code. There is no CPU emulator or assembler here.
  `ScreenBuffer` only reads memory through a function you supply.
- It does not open windows or draw on screen. The images from `PpuState` and
  `ScreenBuffer` are plain byte strings for you to display or save.
- There is no interactive CPU visualizer. `widgets` provides only state
  helpers.
- There is no file-picker dialog.

## Tests

```
pip install .[test]
pytest
```