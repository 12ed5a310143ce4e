"""Per-opcode lookup tables: cycle counts, addressing modes and mnemonics."""

from __future__ import annotations

from .opcodes import Mode

_CYCLES: tuple[int, ...] = (
    7, 6, 0, 8, 3, 3, 5, 5, 3, 2, 2, 2, 4, 4, 6, 6,
    2, 5, 0, 8, 4, 4, 6, 6, 2, 4, 2, 7, 4, 4, 7, 7,
    6, 6, 0, 8, 3, 3, 5, 5, 4, 2, 2, 2, 4, 4, 6, 6,
    2, 5, 0, 8, 4, 4, 6, 6, 2, 4, 2, 7, 4, 4, 7, 7,
    6, 6, 0, 8, 3, 3, 5, 5, 3, 2, 2, 2, 3, 4, 6, 6,
    2, 5, 0, 8, 4, 4, 6, 6, 2, 4, 2, 7, 4, 4, 7, 7,
    6, 6, 0, 8, 3, 3, 5, 5, 4, 2, 2, 2, 5, 4, 6, 6,
    2, 5, 0, 8, 4, 4, 6, 6, 2, 4, 2, 7, 4, 4, 7, 7,
    2, 6, 2, 6, 3, 3, 3, 3, 2, 2, 2, 2, 4, 4, 4, 4,
    2, 6, 0, 6, 4, 4, 4, 4, 2, 5, 2, 5, 5, 5, 5, 5,
    2, 6, 2, 6, 3, 3, 3, 3, 2, 2, 2, 2, 4, 4, 4, 4,
    2, 5, 0, 5, 4, 4, 4, 4, 2, 4, 2, 4, 4, 4, 4, 4,
    2, 6, 2, 8, 3, 3, 5, 5, 2, 2, 2, 2, 4, 4, 6, 6,
    2, 5, 0, 8, 4, 4, 6, 6, 2, 4, 2, 7, 4, 4, 7, 7,
    2, 6, 2, 8, 3, 3, 5, 5, 2, 2, 2, 2, 4, 4, 6, 6,
    2, 5, 0, 8, 4, 4, 6, 6, 2, 4, 2, 7, 4, 4, 7, 7,
)

_MODE_ABBREVIATIONS = {
    "abs": Mode.ABSOLUTE,
    "abx": Mode.ABSOLUTE_INDEXED_X,
    "aby": Mode.ABSOLUTE_INDEXED_Y,
    "imm": Mode.IMMEDIATE,
    "imp": Mode.IMPLIED,
    "ind": Mode.INDIRECT,
    "izx": Mode.INDIRECT_X,
    "izy": Mode.INDIRECT_Y,
    "rel": Mode.RELATIVE,
    "a": Mode.REGISTER_A,
    "zp": Mode.ZERO_PAGE,
    "zpx": Mode.ZERO_PAGE_X,
    "zpy": Mode.ZERO_PAGE_Y,
    "non": Mode.NONE,
}

_BRANCH_ROW = "rel izy non izy zpx zpx zpx zpx non aby non aby abx abx abx abx"
_LOAD_STORE_BRANCH_ROW = (
    "rel izy non izy zpx zpx zpy zpy non aby non aby abx abx aby aby"
)
_IMMEDIATE_ROW = "imm izx imm izx zp zp zp zp non imm non imm abs abs abs abs"

_MODE_ROWS = (
    "non izx non izx zp zp zp zp non imm a imm abs abs abs abs",
    _BRANCH_ROW,
    "abs izx non izx zp zp zp zp non imm a imm abs abs abs abs",
    _BRANCH_ROW,
    "non izx non izx zp zp zp zp non imm a imm abs abs abs abs",
    _BRANCH_ROW,
    "non izx non izx zp zp zp zp non imm a imm ind abs abs abs",
    _BRANCH_ROW,
    _IMMEDIATE_ROW,
    _LOAD_STORE_BRANCH_ROW,
    _IMMEDIATE_ROW,
    _LOAD_STORE_BRANCH_ROW,
    _IMMEDIATE_ROW,
    _BRANCH_ROW,
    _IMMEDIATE_ROW,
    _BRANCH_ROW,
)

_MODES: tuple[Mode, ...] = tuple(
    _MODE_ABBREVIATIONS[abbreviation]
    for row in _MODE_ROWS
    for abbreviation in row.split()
)

_NAMES: tuple[str, ...] = tuple(
    """
    brk ora kil slo nop ora asl slo php ora asl anc nop ora asl slo
    bpl ora kil slo nop ora asl slo clc ora nop slo nop ora asl slo
    jsr and kil rla bit and rol rla plp and rol anc bit and rol rla
    bmi and kil rla nop and rol rla sec and nop rla nop and rol rla
    rti eor kil sre nop eor lsr sre pha eor lsr alr jmp eor lsr sre
    bvc eor kil sre nop eor lsr sre cli eor nop sre nop eor lsr sre
    rts adc kil rra nop adc ror rra pla adc ror arr jmp adc ror rra
    bvs adc kil rra nop adc ror rra sei adc nop rra nop adc ror rra
    nop sta nop sax sty sta stx sax dey nop txa xaa sty sta stx sax
    bcc sta kil ahx sty sta stx sax tya sta txs tas shy sta shx ahx
    ldy lda ldx lax ldy lda ldx lax tay lda tax lax ldy lda ldx lax
    bcs lda kil lax ldy lda ldx lax clv lda tsx las ldy lda ldx lax
    cpy cmp nop dcp cpy cmp dec dcp iny cmp dex axs cpy cmp dec dcp
    bne cmp kil dcp nop cmp dec dcp cld cmp nop dcp nop cmp dec dcp
    cpx sbc nop isc cpx sbc inc isc inx sbc nop sbc cpx sbc inc isc
    beq sbc kil isc nop sbc inc isc sed sbc nop isc nop sbc inc isc
    """.split()
)

assert len(_CYCLES) == len(_MODES) == len(_NAMES) == 256


def _index(opcode: int) -> int:
    value = int(opcode)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Opcode out of range: {value}")
    return value


def cycle_count(opcode: int) -> int:
    """Return the base number of cycles the opcode takes (0 for KIL)."""
    return _CYCLES[_index(opcode)]


def addressing_mode(opcode: int) -> Mode:
    """Return the addressing mode used by the opcode."""
    return _MODES[_index(opcode)]


def opcode_name(opcode: int) -> str:
    """Return the lower-case mnemonic of the opcode."""
    return _NAMES[_index(opcode)]