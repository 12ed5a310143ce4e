"""6502 instructions, addressing modes and opcode values."""

from __future__ import annotations

import enum


class Mode(enum.Enum):
    """Addressing mode of a decoded opcode."""

    ABSOLUTE = enum.auto()
    ABSOLUTE_INDEXED_X = enum.auto()
    ABSOLUTE_INDEXED_Y = enum.auto()
    IMMEDIATE = enum.auto()
    IMPLIED = enum.auto()
    INDIRECT = enum.auto()
    INDIRECT_X = enum.auto()
    INDIRECT_Y = enum.auto()
    RELATIVE = enum.auto()
    REGISTER_A = enum.auto()
    ZERO_PAGE = enum.auto()
    ZERO_PAGE_X = enum.auto()
    ZERO_PAGE_Y = enum.auto()
    NONE = enum.auto()


class TokenMode(enum.Enum):
    """Addressing mode as far as it can be told from assembly source."""

    ABSOLUTE = enum.auto()
    ABSOLUTE_INDEXED_X = enum.auto()
    ABSOLUTE_INDEXED_Y = enum.auto()
    IMMEDIATE = enum.auto()
    IMPLIED = enum.auto()
    INDIRECT = enum.auto()
    INDIRECT_X = enum.auto()
    INDIRECT_Y = enum.auto()
    REGISTER_A = enum.auto()
    RELATIVE = enum.auto()
    ZERO_PAGE_OR_RELATIVE = enum.auto()
    ZERO_PAGE_X = enum.auto()
    ZERO_PAGE_Y = enum.auto()
    NONE = enum.auto()


class Instruction(enum.Enum):
    """6502 instruction mnemonics, including the undocumented ones."""

    # Logical and arithmetic
    ORA = enum.auto()
    AND = enum.auto()
    EOR = enum.auto()
    ADC = enum.auto()
    SBC = enum.auto()
    CMP = enum.auto()
    CPX = enum.auto()
    CPY = enum.auto()
    DEC = enum.auto()
    DEX = enum.auto()
    DEY = enum.auto()
    INC = enum.auto()
    INX = enum.auto()
    INY = enum.auto()
    ASL = enum.auto()
    ROL = enum.auto()
    LSR = enum.auto()
    ROR = enum.auto()
    # Moves
    LDA = enum.auto()
    STA = enum.auto()
    LDX = enum.auto()
    STX = enum.auto()
    LDY = enum.auto()
    STY = enum.auto()
    TAX = enum.auto()
    TXA = enum.auto()
    TAY = enum.auto()
    TYA = enum.auto()
    TSX = enum.auto()
    TXS = enum.auto()
    PLA = enum.auto()
    PHA = enum.auto()
    PLP = enum.auto()
    PHP = enum.auto()
    # Jumps and flags
    BPL = enum.auto()
    BMI = enum.auto()
    BVC = enum.auto()
    BVS = enum.auto()
    BCC = enum.auto()
    BCS = enum.auto()
    BNE = enum.auto()
    BEQ = enum.auto()
    BRK = enum.auto()
    RTI = enum.auto()
    JSR = enum.auto()
    RTS = enum.auto()
    JMP = enum.auto()
    BIT = enum.auto()
    CLC = enum.auto()
    SEC = enum.auto()
    CLD = enum.auto()
    SED = enum.auto()
    CLI = enum.auto()
    SEI = enum.auto()
    CLV = enum.auto()
    NOP = enum.auto()
    # Undocumented
    SLO = enum.auto()
    RLA = enum.auto()
    SRE = enum.auto()
    RRA = enum.auto()
    SAX = enum.auto()
    LAX = enum.auto()
    DCP = enum.auto()
    ISC = enum.auto()
    ANC = enum.auto()
    ALR = enum.auto()
    ARR = enum.auto()
    XAA = enum.auto()
    AXS = enum.auto()
    AHX = enum.auto()
    SHY = enum.auto()
    SHX = enum.auto()
    TAS = enum.auto()
    LAS = enum.auto()
    KIL = enum.auto()


class OpCode(enum.IntEnum):
    """Every byte value 0x00-0xff named by instruction and addressing mode."""

    BRK = 0x00
    ORA_IZX = 0x01
    KIL = 0x02
    SLO_IZX = 0x03
    NOP_ZP = 0x04
    ORA_ZP = 0x05
    ASL_ZP = 0x06
    SLO_ZP = 0x07
    PHP = 0x08
    ORA_IMM = 0x09
    ASL_A = 0x0A
    ANC_IMM = 0x0B
    NOP_ABS = 0x0C
    ORA_ABS = 0x0D
    ASL_ABS = 0x0E
    SLO_ABS = 0x0F
    BPL_REL = 0x10
    ORA_IZY = 0x11
    KIL1 = 0x12
    SLO_IZY = 0x13
    NOP_ZPX = 0x14
    ORA_ZPX = 0x15
    ASL_ZPX = 0x16
    SLO_ZPX = 0x17
    CLC = 0x18
    ORA_ABY = 0x19
    NOP = 0x1A
    SLO_ABY = 0x1B
    NOP_ABX = 0x1C
    ORA_ABX = 0x1D
    ASL_ABX = 0x1E
    SLO_ABX = 0x1F
    JSR_ABS = 0x20
    AND_IZX = 0x21
    KIL2 = 0x22
    RLA_IZX = 0x23
    BIT_ZP = 0x24
    AND_ZP = 0x25
    ROL_ZP = 0x26
    RLA_ZP = 0x27
    PLP = 0x28
    AND_IMM = 0x29
    ROL_A = 0x2A
    ANC_IMM1 = 0x2B
    BIT_ABS = 0x2C
    AND_ABS = 0x2D
    ROL_ABS = 0x2E
    RLA_ABS = 0x2F
    BMI_REL = 0x30
    AND_IZY = 0x31
    KIL3 = 0x32
    RLA_IZY = 0x33
    NOP_ZPX1 = 0x34
    AND_ZPX = 0x35
    ROL_ZPX = 0x36
    RLA_ZPX = 0x37
    SEC = 0x38
    AND_ABY = 0x39
    NOP4 = 0x3A
    RLA_ABY = 0x3B
    NOP_ABX1 = 0x3C
    AND_ABX = 0x3D
    ROL_ABX = 0x3E
    RLA_ABX = 0x3F
    RTI = 0x40
    EOR_IZX = 0x41
    KIL4 = 0x42
    SRE_IZX = 0x43
    NOP_ZP1 = 0x44
    EOR_ZP = 0x45
    LSR_ZP = 0x46
    SRE_ZP = 0x47
    PHA = 0x48
    EOR_IMM = 0x49
    LSR_A = 0x4A
    ALR_IMM = 0x4B
    JMP_ABS = 0x4C
    EOR_ABS = 0x4D
    LSR_ABS = 0x4E
    SRE_ABS = 0x4F
    BVC_REL = 0x50
    EOR_IZY = 0x51
    KIL5 = 0x52
    SRE_IZY = 0x53
    NOP_ZPX2 = 0x54
    EOR_ZPX = 0x55
    LSR_ZPX = 0x56
    SRE_ZPX = 0x57
    CLI = 0x58
    EOR_ABY = 0x59
    NOP3 = 0x5A
    SRE_ABY = 0x5B
    NOP_ABX2 = 0x5C
    EOR_ABX = 0x5D
    LSR_ABX = 0x5E
    SRE_ABX = 0x5F
    RTS = 0x60
    ADC_IZX = 0x61
    KIL6 = 0x62
    RRA_IZX = 0x63
    NOP_ZP2 = 0x64
    ADC_ZP = 0x65
    ROR_ZP = 0x66
    RRA_ZP = 0x67
    PLA = 0x68
    ADC_IMM = 0x69
    ROR_A = 0x6A
    ARR_IMM = 0x6B
    JMP_IND = 0x6C
    ADC_ABS = 0x6D
    ROR_ABS = 0x6E
    RRA_ABS = 0x6F
    BVS_REL = 0x70
    ADC_IZY = 0x71
    KIL7 = 0x72
    RRA_IZY = 0x73
    NOP_ZPX3 = 0x74
    ADC_ZPX = 0x75
    ROR_ZPX = 0x76
    RRA_ZPX = 0x77
    SEI = 0x78
    ADC_ABY = 0x79
    NOP8 = 0x7A
    RRA_ABY = 0x7B
    NOP_ABX3 = 0x7C
    ADC_ABX = 0x7D
    ROR_ABX = 0x7E
    RRA_ABX = 0x7F
    NOP_IMM = 0x80
    STA_IZX = 0x81
    NOP_IMM1 = 0x82
    SAX_IZX = 0x83
    STY_ZP = 0x84
    STA_ZP = 0x85
    STX_ZP = 0x86
    SAX_ZP = 0x87
    DEY = 0x88
    NOP_IMM2 = 0x89
    TXA = 0x8A
    XAA_IMM = 0x8B
    STY_ABS = 0x8C
    STA_ABS = 0x8D
    STX_ABS = 0x8E
    SAX_ABS = 0x8F
    BCC_REL = 0x90
    STA_IZY = 0x91
    KIL8 = 0x92
    AHX_IZY = 0x93
    STY_ZPX = 0x94
    STA_ZPX = 0x95
    STX_ZPY = 0x96
    SAX_ZPY = 0x97
    TYA = 0x98
    STA_ABY = 0x99
    TXS = 0x9A
    TAS_ABY = 0x9B
    SHY_ABX = 0x9C
    STA_ABX = 0x9D
    SHX_ABY = 0x9E
    AHX_ABY = 0x9F
    LDY_IMM = 0xA0
    LDA_IZX = 0xA1
    LDX_IMM = 0xA2
    LAX_IZX = 0xA3
    LDY_ZP = 0xA4
    LDA_ZP = 0xA5
    LDX_ZP = 0xA6
    LAX_ZP = 0xA7
    TAY = 0xA8
    LDA_IMM = 0xA9
    TAX = 0xAA
    LAX_IMM = 0xAB
    LDY_ABS = 0xAC
    LDA_ABS = 0xAD
    LDX_ABS = 0xAE
    LAX_ABS = 0xAF
    BCS_REL = 0xB0
    LDA_IZY = 0xB1
    KIL9 = 0xB2
    LAX_IZY = 0xB3
    LDY_ZPX = 0xB4
    LDA_ZPX = 0xB5
    LDX_ZPY = 0xB6
    LAX_ZPY = 0xB7
    CLV = 0xB8
    LDA_ABY = 0xB9
    TSX = 0xBA
    LAS_ABY = 0xBB
    LDY_ABX = 0xBC
    LDA_ABX = 0xBD
    LDX_ABY = 0xBE
    LAX_ABY = 0xBF
    CPY_IMM = 0xC0
    CMP_IZX = 0xC1
    NOP_IMM3 = 0xC2
    DCP_IZX = 0xC3
    CPY_ZP = 0xC4
    CMP_ZP = 0xC5
    DEC_ZP = 0xC6
    DCP_ZP = 0xC7
    INY = 0xC8
    CMP_IMM = 0xC9
    DEX = 0xCA
    AXS_IMM = 0xCB
    CPY_ABS = 0xCC
    CMP_ABS = 0xCD
    DEC_ABS = 0xCE
    DCP_ABS = 0xCF
    BNE_REL = 0xD0
    CMP_IZY = 0xD1
    KIL10 = 0xD2
    DCP_IZY = 0xD3
    NOP_ZPX4 = 0xD4
    CMP_ZPX = 0xD5
    DEC_ZPX = 0xD6
    DCP_ZPX = 0xD7
    CLD = 0xD8
    CMP_ABY = 0xD9
    NOP1 = 0xDA
    DCP_ABY = 0xDB
    NOP_ABX4 = 0xDC
    CMP_ABX = 0xDD
    DEC_ABX = 0xDE
    DCP_ABX = 0xDF
    CPX_IMM = 0xE0
    SBC_IZX = 0xE1
    NOP_IMM4 = 0xE2
    ISC_IZX = 0xE3
    CPX_ZP = 0xE4
    SBC_ZP = 0xE5
    INC_ZP = 0xE6
    ISC_ZP = 0xE7
    INX = 0xE8
    SBC_IMM = 0xE9
    NOP5 = 0xEA
    SBC_IMM1 = 0xEB
    CPX_ABS = 0xEC
    SBC_ABS = 0xED
    INC_ABS = 0xEE
    ISC_ABS = 0xEF
    BEQ_REL = 0xF0
    SBC_IZY = 0xF1
    KIL11 = 0xF2
    ISC_IZY = 0xF3
    NOP_ZPX5 = 0xF4
    SBC_ZPX = 0xF5
    INC_ZPX = 0xF6
    ISC_ZPX = 0xF7
    SED = 0xF8
    SBC_ABY = 0xF9
    NOP6 = 0xFA
    ISC_ABY = 0xFB
    NOP_ABX5 = 0xFC
    SBC_ABX = 0xFD
    INC_ABX = 0xFE
    ISC_ABX = 0xFF


class OpcodeMatchError(ValueError):
    """No opcode exists for an instruction in a given addressing mode."""


# Mnemonics the assembler recognises; other undocumented ones are not accepted.
_RECOGNISED_MNEMONICS = frozenset(
    {
        "ora", "and", "eor", "adc", "sbc", "cmp", "cpx", "cpy", "dec", "dex",
        "dey", "inc", "inx", "iny", "asl", "rol", "lsr", "ror", "lda", "sta",
        "ldx", "stx", "ldy", "sty", "tax", "txa", "tay", "tya", "tsx", "txs",
        "pla", "pha", "plp", "php", "bpl", "bmi", "bvc", "bvs", "bcc", "bcs",
        "bne", "beq", "brk", "rti", "jsr", "rts", "jmp", "bit", "clc", "sec",
        "cld", "sed", "cli", "sei", "clv", "nop", "kil",
    }
)


def match_instruction(string: str) -> Instruction | None:
    """Return the instruction for a mnemonic, case-insensitively, or None."""
    name = string.lower()
    if name not in _RECOGNISED_MNEMONICS:
        return None
    return Instruction[name.upper()]


_SUFFIX_MODES = {
    "abs": TokenMode.ABSOLUTE,
    "abx": TokenMode.ABSOLUTE_INDEXED_X,
    "aby": TokenMode.ABSOLUTE_INDEXED_Y,
    "imm": TokenMode.IMMEDIATE,
    "ind": TokenMode.INDIRECT,
    "izx": TokenMode.INDIRECT_X,
    "izy": TokenMode.INDIRECT_Y,
    "zp": TokenMode.ZERO_PAGE_OR_RELATIVE,
    "zpx": TokenMode.ZERO_PAGE_X,
    "zpy": TokenMode.ZERO_PAGE_Y,
}

_OPERAND_FORMS = {
    "ADC": "abs abx aby imm izx izy zp zpx",
    "AHX": "aby izy",
    "ALR": "imm",
    "ANC": "imm",
    "AND": "abs abx aby imm izx izy zp zpx",
    "ARR": "imm",
    "ASL": "abs abx zp zpx",
    "AXS": "imm",
    "BIT": "abs zp",
    "CMP": "abs abx aby imm izx izy zp zpx",
    "CPX": "abs imm zp",
    "CPY": "abs imm zp",
    "DCP": "abs abx aby izx izy zp zpx",
    "DEC": "abs abx zp zpx",
    "EOR": "abs abx aby imm izx izy zp zpx",
    "INC": "abs abx zp zpx",
    "ISC": "abs abx aby izx izy zp zpx",
    "JMP": "abs ind",
    "JSR": "abs",
    "LAS": "aby",
    "LAX": "abs aby imm izx izy zp zpy",
    "LDA": "abs abx aby imm izx izy zp zpx",
    "LDX": "abs aby imm zp zpy",
    "LDY": "abs abx imm zp zpx",
    "LSR": "abs abx zp zpx",
    "NOP": "abs abx imm zp zpx",
    "ORA": "abs abx aby imm izx izy zp zpx",
    "RLA": "abs abx aby izx izy zp zpx",
    "ROL": "abs abx zp zpx",
    "ROR": "abs abx zp zpx",
    "RRA": "abs abx aby izx izy zp zpx",
    "SAX": "abs izx zp zpy",
    "SBC": "abs abx aby imm izx izy zp zpx",
    "SHX": "aby",
    "SHY": "abx",
    "SLO": "abs abx aby izx izy zp zpx",
    "SRE": "abs abx aby izx izy zp zpx",
    "STA": "abs abx aby izx izy zp zpx",
    "STX": "abs zp zpy",
    "STY": "abs zp zpx",
    "TAS": "aby",
    "XAA": "imm",
}

_ACCUMULATOR = ("ASL", "LSR", "ROL", "ROR")
_BRANCHES = ("BCC", "BCS", "BEQ", "BMI", "BNE", "BPL", "BVC", "BVS")
_IMPLIED = (
    "BRK", "CLC", "CLD", "CLI", "CLV", "DEX", "DEY", "INX", "INY", "KIL",
    "NOP", "PHA", "PHP", "PLA", "PLP", "RTI", "RTS", "SEC", "SED", "SEI",
    "TAX", "TAY", "TSX", "TXA", "TXS", "TYA",
)


def _build_opcode_table() -> dict[tuple[Instruction, TokenMode], OpCode]:
    table: dict[tuple[Instruction, TokenMode], OpCode] = {}
    for name, forms in _OPERAND_FORMS.items():
        for suffix in forms.split():
            table[Instruction[name], _SUFFIX_MODES[suffix]] = OpCode[
                f"{name}_{suffix.upper()}"
            ]
    for name in _ACCUMULATOR:
        for mode in (TokenMode.NONE, TokenMode.REGISTER_A):
            table[Instruction[name], mode] = OpCode[f"{name}_A"]
    for name in _BRANCHES:
        for mode in (TokenMode.ZERO_PAGE_OR_RELATIVE, TokenMode.RELATIVE):
            table[Instruction[name], mode] = OpCode[f"{name}_REL"]
    for name in _IMPLIED:
        table[Instruction[name], TokenMode.NONE] = OpCode[name]
    return table


_OPCODE_TABLE = _build_opcode_table()


def instruction_mode_to_op_code(instruction: Instruction, mode: TokenMode) -> OpCode:
    """Return the opcode for an instruction in an addressing mode.

    Raises OpcodeMatchError when the combination does not exist.
    """
    try:
        return _OPCODE_TABLE[instruction, mode]
    except KeyError:
        raise OpcodeMatchError(
            f"Unable to match the opcode {instruction.name} {mode.name}"
        ) from None