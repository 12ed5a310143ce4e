import re

import pytest

from nestoolkit.opcode_tables import addressing_mode, cycle_count, opcode_name
from nestoolkit.opcodes import Instruction, Mode, OpCode, match_instruction

_SUFFIX_MODES = {
    "ABS": Mode.ABSOLUTE,
    "ABX": Mode.ABSOLUTE_INDEXED_X,
    "ABY": Mode.ABSOLUTE_INDEXED_Y,
    "IMM": Mode.IMMEDIATE,
    "IND": Mode.INDIRECT,
    "IZX": Mode.INDIRECT_X,
    "IZY": Mode.INDIRECT_Y,
    "REL": Mode.RELATIVE,
    "A": Mode.REGISTER_A,
    "ZP": Mode.ZERO_PAGE,
    "ZPX": Mode.ZERO_PAGE_X,
    "ZPY": Mode.ZERO_PAGE_Y,
}


def _split(opcode):
    base, _, suffix = opcode.name.partition("_")
    return base.rstrip("0123456789"), suffix.rstrip("0123456789")


@pytest.mark.parametrize("opcode", list(OpCode))
def test_name_matches_opcode_enum(opcode):
    base, _ = _split(opcode)
    assert opcode_name(opcode) == base.lower()


@pytest.mark.parametrize("opcode", list(OpCode))
def test_mode_matches_opcode_enum(opcode):
    _, suffix = _split(opcode)
    expected = _SUFFIX_MODES[suffix] if suffix else Mode.NONE
    assert addressing_mode(opcode) == expected


@pytest.mark.parametrize("opcode", list(OpCode))
def test_only_kil_takes_zero_cycles(opcode):
    cycles = cycle_count(opcode)
    if opcode_name(opcode) == "kil":
        assert cycles == 0
    else:
        assert 2 <= cycles <= 8


def test_every_byte_has_a_lower_case_name():
    names = [opcode_name(value) for value in range(256)]
    assert len(names) == 256
    assert all(re.fullmatch(r"[a-z]{3}", name) for name in names)


@pytest.mark.parametrize(
    "value, expected",
    [
        (OpCode.LDA_IMM, Instruction.LDA),
        (OpCode.STA_ZP, Instruction.STA),
        (OpCode.JMP_IND, Instruction.JMP),
        (OpCode.BRK, Instruction.BRK),
    ],
)
def test_documented_names_are_recognised_mnemonics(value, expected):
    assert match_instruction(opcode_name(value)) is expected


def test_known_values():
    assert opcode_name(0xA9) == "lda"
    assert addressing_mode(0xA9) == Mode.IMMEDIATE
    assert cycle_count(OpCode.BRK) == 7


def test_plain_ints_and_enum_members_agree():
    for opcode in OpCode:
        assert cycle_count(int(opcode)) == cycle_count(opcode)
        assert addressing_mode(int(opcode)) == addressing_mode(opcode)


@pytest.mark.parametrize("bad", [-1, 256, 1000])
@pytest.mark.parametrize("lookup", [cycle_count, addressing_mode, opcode_name])
def test_out_of_range_raises(lookup, bad):
    with pytest.raises(ValueError):
        lookup(bad)