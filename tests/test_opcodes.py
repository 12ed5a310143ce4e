import pytest

from nestoolkit.opcodes import (
    Instruction,
    OpCode,
    OpcodeMatchError,
    TokenMode,
    instruction_mode_to_op_code,
    match_instruction,
)


@pytest.mark.parametrize("text", ["lda", "LDA", "LdA"])
def test_match_instruction_is_case_insensitive(text):
    assert match_instruction(text) is Instruction.LDA


def test_match_instruction_recognises_kil():
    assert match_instruction("kil") is Instruction.KIL


@pytest.mark.parametrize("text", ["slo", "lax", "xyz", "", "ldaa"])
def test_match_instruction_rejects_unknown(text):
    assert match_instruction(text) is None


def test_every_matched_mnemonic_maps_back_to_its_name():
    names = ["adc", "jmp", "txs", "bne", "nop", "rti", "sty"]
    for name in names:
        assert match_instruction(name).name.lower() == name


def test_opcode_covers_every_byte_once():
    values = [int(OpCode(value)) for value in range(256)]
    assert values == list(range(256))
    assert len(OpCode) == 256


@pytest.mark.parametrize(
    "instruction, mode, expected",
    [
        (Instruction.LDA, TokenMode.IMMEDIATE, 0xA9),
        (Instruction.JMP, TokenMode.INDIRECT, 0x6C),
        (Instruction.JMP, TokenMode.ABSOLUTE, 0x4C),
        (Instruction.STA, TokenMode.ZERO_PAGE_OR_RELATIVE, 0x85),
        (Instruction.LDX, TokenMode.ZERO_PAGE_Y, 0xB6),
        (Instruction.BRK, TokenMode.NONE, 0x00),
        (Instruction.NOP, TokenMode.NONE, 0x1A),
        (Instruction.KIL, TokenMode.NONE, 0x02),
        (Instruction.SHY, TokenMode.ABSOLUTE_INDEXED_X, 0x9C),
    ],
)
def test_known_opcodes(instruction, mode, expected):
    assert instruction_mode_to_op_code(instruction, mode) == expected


@pytest.mark.parametrize("name", ["ASL", "LSR", "ROL", "ROR"])
def test_accumulator_modes_agree(name):
    instruction = Instruction[name]
    implied = instruction_mode_to_op_code(instruction, TokenMode.NONE)
    register = instruction_mode_to_op_code(instruction, TokenMode.REGISTER_A)
    assert implied is register
    assert implied is OpCode[f"{name}_A"]


@pytest.mark.parametrize(
    "name", ["BCC", "BCS", "BEQ", "BMI", "BNE", "BPL", "BVC", "BVS"]
)
def test_branch_modes_agree(name):
    instruction = Instruction[name]
    relative = instruction_mode_to_op_code(instruction, TokenMode.RELATIVE)
    ambiguous = instruction_mode_to_op_code(
        instruction, TokenMode.ZERO_PAGE_OR_RELATIVE
    )
    assert relative is ambiguous
    assert relative is OpCode[f"{name}_REL"]


def test_every_mapped_opcode_belongs_to_its_instruction():
    for instruction in Instruction:
        for mode in TokenMode:
            try:
                op = instruction_mode_to_op_code(instruction, mode)
            except OpcodeMatchError:
                continue
            prefix = op.name.split("_")[0].rstrip("0123456789")
            assert prefix == instruction.name


@pytest.mark.parametrize(
    "instruction, mode",
    [
        (Instruction.STA, TokenMode.IMMEDIATE),
        (Instruction.JSR, TokenMode.INDIRECT),
        (Instruction.TAX, TokenMode.ABSOLUTE),
        (Instruction.LDA, TokenMode.NONE),
        (Instruction.BNE, TokenMode.ABSOLUTE),
    ],
)
def test_invalid_combinations_raise(instruction, mode):
    with pytest.raises(OpcodeMatchError, match="Unable to match the opcode"):
        instruction_mode_to_op_code(instruction, mode)


def test_error_is_a_value_error():
    with pytest.raises(ValueError):
        instruction_mode_to_op_code(Instruction.CLC, TokenMode.IMMEDIATE)