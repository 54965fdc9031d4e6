import pytest

from sapcore.assembler import Assembler, AssemblerError, Instruction
from sapcore.disassembler import Opcode, disassemble


def test_single_instruction_with_operand():
    assert Assembler().assemble(["LDA 14"]) == [Instruction(0, int(Opcode.LDA), 14)]


def test_instruction_without_operand_has_zero_operand():
    result = Assembler().assemble(["OUT", "HLT"])
    assert result == [
        Instruction(0, int(Opcode.OUT), 0),
        Instruction(1, int(Opcode.HLT), 0),
    ]


def test_comments_and_empty_lines_are_skipped():
    lines = ["; a program", "", "LDI 3 ; load three", "   ", "OUT"]
    result = Assembler().assemble(lines)
    assert [i.address for i in result] == [0, 1]
    assert [disassemble(i.byte) for i in result] == ["LDI 3", "OUT"]


def test_round_trip_through_disassembler():
    program = ["LDA 14", "ADD 15", "SUB 13", "STA 12", "LDI 5", "JMP 4", "JC 6", "JZ 7", "NOP", "OUT", "HLT"]
    result = Assembler().assemble(program)
    assert [disassemble(i.byte) for i in result] == program
    assert [i.address for i in result] == list(range(len(program)))


def test_org_and_db_place_data():
    result = Assembler().assemble(["LDA 14", "ORG 14", "DB 28", "DB 14"])
    assert [i.address for i in result] == [0, 14, 15]
    assert [i.byte for i in result[1:]] == [28, 14]


def test_db_truncates_to_a_byte():
    result = Assembler().assemble(["DB 255"])
    assert result[0].byte == 255


def test_unknown_mnemonic():
    with pytest.raises(AssemblerError, match="unknown mnemonic FOO"):
        Assembler().assemble(["FOO 1"])


def test_missing_operand():
    with pytest.raises(AssemblerError, match="wrong number of arguments to LDA"):
        Assembler().assemble(["LDA"])


def test_operand_out_of_bounds():
    with pytest.raises(AssemblerError, match="out of bounds 16"):
        Assembler().assemble(["LDA 16"])


def test_db_wrong_number_of_arguments():
    with pytest.raises(AssemblerError, match="wrong number of arguments to data"):
        Assembler().assemble(["DB 1 2"])


def test_address_out_of_bounds():
    lines = ["NOP"] * 16 + ["NOP"]
    with pytest.raises(AssemblerError, match="address out of bounds 16"):
        Assembler().assemble(lines)


def test_sixteen_instructions_fit():
    result = Assembler().assemble(["NOP"] * 16)
    assert len(result) == 16
    assert result[-1].address == 15


def test_invalid_number():
    with pytest.raises(AssemblerError):
        Assembler().assemble(["LDA x"])


def test_load_instructions_from_file(tmp_path):
    source = tmp_path / "add.asm"
    source.write_text("LDA 14\nADD 15\nOUT\nHLT\n\nORG 14\nDB 28\nDB 14\n")
    result = Assembler().load_instructions(str(source))
    assert [disassemble(i.byte) for i in result[:4]] == ["LDA 14", "ADD 15", "OUT", "HLT"]
    assert [i.byte for i in result[4:]] == [28, 14]


def test_empty_file_gives_no_instructions(tmp_path):
    source = tmp_path / "empty.asm"
    source.write_text("")
    assert Assembler().load_instructions(str(source)) == []


def test_missing_file(tmp_path):
    name = str(tmp_path / "does_not_exist.asm")
    with pytest.raises(AssemblerError) as info:
        Assembler().load_instructions(name)
    assert str(info.value) == f"Assembler: failed to open file: {name}"