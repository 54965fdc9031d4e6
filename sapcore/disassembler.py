"""Conversion of binary instructions back into assembly."""

from enum import IntEnum


class Opcode(IntEnum):
    """The 4-bit opcodes of the instruction set."""

    NOP = 0b0000
    LDA = 0b0001
    ADD = 0b0010
    SUB = 0b0011
    STA = 0b0100
    LDI = 0b0101
    JMP = 0b0110
    JC = 0b0111
    JZ = 0b1000
    OUT = 0b1110
    HLT = 0b1111

    @property
    def has_operand(self) -> bool:
        """Whether the instruction takes a 4-bit operand."""
        return self not in (Opcode.NOP, Opcode.OUT, Opcode.HLT)


def disassemble(instruction: int) -> str:
    """Convert an 8-bit instruction into assembly, e.g. ``0b00111001`` to ``"SUB 9"``.

    Returns ``"UNKNOWN"`` for an opcode outside the instruction set.
    """
    opcode_bits = (instruction >> 4) & 0x0F
    operand = instruction & 0x0F
    try:
        opcode = Opcode(opcode_bits)
    except ValueError:
        return "UNKNOWN"
    if opcode.has_operand:
        return f"{opcode.name} {operand}"
    return opcode.name