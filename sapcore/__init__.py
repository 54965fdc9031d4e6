"""Bus, registers, ALU, flags, clock, assembler and disassembler of a SAP-1 style 8-bit computer."""

__version__ = "0.1.0"

__all__ = [
    "alu",
    "assembler",
    "bus",
    "clock",
    "disassembler",
    "flags",
    "listeners",
    "register",
]