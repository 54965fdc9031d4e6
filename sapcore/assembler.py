"""Assembler turning assembly source into 8-bit machine instructions."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List

from sapcore.disassembler import Opcode

logger = logging.getLogger(__name__)

FOUR_BITS_MAX = 0x0F

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class AssemblerError(Exception):
    """Raised when assembly source cannot be turned into instructions."""


@dataclass(frozen=True)
class Instruction:
    """One byte of memory: a 4-bit address holding a 4-bit opcode and a 4-bit operand."""

    address: int
    opcode: int
    operand: int

    @property
    def byte(self) -> int:
        """The 8-bit value stored at the address."""
        return (self.opcode << 4) | self.operand


def _parse_int(text: str) -> int:
    """Parse a leading decimal integer, ignoring trailing characters."""
    match = _INTEGER.match(text)
    if match is None:
        raise AssemblerError(f"Assembler: invalid number {text}")
    return int(match.group(1))


def _tokenize(line: str) -> List[str]:
    tokens = []
    for token in line.split():
        if token.startswith(";"):
            break
        tokens.append(token)
    return tokens


class Assembler:
    """Turns assembly source into machine instructions for a 16-byte memory.

    Besides the instruction set, two pseudo-instructions are supported:

    - ``ORG n``: continue at memory address ``n``.
    - ``DB n``: store the byte ``n`` at the current address.

    Comments start with ``;``.
    """

    def load_instructions(self, file_name: str) -> List[Instruction]:
        """Assemble the file named ``file_name``."""
        logger.info("Assembler: loading file: %s", file_name)
        try:
            with open(file_name, encoding="utf-8") as file:
                lines = [line.rstrip("\n") for line in file]
        except OSError as error:
            raise AssemblerError(f"Assembler: failed to open file: {file_name}") from error
        return self.assemble(lines)

    def assemble(self, lines: Iterable[str]) -> List[Instruction]:
        """Assemble the given source lines."""
        instructions: List[Instruction] = []
        location = 0

        for line in lines:
            if not line:
                continue
            logger.debug("Assembler: %s", line)

            if location > FOUR_BITS_MAX:
                raise AssemblerError(f"Assembler: address out of bounds {location}")

            tokens = _tokenize(line)
            if not tokens:
                continue

            mnemonic = tokens[0]
            if mnemonic == "ORG":
                if len(tokens) < 2:
                    raise AssemblerError("Assembler: wrong number of arguments to ORG")
                location = _parse_int(tokens[1]) & 0xFF
            elif mnemonic == "DB":
                instructions.append(self._data(location, tokens))
                location += 1
            else:
                instructions.append(self._instruction(location, mnemonic, tokens))
                location += 1

        return instructions

    @staticmethod
    def _data(location: int, tokens: List[str]) -> Instruction:
        if len(tokens) != 2:
            raise AssemblerError("Assembler: wrong number of arguments to data")
        value = _parse_int(tokens[1]) & 0xFF
        instruction = Instruction(location & FOUR_BITS_MAX, value >> 4, value & FOUR_BITS_MAX)
        logger.debug("Assembler: %s", instruction)
        return instruction

    @staticmethod
    def _instruction(location: int, mnemonic: str, tokens: List[str]) -> Instruction:
        try:
            opcode = Opcode[mnemonic]
        except KeyError:
            raise AssemblerError(
                f"Assembler: interpret mnemonic - unknown mnemonic {mnemonic}"
            ) from None

        operand = 0
        if opcode.has_operand:
            if len(tokens) != 2:
                raise AssemblerError(
                    f"Assembler: interpret operand - wrong number of arguments to {mnemonic}"
                )
            operand = _parse_int(tokens[1]) & 0xFF
            if operand > FOUR_BITS_MAX:
                raise AssemblerError(f"Assembler: interpret operand - out of bounds {operand}")

        instruction = Instruction(location & FOUR_BITS_MAX, int(opcode), operand)
        logger.debug("Assembler: %s", instruction)
        return instruction