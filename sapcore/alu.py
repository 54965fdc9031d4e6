"""8-bit arithmetic logic unit."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from sapcore.bus import Bus
from sapcore.listeners import RegisterListener
from sapcore.register import GenericRegister

logger = logging.getLogger(__name__)

AluObserver = Callable[[int, bool, bool], None]


class ArithmeticLogicUnit(RegisterListener):
    """Adds or subtracts the A and B registers and outputs the result to the bus.

    Addition is recalculated as soon as either register changes value.
    Subtraction is a one-off recalculation that the next addition overwrites.
    Each calculation sets the carry bit (result wrapped past 255) and the zero
    bit (result is 0). ``observer`` is an optional callable receiving
    ``(value, carry, zero)`` after each calculation.
    """

    def __init__(self, a_register: GenericRegister, b_register: GenericRegister, bus: Bus) -> None:
        self._a_register = a_register
        self._b_register = b_register
        self._bus = bus
        self._value = 0
        self._carry = False
        self._zero = True
        self.observer: Optional[AluObserver] = None

    @property
    def value(self) -> int:
        """The current result."""
        return self._value

    @property
    def carry(self) -> bool:
        """Whether the carry bit is set."""
        return self._carry

    @property
    def zero(self) -> bool:
        """Whether the zero bit is set."""
        return self._zero

    def reset(self) -> None:
        """Set the result to 0, with only the zero bit set."""
        self._value = 0
        self._carry = False
        self._zero = True

    def out(self) -> None:
        """Put the result on the bus."""
        logger.debug("ArithmeticLogicUnit: out")
        self._bus.write(self._value)

    def register_value_changed(self, value: int) -> None:
        self._calculate(self._b_register.value, "add")

    def subtract(self) -> None:
        """Overwrite the result with A - B, computed by adding B's two's complement.

        The carry bit is set whenever the addition wraps past 255, which is the
        case for any non-negative difference except when B is 0.
        """
        self._calculate(-self._b_register.value & 0xFF, "subtract")

    def _calculate(self, b_value: int, operation: str) -> None:
        result = self._a_register.value + b_value
        new_value = result & 0xFF
        new_carry = result > 0xFF
        new_zero = new_value == 0
        logger.debug(
            "ArithmeticLogicUnit: %s. value %d -> %d (%d), C=%s Z=%s",
            operation, self._value, result, new_value, new_carry, new_zero,
        )
        self._value = new_value
        self._carry = new_carry
        self._zero = new_zero
        if self.observer is not None:
            self.observer(self._value, self._carry, self._zero)

    def __str__(self) -> str:
        v = self._value
        return (
            f"ArithmeticLogicUnit: value - {v} / 0x{v:02X} / {v:08b}\n"
            f"ArithmeticLogicUnit: bits - C={int(self._carry)}, Z={int(self._zero)}"
        )