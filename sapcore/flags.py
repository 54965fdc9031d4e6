"""Register holding the carry and zero flags."""

from __future__ import annotations

import logging
from typing import Optional

from sapcore.alu import ArithmeticLogicUnit
from sapcore.listeners import ClockListener, FlagsRegisterObserver

logger = logging.getLogger(__name__)


class FlagsRegister(ClockListener):
    """Stores the ALU's carry and zero bits as flags for conditional jumps."""

    def __init__(self, arithmetic_logic_unit: ArithmeticLogicUnit) -> None:
        self._alu = arithmetic_logic_unit
        self._read_on_clock = False
        self._carry_flag = False
        self._zero_flag = False
        self.observer: Optional[FlagsRegisterObserver] = None

    @property
    def carry_flag(self) -> bool:
        """Whether the carry flag is set."""
        return self._carry_flag

    @property
    def zero_flag(self) -> bool:
        """Whether the zero flag is set."""
        return self._zero_flag

    def reset(self) -> None:
        """Clear both flags."""
        self._carry_flag = False
        self._zero_flag = False
        self._notify()

    def in_(self) -> None:
        """Take the ALU's bits as the new flags on the next clock tick."""
        logger.debug("FlagsRegister: in - will read from ALU on clock tick")
        self._read_on_clock = True

    def clock_ticked(self) -> None:
        """Handle the rising edge of the clock."""
        self._clock_edge(rising=True)

    def inverted_clock_ticked(self) -> None:
        """Handle the falling edge of the clock."""
        self._clock_edge(rising=False)

    def _clock_edge(self, rising: bool) -> None:
        # The flags latch the ALU bits only on the rising edge.
        if rising and self._read_on_clock:
            self._read_from_alu()
            self._read_on_clock = False

    def _read_from_alu(self) -> None:
        carry, zero = self._alu.carry, self._alu.zero
        logger.debug(
            "FlagsRegister: CF=%s ZF=%s -> CF=%s ZF=%s",
            self._carry_flag, self._zero_flag, carry, zero,
        )
        self._carry_flag = carry
        self._zero_flag = zero
        self._notify()

    def _notify(self) -> None:
        if self.observer is not None:
            self.observer.flags_updated(self._carry_flag, self._zero_flag)

    def __str__(self) -> str:
        return f"FlagsRegister: CF={int(self._carry_flag)}, ZF={int(self._zero_flag)}"