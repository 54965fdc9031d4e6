"""Interfaces through which the computer's components notify each other."""

from abc import ABC, abstractmethod


class ClockListener(ABC):
    """Notified on both edges of the clock signal."""

    @abstractmethod
    def clock_ticked(self) -> None:
        """Handle the rising edge of the clock."""

    @abstractmethod
    def inverted_clock_ticked(self) -> None:
        """Handle the falling edge of the clock."""


class RegisterListener(ABC):
    """Notified immediately whenever a register changes its value."""

    @abstractmethod
    def register_value_changed(self, value: int) -> None:
        """The register now holds ``value``."""


class StepListener(ABC):
    """Notified when the step counter has a new microinstruction step ready."""

    @abstractmethod
    def step_ready(self, step: int) -> None:
        """The given step is ready to be handled."""


class FlagsRegisterObserver(ABC):
    """External observer of the computer's flags."""

    @abstractmethod
    def flags_updated(self, carry_flag: bool, zero_flag: bool) -> None:
        """The flags have been updated."""