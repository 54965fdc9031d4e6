"""Generic 8-bit register."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from sapcore.bus import Bus
from sapcore.listeners import ClockListener, RegisterListener

logger = logging.getLogger(__name__)


class GenericRegister(ClockListener):
    """An 8-bit register that reads from and writes to the bus.

    ``register_listener`` is notified immediately whenever the value changes;
    ``observer`` is an optional callable receiving every new value.
    """

    def __init__(self, name: str, bus: Bus) -> None:
        self.name = name
        self._bus = bus
        self._value = 0
        self._read_on_clock = False
        self.register_listener: Optional[RegisterListener] = None
        self.observer: Optional[Callable[[int], None]] = None

    @property
    def value(self) -> int:
        """The value currently stored in the register."""
        return self._value

    def reset(self) -> None:
        """Set the value back to 0."""
        self._value = 0
        self._notify()

    def in_(self) -> None:
        """Take the value from the bus on the next clock tick."""
        logger.debug("%s register: in - will read from bus on clock tick", self.name)
        self._read_on_clock = True

    def out(self) -> None:
        """Put the current value on the bus."""
        logger.debug("%s register: out", self.name)
        self._bus.write(self._value)

    def clock_ticked(self) -> None:
        """Handle the rising edge of the clock."""
        self._clock_edge(rising=True)

    def inverted_clock_ticked(self) -> None:
        """Handle the falling edge of the clock."""
        self._clock_edge(rising=False)

    def _clock_edge(self, rising: bool) -> None:
        # The register latches the bus only on the rising edge.
        if rising and self._read_on_clock:
            self._read_from_bus()
            self._read_on_clock = False

    def _read_from_bus(self) -> None:
        bus_value = self._bus.read()
        logger.debug(
            "%s register: changing value from %d to %d", self.name, self._value, bus_value
        )
        self._value = bus_value
        self._notify()

    def _notify(self) -> None:
        if self.observer is not None:
            self.observer(self._value)
        if self.register_listener is not None:
            self.register_listener.register_value_changed(self._value)

    def __str__(self) -> str:
        v = self._value
        return f"{self.name} register: {v} / 0x{v:02X} / {v:08b}"