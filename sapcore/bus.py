"""The 8-bit bus shared by all components."""

from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

ValueObserver = Callable[[int], None]


class Bus:
    """An 8-bit bus that can be read and written at any time.

    ``observer`` is an optional callable receiving every new value.
    """

    def __init__(self) -> None:
        self._value = 0
        self.observer: Optional[ValueObserver] = None

    def read(self) -> int:
        """Return the current value on the bus."""
        return self._value

    def write(self, value: int) -> None:
        """Put a new value on the bus, truncated to 8 bits."""
        value &= 0xFF
        logger.debug("Bus: changing value from %d to %d", self._value, value)
        self._value = value
        self._notify()

    def reset(self) -> None:
        """Set the bus back to 0."""
        self._value = 0
        self._notify()

    def _notify(self) -> None:
        if self.observer is not None:
            self.observer(self._value)

    def __str__(self) -> str:
        v = self._value
        return f"Bus: {v} / 0x{v:02X} / {v:08b}"