"""The clock that drives the computer."""

from __future__ import annotations

import logging
import math
import threading
import time
from typing import Callable, List, Optional, Protocol

from sapcore.listeners import ClockListener

logger = logging.getLogger(__name__)

_EPSILON = 1e-9
_MIN_HZ = 0.1


def _less_than(a: float, b: float) -> bool:
    return a < b - _EPSILON


def _equals(a: float, b: float) -> bool:
    return abs(a - b) < _EPSILON


class TimeSource(Protocol):
    """Source of elapsed time in nanoseconds."""

    def reset(self) -> None: ...

    def delta(self) -> float: ...

    def sleep(self, nanoseconds: float) -> None: ...


class _MonotonicTimeSource:
    def __init__(self) -> None:
        self._last = time.monotonic_ns()

    def reset(self) -> None:
        self._last = time.monotonic_ns()

    def delta(self) -> float:
        now = time.monotonic_ns()
        elapsed = now - self._last
        self._last = now
        return float(elapsed)

    def sleep(self, nanoseconds: float) -> None:
        if nanoseconds > 0:
            time.sleep(nanoseconds / 1e9)


class ClockError(Exception):
    """Raised when the clock is misconfigured."""


class Clock:
    """A square-wave clock at 50% duty cycle.

    Listeners are notified of the rising edge (``clock_ticked``) and the
    falling edge (``inverted_clock_ticked``), in the order they were added.
    ``on_tick`` receives ``True`` for a rising edge and ``False`` for a falling
    one; ``on_frequency_changed`` receives each new frequency in hertz.
    The frequency must be set before the clock is started.
    """

    def __init__(self, time_source: Optional[TimeSource] = None) -> None:
        self._time_source: TimeSource = time_source or _MonotonicTimeSource()
        self._half_period = 0.0
        self._hz = 0.0
        self._counter = 0.0
        self._running = False
        self._halted = False
        self._rising = False
        self._single_stepping = False
        self._remaining_ticks = 0
        self._thread: Optional[threading.Thread] = None
        self._listeners: List[ClockListener] = []
        self.on_tick: Optional[Callable[[bool], None]] = None
        self.on_frequency_changed: Optional[Callable[[float], None]] = None

    @property
    def is_running(self) -> bool:
        """Whether the clock is currently running."""
        return self._running

    @property
    def is_halted(self) -> bool:
        """Whether the clock is halted until reset."""
        return self._halted

    @property
    def hz(self) -> float:
        """The current frequency in hertz."""
        return self._hz

    def start(self) -> None:
        """Start the clock on a background thread until stopped or halted."""
        logger.info("Clock: starting clock")
        if self._halted:
            logger.error("Clock: halted")
            return
        self._prepare(single_stepping=False)
        self._thread = threading.Thread(target=self._main_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop a running clock."""
        self._running = False
        logger.info("Clock: stopped")

    def halt(self) -> None:
        """Stop the clock and refuse to start again until reset."""
        self._halted = True
        self.stop()

    def join(self) -> None:
        """Wait for a running clock to finish."""
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def detach(self) -> None:
        """Let a running clock go on without waiting for it."""
        self._thread = None

    def single_step(self) -> None:
        """Run one full clock cycle synchronously."""
        logger.info("Clock: single stepping clock")
        if self._halted:
            logger.error("Clock: halted")
            return
        if self._running:
            logger.error("Clock: already running")
            return
        self._prepare(single_stepping=True)
        self._remaining_ticks = 2
        self._main_loop()

    def reset(self) -> None:
        """Clear the halted state so the clock can start again."""
        self._halted = False

    def set_frequency(self, hz: float) -> None:
        """Set the frequency in hertz; it must be at least 0.1."""
        logger.debug("Clock: changing frequency to %s", hz)
        if _less_than(hz, _MIN_HZ):
            raise ClockError(f"Clock: frequency too low {hz:f}")
        self._hz = hz
        self._half_period = 1.0 / (hz * 2.0) * 1e9
        if self.on_frequency_changed is not None:
            self.on_frequency_changed(self._hz)

    def increase_frequency(self) -> None:
        """Increase the frequency by a step that grows with the frequency."""
        hz = self._hz
        if _less_than(hz, 1):
            self.set_frequency(hz + 0.1)
        elif hz < 20:
            self.set_frequency(hz + 1)
        elif hz < 200:
            self.set_frequency(hz + 10)
        elif hz < 2000:
            self.set_frequency(hz + 100)
        else:
            self.set_frequency(hz + 1000)

    def decrease_frequency(self) -> None:
        """Decrease the frequency by a step, but not below 0.1."""
        hz = self._hz
        if _less_than(hz, _MIN_HZ) or _equals(hz, _MIN_HZ):
            logger.error("Clock: can not decrease frequency below 0.1")
        elif hz <= 1:
            self.set_frequency(hz - 0.1)
        elif hz <= 20:
            self.set_frequency(hz - 1)
        elif hz <= 200:
            self.set_frequency(hz - 10)
        elif hz <= 2000:
            self.set_frequency(hz - 100)
        else:
            self.set_frequency(hz - 1000)

    def add_listener(self, listener: ClockListener) -> None:
        """Add a listener for clock edges."""
        self._listeners.append(listener)

    def clear_listeners(self) -> None:
        """Remove all listeners."""
        self._listeners.clear()

    def _prepare(self, single_stepping: bool) -> None:
        if self._half_period <= 0:
            raise ClockError("Clock: frequency must be set before start")
        self._counter = 0.0
        self._running = True
        self._rising = True
        self._single_stepping = single_stepping
        self._time_source.reset()

    def _main_loop(self) -> None:
        logger.debug("Clock: starting main loop")
        while self._running:
            if self._tick():
                if self._rising:
                    self._notify_tick()
                    self._rising = False
                else:
                    self._notify_inverted_tick()
                    self._rising = True
                if self._single_stepping:
                    self._remaining_ticks -= 1
                    if self._remaining_ticks <= 0:
                        self._running = False
            else:
                self._time_source.sleep(math.floor(self._half_period - self._counter))
        logger.debug("Clock: exiting main loop")

    def _tick(self) -> bool:
        self._counter += self._time_source.delta()
        if self._counter >= self._half_period:
            self._counter = math.fmod(self._counter, self._half_period)
            return True
        return False

    def _notify_tick(self) -> None:
        if self.on_tick is not None:
            self.on_tick(True)
        for listener in list(self._listeners):
            listener.clock_ticked()

    def _notify_inverted_tick(self) -> None:
        if self.on_tick is not None:
            self.on_tick(False)
        for listener in list(self._listeners):
            listener.inverted_clock_ticked()