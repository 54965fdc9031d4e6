import pytest

from sapcore.bus import Bus
from sapcore.listeners import RegisterListener
from sapcore.register import GenericRegister


class RecordingListener(RegisterListener):
    def __init__(self):
        self.values = []

    def register_value_changed(self, value):
        self.values.append(value)


@pytest.fixture
def bus():
    return Bus()


@pytest.fixture
def register(bus):
    return GenericRegister("some", bus)


def test_out_puts_zero_on_new_instance(bus, register):
    assert bus.read() == 0
    register.out()
    assert bus.read() == 0


def test_clock_tick_does_nothing_by_itself(bus, register):
    bus.write(8)
    register.clock_ticked()
    register.out()
    assert bus.read() == 0


def test_in_stores_value_from_bus_on_clock_tick(bus, register):
    bus.write(8)
    register.in_()
    register.out()
    assert bus.read() == 0

    bus.write(6)
    register.clock_ticked()
    bus.write(4)

    register.out()
    assert bus.read() == 6


def test_in_only_stores_on_first_clock_tick(bus, register):
    bus.write(15)
    register.in_()
    register.clock_ticked()
    register.out()
    assert bus.read() == 15

    bus.write(6)
    register.clock_ticked()
    register.out()
    assert bus.read() == 15


def test_listener_notified_when_reading_from_bus(bus, register):
    listener = RecordingListener()
    register.register_listener = listener
    bus.write(8)
    register.in_()
    assert listener.values == []

    bus.write(6)
    register.clock_ticked()
    bus.write(4)
    assert listener.values == [6]


def test_observer_notified_when_reading_from_bus(bus, register):
    calls = []
    register.observer = calls.append
    bus.write(8)
    register.in_()
    assert calls == []

    bus.write(6)
    register.clock_ticked()
    bus.write(4)
    assert calls == [6]


def test_reset_sets_value_to_zero(bus, register):
    bus.write(8)
    register.in_()
    register.clock_ticked()
    register.out()
    assert bus.read() == 8

    register.reset()
    register.out()
    assert bus.read() == 0


def test_reset_notifies_listener(bus, register):
    listener = RecordingListener()
    register.register_listener = listener
    bus.write(80)
    register.in_()
    register.clock_ticked()
    assert listener.values == [80]

    register.reset()
    assert listener.values == [80, 0]


def test_reset_notifies_observer(bus, register):
    calls = []
    register.observer = calls.append
    bus.write(88)
    register.in_()
    register.clock_ticked()
    assert calls == [88]

    register.reset()
    assert calls == [88, 0]


def test_value_after_in_and_clock_tick(bus, register):
    bus.write(230)
    register.in_()
    assert register.value == 0
    register.clock_ticked()
    assert register.value == 230


def test_inverted_clock_tick_does_not_read(bus, register):
    bus.write(9)
    register.in_()
    register.inverted_clock_ticked()
    assert register.value == 0


def test_str_shows_name_and_value(bus, register):
    bus.write(255)
    register.in_()
    register.clock_ticked()
    assert str(register) == "some register: 255 / 0xFF / 11111111"