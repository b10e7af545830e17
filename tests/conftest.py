"""
Shared test fixtures for the fire alarm test suite.

Provides recording versions of the simulated hardware controllers, so tests
can assert on the exact sequence of display/buzzer operations, and a scripted
temperature sensor.
"""

import logging

import pytest

from fire_alarm.controllers import BuzzerController, DisplayController, SensorReadError
from fire_alarm.utils.event_bus import EventBus

logging.getLogger("fire_alarm").setLevel(logging.DEBUG)


class RecordingDisplay(DisplayController):
    """Simulated LCD that logs every operation"""

    def __init__(self):
        super().__init__(columns=16, rows=2, simulate=True)
        self.ops = []

    def set_color(self, r, g, b):
        self.ops.append(("color", (r, g, b)))
        super().set_color(r, g, b)

    def write_line(self, line, text):
        self.ops.append(("line", line, text))
        super().write_line(line, text)

    def colors(self):
        return [op[1] for op in self.ops if op[0] == "color"]


class RecordingBuzzer(BuzzerController):
    """Simulated buzzer that logs every operation"""

    def __init__(self):
        super().__init__(pin=18, simulate=True)
        self.ops = []

    def set_volume(self, level):
        self.ops.append(("volume", level))
        super().set_volume(level)

    def play(self, frequency):
        self.ops.append(("play", frequency))
        super().play(frequency)

    def stop(self):
        self.ops.append(("stop",))
        super().stop()


class ScriptedSensor:
    """Returns queued values in order, then repeats the last one.

    An Exception instance in the script is raised instead of returned.
    """

    def __init__(self, values):
        self.values = list(values)
        self.reads = 0
        self.closed = False

    def read(self):
        self.reads += 1
        if len(self.values) > 1:
            value = self.values.pop(0)
        else:
            value = self.values[0]
        if isinstance(value, Exception):
            raise value
        return value

    def close(self):
        self.closed = True


@pytest.fixture()
def bus():
    return EventBus()


@pytest.fixture()
def display():
    return RecordingDisplay()


@pytest.fixture()
def buzzer():
    return RecordingBuzzer()


@pytest.fixture()
def sensor_error():
    return SensorReadError("DHT22 returned no temperature")


@pytest.fixture()
def make_sensor():
    return ScriptedSensor
