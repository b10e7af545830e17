"""Tests for the simulated hardware controllers"""

from unittest.mock import patch

import pytest

from fire_alarm.controllers import (
    BuzzerController, COLORS, DisplayController, SensorController, SensorReadError
)
from fire_alarm.controllers.display import fit_line


@pytest.mark.parametrize("text, expected", [
    ("", " " * 16),
    ("fire detected!", "fire detected!  "),
    ("exactly16chars!!", "exactly16chars!!"),
    ("temperature: 123.4", "temperature: 123"),
])
def test_fit_line_pads_and_truncates(text, expected):
    assert fit_line(text, 16) == expected


def test_display_write_line_keeps_fixed_width():
    display = DisplayController(columns=16, rows=2, simulate=True)

    display.message("temperature: 21")
    display.write_line(1, "fire detected! and more")

    assert display.lines == ["temperature: 21 ", "fire detected! a"]


def test_display_named_colors_fall_back_to_white():
    display = DisplayController(simulate=True)

    display.color("red")
    assert display.current_color == COLORS["red"]

    display.color("purple")
    assert display.current_color == COLORS["white"]


def test_display_clear_blanks_every_line():
    display = DisplayController(columns=16, rows=2, simulate=True)
    display.message("hello", 0)
    display.message("world", 1)

    display.clear()

    assert display.lines == [" " * 16, " " * 16]


def test_buzzer_double_stop_is_idempotent():
    buzzer = BuzzerController(simulate=True)
    buzzer.set_volume(0.5)
    buzzer.play(2600)

    buzzer.stop()
    once = (buzzer.is_playing, buzzer.volume, buzzer.frequency)
    buzzer.stop()
    twice = (buzzer.is_playing, buzzer.volume, buzzer.frequency)

    assert once == twice
    assert buzzer.is_playing is False


def test_buzzer_volume_is_clamped():
    buzzer = BuzzerController(simulate=True)

    buzzer.set_volume(3)
    assert buzzer.volume == 1.0
    buzzer.set_volume(-1)
    assert buzzer.volume == 0.0


def test_simulated_sensor_reads_near_base_temperature():
    sensor = SensorController(simulate=True)

    with patch("fire_alarm.controllers.sensors.config.SIMULATED_TEMPERATURE", 80.0):
        values = [sensor.read() for _ in range(20)]

    assert all(79.5 <= value <= 80.5 for value in values)


def test_sensor_without_value_raises():
    sensor = SensorController(simulate=True)
    sensor.simulate = False
    sensor.dht_sensor = type("Dht", (), {"temperature": None})()

    with pytest.raises(SensorReadError):
        sensor.read()


def test_sensor_runtime_error_becomes_read_error():
    class FlakyDht:
        @property
        def temperature(self):
            raise RuntimeError("Checksum did not validate")

    sensor = SensorController(simulate=True)
    sensor.simulate = False
    sensor.dht_sensor = FlakyDht()

    with pytest.raises(SensorReadError, match="Checksum"):
        sensor.read()


def test_display_geometry_from_arguments_or_config():
    wide = DisplayController(columns=20, rows=4, simulate=True)
    assert wide.lines == [" " * 20] * 4

    with patch.multiple("fire_alarm.controllers.display.config", LCD_COLUMNS=8, LCD_ROWS=1):
        small = DisplayController(simulate=True)

    small.message("temperature: 21")
    assert small.lines == ["temperat"]
