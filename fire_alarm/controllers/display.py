"""RGB character LCD controller"""

import logging
from typing import List, Tuple
from .. import config

logger = logging.getLogger(__name__)

# Backlight colors (0-255 per channel)
COLORS = {
    "red": (255, 0, 0),
    "white": (255, 255, 255),
}


def fit_line(text: str, width: int) -> str:
    """Pad or truncate text to exactly width characters"""
    return str(text)[:width].ljust(width)


class DisplayController:
    """Drive an I2C RGB character LCD (backlight color + text lines)"""

    def __init__(self, columns: int = None, rows: int = None, simulate: bool = None):
        self.columns = columns if columns is not None else config.LCD_COLUMNS
        self.rows = rows if rows is not None else config.LCD_ROWS
        self.simulate = config.SIMULATE_HARDWARE if simulate is None else simulate
        self.lcd = None

        # Last state written, kept for status logging and simulation
        self.current_color: Tuple[int, int, int] = COLORS["white"]
        self.lines: List[str] = [fit_line("", self.columns) for _ in range(self.rows)]

        if not self.simulate:
            import board
            from adafruit_character_lcd.character_lcd_rgb_i2c import Character_LCD_RGB_I2C
            self.lcd = Character_LCD_RGB_I2C(board.I2C(), self.columns, self.rows)

        logger.info("Display controller initialized")

    def set_color(self, r: int, g: int, b: int):
        """Set the backlight color"""
        self.current_color = (r, g, b)
        if self.simulate:
            logger.debug(f"[SIMULATION] LCD color {self.current_color}")
            return

        # Driver takes each channel as a 0-100 percentage
        self.lcd.color = [round(channel * 100 / 255) for channel in (r, g, b)]

    def color(self, name: str):
        """Set a named backlight color; unknown names fall back to white"""
        self.set_color(*COLORS.get(name, COLORS["white"]))

    def write_line(self, line: int, text: str):
        """Write text at the start of a line, padded to the display width"""
        text = fit_line(text, self.columns)
        self.lines[line] = text
        if self.simulate:
            logger.debug(f"[SIMULATION] LCD line {line}: '{text}'")
            return

        self.lcd.cursor_position(0, line)
        self.lcd.message = text

    def message(self, text: str, line: int = 0):
        self.write_line(line, text)

    def clear(self):
        for line in range(self.rows):
            self.write_line(line, "")
