"""Frame buffer and command interface for an SSD1306 OLED over I2C."""

from enum import IntEnum

from .font import glyph

WIDTH = 128
HEIGHT = 64
DEFAULT_ADDRESS = 0x3C

_DATA_PREFIX = 0x40
_COMMAND_PREFIX = 0x80


class Command(IntEnum):
    """SSD1306 command opcodes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


_CONFIG_SEQUENCE = (
    Command.SET_DISP | 0x00,
    Command.SET_MEM_ADDR,
    0x01,
    Command.SET_DISP_START_LINE | 0x00,
    Command.SET_SEG_REMAP | 0x01,
    Command.SET_MUX_RATIO,
    HEIGHT - 1,
    Command.SET_COM_OUT_DIR | 0x08,
    Command.SET_DISP_OFFSET,
    0x00,
    Command.SET_COM_PIN_CFG,
    0x12,
    Command.SET_DISP_CLK_DIV,
    0x80,
    Command.SET_PRECHARGE,
    0xF1,
    Command.SET_VCOM_DESEL,
    0x30,
    Command.SET_CONTRAST,
    0xFF,
    Command.SET_ENTIRE_ON,
    Command.SET_NORM_INV,
    Command.SET_CHARGE_PUMP,
    0x14,
    Command.SET_DISP | 0x01,
)


class I2CBus:
    """In-memory I2C bus that records every write as ``(address, bytes)``."""

    def __init__(self):
        self.transactions = []

    def write(self, address, data):
        self.transactions.append((address, bytes(data)))


class SSD1306:
    """An SSD1306 display with a local frame buffer in vertical addressing mode."""

    def __init__(self, bus, width=WIDTH, height=HEIGHT, address=DEFAULT_ADDRESS,
                 external_vcc=False):
        self.bus = bus
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self.buffer = bytearray(self.pages * self.width + 1)
        self.buffer[0] = _DATA_PREFIX

    def config(self):
        """Send the power-up configuration sequence."""
        for value in _CONFIG_SEQUENCE:
            self.command(value)

    def command(self, value):
        """Send one command byte."""
        self.bus.write(self.address, bytes([_COMMAND_PREFIX, value & 0xFF]))

    def send_data(self):
        """Push the whole frame buffer to the display."""
        for value in (Command.SET_COL_ADDR, 0, self.width - 1,
                      Command.SET_PAGE_ADDR, 0, self.pages - 1):
            self.command(value)
        self.bus.write(self.address, bytes(self.buffer))

    @staticmethod
    def _locate(x, y):
        x &= 0xFF
        y &= 0xFF
        return (y >> 3) + (x << 3) + 1, 1 << (y & 0b111)

    def pixel(self, x, y, value):
        index, mask = self._locate(x, y)
        if value:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x, y):
        index, mask = self._locate(x, y)
        return bool(self.buffer[index] & mask)

    def fill(self, value):
        for y in range(self.height):
            for x in range(self.width):
                self.pixel(x, y, value)

    def rect(self, top, left, width, height, value, fill=False):
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0, y0, x1, y1, value):
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0, x1, y, value):
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x, y0, y1, value):
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, c, x, y):
        for i, column in enumerate(glyph(c)):
            for j in range(8):
                self.pixel(x + i, y + j, column & (1 << j))

    def draw_string(self, text, x, y):
        """Draw ``text`` left to right, wrapping lines and stopping at the bottom."""
        for char in text:
            self.draw_char(char, x, y)
            x = (x + 8) & 0xFF
            if x + 8 >= self.width:
                x = 0
                y = (y + 8) & 0xFF
            if y + 8 >= self.height:
                break