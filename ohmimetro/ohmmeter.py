"""Voltage-divider ohmmeter: measurement, E24 rounding and display output."""

import argparse
import sys
import time

from .ssd1306 import I2CBus, SSD1306

ADC_RANGE = 4096
KNOWN_RESISTOR = 10000
SAMPLES = 10000
UPDATE_INTERVAL = 0.2

E24_VALUES = (
    1000.00, 10000.00, 100000.00, 1100.00, 11000.00,
    1200.00, 12000.00, 1300.00, 13000.00,
    1500.00, 15000.00, 1600.00, 16000.00,
    1800.00, 18000.00, 2200.00, 22000.00,
    2400.00, 24000.00, 2700.00, 27000.00,
    3300.00, 33000.00, 3600.00, 36000.00,
    3900.00, 39000.00, 4700.00, 47000.00,
    510.00, 5100.00, 51000.00,
    560.00, 5600.00, 56000.00,
    620.00, 6200.00, 62000.00,
    680.00, 6800.00, 68000.00,
    750.00, 7500.00, 75000.00,
    820.00, 8200.00, 82000.00,
    910.00, 9100.00, 91000.00,
)

COLORS = (
    "preto", "marrom", "vermelho", "laranja", "amarelo",
    "verde", "azul", "violeta", "cinza", "branco",
)


def resistance_from_adc(reading, known=KNOWN_RESISTOR):
    """Unknown resistance in ohms from one 12-bit ADC reading."""
    if not 0 <= reading < ADC_RANGE:
        raise ValueError(f"ADC reading out of range: {reading}")
    return (reading * known) // (ADC_RANGE - reading)


def average_resistance(readings, known=KNOWN_RESISTOR):
    """Integer mean of the resistances computed from ``readings``."""
    values = [resistance_from_adc(r, known) for r in readings]
    if not values:
        raise ValueError("at least one reading is required")
    return sum(values) // len(values)


def nearest_commercial(value):
    """The E24 value closest to ``value``; ties go to the first in the table."""
    return min(E24_VALUES, key=lambda candidate: abs(candidate - value))


def band_colors(value):
    """Colour names of the first digit, second digit and multiplier bands."""
    digits = f"{value:.0f}"
    if len(digits) < 2 or not digits.isdigit():
        raise ValueError(f"cannot encode {value!r} as colour bands")
    multiplier = len(digits) - 2
    if multiplier >= len(COLORS):
        raise ValueError(f"cannot encode {value!r} as colour bands")
    return COLORS[int(digits[0])], COLORS[int(digits[1])], COLORS[multiplier]


def render(display, measured, commercial):
    """Draw a measurement and its E24 value with colour bands, then show it."""
    display.fill(False)
    display.draw_string("ohm", 100, 0)
    display.draw_string("Resis", 0, 0)
    display.draw_string(str(measured), 46, 0)
    display.draw_string("E24", 0, 20)
    display.draw_string("ohm", 100, 20)
    display.draw_string(f"{commercial:.0f}", 46, 20)
    for name, row in zip(band_colors(commercial), (35, 45, 55)):
        display.draw_string(name, 37, row)
    display.send_data()


class Ohmmeter:
    """Samples an ADC, averages the resistance and shows it on a display."""

    def __init__(self, adc_read, display, known=KNOWN_RESISTOR, samples=SAMPLES):
        self.adc_read = adc_read
        self.display = display
        self.known = known
        self.samples = samples

    def measure(self):
        """Average resistance over ``samples`` readings after one settling read."""
        self.adc_read()
        return average_resistance(
            (self.adc_read() for _ in range(self.samples)), self.known)

    def update(self):
        """Measure, round to E24, redraw; return ``(measured, commercial)``."""
        measured = self.measure()
        commercial = nearest_commercial(measured)
        render(self.display, measured, commercial)
        return measured, commercial

    def run(self, interval=UPDATE_INTERVAL, cycles=None):
        """Update repeatedly; forever unless ``cycles`` is given. Returns the last result."""
        result = None
        done = 0
        while cycles is None or done < cycles:
            result = self.update()
            done += 1
            time.sleep(interval)
        return result


def main(argv=None):
    """Report resistance, E24 value and colour bands for given ADC readings."""
    parser = argparse.ArgumentParser(
        prog="ohmimetro",
        description="Compute a resistance from ADC readings of a voltage divider.")
    parser.add_argument("readings", nargs="*", type=int,
                        help="12-bit ADC readings (read from stdin if omitted)")
    parser.add_argument("--known", type=int, default=KNOWN_RESISTOR,
                        help="known resistor in ohms")
    args = parser.parse_args(argv)

    readings = args.readings
    if not readings:
        try:
            readings = [int(token) for token in sys.stdin.read().split()]
        except ValueError as exc:
            parser.error(str(exc))
    if not readings:
        parser.error("no readings given")

    try:
        measured = average_resistance(readings, args.known)
        commercial = nearest_commercial(measured)
        colors = band_colors(commercial)
    except ValueError as exc:
        parser.error(str(exc))

    render(SSD1306(I2CBus()), measured, commercial)
    print(f"Resis {measured} ohm")
    print(f"E24 {commercial:.0f} ohm")
    print(" ".join(colors))
    return 0