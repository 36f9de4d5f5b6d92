# ohmimetro

Work out an unknown resistor from the 12-bit ADC readings of a voltage
divider, find the nearest commercial (E24) value, name its colour bands, and
draw the result into an SSD1306-style 128x64 framebuffer.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
ohmimetro 2048 2048
```

prints

```
Resis 10000 ohm
E24 10000 ohm
marrom preto laranja
```

The positional arguments are ADC readings (0 to 4095). When none are given,
whitespace-separated readings are read from standard input:

```
echo "2048 2100 1990" | ohmimetro
```

`--known OHMS` sets the known resistor of the divider (default 10000).
Readings out of range, non-numeric input, no readings at all, or a value that
cannot be expressed as colour bands end the command with a usage error.

## Library use

`ohmimetro.ohmmeter` works on plain readings:

```python
from ohmimetro.ohmmeter import (
    resistance_from_adc, average_resistance, nearest_commercial, band_colors,
)

resistance_from_adc(2048, 10000)        # 10000
average_resistance([2048, 2048], 10000) # 10000
nearest_commercial(4650)                # 4700.0
band_colors(4700)                       # ('amarelo', 'violeta', 'vermelho')
```

- `resistance_from_adc(reading, known)` uses integer arithmetic and raises
  `ValueError` for a reading outside 0..4095.
- `average_resistance(readings, known)` is the integer mean; it raises
  `ValueError` for no readings.
- `nearest_commercial(value)` picks from `E24_VALUES` (510 ohm to 100 kohm);
  on a tie the first value in the table wins.
- `band_colors(value)` returns the first digit, second digit and multiplier
  colour names (Portuguese, from `COLORS`), raising `ValueError` when the
  value cannot be encoded.
- `render(display, measured, commercial)` clears the display, draws both
  values and the band names, and calls `send_data()`.

`Ohmmeter` ties an ADC reading function to a display:

```python
from ohmimetro.ssd1306 import SSD1306, I2CBus
from ohmimetro.ohmmeter import Ohmmeter

display = SSD1306(I2CBus())
meter = Ohmmeter(lambda: 2048, display, known=10000, samples=100)
meter.update()                      # (10000, 10000.0)
meter.run(interval=0.0, cycles=3)   # runs forever when cycles is None
```

`measure()` discards one settling read, then averages `samples` readings.

## Display

`ohmimetro.ssd1306.SSD1306(bus, width=128, height=64, address=0x3C,
external_vcc=False)` keeps a frame buffer in vertical addressing mode and
offers `pixel`, `get_pixel`, `fill`, `rect`, `line`, `hline`, `vline`,
`draw_char` and `draw_string`. `config()` sends the power-up command sequence
(`Command` holds the opcodes), `command(value)` sends one command byte, and
`send_data()` sets the column and page window and writes the whole buffer.
All of these go through the bus's `write(address, data)` method.

`I2CBus` is an in-memory bus that records each write in `transactions` as
`(address, bytes)`. Glyphs come from `ohmimetro.font.glyph`, which covers
digits and upper- and lower-case letters; other characters draw blank.

## What it does not do

The package does not read a real ADC or drive a real I2C display. `Ohmmeter`
takes any function that returns readings, and `SSD1306` writes to whatever
bus object it is given; the command draws into an `I2CBus` that only records
the bytes, and reports its results on standard output.