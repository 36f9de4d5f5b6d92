import pytest

from ohmimetro.font import glyph
from ohmimetro.ssd1306 import HEIGHT, WIDTH, Command, I2CBus, SSD1306


@pytest.fixture
def display():
    return SSD1306(I2CBus(), WIDTH, HEIGHT, 0x3C, False)


def lit(display):
    return {(x, y) for x in range(display.width) for y in range(display.height)
            if display.get_pixel(x, y)}


def test_initial_buffer(display):
    assert display.buffer[0] == 0x40
    assert len(display.buffer) == display.pages * display.width + 1
    assert not any(display.buffer[1:])


def test_command_wire_format(display):
    display.command(Command.SET_DISP)
    assert display.bus.transactions == [(0x3C, bytes([0x80, 0xAE]))]


def test_config_sequence(display):
    display.config()
    sent = [data for _, data in display.bus.transactions]
    assert all(d[0] == 0x80 and len(d) == 2 for d in sent)
    assert sent[0][1] == Command.SET_DISP
    assert sent[-1][1] == Command.SET_DISP | 0x01
    values = [d[1] for d in sent]
    assert values[values.index(Command.SET_MUX_RATIO) + 1] == HEIGHT - 1
    assert values[values.index(Command.SET_CHARGE_PUMP) + 1] == 0x14


def test_send_data(display):
    display.pixel(3, 5, True)
    display.send_data()
    transactions = display.bus.transactions
    commands = [data[1] for _, data in transactions[:6]]
    assert commands == [Command.SET_COL_ADDR, 0, WIDTH - 1,
                        Command.SET_PAGE_ADDR, 0, display.pages - 1]
    address, payload = transactions[-1]
    assert address == 0x3C
    assert payload == bytes(display.buffer)


def test_pixel_layout(display):
    display.pixel(0, 0, True)
    assert display.buffer[1] == 0x01
    display.pixel(0, 7, True)
    assert display.buffer[1] == 0x81


def test_pixel_round_trip(display):
    display.pixel(40, 33, True)
    assert display.get_pixel(40, 33)
    assert lit(display) == {(40, 33)}
    display.pixel(40, 33, False)
    assert not display.get_pixel(40, 33)
    assert lit(display) == set()


def test_pixel_outside_buffer(display):
    with pytest.raises(IndexError):
        display.pixel(200, 0, True)


def test_fill(display):
    display.fill(True)
    assert display.buffer[0] == 0x40
    assert all(b == 0xFF for b in display.buffer[1:])
    display.fill(False)
    assert not any(display.buffer[1:])


def test_rect_outline(display):
    display.rect(10, 20, 5, 4, True, False)
    assert display.get_pixel(20, 10)
    assert display.get_pixel(24, 13)
    assert not display.get_pixel(22, 11)
    assert all(display.get_pixel(x, 10) for x in range(20, 25))


def test_rect_filled(display):
    display.rect(10, 20, 5, 4, True, True)
    assert lit(display) == {(x, y) for x in range(20, 25) for y in range(10, 14)}


def test_line_diagonal(display):
    display.line(0, 0, 10, 10, True)
    assert lit(display) == {(i, i) for i in range(11)}


def test_line_reverse_matches_endpoints(display):
    display.line(30, 5, 2, 20, True)
    pixels = lit(display)
    assert (30, 5) in pixels and (2, 20) in pixels
    assert {x for x, _ in pixels} == set(range(2, 31))


def test_hline_and_vline(display):
    display.hline(5, 15, 3, True)
    display.vline(60, 0, 63, True)
    assert lit(display) == ({(x, 3) for x in range(5, 16)}
                            | {(60, y) for y in range(64)})


def test_draw_char_matches_glyph(display):
    display.draw_char("R", 16, 8)
    columns = glyph("R")
    expected = {(16 + i, 8 + j) for i in range(8) for j in range(8)
                if columns[i] >> j & 1}
    assert lit(display) == expected


def test_draw_string_wraps(display):
    display.draw_string("AB", 112, 0)
    reference = SSD1306(I2CBus())
    reference.draw_char("A", 112, 0)
    reference.draw_char("B", 0, 8)
    assert display.buffer == reference.buffer


def test_draw_string_stops_at_bottom(display):
    display.draw_string("AAA", 0, 56)
    reference = SSD1306(I2CBus())
    reference.draw_char("A", 0, 56)
    assert display.buffer == reference.buffer