import pytest

from ohmimetro.font import FONT, GLYPH_SIZE, glyph, glyph_offset


def test_digit_zero_glyph():
    assert glyph("0") == bytes([0x3e, 0x41, 0x41, 0x49, 0x41, 0x41, 0x3e, 0x00])


def test_upper_a_glyph():
    assert glyph("A") == bytes([0x78, 0x14, 0x12, 0x11, 0x12, 0x14, 0x78, 0x00])


def test_lower_a_glyph():
    assert glyph("a") == bytes([0x00, 0x00, 0x64, 0x92, 0x92, 0x94, 0x78, 0x80])


def test_lower_z_glyph():
    assert glyph("z") == bytes([0x00, 0x00, 0xC4, 0xA4, 0x94, 0x8C, 0x84, 0x00])


@pytest.mark.parametrize("char", ["?", " ", "-", "é"])
def test_unsupported_characters_are_blank(char):
    assert glyph_offset(char) == 0
    assert glyph(char) == bytes(GLYPH_SIZE)


def test_digits_are_consecutive():
    offsets = [glyph_offset(c) for c in "0123456789"]
    assert offsets == sorted(offsets)
    assert all(b - a == GLYPH_SIZE for a, b in zip(offsets, offsets[1:]))


def test_letters_follow_digits_in_order():
    assert glyph_offset("A") == glyph_offset("9") + GLYPH_SIZE
    assert glyph_offset("a") == glyph_offset("Z") + GLYPH_SIZE
    assert glyph_offset("z") + GLYPH_SIZE == len(FONT)


def test_every_supported_glyph_has_full_size():
    chars = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    assert all(len(glyph(c)) == GLYPH_SIZE for c in chars)
    assert len({glyph_offset(c) for c in chars}) == len(chars)


@pytest.mark.parametrize("text", ["", "ab"])
def test_requires_single_character(text):
    with pytest.raises(ValueError):
        glyph_offset(text)