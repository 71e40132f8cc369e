import pytest

from circuitos.font5x7 import (
    FONT_5X7,
    GLYPH_COUNT,
    GLYPH_WIDTH,
    glyph_5x7,
)


def test_letter_a_columns():
    assert glyph_5x7("A") == (0x7C, 0x12, 0x11, 0x12, 0x7C)


def test_digit_zero_columns():
    assert glyph_5x7(ord("0")) == (0x3E, 0x51, 0x49, 0x45, 0x3E)


def test_space_is_blank():
    assert glyph_5x7(" ") == (0, 0, 0, 0, 0)


def test_table_length_matches_glyph_count():
    assert len(FONT_5X7) == GLYPH_COUNT * GLYPH_WIDTH
    assert GLYPH_COUNT > ord("~")
    assert bytes(glyph_5x7(GLYPH_COUNT - 1)) == FONT_5X7[-GLYPH_WIDTH:]


def test_char_and_code_agree():
    for ch in "Hello, World! 123":
        assert glyph_5x7(ch) == glyph_5x7(ord(ch))


def test_every_glyph_has_five_byte_columns():
    for code in range(GLYPH_COUNT):
        columns = glyph_5x7(code)
        assert len(columns) == GLYPH_WIDTH
        assert all(0 <= c <= 0xFF for c in columns)


def test_glyph_matches_table_slice():
    code = ord("Q")
    assert bytes(glyph_5x7(code)) == FONT_5X7[code * GLYPH_WIDTH:(code + 1) * GLYPH_WIDTH]


def test_digits_are_distinct():
    glyphs = {glyph_5x7(d) for d in "0123456789"}
    assert len(glyphs) == 10


def test_upper_and_lower_case_differ():
    for upper, lower in zip("ABCXYZ", "abcxyz"):
        assert glyph_5x7(upper) != glyph_5x7(lower)


def test_printable_ascii_not_blank_except_space():
    blank = [code for code in range(ord("!"), ord("~") + 1) if glyph_5x7(code) == (0, 0, 0, 0, 0)]
    assert blank == []


@pytest.mark.parametrize("code", [-1, GLYPH_COUNT, 10_000])
def test_out_of_range_code_rejected(code):
    with pytest.raises(ValueError):
        glyph_5x7(code)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        glyph_5x7("ab")


def test_empty_string_rejected():
    with pytest.raises(ValueError):
        glyph_5x7("")


@pytest.mark.parametrize("code", [1.5, None, b"A"])
def test_wrong_type_rejected(code):
    with pytest.raises(TypeError):
        glyph_5x7(code)