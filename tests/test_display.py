import pytest

from asciiray.display import (
    Display,
    TerminalDisplay,
    val_to_char_3_bit,
    val_to_char_4_bit,
)


def test_ramp_ends():
    assert val_to_char_3_bit(0) == " "
    assert val_to_char_3_bit(255) == "@"
    assert val_to_char_4_bit(255) == "@"


def test_ramps_depend_only_on_high_bits():
    for value in range(256):
        assert val_to_char_3_bit(value) == val_to_char_3_bit(value & 0xE0)
        assert val_to_char_4_bit(value) == val_to_char_4_bit(value & 0xF0)


def test_four_bit_ramp_has_sixteen_levels():
    assert len({val_to_char_4_bit(v) for v in range(256)}) == 16


def test_display_is_abstract():
    with pytest.raises(TypeError):
        Display()


def test_width_divided_by_char_per_pixel():
    display = TerminalDisplay(10, 3, 2)
    assert display.width() == 10 // 2
    assert display.height() == 3


def test_blank_render_dimensions():
    display = TerminalDisplay(6, 4, 2)
    lines = display.render_to_str().split("\n")
    assert lines[-1] == ""
    assert lines[:-1] == [" " * 6] * 4


def test_pixel_repeated_per_char():
    display = TerminalDisplay(6, 2, 3)
    display[0, 0] = 255
    first, second = display.render_to_str().splitlines()
    assert first.startswith("@" * 3)
    assert first.count("@") == 3
    assert "@" not in second


def test_values_wrap_to_a_byte():
    display = TerminalDisplay(4, 4)
    display[1, 2] = 256 + 7
    assert display[1, 2] == 7
    assert display[2, 1] == 0


def test_out_of_range_pixel_raises():
    display = TerminalDisplay(4, 4)
    display[3, 3] = 5
    assert display[3, 3] == 5
    with pytest.raises(IndexError):
        display[4, 0]
    with pytest.raises(IndexError):
        display[0, 4] = 1
    assert display[3, 3] == 5


def test_clear_resets_all_pixels():
    display = TerminalDisplay(3, 3)
    display[2, 2] = 200
    display[0, 1] = 100
    display.clear()
    assert all(display[r, c] == 0 for r in range(3) for c in range(3))


def test_buffer_matches_text_with_terminator():
    display = TerminalDisplay(8, 3, 2)
    display[1, 1] = 255
    text = display.render_to_str().encode("ascii")
    buffer = display.render_to_buffer()
    assert len(buffer) == len(text)
    assert buffer[:-1] == text[:-1]
    assert buffer.endswith(b"\0")


def test_resize_keeps_leading_values():
    display = TerminalDisplay(4, 4)
    display[0, 0] = 42
    display.resize(8, 5)
    assert display.width() == 8
    assert display.height() == 5
    assert display[0, 0] == 42
    assert display[4, 7] == 0
    assert len(display.render_to_str().splitlines()) == 5