import pytest

from termflex.color import Color


def test_hex_color():
    assert Color.hex("#ff0000") == Color.rgb(255, 0, 0)
    assert Color.hex("00ff00") == Color.rgb(0, 255, 0)
    assert Color.hex("#0000ff") == Color.rgb(0, 0, 255)


def test_rgb_color():
    color = Color.rgb(128, 64, 32)
    assert color.name == "rgb"
    assert color.value == (128, 64, 32)


def test_ansi256_color():
    color = Color.ansi256(196)
    assert color == Color("ansi256", (196,))
    assert color.value == (196,)


def test_hex_wrong_length_is_reset():
    assert Color.hex("#fff") == Color.RESET
    assert Color.hex("") == Color.RESET
    assert Color.hex("#1234567") == Color.RESET


def test_hex_invalid_pair_counts_as_zero():
    assert Color.hex("zz8000") == Color.rgb(0, 128, 0)
    assert Color.hex("-10000") == Color.rgb(0, 0, 0)


def test_hex_strips_repeated_hash():
    assert Color.hex("##102030") == Color.rgb(16, 32, 48)


def test_hex_uppercase_digits():
    assert Color.hex("#ABCDEF") == Color.rgb(0xAB, 0xCD, 0xEF)


def test_default_is_reset():
    assert Color() == Color.RESET


def test_named_colors_are_distinct():
    assert Color.GREEN == Color("green")
    assert Color.GREEN != Color.BRIGHT_GREEN
    assert Color.RED.name == "red"


@pytest.mark.parametrize("args", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_rgb_out_of_range(args):
    with pytest.raises(ValueError):
        Color.rgb(*args)


def test_ansi256_out_of_range():
    with pytest.raises(ValueError):
        Color.ansi256(256)


def test_unknown_name_rejected():
    with pytest.raises(ValueError):
        Color("purple")


def test_named_colour_with_value_rejected():
    with pytest.raises(ValueError):
        Color("red", (1,))


def test_repr():
    assert repr(Color.ansi256(245)) == "Color.ansi256(245)"
    assert repr(Color.rgb(1, 2, 3)) == "Color.rgb(1, 2, 3)"
    assert repr(Color.CYAN) == "Color.CYAN"