import pytest

from huewheel.conversions import hex_to_rgb, rgb_to_hex
from huewheel.errors import InvalidColorError
from ..samples import samples_rgb_hex


def test_rgb_to_hex():
    for (r, g, b), expected in samples_rgb_hex.items():
        assert rgb_to_hex(r, g, b) == expected


def test_hex_to_rgb():
    for expected, text in samples_rgb_hex.items():
        assert hex_to_rgb(text) == expected


def test_hex_to_rgb_named_fields():
    rgb = hex_to_rgb("#FF0000")
    assert (rgb.r, rgb.g, rgb.b) == (255, 0, 0)


def test_hex_keeps_leading_zeros():
    assert rgb_to_hex(0, 0, 0) == "#000000"
    assert rgb_to_hex(0, 0, 15) == "#00000f"


def test_shorthand_expansion():
    assert hex_to_rgb("#0f0") == (0, 255, 0)
    assert hex_to_rgb("#0f0") == hex_to_rgb("#00ff00")
    assert hex_to_rgb("abc") == hex_to_rgb("#aabbcc")


def test_hash_and_case_are_optional():
    assert hex_to_rgb("ff8800") == (255, 136, 0)
    assert hex_to_rgb("#Ff8800") == (255, 136, 0)
    assert hex_to_rgb("  #ff8800 ") == (255, 136, 0)


@pytest.mark.parametrize("text", ["", "#", "#ff00", "#gg0000", "#ff00000", "red", "#12345"])
def test_invalid_hex_raises(text):
    with pytest.raises(InvalidColorError):
        hex_to_rgb(text)


def test_hex_round_trip_is_lossless():
    for r in (0, 1, 127, 128, 254, 255):
        for g in (0, 15, 16, 200):
            for b in (0, 9, 255):
                assert hex_to_rgb(rgb_to_hex(r, g, b)) == (r, g, b)


def test_rgb_to_hex_clamps_channels():
    assert rgb_to_hex(300, -5, 127.5) == "#ff0080"
