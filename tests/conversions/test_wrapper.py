import pytest

from huewheel.conversions import convert, ColorSpace
from ..samples import samples_hsv_rgb, samples_rgb_hsl


def test_convert_returns_tuple():
    result = convert((255, 128, 64), "rgb", "hsv")
    assert isinstance(result, tuple)
    assert len(result) == 3


def test_convert_hsv_to_rgb():
    for hsv, rgb in samples_hsv_rgb.items():
        assert convert(hsv, "hsv", "rgb") == rgb


def test_convert_accepts_enum_and_uppercase():
    for rgb, hsl in samples_rgb_hsl.items():
        assert convert(rgb, ColorSpace.RGB, "HSL") == hsl


def test_same_space_is_identity():
    assert convert((10, 20, 30), "rgb", "rgb") == (10, 20, 30)


def test_unknown_space_raises():
    with pytest.raises(ValueError):
        convert((0, 0, 0), "rgb", "cmyk")


def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        convert((0, 0, 0, 255), "rgb", "hsv")
