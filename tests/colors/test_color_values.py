import pytest

from huewheel.colors import ColorRGB, ColorHSV, ColorHSL, get_color_class
from huewheel.types.color_types import RGB, HSV, HSL, ColorSpace
from ..samples import samples_hsv_rgb, samples_rgb_hsl


def test_value_types():
    assert isinstance(ColorRGB((1, 2, 3)).value, RGB)
    assert isinstance(ColorHSV((1, 2, 3)).value, HSV)
    assert isinstance(ColorHSL((1, 2, 3)).value, HSL)


def test_default_is_null_value():
    assert ColorRGB().value == (0, 0, 0)
    assert ColorHSV().value == (0.0, 0.0, 0.0)


def test_colors_are_immutable():
    color = ColorHSV((10, 20, 30))
    with pytest.raises(AttributeError):
        color._value = (0, 0, 0)
    with pytest.raises(AttributeError):
        color.anything = 1


def test_hue_wraps_modulo_360():
    assert ColorHSV((360, 50, 50)).value.h == 0
    assert ColorHSV((370, 50, 50)).value.h == 10
    assert ColorHSL((-90, 50, 50)).value.h == 270


def test_channels_are_clamped():
    assert ColorHSV((10, 150, -5)).value == (10, 100, 0)
    assert ColorRGB((300, -1, 128)).value == (255, 0, 128)


def test_rgb_channels_are_rounded_half_up():
    assert ColorRGB((127.5, 0.4, 254.6)).value == (128, 0, 255)
    assert all(isinstance(c, int) for c in ColorRGB((1.2, 2.7, 3)).value)


def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        ColorRGB((1, 2))
    with pytest.raises(ValueError):
        ColorHSV((1, 2, 3, 4))


def test_convert_hsv_to_rgb():
    for hsv, rgb in samples_hsv_rgb.items():
        converted = ColorHSV(hsv).convert("rgb")
        assert isinstance(converted, ColorRGB)
        assert converted.value == rgb


def test_convert_rgb_to_hsl():
    for rgb, hsl in samples_rgb_hsl.items():
        converted = ColorRGB(rgb).convert(ColorSpace.HSL)
        assert isinstance(converted, ColorHSL)
        assert converted.value == hsl


def test_convert_same_space_returns_self():
    color = ColorRGB((1, 2, 3))
    assert color.convert("rgb") is color
    assert color.convert() is color


def test_construct_from_other_color():
    red = ColorHSV((0, 100, 100))
    assert ColorRGB(red).value == (255, 0, 0)
    assert ColorHSV(ColorRGB((0, 0, 255))).value == (240, 100, 100)


def test_hex_property():
    assert ColorHSV((120, 100, 100)).hex == "#00ff00"
    assert ColorRGB((255, 0, 0)).hex == "#ff0000"
    assert ColorHSL((0, 0, 100)).hex == "#ffffff"


def test_equality_and_hash():
    assert ColorRGB((1, 2, 3)) == ColorRGB((1, 2, 3))
    assert ColorRGB((1, 2, 3)) != ColorRGB((1, 2, 4))
    assert ColorHSV((1, 2, 3)) != ColorHSL((1, 2, 3))
    assert len({ColorRGB((1, 2, 3)), ColorRGB((1, 2, 3))}) == 1


def test_sequence_protocol():
    r, g, b = ColorRGB((1, 2, 3))
    assert (r, g, b) == (1, 2, 3)
    assert len(ColorRGB()) == 3
    assert ColorRGB((1, 2, 3))[1] == 2
    assert repr(ColorRGB((1, 2, 3))) == "ColorRGB(1, 2, 3)"


def test_get_color_class():
    assert get_color_class("HSV") is ColorHSV
    assert get_color_class(ColorSpace.RGB) is ColorRGB
    with pytest.raises(ValueError):
        get_color_class("lab")


def test_convert_rejects_unknown_space():
    with pytest.raises(ValueError):
        ColorRGB((1, 2, 3)).convert("lab")


def test_has_hue():
    assert ColorHSV((10, 20, 30)).has_hue
    assert ColorHSL((10, 20, 30)).has_hue
    assert not ColorRGB((10, 20, 30)).has_hue
