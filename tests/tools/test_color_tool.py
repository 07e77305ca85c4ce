import pytest

from huewheel.colors import ColorHSL, ColorRGB
from huewheel.errors import InvalidColorError
from huewheel.normalizers import parse_color, parse_triplet
from huewheel.tools import ConverterFields, convert_field, from_wheel, process_color
from huewheel.wheel import ColorWheel


def test_parse_color_forms():
    assert parse_color("#ff0000") == ColorRGB((255, 0, 0))
    assert parse_color("  #0F0 ") == ColorRGB((0, 255, 0))
    assert parse_color("RGB(1, 2,3)") == ColorRGB((1, 2, 3))
    assert parse_color("hsl(120, 100%, 50%)") == ColorHSL((120, 100, 50))


@pytest.mark.parametrize("text, message", [
    ("rgb(1,2)", "Invalid RGB format"),
    ("hsl(1,2,3)", "Invalid HSL format"),
    ("#12", "Invalid HEX color"),
    ("blue", "Unsupported color format"),
])
def test_parse_color_errors(text, message):
    with pytest.raises(InvalidColorError, match=message) as excinfo:
        parse_color(text)
    assert excinfo.value.text == text


def test_parse_triplet():
    assert parse_triplet("255, 0, 0") == (255, 0, 0)
    assert parse_triplet("h 10 s 20% l 30%") == (10, 20, 30)
    with pytest.raises(InvalidColorError, match="Format"):
        parse_triplet("1, 2", "Format: R, G, B")


def test_process_hex():
    output = process_color("#FF0000")
    assert output.ok
    assert output.hex == "#ff0000"
    assert output.rgb == "rgb(255,0,0)"
    assert output.hsl == "hsl(0,100%,50%)"


def test_process_rgb():
    output = process_color("rgb(0, 255, 0)")
    assert output.hex == "#00ff00"
    assert output.rgb == "rgb(0, 255, 0)"
    assert output.hsl == "hsl(120,100%,50%)"


def test_process_hsl():
    output = process_color("hsl(240,100%,50%)")
    assert output.hex == "#0000ff"
    assert output.rgb == "rgb(0,0,255)"
    assert output.hsl == "hsl(240,100%,50%)"


def test_process_error(caplog):
    output = process_color("not a color")
    assert not output.ok
    assert (output.hex, output.rgb, output.hsl) == ("", "", "")
    assert output.error_message == "Unsupported color format. Please use Hex, RGB, or HSL."
    assert "not a color" in caplog.text


def test_convert_field_from_hex():
    fields = convert_field("hex", "#0f0")
    assert fields == ConverterFields(hex="#0f0", rgb="0, 255, 0", hsl="120, 100, 50")


def test_convert_field_from_rgb():
    fields = convert_field("rgb", "255, 128, 0")
    assert fields == ConverterFields(hex="#ff8000", rgb="255, 128, 0", hsl="30, 100, 50")


def test_convert_field_from_hsl():
    fields = convert_field("hsl", "210, 50, 60")
    assert fields == ConverterFields(hex="#6699cc", rgb="102, 153, 204", hsl="210, 50, 60")


def test_convert_field_errors():
    with pytest.raises(InvalidColorError, match="Invalid HEX color"):
        convert_field("hex", "#zzz")
    with pytest.raises(InvalidColorError, match="Format: R, G, B"):
        convert_field("rgb", "255, 0")
    with pytest.raises(InvalidColorError, match="Format: H, S, L"):
        convert_field("hsl", "")
    with pytest.raises(ValueError):
        convert_field("cmyk", "0, 0, 0, 0")


def test_from_wheel():
    wheel = ColorWheel(size=300)
    wheel.pointer_down(150 + 70, 150)
    assert from_wheel(wheel.change) == ConverterFields(hex="#ff8080", rgb="255, 128, 128", hsl="0, 100, 75")
