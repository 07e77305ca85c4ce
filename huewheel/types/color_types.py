from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Tuple, Union

Scalar = int | float
ColorElement = Union[Tuple[int, int, int], Tuple[float, float, float]]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSV = "hsv"
    HSL = "hsl"


HUE_SPACES = {ColorSpace.HSV, ColorSpace.HSL}

HUE_360 = 360.0
PERCENT_MAX = 100.0
CHANNEL_MAX = 255


class RGB(NamedTuple):
    """Integer channels in [0, 255]."""
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees, saturation and lightness in percent."""
    h: float
    s: float
    l: float


class HSV(NamedTuple):
    """Hue in degrees, saturation and value in percent."""
    h: float
    s: float
    v: float


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int


def to_color_space(value: ColorSpace | str) -> ColorSpace:
    """Accept a ColorSpace member or a case-insensitive name like 'HSV'."""
    if isinstance(value, ColorSpace):
        return value
    return ColorSpace(value.lower())


def is_hue_space(color_space: ColorSpace | str) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: Color space enum member or its string value
    Returns:
        True if hue-based, False otherwise
    """
    return to_color_space(color_space) in HUE_SPACES
