from typing import Callable, Dict, Tuple

from ..types.color_types import ColorSpace, ColorElement, to_color_space
from .to_rgb import hsv_to_rgb, hsl_to_rgb
from .to_hsl import rgb_to_hsl, hsv_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv

CONVERT_SCALAR: Dict[Tuple[ColorSpace, ColorSpace], Callable[[float, float, float], tuple]] = {
    (ColorSpace.HSV, ColorSpace.RGB): hsv_to_rgb,
    (ColorSpace.HSL, ColorSpace.RGB): hsl_to_rgb,
    (ColorSpace.RGB, ColorSpace.HSL): rgb_to_hsl,
    (ColorSpace.HSV, ColorSpace.HSL): hsv_to_hsl,
    (ColorSpace.RGB, ColorSpace.HSV): rgb_to_hsv,
    (ColorSpace.HSL, ColorSpace.HSV): hsl_to_hsv,
}


def convert(
    color: ColorElement,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> tuple:
    """
    Convert a 3-channel color between RGB, HSV and HSL.

    Returns the input unchanged when both spaces are the same.

    Raises:
        ValueError: on an unknown color space or a color without 3 channels
    """
    fs = to_color_space(from_space)
    ts = to_color_space(to_space)
    if len(color) != 3:
        raise ValueError(f"{fs.value} expects 3 channels, got {len(color)}")
    if fs == ts:
        return tuple(color)
    return CONVERT_SCALAR[(fs, ts)](*color)
