from __future__ import annotations
from .color_base import ColorBase, build_registry
from .rgb import ColorRGB
from .hsv import ColorHSV
from .hsl import ColorHSL
from ..conversions import convert
from ..types.color_types import ColorSpace, to_color_space

space_to_class: dict[ColorSpace, type[ColorBase]] = build_registry(ColorRGB, ColorHSV, ColorHSL)


def get_color_class(color_space: ColorSpace | str) -> type[ColorBase]:
    try:
        return space_to_class[to_color_space(color_space)]
    except ValueError:
        raise ValueError(f"Unsupported color space: {color_space}") from None


def color_convert(self: ColorBase, to_space: ColorSpace | str | None = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Args:
        to_space: Target color space ("rgb", "hsv", "hsl"). Defaults to the current one.

    Returns:
        New ColorBase instance in the target space
    """
    if to_space is None:
        return self
    target_class = get_color_class(to_space)
    if target_class.mode == self.mode:
        return self
    result = convert(self.value, self.mode, target_class.mode)
    return target_class(result)


ColorBase.convert = color_convert
