from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, RGB
from .color_base import ColorBase


class ColorRGB(ColorBase):
    __slots__ = ()
    mode:       ClassVar[ColorSpace] = ColorSpace.RGB
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    null_value: ClassVar[Tuple[int, int, int]] = (0, 0, 0)
    tuple_type: ClassVar[type] = RGB
