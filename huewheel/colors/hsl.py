from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, HSL
from .color_base import ColorBase


class ColorHSL(ColorBase):
    __slots__ = ()
    mode:       ClassVar[ColorSpace] = ColorSpace.HSL
    _type:      ClassVar[type] = float
    maxima:     ClassVar[Tuple[float, float, float]] = (360.0, 100.0, 100.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    tuple_type: ClassVar[type] = HSL
