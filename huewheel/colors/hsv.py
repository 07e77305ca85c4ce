from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace, HSV
from .color_base import ColorBase


class ColorHSV(ColorBase):
    __slots__ = ()
    mode:       ClassVar[ColorSpace] = ColorSpace.HSV
    _type:      ClassVar[type] = float
    maxima:     ClassVar[Tuple[float, float, float]] = (360.0, 100.0, 100.0)
    null_value: ClassVar[Tuple[float, float, float]] = (0.0, 0.0, 0.0)
    tuple_type: ClassVar[type] = HSV

    def with_value(self, v: float) -> "ColorHSV":
        """Return a copy with a new value (brightness) channel."""
        h, s, _ = self.value
        return ColorHSV((h, s, v))
