from __future__ import annotations
from typing import Any, ClassVar, Callable, Iterator, Tuple, cast

from ..conversions import rgb_to_hex
from ..types.color_types import ColorElement, ColorSpace, Scalar, is_hue_space
from ..utils import get_dimension, normalize_hue, round_half_up


class ColorBase:
    __slots__ = ('_value', '_frozen')  # no __dict__ → immutability

    num_channels: ClassVar[int] = 3
    mode:        ClassVar[ColorSpace]
    _type:       ClassVar[type]
    maxima:      ClassVar[Tuple[Scalar, Scalar, Scalar]]
    null_value:  ClassVar[Tuple[Scalar, Scalar, Scalar]]
    tuple_type:  ClassVar[type]
    convert: Callable[[ColorBase, ColorSpace | str], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorElement | ColorBase | None = None) -> None:
        if value is None:
            value = self.null_value

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = value.value if value.mode == self.mode else value.convert(self.mode).value

        value_dim = get_dimension(value)
        if value_dim != self.num_channels:
            raise ValueError(f"{self.mode.value} expects {self.num_channels} channels, got {value!r}")

        channels = []
        for index, (v, m) in enumerate(zip(cast(Tuple[Any, ...], value), self.maxima)):
            v = float(v)
            if self.has_hue and index == 0:
                v = normalize_hue(v)
            else:
                v = max(0.0, min(v, float(m)))
            channels.append(round_half_up(v) if self._type is int else v)

        # safe assignment; __setattr__ still allows it during init
        self._value = self.tuple_type(*channels)

        # freeze instance, no more writes allowed
        super().__setattr__('_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> tuple:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    @property
    def hex(self) -> str:
        """``#rrggbb`` form of this color."""
        return rgb_to_hex(*self.convert(ColorSpace.RGB).value)

    # ------------------ DUNDER ------------------
    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> Scalar:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{tuple(self._value)!r}"


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
