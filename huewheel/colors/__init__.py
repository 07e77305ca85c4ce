"""
Color Classes
=============

Immutable value types for the RGB, HSV and HSL color models.

Features
--------
- Immutable color instances (frozen after initialization)
- Hue wrapped modulo 360, other channels clamped to their maxima
- Integer RGB channels rounded half-up
- Conversion between models with ``convert``

Usage
-----
>>> from huewheel.colors import ColorHSV
>>> red = ColorHSV((360, 100, 100))
>>> red.value
HSV(h=0.0, s=100.0, v=100.0)
>>> red.convert("rgb").value
RGB(r=255, g=0, b=0)
>>> red.hex
'#ff0000'

Color Classes
-------------
    - ColorRGB: integer RGB (0-255)
    - ColorHSV: hue in degrees, saturation/value in percent
    - ColorHSL: hue in degrees, saturation/lightness in percent
"""

from .color_base import ColorBase
from .rgb import ColorRGB
from .hsv import ColorHSV
from .hsl import ColorHSL
from .color import color_convert, get_color_class, space_to_class


__all__ = [
    'ColorBase',
    'ColorRGB',
    'ColorHSV',
    'ColorHSL',
    'color_convert',
    'get_color_class',
    'space_to_class',
]
