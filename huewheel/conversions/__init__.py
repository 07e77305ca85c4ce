"""
Color Space Conversions
=======================

Pure, deterministic conversions between the RGB, HSV and HSL color models and
the ``#rrggbb`` hex notation.

Units
-----
- RGB: integer channels in [0, 255]
- HSV / HSL: hue in degrees [0, 360), other channels in percent [0, 100]

Hue is wrapped modulo 360 and the remaining channels are clamped, so numeric
input never raises. Integer outputs are rounded half-up like JavaScript's
``Math.round``.

Examples
--------
>>> from huewheel.conversions import hsv_to_rgb, rgb_to_hex, rgb_to_hsl
>>> hsv_to_rgb(0, 100, 100)
RGB(r=255, g=0, b=0)
>>> rgb_to_hex(0, 255, 0)
'#00ff00'
>>> rgb_to_hsl(255, 0, 0)
HSL(h=0, s=100, l=50)
"""

from .to_rgb import hsv_to_rgb, hsl_to_rgb, np_hsv_to_rgb
from .to_hsl import rgb_to_hsl, hsv_to_hsl
from .to_hsv import rgb_to_hsv, hsl_to_hsv
from .hex import rgb_to_hex, hex_to_rgb
from .wrapper import convert

from ..types.color_types import ColorSpace

__all__ = [
    # → RGB
    'hsv_to_rgb',
    'hsl_to_rgb',
    'np_hsv_to_rgb',

    # → HSL
    'rgb_to_hsl',
    'hsv_to_hsl',

    # → HSV
    'rgb_to_hsv',
    'hsl_to_hsv',

    # Hex notation
    'rgb_to_hex',
    'hex_to_rgb',

    # High-level API
    'convert',
    'ColorSpace',
]
