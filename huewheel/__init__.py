"""Huewheel: color model conversions and an interactive HSV color wheel."""

from .colors import (
    ColorBase,
    ColorRGB,
    ColorHSV,
    ColorHSL,
    color_convert,
)
from .conversions import (
    hsv_to_rgb,
    hsl_to_rgb,
    np_hsv_to_rgb,
    rgb_to_hsl,
    hsv_to_hsl,
    rgb_to_hsv,
    hsl_to_hsv,
    rgb_to_hex,
    hex_to_rgb,
    convert,
)
from .errors import HueWheelError, InvalidColorError
from .types.color_types import ColorSpace, RGB, HSL, HSV, RGBA
from .normalizers import parse_color
from .wheel import (
    ChangeNotifier,
    ColorChange,
    ColorWheel,
    WheelConfig,
    WheelGeometry,
    WheelState,
    pixel_color,
    rasterize_wheel,
)
from .tools import process_color, convert_field, from_wheel

__version__ = "1.0.0"

__all__ = [
    # color value types
    "ColorBase",
    "ColorRGB",
    "ColorHSV",
    "ColorHSL",
    "color_convert",
    "ColorSpace",
    "RGB",
    "HSL",
    "HSV",
    "RGBA",
    # conversions
    "hsv_to_rgb",
    "hsl_to_rgb",
    "np_hsv_to_rgb",
    "rgb_to_hsl",
    "hsv_to_hsl",
    "rgb_to_hsv",
    "hsl_to_hsv",
    "rgb_to_hex",
    "hex_to_rgb",
    "convert",
    # errors
    "HueWheelError",
    "InvalidColorError",
    # text tools
    "parse_color",
    "process_color",
    "convert_field",
    "from_wheel",
    # wheel
    "ChangeNotifier",
    "ColorChange",
    "ColorWheel",
    "WheelConfig",
    "WheelGeometry",
    "WheelState",
    "pixel_color",
    "rasterize_wheel",
    "__version__",
]
