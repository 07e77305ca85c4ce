import logging
import re
from typing import Tuple

from ..colors import ColorBase, ColorRGB, ColorHSL
from ..conversions import hex_to_rgb
from ..errors import InvalidColorError

logger = logging.getLogger(__name__)

_RGB_FUNCTION = re.compile(r"^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$")
_HSL_FUNCTION = re.compile(r"^hsl\(\s*(\d+)\s*,\s*(\d+)%\s*,\s*(\d+)%\s*\)$")
_INTEGER = re.compile(r"\d+")

UNSUPPORTED_FORMAT = "Unsupported color format. Please use Hex, RGB, or HSL."


def parse_color(text: str) -> ColorBase:
    """
    Parse CSS-like color text into a color instance.

    Accepted forms (case-insensitive, surrounding whitespace ignored):
    ``#rgb``, ``#rrggbb``, ``rgb(r, g, b)`` and ``hsl(h, s%, l%)``.

    Raises:
        InvalidColorError: with a message suitable for display
    """
    color = text.strip().lower()

    if color.startswith("#"):
        return ColorRGB(hex_to_rgb(color))

    if color.startswith("rgb("):
        match = _RGB_FUNCTION.match(color)
        if match is None:
            raise InvalidColorError("Invalid RGB format", text)
        return ColorRGB(tuple(int(part) for part in match.groups()))

    if color.startswith("hsl("):
        match = _HSL_FUNCTION.match(color)
        if match is None:
            raise InvalidColorError("Invalid HSL format", text)
        return ColorHSL(tuple(int(part) for part in match.groups()))

    logger.debug("Rejected color text %r", text)
    raise InvalidColorError(UNSUPPORTED_FORMAT, text)


def parse_triplet(text: str, message: str = "Expected three numbers") -> Tuple[int, int, int]:
    """Extract exactly three non-negative integers from free text like ``"255, 0, 0"``."""
    parts = _INTEGER.findall(text)
    if len(parts) != 3:
        raise InvalidColorError(message, text)
    first, second, third = (int(part) for part in parts)
    return first, second, third
