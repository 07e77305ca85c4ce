import re

from ..errors import InvalidColorError
from ..types.color_types import RGB, CHANNEL_MAX
from ..utils.num_utils import clamp, round_half_up

_SHORTHAND_HEX = re.compile(r"^#?([0-9a-f])([0-9a-f])([0-9a-f])$", re.IGNORECASE)
_FULL_HEX = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Encode RGB channels as a lowercase ``#rrggbb`` string.

    A forced 25th bit keeps the hex output six digits wide; it is stripped
    after formatting.
    """
    r, g, b = (int(clamp(round_half_up(c), 0, CHANNEL_MAX)) for c in (r, g, b))
    return "#" + format((1 << 24) + (r << 16) + (g << 8) + b, "x")[1:]


def hex_to_rgb(text: str) -> RGB:
    """
    Decode ``#rrggbb`` or ``#rgb`` (the ``#`` is optional, case-insensitive).

    Raises:
        InvalidColorError: if the text is not a 3 or 6 digit hex color
    """
    value = text.strip()
    shorthand = _SHORTHAND_HEX.match(value)
    if shorthand:
        value = "".join(ch * 2 for ch in shorthand.groups())

    match = _FULL_HEX.match(value)
    if match is None:
        raise InvalidColorError("Invalid HEX color", text)
    return RGB(*(int(part, 16) for part in match.groups()))
