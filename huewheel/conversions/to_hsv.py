from ..types.color_types import HSV, CHANNEL_MAX, PERCENT_MAX
from ..utils.num_utils import clamp, normalize_hue


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """Convert integer RGB to HSV without rounding (hue in degrees, s/v in percent)."""
    r = clamp(r, 0, CHANNEL_MAX) / CHANNEL_MAX
    g = clamp(g, 0, CHANNEL_MAX) / CHANNEL_MAX
    b = clamp(b, 0, CHANNEL_MAX) / CHANNEL_MAX

    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn

    if d == 0:
        h = 0.0
    elif mx == r:
        h = 60 * (((g - b) / d) % 6)
    elif mx == g:
        h = 60 * ((b - r) / d + 2)
    else:
        h = 60 * ((r - g) / d + 4)

    s = 0.0 if mx == 0 else d / mx
    return HSV(normalize_hue(h), s * PERCENT_MAX, mx * PERCENT_MAX)


def hsl_to_hsv(h: float, s: float, l: float) -> HSV:
    """Convert HSL to HSV without rounding. Percent units in and out."""
    s = clamp(s, 0.0, PERCENT_MAX) / PERCENT_MAX
    l = clamp(l, 0.0, PERCENT_MAX) / PERCENT_MAX

    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)

    return HSV(normalize_hue(h), s_v * PERCENT_MAX, v * PERCENT_MAX)
