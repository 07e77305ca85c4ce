from ..types.color_types import HSL, CHANNEL_MAX, PERCENT_MAX
from ..utils.num_utils import clamp, normalize_hue, round_half_up

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert integer RGB to HSL for display.

    Every component is rounded half-up to an integer: hue in degrees,
    saturation and lightness in percent. Achromatic colors (``max == min``)
    report hue 0 and saturation 0.
    """
    r = clamp(r, 0, CHANNEL_MAX) / CHANNEL_MAX
    g = clamp(g, 0, CHANNEL_MAX) / CHANNEL_MAX
    b = clamp(b, 0, CHANNEL_MAX) / CHANNEL_MAX

    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2

    if mx == mn:
        h = s = 0.0
    else:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    hue = round_half_up(h * 360)
    return HSL(
        0 if hue == 360 else hue,
        round_half_up(s * PERCENT_MAX),
        round_half_up(l * PERCENT_MAX),
    )

## HSV to HSL conversions

def hsv_to_hsl(h: float, s: float, v: float) -> HSL:
    """Convert HSV to HSL without rounding. Percent units in and out."""
    s = clamp(s, 0.0, PERCENT_MAX) / PERCENT_MAX
    v = clamp(v, 0.0, PERCENT_MAX) / PERCENT_MAX

    l = v * (1 - s / 2)
    if l == 0 or l == 1:
        s_l = 0.0
    else:
        s_l = (v - l) / min(l, 1 - l)

    return HSL(normalize_hue(h), s_l * PERCENT_MAX, l * PERCENT_MAX)
