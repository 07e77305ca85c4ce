import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB, CHANNEL_MAX, PERCENT_MAX
from ..utils.num_utils import clamp, normalize_hue, np_normalize_hue, round_half_up, np_round_half_up

## HSV to RGB conversions

def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """
    Convert HSV to integer RGB using the sextant decomposition.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in percent [0, 100]
        v: Value (brightness) in percent [0, 100]

    Returns:
        RGB: channels in [0, 255], rounded half-up
    """
    h = normalize_hue(h)
    s = clamp(s, 0.0, PERCENT_MAX) / PERCENT_MAX
    v = clamp(v, 0.0, PERCENT_MAX) / PERCENT_MAX

    c = v * s
    hp = h / 60
    x = c * (1 - abs((hp % 2) - 1))
    m = v - c

    sextant = int(hp)
    if sextant == 0:
        r, g, b = c, x, 0.0
    elif sextant == 1:
        r, g, b = x, c, 0.0
    elif sextant == 2:
        r, g, b = 0.0, c, x
    elif sextant == 3:
        r, g, b = 0.0, x, c
    elif sextant == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGB(
        round_half_up((r + m) * CHANNEL_MAX),
        round_half_up((g + m) * CHANNEL_MAX),
        round_half_up((b + m) * CHANNEL_MAX),
    )


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to integer RGB.

    Performs the same arithmetic as :func:`hsv_to_rgb` element-wise.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in percent
        v: array-like or scalar, value in percent

    Returns:
        rgb: int array of shape (..., 3) with channels in [0, 255]
    """
    h = np_normalize_hue(h)
    s = np.clip(np.asarray(s, dtype=float), 0.0, PERCENT_MAX) / PERCENT_MAX
    v = np.clip(np.asarray(v, dtype=float), 0.0, PERCENT_MAX) / PERCENT_MAX

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    c = v * s
    hp = h / 60
    x = c * (1 - np.abs(np.mod(hp, 2) - 1))
    m = v - c
    zero = np.zeros(out_shape)

    sextant = np.floor(hp).astype(int)
    conditions = [sextant == i for i in range(5)]

    r = np.select(conditions, [c, x, zero, zero, x], default=c)
    g = np.select(conditions, [x, c, c, x, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, c, c], default=x)

    rgb = np.stack([r, g, b], axis=-1) + m[..., None]
    return np_round_half_up(rgb * CHANNEL_MAX).astype(np.int64)

## HSL to RGB conversions

def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to integer RGB.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]

    Returns:
        RGB: channels in [0, 255], rounded half-up
    """
    h = normalize_hue(h) / 360
    s = clamp(s, 0.0, PERCENT_MAX) / PERCENT_MAX
    l = clamp(l, 0.0, PERCENT_MAX) / PERCENT_MAX

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(
        round_half_up(r * CHANNEL_MAX),
        round_half_up(g * CHANNEL_MAX),
        round_half_up(b * CHANNEL_MAX),
    )
