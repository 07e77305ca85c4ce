import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HUE_360


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (JavaScript ``Math.round``)."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: NDArray) -> NDArray:
    """Vectorized :func:`round_half_up`, returns a float array of whole numbers."""
    return np.floor(np.asarray(values, dtype=float) + 0.5)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_360
    # -1e-20 % 360 rounds up to 360.0
    return 0.0 if h >= HUE_360 else h


def np_normalize_hue(h: NDArray) -> NDArray:
    h = np.mod(np.asarray(h, dtype=float), HUE_360)
    return np.where(h >= HUE_360, 0.0, h)
