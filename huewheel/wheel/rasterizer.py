from __future__ import annotations
import logging
from typing import Dict, Optional, Tuple

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw

from ..colors import ColorHSV
from ..conversions import hsv_to_rgb, np_hsv_to_rgb
from ..types.color_types import RGBA, CHANNEL_MAX, HUE_360, PERCENT_MAX
from ..utils.default import value_or_default
from .config import WheelConfig
from .geometry import WheelGeometry, polar

logger = logging.getLogger(__name__)

MARKER_FILL = (255, 255, 255, 255)
MARKER_OUTLINE = (0, 0, 0, 255)


class PolarGridCache:
    """Lightweight polar coordinate grid cache to avoid recomputation."""

    def __init__(self, max_entries: int = 8) -> None:
        self.max_entries = max_entries
        self._cache: Dict[Tuple[int, Tuple[float, float]], Tuple[NDArray, NDArray]] = {}

    def get_grid(self, size: int, center: Tuple[float, float]) -> Tuple[NDArray, NDArray]:
        """Return ``(distances, theta)`` arrays of shape (size, size), theta in degrees."""
        key = (size, center)
        if key not in self._cache:
            indices_matrix = np.indices((size, size), dtype=np.float64)
            y_indices = indices_matrix[0] - center[1]
            x_indices = indices_matrix[1] - center[0]
            distances = np.hypot(x_indices, y_indices)
            theta = (np.degrees(np.arctan2(y_indices, x_indices)) + HUE_360) % HUE_360
            theta = np.where(theta >= HUE_360, 0.0, theta)
            self._cache[key] = (distances, theta)

            if len(self._cache) > self.max_entries:
                oldest_key = next(iter(self._cache))
                del self._cache[oldest_key]

        return self._cache[key]


def pixel_color(
    x: float,
    y: float,
    center: Tuple[float, float],
    radius: float,
    brightness: float,
) -> Optional[RGBA]:
    """
    Color of a single wheel pixel, or None outside the circle.

    Hue is the pixel's angle around ``center`` and saturation its distance
    relative to ``radius``; ``brightness`` is the HSV value for every pixel.
    """
    if radius <= 0:
        return None
    angle, distance = polar(x - center[0], y - center[1])
    if distance > radius:
        return None
    r, g, b = hsv_to_rgb(angle, distance / radius * PERCENT_MAX, brightness)
    return RGBA(r, g, b, CHANNEL_MAX)


def rasterize_wheel(
    geometry: WheelGeometry,
    brightness: float,
    grid_cache: Optional[PolarGridCache] = None,
) -> NDArray[np.uint8]:
    """
    Rasterize the whole wheel into an RGBA buffer of shape (size, size, 4).

    Equivalent to evaluating :func:`pixel_color` for every pixel; pixels
    outside the circle are fully transparent.
    """
    size = geometry.size
    frame = np.zeros((size, size, 4), dtype=np.uint8)
    radius = geometry.radius
    if radius <= 0:
        return frame

    grid_cache = value_or_default(grid_cache, PolarGridCache(max_entries=1))
    distances, theta = grid_cache.get_grid(size, geometry.center)

    inside = distances <= radius
    saturation = distances / radius * PERCENT_MAX
    rgb = np_hsv_to_rgb(theta, saturation, brightness)

    frame[..., :3] = np.where(inside[..., None], rgb, 0).astype(np.uint8)
    frame[..., 3] = np.where(inside, CHANNEL_MAX, 0).astype(np.uint8)
    logger.debug("Rasterized %dx%d wheel at brightness %.1f", size, size, brightness)
    return frame


def marker_position(geometry: WheelGeometry, hsv: ColorHSV) -> Tuple[float, float]:
    h, s, _ = hsv.value
    return geometry.position_of(h, s)


def draw_marker(
    frame: NDArray[np.uint8],
    geometry: WheelGeometry,
    hsv: ColorHSV,
    config: Optional[WheelConfig] = None,
) -> NDArray[np.uint8]:
    """Return a copy of ``frame`` with the selection marker drawn at ``hsv``."""
    config = value_or_default(config, WheelConfig())
    x, y = marker_position(geometry, hsv)
    r = config.marker_radius

    image = Image.fromarray(np.ascontiguousarray(frame).copy())
    draw = ImageDraw.Draw(image)
    draw.ellipse(
        [x - r, y - r, x + r, y + r],
        fill=MARKER_FILL,
        outline=MARKER_OUTLINE,
        width=config.marker_outline_width,
    )
    return np.array(image)


def to_image(frame: NDArray[np.uint8]) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(frame))


def save_wheel(
    path,
    size: Optional[int] = None,
    brightness: float = PERCENT_MAX,
    hsv: Optional[ColorHSV] = None,
    config: Optional[WheelConfig] = None,
) -> Image.Image:
    """Render a wheel (with a marker when ``hsv`` is given) and save it as an image file."""
    config = value_or_default(config, WheelConfig())
    geometry = WheelGeometry(config.responsive_size(size), config.rim_padding)
    frame = rasterize_wheel(geometry, brightness)
    if hsv is not None:
        frame = draw_marker(frame, geometry, hsv, config)
    image = to_image(frame)
    image.save(path)
    return image
