from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from ..utils.default import value_or_default

DEFAULT_SIZE = 300
MAX_SIZE = 350
VIEWPORT_MARGIN = 80
RIM_PADDING = 10
MARKER_RADIUS = 8
MARKER_OUTLINE_WIDTH = 2
INITIAL_HSV: Tuple[float, float, float] = (0.0, 100.0, 100.0)


@dataclass(frozen=True)
class WheelConfig:
    """Sizing and drawing defaults for a :class:`~huewheel.wheel.sampler.ColorWheel`."""

    default_size: int = DEFAULT_SIZE
    max_size: int = MAX_SIZE
    viewport_margin: int = VIEWPORT_MARGIN
    rim_padding: int = RIM_PADDING
    marker_radius: int = MARKER_RADIUS
    marker_outline_width: int = MARKER_OUTLINE_WIDTH
    initial_hsv: Tuple[float, float, float] = INITIAL_HSV

    def __post_init__(self) -> None:
        if self.rim_padding < 0:
            raise ValueError("rim_padding must be non-negative")
        if self.max_size <= 2 * self.rim_padding:
            raise ValueError("max_size must leave room for a wheel inside the rim padding")

    @property
    def min_size(self) -> int:
        return 2 * self.rim_padding + 1

    def responsive_size(self, size: Optional[int] = None, viewport_width: Optional[int] = None) -> int:
        """
        Pixel size of the wheel canvas.

        The requested size is capped by the viewport width minus the margin
        and by ``max_size``; the viewport cap is skipped when the width is unknown.
        """
        resolved = int(value_or_default(size, self.default_size))
        candidates = [resolved, self.max_size]
        if viewport_width is not None:
            candidates.append(int(viewport_width) - self.viewport_margin)
        return max(min(candidates), self.min_size)
