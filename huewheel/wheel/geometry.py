from __future__ import annotations
import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from ..types.color_types import HUE_360, PERCENT_MAX


class PointerSample(NamedTuple):
    """Polar position of a pointer on the wheel: hue angle and normalized radius."""
    angle: float
    radius: float

    @property
    def saturation(self) -> float:
        return self.radius * PERCENT_MAX


class CanvasRect(NamedTuple):
    """Origin of the wheel canvas in client coordinates."""
    left: float = 0.0
    top: float = 0.0


def polar(dx: float, dy: float) -> Tuple[float, float]:
    """Return ``(angle_degrees, distance)`` of a vector, angle normalized to [0, 360)."""
    distance = math.hypot(dx, dy)
    angle = (math.degrees(math.atan2(dy, dx)) + HUE_360) % HUE_360
    return (0.0 if angle >= HUE_360 else angle), distance


@dataclass(frozen=True)
class WheelGeometry:
    size: int
    padding: int = 0

    @property
    def center(self) -> Tuple[float, float]:
        half = self.size / 2
        return half, half

    @property
    def radius(self) -> float:
        return self.size / 2 - self.padding

    def sample(self, x: float, y: float) -> Optional[PointerSample]:
        """
        Sample the wheel at canvas-local coordinates.

        Returns None when the point lies outside the circle. Points exactly on
        the rim are accepted with a normalized radius of 1.
        """
        cx, cy = self.center
        angle, distance = polar(x - cx, y - cy)
        if distance > self.radius:
            return None
        return PointerSample(angle, min(distance / self.radius, 1.0))

    def position_of(self, hue: float, saturation: float) -> Tuple[float, float]:
        """Canvas coordinates of a (hue, saturation) pair; inverse of :meth:`sample`."""
        cx, cy = self.center
        r = saturation / PERCENT_MAX * self.radius
        theta = math.radians(hue)
        return cx + r * math.cos(theta), cy + r * math.sin(theta)
