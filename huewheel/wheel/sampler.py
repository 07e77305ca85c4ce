from __future__ import annotations
import logging
from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from ..colors import ColorHSV
from ..types.color_types import PERCENT_MAX
from ..utils.default import value_or_default
from ..utils.num_utils import clamp
from .config import WheelConfig
from .events import ChangeNotifier, ColorChange, Listener
from .geometry import CanvasRect, PointerSample, WheelGeometry
from .rasterizer import PolarGridCache, draw_marker, rasterize_wheel

logger = logging.getLogger(__name__)

TouchPoint = Tuple[float, float]


class WheelState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class ColorWheel:
    """
    Interactive HSV color wheel.

    Hue and saturation come from pointer samples on the wheel, value comes
    from the brightness control. The HSV triple is the only mutable state;
    hex, RGB and HSL are derived from it on every change and published
    through :attr:`notifier`.

    Construction publishes nothing unless ``notify_initial`` is set, in which
    case listeners receive the initial color once; :attr:`change` always
    holds the current one.
    """

    def __init__(
        self,
        size: Optional[int] = None,
        viewport_width: Optional[int] = None,
        on_change: Optional[Listener] = None,
        notifier: Optional[ChangeNotifier] = None,
        config: Optional[WheelConfig] = None,
        notify_initial: bool = False,
    ) -> None:
        self.config = value_or_default(config, WheelConfig())
        self._requested_size = size
        self.geometry = WheelGeometry(
            self.config.responsive_size(size, viewport_width),
            self.config.rim_padding,
        )
        self.notifier = value_or_default(notifier, ChangeNotifier())
        if on_change is not None:
            self.notifier.subscribe(on_change)

        self._hsv = ColorHSV(self.config.initial_hsv)
        self.state = WheelState.IDLE
        self._grid_cache = PolarGridCache(max_entries=2)
        self._layer: Optional[NDArray[np.uint8]] = None
        self._layer_key: Optional[Tuple[WheelGeometry, float]] = None

        if notify_initial:
            self.notifier.publish(self.change)

    # ------------------ STATE ------------------
    @property
    def hsv(self) -> ColorHSV:
        return self._hsv

    @property
    def brightness(self) -> float:
        return self._hsv.value.v

    @property
    def change(self) -> ColorChange:
        return ColorChange.from_hsv(self._hsv)

    @property
    def is_dragging(self) -> bool:
        return self.state is WheelState.DRAGGING

    def _apply_sample(self, sample: PointerSample) -> None:
        self._hsv = ColorHSV((sample.angle, sample.saturation, self.brightness))
        self.notifier.publish(self.change)

    def _sample(self, client_x: float, client_y: float, rect: Optional[CanvasRect]) -> Optional[PointerSample]:
        rect = value_or_default(rect, CanvasRect())
        return self.geometry.sample(client_x - rect.left, client_y - rect.top)

    # ------------------ POINTER EVENTS ------------------
    def pointer_down(self, client_x: float, client_y: float, rect: Optional[CanvasRect] = None) -> bool:
        """Start dragging if the pointer is on the wheel. Returns True when the color changed."""
        sample = self._sample(client_x, client_y, rect)
        if sample is None:
            return False
        self.state = WheelState.DRAGGING
        logger.debug("Wheel drag started at hue=%.1f sat=%.1f", sample.angle, sample.saturation)
        self._apply_sample(sample)
        return True

    def pointer_move(self, client_x: float, client_y: float, rect: Optional[CanvasRect] = None) -> bool:
        """Re-sample while dragging; samples off the wheel are ignored."""
        if not self.is_dragging:
            return False
        sample = self._sample(client_x, client_y, rect)
        if sample is None:
            return False
        self._apply_sample(sample)
        return True

    def pointer_up(self) -> None:
        if self.is_dragging:
            logger.debug("Wheel drag ended")
        self.state = WheelState.IDLE

    pointer_leave = pointer_up

    # ------------------ TOUCH EVENTS ------------------
    def touch_start(self, touches: Sequence[TouchPoint], rect: Optional[CanvasRect] = None) -> bool:
        if not touches:
            return False
        x, y = touches[0]
        return self.pointer_down(x, y, rect)

    def touch_move(self, touches: Sequence[TouchPoint], rect: Optional[CanvasRect] = None) -> bool:
        if not touches:
            return False
        x, y = touches[0]
        return self.pointer_move(x, y, rect)

    def touch_end(self) -> None:
        self.pointer_up()

    # ------------------ BRIGHTNESS / LAYOUT ------------------
    def set_brightness(self, value: float) -> None:
        """Set the HSV value from the linear brightness control (0-100)."""
        self._hsv = self._hsv.with_value(clamp(float(value), 0.0, PERCENT_MAX))
        self.notifier.publish(self.change)

    def resize(self, viewport_width: Optional[int]) -> None:
        """Recompute the canvas size for a new viewport width."""
        self.geometry = WheelGeometry(
            self.config.responsive_size(self._requested_size, viewport_width),
            self.config.rim_padding,
        )

    # ------------------ RENDERING ------------------
    def render(self) -> NDArray[np.uint8]:
        """
        Current RGBA frame: the wheel at the current brightness plus the marker.

        The wheel layer is rasterized again only when the size or the
        brightness changed; pointer samples only redraw the marker.
        """
        key = (self.geometry, self.brightness)
        if self._layer is None or self._layer_key != key:
            self._layer = rasterize_wheel(self.geometry, self.brightness, self._grid_cache)
            self._layer_key = key
        return draw_marker(self._layer, self.geometry, self._hsv, self.config)
