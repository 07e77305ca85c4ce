from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from ..colors import ColorHSV
from ..conversions import hsv_to_rgb, rgb_to_hex, rgb_to_hsl
from ..types.color_types import HSL, RGB

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorChange:
    """Payload published whenever the selected wheel color changes."""
    hex: str
    rgb: RGB
    hsl: HSL

    @classmethod
    def from_hsv(cls, hsv: ColorHSV) -> "ColorChange":
        rgb = hsv_to_rgb(*hsv.value)
        return cls(hex=rgb_to_hex(*rgb), rgb=rgb, hsl=rgb_to_hsl(*rgb))

    def as_dict(self) -> Dict[str, Any]:
        return {
            "hex": self.hex,
            "rgb": dict(self.rgb._asdict()),
            "hsl": dict(self.hsl._asdict()),
        }


Listener = Callable[[ColorChange], Any]


class ChangeNotifier:
    """
    Publish/subscribe store for color changes.

    Each wheel receives its own notifier (or one shared explicitly by the
    caller). A listener that raises is logged and skipped so the remaining
    listeners still receive the change.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def publish(self, change: ColorChange) -> None:
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("Color change listener %r failed", listener)
