"""
Color Wheel
===========

Circular hue/saturation picker with a separate brightness control.

- geometry: polar sampling of pointer positions
- sampler: the interactive ``ColorWheel`` (idle → dragging → idle)
- rasterizer: per-pixel color function and the vectorized wheel fill
- events: ``ColorChange`` payloads and the ``ChangeNotifier`` store
- config: sizing and drawing defaults

Example
-------
>>> from huewheel.wheel import ColorWheel
>>> changes = []
>>> wheel = ColorWheel(size=300, on_change=changes.append)
>>> wheel.pointer_down(150, 150)   # center of the wheel
True
>>> changes[-1].hex
'#ffffff'
"""

from .config import WheelConfig
from .events import ChangeNotifier, ColorChange
from .geometry import CanvasRect, PointerSample, WheelGeometry, polar
from .rasterizer import (
    PolarGridCache,
    draw_marker,
    marker_position,
    pixel_color,
    rasterize_wheel,
    save_wheel,
    to_image,
)
from .sampler import ColorWheel, WheelState

__all__ = [
    "WheelConfig",
    "ChangeNotifier",
    "ColorChange",
    "CanvasRect",
    "PointerSample",
    "WheelGeometry",
    "polar",
    "PolarGridCache",
    "draw_marker",
    "marker_position",
    "pixel_color",
    "rasterize_wheel",
    "save_wheel",
    "to_image",
    "ColorWheel",
    "WheelState",
]
