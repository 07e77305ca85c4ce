"""
Text color tools.

``process_color`` backs the single-input converter: it takes any supported
color text and reports all three notations, or an error message.
``convert_field`` backs the three-field converter, where editing one field
recomputes the other two. ``from_wheel`` fills the same three fields from a
color wheel change.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from ..colors import ColorRGB
from ..conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from ..errors import InvalidColorError
from ..normalizers import parse_color, parse_triplet
from ..types.color_types import RGB
from ..wheel.events import ColorChange

logger = logging.getLogger(__name__)

FieldSource = Literal["hex", "rgb", "hsl"]


@dataclass(frozen=True)
class ColorToolOutput:
    hex: str
    rgb: str
    hsl: str
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_message is None


@dataclass(frozen=True)
class ConverterFields:
    hex: str
    rgb: str
    hsl: str


def _format_rgb_function(rgb: RGB) -> str:
    return f"rgb({rgb.r},{rgb.g},{rgb.b})"


def _format_hsl_function(rgb: RGB) -> str:
    h, s, l = rgb_to_hsl(*rgb)
    return f"hsl({h},{s}%,{l}%)"


def process_color(text: str) -> ColorToolOutput:
    """
    Convert color text to hex, ``rgb()`` and ``hsl()`` notations.

    The notation the input was written in is echoed back (trimmed and
    lowercased); the other two are derived. Unparsable input yields empty
    fields and an ``error_message``.
    """
    color = text.strip().lower()
    try:
        parsed = parse_color(color)
    except InvalidColorError as exc:
        logger.warning("Color conversion failed for %r: %s", text, exc)
        return ColorToolOutput(hex="", rgb="", hsl="", error_message=str(exc))

    rgb = RGB(*ColorRGB(parsed).value)
    hex_value = color if color.startswith("#") else rgb_to_hex(*rgb)
    rgb_value = color if color.startswith("rgb(") else _format_rgb_function(rgb)
    hsl_value = color if color.startswith("hsl(") else _format_hsl_function(rgb)
    return ColorToolOutput(hex=hex_value, rgb=rgb_value, hsl=hsl_value)


def _fields_from_rgb(rgb: RGB) -> ConverterFields:
    h, s, l = rgb_to_hsl(*rgb)
    return ConverterFields(
        hex=rgb_to_hex(*rgb),
        rgb=f"{rgb.r}, {rgb.g}, {rgb.b}",
        hsl=f"{h}, {s}, {l}",
    )


def convert_field(source: FieldSource, value: str) -> ConverterFields:
    """
    Recompute the three converter fields after ``source`` was edited.

    The edited field keeps its text verbatim.

    Raises:
        InvalidColorError: if ``value`` cannot be read in the ``source`` notation
        ValueError: if ``source`` is not one of "hex", "rgb", "hsl"
    """
    if source == "hex":
        rgb = hex_to_rgb(value)
    elif source == "rgb":
        rgb = RGB(*ColorRGB(parse_triplet(value, "Invalid RGB color. Format: R, G, B")).value)
    elif source == "hsl":
        rgb = hsl_to_rgb(*parse_triplet(value, "Invalid HSL color. Format: H, S, L"))
    else:
        raise ValueError(f"Unknown converter field: {source!r}")

    derived = _fields_from_rgb(rgb)
    return ConverterFields(
        hex=value if source == "hex" else derived.hex,
        rgb=value if source == "rgb" else derived.rgb,
        hsl=value if source == "hsl" else derived.hsl,
    )


def from_wheel(change: ColorChange) -> ConverterFields:
    """Fill the converter fields from a single color wheel change."""
    r, g, b = change.rgb
    h, s, l = change.hsl
    return ConverterFields(hex=change.hex, rgb=f"{r}, {g}, {b}", hsl=f"{h}, {s}, {l}")
