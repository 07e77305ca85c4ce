from .dimension import get_dimension
from .default import value_or_default
from .num_utils import clamp, normalize_hue, round_half_up, np_round_half_up, np_normalize_hue

__all__ = [
    "get_dimension",
    "value_or_default",
    "clamp",
    "normalize_hue",
    "round_half_up",
    "np_round_half_up",
    "np_normalize_hue",
]
