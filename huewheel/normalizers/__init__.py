from .color_parser import parse_color, parse_triplet

__all__ = ["parse_color", "parse_triplet"]
