from .color_tool import ColorToolOutput, ConverterFields, process_color, convert_field, from_wheel

__all__ = [
    "ColorToolOutput",
    "ConverterFields",
    "process_color",
    "convert_field",
    "from_wheel",
]
