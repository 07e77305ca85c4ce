class HueWheelError(Exception):
    """Base class for errors raised by huewheel."""


class InvalidColorError(HueWheelError, ValueError):
    """Raised when a color string cannot be parsed."""

    def __init__(self, message: str, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text
