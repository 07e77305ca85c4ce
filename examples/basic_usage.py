"""Basic huewheel usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from huewheel import (
    ColorHSV,
    ColorWheel,
    convert_field,
    hex_to_rgb,
    hsv_to_rgb,
    process_color,
    rgb_to_hex,
    rgb_to_hsl,
)
from huewheel.wheel import save_wheel


def demonstrate_conversions() -> None:
    # Scalar conversions between the color models.
    rgb = hsv_to_rgb(30, 100, 100)
    print("HSV(30, 100, 100) -> RGB:", rgb)
    print("RGB -> HEX:", rgb_to_hex(*rgb))
    print("RGB -> HSL:", rgb_to_hsl(*rgb))
    print("#0f0 -> RGB:", hex_to_rgb("#0f0"))

    # Immutable color values convert between models on demand.
    teal = ColorHSV((180, 60, 70))
    print("ColorHSV -> ColorRGB:", teal.convert("rgb"), teal.hex)


def demonstrate_text_tools() -> None:
    print(process_color("hsl(210, 50%, 60%)"))
    print(process_color("chartreuse"))
    print(convert_field("rgb", "255, 128, 0"))


def demonstrate_wheel() -> None:
    wheel = ColorWheel(size=300, on_change=lambda change: print("wheel:", change.as_dict()))

    # Click half way out on the right: hue 0, saturation 50.
    wheel.pointer_down(220, 150)
    # Drag to the bottom rim: hue 90, saturation 100.
    wheel.pointer_move(150, 290)
    wheel.pointer_up()
    # Outside the circle: ignored.
    wheel.pointer_down(0, 0)
    wheel.set_brightness(75)

    save_wheel("wheel.png", size=300, brightness=wheel.brightness, hsv=wheel.hsv)
    print("Saved wheel.png")


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_text_tools()
    demonstrate_wheel()
