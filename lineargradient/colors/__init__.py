from .color import Color, ColorInput, coerce_color

__all__ = ["Color", "ColorInput", "coerce_color"]
