from __future__ import annotations
from typing import Any, Tuple, Union

import numpy as np

UnitRGBA = Tuple[float, float, float, float]


def _clamp_unit(value: float) -> float:
    return max(0.0, min(float(value), 1.0))


class Color:
    """
    Immutable sRGB color with alpha, stored as unit floats in RGBA order.

    Channels are clamped to [0, 1] on construction. Equality and hashing
    compare channel values, so colors built from the same ARGB integer and
    from the same hex string are interchangeable.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels = 4
    alpha_index = -1

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[Tuple[float, ...], Color]) -> None:
        if isinstance(value, Color):
            value = value.value
        if len(value) == 3:
            value = tuple(value) + (1.0,)
        if len(value) != self.num_channels:
            raise ValueError(f"Color expects 3 or 4 channels, got {len(value)}")

        self._value: UnitRGBA = tuple(_clamp_unit(v) for v in value)  # type: ignore[assignment]
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_argb(cls, argb: int) -> Color:
        """Build from a packed 0xAARRGGBB integer."""
        if not 0 <= argb <= 0xFFFFFFFF:
            raise ValueError(f"ARGB value must fit in 32 bits, got {argb:#x}")
        a = (argb >> 24) & 0xFF
        r = (argb >> 16) & 0xFF
        g = (argb >> 8) & 0xFF
        b = argb & 0xFF
        return cls((r / 255, g / 255, b / 255, a / 255))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """
        Build from "#RGB", "#RRGGBB" or "#AARRGGBB" (alpha first, as Android writes it).
        """
        digits = text.strip().lstrip('#')
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        if len(digits) == 6:
            digits = 'ff' + digits
        if len(digits) != 8:
            raise ValueError(f"Invalid hex color: {text!r}")
        try:
            argb = int(digits, 16)
        except ValueError:
            raise ValueError(f"Invalid hex color: {text!r}") from None
        return cls.from_argb(argb)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> UnitRGBA:
        return self._value

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    @property
    def alpha(self) -> float:
        return self._value[self.alpha_index]

    @property
    def argb(self) -> int:
        r, g, b, a = (int(round(v * 255)) for v in self._value)
        return (a << 24) | (r << 16) | (g << 8) | b

    def to_hex(self) -> str:
        return f"#{self.argb:08x}"

    def with_alpha(self, alpha: float) -> Color:
        """Return a new color with the alpha channel replaced."""
        return self.__class__(self._value[:-1] + (alpha,))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Color({self.to_hex()})"


ColorInput = Union[Color, int, str, Tuple[float, ...], list, np.ndarray]


def coerce_color(color_input: ColorInput) -> Color:
    """
    Turn any supported color input into a Color.

    Integers are read as packed 0xAARRGGBB, strings as hex, sequences and
    1D arrays as unit float channels.
    """
    if isinstance(color_input, Color):
        return color_input
    if isinstance(color_input, bool):
        raise TypeError("Unsupported color input type.")
    if isinstance(color_input, (int, np.integer)):
        return Color.from_argb(int(color_input))
    if isinstance(color_input, str):
        return Color.from_hex(color_input)
    if isinstance(color_input, np.ndarray):
        if color_input.ndim != 1:
            raise ValueError("Input array must be 1-dimensional.")
        return Color(tuple(color_input.tolist()))
    if isinstance(color_input, (tuple, list)):
        return Color(tuple(color_input))
    raise TypeError("Unsupported color input type.")
