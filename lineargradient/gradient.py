"""
Linear gradient that accepts any angle, in the manner of CSS linear-gradient().

https://developer.mozilla.org/en-US/docs/Web/CSS/gradient/linear-gradient
"""
from __future__ import annotations
from typing import Any, Optional, Sequence, Tuple, Union

from .angles import normalize_for_convention
from .colors import Color, ColorInput, coerce_color
from .endpoints import gradient_endpoints
from .fill import GradientFill
from .types.angle_types import AngleConvention
from .types.geometry_types import Offset, SizeInput, as_rect_size
from .types.tile_mode import TileMode, DEFAULT_TILE_MODE
from .utils.validation import validate_stops, value_or_default


class LinearGradientWithAngle:
    """
    Immutable description of an angled linear gradient.

    The descriptor is independent of any box: ``create_fill`` derives the
    gradient line for a concrete size. Equality, hashing and repr only look
    at colors, stops, normalized angle and tile mode, so ``angle=0`` in CSS
    convention equals ``angle=90`` in cartesian convention.

    Args:
        colors: At least two colors (Color, packed ARGB int, hex string or unit tuple)
        stops: Optional positions in [0, 1], one per color
        tile_mode: Behaviour outside the gradient line
        angle: Angle in degrees, any magnitude
        convention: How ``angle`` is read; cartesian by default
    """
    __slots__ = ('_colors', '_stops', '_tile_mode', '_normalized_angle', '_is_frozen')

    def __setattr__(self, name, value):
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        colors: Sequence[ColorInput],
        stops: Optional[Sequence[float]] = None,
        tile_mode: Union[TileMode, str, None] = None,
        angle: float = 0.0,
        convention: Union[AngleConvention, str, None] = None,
    ) -> None:
        if len(colors) < 2:
            raise ValueError("At least 2 colors are required for a linear gradient")

        self._colors: Tuple[Color, ...] = tuple(coerce_color(c) for c in colors)
        self._stops = validate_stops(stops, len(self._colors))
        self._tile_mode = TileMode(value_or_default(tile_mode, DEFAULT_TILE_MODE))
        self._normalized_angle = normalize_for_convention(angle, convention)
        super().__setattr__('_is_frozen', True)

    @classmethod
    def css(
        cls,
        angle: float,
        colors: Sequence[ColorInput],
        stops: Optional[Sequence[float]] = None,
        tile_mode: Union[TileMode, str, None] = None,
    ) -> LinearGradientWithAngle:
        """Shortcut for a gradient whose angle follows CSS linear-gradient()."""
        return cls(colors, stops=stops, tile_mode=tile_mode, angle=angle, convention=AngleConvention.CSS)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def colors(self) -> Tuple[Color, ...]:
        return self._colors

    @property
    def stops(self) -> Optional[Tuple[float, ...]]:
        return self._stops

    @property
    def tile_mode(self) -> TileMode:
        return self._tile_mode

    @property
    def normalized_angle(self) -> float:
        """Cartesian angle in [0, 360)."""
        return self._normalized_angle

    def endpoints(self, size: SizeInput) -> Tuple[Offset, Offset]:
        return gradient_endpoints(as_rect_size(size), self._normalized_angle)

    def create_fill(self, size: SizeInput) -> GradientFill:
        """
        Derive the fill for a concrete box.

        Args:
            size: RectSize or (width, height); both must be positive

        Returns:
            GradientFill with the gradient line spanning the box corner to corner
        """
        start, end = self.endpoints(size)
        return GradientFill(
            colors=self._colors,
            stops=self._stops,
            start=start,
            end=end,
            tile_mode=self._tile_mode,
        )

    def _key(self) -> Tuple[Any, ...]:
        return (self._colors, self._stops, self._normalized_angle, self._tile_mode)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, LinearGradientWithAngle):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"LinearGradient(colors={list(self._colors)}, "
            f"stops={list(self._stops) if self._stops is not None else None}, "
            f"angle={self._normalized_angle}, "
            f"tileMode={self._tile_mode.value})"
        )
