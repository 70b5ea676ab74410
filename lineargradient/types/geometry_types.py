from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple, Union
import math

import numpy as np


@dataclass(frozen=True)
class Offset:
    """Immutable 2D point in screen coordinates (y grows downward)."""
    x: float
    y: float

    def __add__(self, other: Offset) -> Offset:
        if not isinstance(other, Offset):
            return NotImplemented
        return Offset(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Offset) -> Offset:
        if not isinstance(other, Offset):
            return NotImplemented
        return Offset(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Offset:
        return Offset(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def scale(self, factor: float) -> Offset:
        return Offset(self.x * factor, self.y * factor)

    def distance_to(self, other: Offset) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def midpoint(self, other: Offset) -> Offset:
        return Offset((self.x + other.x) / 2, (self.y + other.y) / 2)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


@dataclass(frozen=True)
class RectSize:
    """
    Size of the box a gradient fills.

    Both dimensions must be positive and finite; a degenerate box has no
    diagonal to project the gradient line on.
    """
    width: float
    height: float

    def __post_init__(self) -> None:
        width = float(self.width)
        height = float(self.height)
        if not (math.isfinite(width) and math.isfinite(height)) or width <= 0 or height <= 0:
            raise ValueError(
                f"width and height must be positive, got {self.width!r} x {self.height!r}"
            )
        # frozen: bypass the generated __setattr__ to store the coerced floats
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)

    @property
    def center(self) -> Offset:
        return Offset(self.width / 2, self.height / 2)

    @property
    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)


SizeInput = Union[RectSize, Tuple[float, float]]


def as_rect_size(size: SizeInput) -> RectSize:
    """
    Coerce a size input to a RectSize.

    Args:
        size: RectSize or (width, height) pair

    Returns:
        RectSize instance
    """
    if isinstance(size, RectSize):
        return size
    if isinstance(size, (tuple, list)) and len(size) == 2:
        return RectSize(size[0], size[1])
    raise TypeError("Unsupported size input type.")
