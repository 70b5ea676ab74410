from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from .colors import Color
from .types.geometry_types import Offset
from .types.tile_mode import TileMode, bound_parameter


@dataclass(frozen=True)
class GradientFill:
    """
    Everything a linear-gradient fill primitive needs for one box size.

    Attributes:
        colors: Colors along the gradient line, at least two
        stops: Positions of the colors in [0, 1], or None for an even spread
        start: Point where t == 0
        end: Point where t == 1
        tile_mode: How positions outside [start, end] are resolved
    """
    colors: Tuple[Color, ...]
    stops: Optional[Tuple[float, ...]]
    start: Offset
    end: Offset
    tile_mode: TileMode

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def direction(self) -> Offset:
        return self.end - self.start

    def parameter_at(self, points: ArrayLike) -> np.ndarray:
        """
        Project points onto the gradient line and apply the tile mode.

        Args:
            points: array-like of shape (..., 2) holding (x, y) positions

        Returns:
            Array of shape (...) with the gradient parameter of each point
        """
        pts = np.asarray(points, dtype=float)
        if pts.ndim == 0 or pts.shape[-1] != 2:
            raise ValueError(f"points must have a last dimension of 2, got shape {pts.shape}")

        start = self.start.as_array()
        axis = self.end.as_array() - start
        t = (pts - start) @ axis / float(axis @ axis)
        return bound_parameter(t, self.tile_mode)
