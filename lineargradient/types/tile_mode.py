from enum import Enum
from typing import Union

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function


class TileMode(str, Enum):
    """Policy for positions that fall before the start or past the end of the gradient line."""
    CLAMP = "clamp"
    REPEAT = "repeat"
    MIRROR = "mirror"
    DECAL = "decal"


DEFAULT_TILE_MODE = TileMode.CLAMP

tile_mode_bound_types = {
    TileMode.CLAMP: BoundType.CLAMP,
    TileMode.REPEAT: BoundType.CYCLIC,
    TileMode.MIRROR: BoundType.BOUNCE,
    # left unbounded; consumers treat t outside [0, 1] as transparent
    TileMode.DECAL: BoundType.IGNORE,
}


def bound_parameter(t: Union[float, np.ndarray], tile_mode: Union[TileMode, str]) -> np.ndarray:
    """
    Apply a tile mode to gradient parameters.

    Args:
        t: Gradient parameter(s), 0 at the start point and 1 at the end point
        tile_mode: TileMode or its string value

    Returns:
        Array of bounded parameters with the same shape as ``t``
    """
    bound_type = tile_mode_bound_types[TileMode(tile_mode)]
    t = np.asarray(t, dtype=float)
    if bound_type is BoundType.IGNORE:
        return t
    fn = bound_type_to_np_function[bound_type]
    return fn(t, 0.0, 1.0)
