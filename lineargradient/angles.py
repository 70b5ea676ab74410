"""
Angle normalization for gradient directions.

Every public function reduces an arbitrary angle in degrees (negative, or
past a full turn) to the cartesian convention in [0, 360). Scalar functions
have ``np_`` twins that work element-wise on arrays.
"""
from __future__ import annotations
from typing import Callable, Dict, Union
import math

import numpy as np
from numpy.typing import ArrayLike

from .types.angle_types import AngleConvention, DEFAULT_CONVENTION, FULL_TURN, QUARTER_TURN
from .utils.validation import value_or_default


def normalize_angle(angle: float) -> float:
    """
    Normalize angle to [0, 360) range.

    Full turns are removed with float arithmetic, so ``normalize_angle(a + 360)``
    equals ``normalize_angle(a)`` exactly only when ``a + 360`` is exactly
    representable; otherwise they agree to within a few ulps of 360
    (``normalize_angle(360.1)`` is ``0.10000000000002274``).
    """
    angle = float(angle)
    if not math.isfinite(angle):
        raise ValueError(f"angle must be finite, got {angle!r}")
    normalized = angle % FULL_TURN
    # tiny negatives wrap to 360.0 after rounding
    if normalized >= FULL_TURN:
        return 0.0
    return normalized + 0.0


def css_to_cartesian(angle: float) -> float:
    """
    Convert a CSS gradient angle to a normalized cartesian angle.

    CSS 0deg points up and turns clockwise, so ``css_to_cartesian(0) == 90``
    and ``css_to_cartesian(90) == 0``.
    """
    return normalize_angle(QUARTER_TURN - float(angle))


_CONVENTION_NORMALIZERS: Dict[AngleConvention, Callable[[float], float]] = {
    AngleConvention.CARTESIAN: normalize_angle,
    AngleConvention.CSS: css_to_cartesian,
}


def normalize_for_convention(
    angle: float,
    convention: Union[AngleConvention, str, None] = None,
) -> float:
    """
    Normalize an angle read in the given convention.

    Args:
        angle: Angle in degrees, any magnitude
        convention: AngleConvention or its string value; defaults to cartesian

    Returns:
        Cartesian angle in [0, 360)
    """
    convention = AngleConvention(value_or_default(convention, DEFAULT_CONVENTION))
    return _CONVENTION_NORMALIZERS[convention](angle)


def np_normalize_angle(angles: ArrayLike) -> np.ndarray:
    angles = np.asarray(angles, dtype=float)
    if not np.all(np.isfinite(angles)):
        raise ValueError("angles must be finite")
    normalized = np.mod(angles, FULL_TURN)
    normalized = np.where(normalized >= FULL_TURN, 0.0, normalized)
    return normalized + 0.0


def np_css_to_cartesian(angles: ArrayLike) -> np.ndarray:
    return np_normalize_angle(QUARTER_TURN - np.asarray(angles, dtype=float))


def np_normalize_for_convention(
    angles: ArrayLike,
    convention: Union[AngleConvention, str, None] = None,
) -> np.ndarray:
    convention = AngleConvention(value_or_default(convention, DEFAULT_CONVENTION))
    if convention is AngleConvention.CSS:
        return np_css_to_cartesian(angles)
    return np_normalize_angle(angles)
