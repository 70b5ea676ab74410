"""
Gradient line endpoints for an angled linear gradient.

The gradient line passes through the center of the box and is long enough
that the perpendiculars through its endpoints touch the box's far corners,
so the first and last color stops land exactly on the corners for every
angle and aspect ratio (the same extent CSS linear-gradient() uses).
"""
from __future__ import annotations
from typing import Tuple
import math

import numpy as np
from numpy.typing import ArrayLike

from .types.angle_types import FULL_TURN
from .types.geometry_types import Offset, SizeInput, as_rect_size


def _validate_normalized(angle: float) -> None:
    if not 0.0 <= angle < FULL_TURN:
        raise ValueError(f"angle must be normalized to [0, 360), got {angle!r}")


def uses_mirrored_diagonal(angle: float) -> bool:
    """
    Whether the gradient line is measured against the other diagonal.

    Open intervals: 90, 180 and 270 measure against the main diagonal.
    """
    return 90.0 < angle < 180.0 or 270.0 < angle < FULL_TURN


def half_line_length(width: float, height: float, angle: float) -> float:
    """
    Half the length of the gradient line for a normalized cartesian angle.

    Args:
        width: Box width, positive
        height: Box height, positive
        angle: Angle in degrees in [0, 360)

    Returns:
        Distance from the box center to either endpoint
    """
    diagonal = math.hypot(width, height)
    diagonal_to_width = math.acos(width / diagonal)
    theta = math.radians(angle)
    if uses_mirrored_diagonal(angle):
        diagonal_to_line = math.pi - theta - diagonal_to_width
    else:
        diagonal_to_line = theta - diagonal_to_width
    return abs(math.cos(diagonal_to_line) * diagonal) / 2


def gradient_endpoints(size: SizeInput, angle: float) -> Tuple[Offset, Offset]:
    """
    Compute the start and end points of the gradient line.

    Args:
        size: RectSize or (width, height) of the box being filled
        angle: Cartesian angle in degrees, already normalized to [0, 360)

    Returns:
        (start, end) in box coordinates with y growing downward, symmetric
        about the box center
    """
    _validate_normalized(angle)
    size = as_rect_size(size)
    half_line = half_line_length(size.width, size.height, angle)

    theta = math.radians(angle)
    horizontal_offset = half_line * math.cos(theta)
    # screen y grows downward, so a positive angle moves the end point up
    vertical_offset = half_line * math.sin(theta)

    center = size.center
    start = center + Offset(-horizontal_offset, vertical_offset)
    end = center + Offset(horizontal_offset, -vertical_offset)
    return start, end


def np_gradient_endpoints(
    widths: ArrayLike,
    heights: ArrayLike,
    angles: ArrayLike,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized: compute gradient endpoints for many boxes and angles at once.

    Inputs broadcast against each other.

    Args:
        widths: array-like or scalar, positive box widths
        heights: array-like or scalar, positive box heights
        angles: array-like or scalar, cartesian angles in [0, 360)

    Returns:
        (starts, ends): arrays of shape (..., 2) holding (x, y) points
    """
    w = np.asarray(widths, dtype=float)
    h = np.asarray(heights, dtype=float)
    a = np.asarray(angles, dtype=float)

    out_shape = np.broadcast(w, h, a).shape
    w = np.broadcast_to(w, out_shape)
    h = np.broadcast_to(h, out_shape)
    a = np.broadcast_to(a, out_shape)

    if not (np.all(np.isfinite(w)) and np.all(np.isfinite(h))) or np.any(w <= 0) or np.any(h <= 0):
        raise ValueError("width and height must be positive")
    if not np.all((a >= 0.0) & (a < FULL_TURN)):
        raise ValueError("angles must be normalized to [0, 360)")

    diagonal = np.hypot(w, h)
    diagonal_to_width = np.arccos(w / diagonal)
    theta = np.radians(a)

    mirrored = ((a > 90.0) & (a < 180.0)) | ((a > 270.0) & (a < FULL_TURN))
    diagonal_to_line = np.where(
        mirrored,
        np.pi - theta - diagonal_to_width,
        theta - diagonal_to_width,
    )
    half_line = np.abs(np.cos(diagonal_to_line) * diagonal) / 2

    horizontal_offset = half_line * np.cos(theta)
    vertical_offset = half_line * np.sin(theta)

    center = np.stack([w / 2, h / 2], axis=-1)
    starts = center + np.stack([-horizontal_offset, vertical_offset], axis=-1)
    ends = center + np.stack([horizontal_offset, -vertical_offset], axis=-1)
    return starts, ends
