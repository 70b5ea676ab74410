"""lineargradient: linear gradients at any angle for axis-aligned boxes."""

from .angles import (
    normalize_angle,
    css_to_cartesian,
    normalize_for_convention,
    np_normalize_angle,
    np_css_to_cartesian,
    np_normalize_for_convention,
)
from .endpoints import gradient_endpoints, np_gradient_endpoints, half_line_length
from .colors import Color, coerce_color
from .fill import GradientFill
from .gradient import LinearGradientWithAngle
from .types import AngleConvention, Offset, RectSize, TileMode

__version__ = "1.0.0"

__all__ = [
    # angles
    "normalize_angle",
    "css_to_cartesian",
    "normalize_for_convention",
    "np_normalize_angle",
    "np_css_to_cartesian",
    "np_normalize_for_convention",
    "AngleConvention",
    # geometry
    "Offset",
    "RectSize",
    "gradient_endpoints",
    "np_gradient_endpoints",
    "half_line_length",
    # gradients
    "Color",
    "coerce_color",
    "GradientFill",
    "LinearGradientWithAngle",
    "TileMode",
    "__version__",
]
