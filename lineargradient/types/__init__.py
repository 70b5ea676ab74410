from .angle_types import AngleConvention, DEFAULT_CONVENTION, FULL_TURN, QUARTER_TURN
from .geometry_types import Offset, RectSize, SizeInput, as_rect_size
from .tile_mode import TileMode, DEFAULT_TILE_MODE, tile_mode_bound_types, bound_parameter

__all__ = [
    "AngleConvention",
    "DEFAULT_CONVENTION",
    "FULL_TURN",
    "QUARTER_TURN",
    "Offset",
    "RectSize",
    "SizeInput",
    "as_rect_size",
    "TileMode",
    "DEFAULT_TILE_MODE",
    "tile_mode_bound_types",
    "bound_parameter",
]
