# No dependencies
from enum import Enum


class AngleConvention(str, Enum):
    """How a raw angle in degrees is read.

    CARTESIAN: 0 points along +x and the angle grows counter-clockwise.
    CSS: 0 points up and the angle grows clockwise, as in CSS linear-gradient().
    """
    CARTESIAN = "cartesian"
    CSS = "css"


FULL_TURN = 360.0
QUARTER_TURN = 90.0

DEFAULT_CONVENTION = AngleConvention.CARTESIAN
