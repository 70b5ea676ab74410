from typing import Optional, Sequence, Tuple, TypeVar
import math
import warnings

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def ensure_same_length(items: Sequence, target_size: int, name: str) -> None:
    """Raise if ``items`` does not hold exactly ``target_size`` elements.

    Mismatched lists are never padded or truncated.
    """
    if len(items) != target_size:
        raise ValueError(
            f"{name} must have the same length as colors ({target_size}), got {len(items)}"
        )


def validate_stops(stops: Optional[Sequence[float]], num_colors: int) -> Optional[Tuple[float, ...]]:
    """
    Validate color stops against the color list.

    Args:
        stops: Fractional positions in [0, 1], one per color, or None for an even spread
        num_colors: Number of colors in the gradient

    Returns:
        Tuple of float stops, or None when no stops were given
    """
    if stops is None:
        return None
    result = tuple(float(s) for s in stops)
    ensure_same_length(result, num_colors, "stops")
    for stop in result:
        if not math.isfinite(stop) or stop < 0.0 or stop > 1.0:
            raise ValueError(f"stops must lie in [0, 1], got {stop!r}")
    if any(b < a for a, b in zip(result, result[1:])):
        warnings.warn(
            f"stops are not in ascending order: {result}. "
            "The rendering framework decides how to resolve them.",
            UserWarning,
            stacklevel=3,
        )
    return result
