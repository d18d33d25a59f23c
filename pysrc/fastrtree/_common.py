# _common.py
"""Common utilities and validators shared across the tree modules."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from ._errors import InvalidConfiguration, InvalidRectangle

# Type aliases
Bounds = tuple[float, float, float, float]
"""Axis-aligned rectangle as (min_x, min_y, max_x, max_y)."""

MIN_MAX_CHILDREN = 2
"""Smallest capacity for which a split can place one seed on each side."""


def _is_np_array(x: Any) -> bool:
    """
    Check if x is a NumPy array without importing NumPy.

    This allows type checking without forcing NumPy as a hard dependency.

    Args:
        x: Object to check.

    Returns:
        True if x is a NumPy array.
    """
    mod = getattr(x.__class__, "__module__", "")
    return mod.startswith("numpy") and hasattr(x, "ndim") and hasattr(x, "shape")


def validate_bounds(bounds: Any, *, allow_infinite: bool = False) -> Bounds:
    """
    Validate and normalize a rectangle to a tuple of four floats.

    Args:
        bounds: Rectangle as a sequence of 4 numbers.
        allow_infinite: Accept +/-inf coordinates. Queries may be unbounded,
            stored rectangles may not.

    Returns:
        Validated bounds as a tuple of floats.

    Raises:
        InvalidRectangle: If the rectangle is malformed.
    """
    try:
        coords = tuple(bounds)
    except TypeError:
        raise InvalidRectangle(
            f"rectangle must be a sequence of four numbers, got {bounds!r}"
        ) from None
    if len(coords) != 4:
        raise InvalidRectangle(
            "rectangle must be a tuple of four numeric values (x min, y min, x max, y max)"
        )
    for c in coords:
        if isinstance(c, bool) or not isinstance(c, Real):
            raise InvalidRectangle(f"rectangle coordinates must be numbers, got {c!r}")

    min_x, min_y, max_x, max_y = (float(c) for c in coords)
    if any(math.isnan(c) for c in (min_x, min_y, max_x, max_y)):
        raise InvalidRectangle(f"rectangle {coords!r} has a NaN coordinate")
    if not allow_infinite and any(
        math.isinf(c) for c in (min_x, min_y, max_x, max_y)
    ):
        raise InvalidRectangle(f"rectangle {coords!r} has an infinite coordinate")
    if min_x > max_x or min_y > max_y:
        raise InvalidRectangle(
            f"rectangle {coords!r} has min > max; expected (min_x, min_y, max_x, max_y)"
        )
    return (min_x, min_y, max_x, max_y)


def validate_max_children(max_children: Any) -> int:
    """
    Validate the per-node capacity.

    Raises:
        InvalidConfiguration: If max_children is not an int >= 2.
    """
    if isinstance(max_children, bool) or not isinstance(max_children, int):
        raise InvalidConfiguration(
            f"max_children must be an integer, got {type(max_children).__name__}"
        )
    if max_children < MIN_MAX_CHILDREN:
        raise InvalidConfiguration(
            f"max_children must be >= {MIN_MAX_CHILDREN}, got {max_children}"
        )
    return max_children


def validate_np_shape(geoms: Any) -> None:
    """
    Validate that a NumPy array holds rectangles as rows of four coordinates.

    Raises:
        InvalidRectangle: If the array is not shaped (N, 4).
    """
    if geoms.ndim != 2 or geoms.shape[1] != 4:
        raise InvalidRectangle(
            f"NumPy array must have shape (N, 4), got {tuple(geoms.shape)}"
        )
