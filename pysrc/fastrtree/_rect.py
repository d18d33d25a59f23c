# _rect.py
"""Rect value type and the bounding-box arithmetic used by insert, split, and search."""

from __future__ import annotations

from typing import Any, NamedTuple

from ._common import validate_bounds


class Rect(NamedTuple):
    """
    Immutable axis-aligned rectangle.

    A Rect is a tuple, so it compares equal to a plain
    (min_x, min_y, max_x, max_y) tuple with the same values.

    Attributes:
        min_x: Left edge.
        min_y: Bottom edge.
        max_x: Right edge.
        max_y: Top edge.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_bounds(cls, bounds: Any, *, allow_infinite: bool = False) -> Rect:
        """
        Build a Rect from any sequence of four numbers, validating it.

        Raises:
            InvalidRectangle: If the sequence is not a well-formed rectangle.
        """
        return cls(*validate_bounds(bounds, allow_infinite=allow_infinite))


def area(r: Rect) -> float:
    """Area of a rectangle. Degenerate rectangles have area 0."""
    return (r.max_x - r.min_x) * (r.max_y - r.min_y)


def merge(a: Rect, b: Rect) -> Rect:
    """Smallest rectangle containing both a and b."""
    return Rect(
        a.min_x if a.min_x < b.min_x else b.min_x,
        a.min_y if a.min_y < b.min_y else b.min_y,
        a.max_x if a.max_x > b.max_x else b.max_x,
        a.max_y if a.max_y > b.max_y else b.max_y,
    )


def merge_all(rects) -> Rect:
    """Smallest rectangle containing every rectangle in a non-empty iterable."""
    it = iter(rects)
    out = next(it)
    for r in it:
        out = merge(out, r)
    return out


def overlap(a: Rect, b: Rect) -> bool:
    """True if a and b intersect. Touching edges count as overlap."""
    return (
        a.min_x <= b.max_x
        and a.max_x >= b.min_x
        and a.min_y <= b.max_y
        and a.max_y >= b.min_y
    )


def contains(outer: Rect, inner: Rect) -> bool:
    """True if inner lies entirely within outer (edges inclusive)."""
    return (
        outer.min_x <= inner.min_x
        and outer.min_y <= inner.min_y
        and outer.max_x >= inner.max_x
        and outer.max_y >= inner.max_y
    )


def enlargement(existing: Rect, candidate: Rect) -> float:
    """
    Additional area needed for existing to absorb candidate.

    Lower values mean candidate fits more naturally into existing.
    """
    return area(merge(existing, candidate)) - area(existing)


def distance(a: Rect, b: Rect) -> float:
    """Squared Euclidean gap between two rectangles, 0 if they overlap."""
    dx = max(0.0, a.min_x - b.max_x, b.min_x - a.max_x)
    dy = max(0.0, a.min_y - b.max_y, b.min_y - a.max_y)
    return dx * dx + dy * dy


def dead_space(a: Rect, b: Rect) -> float:
    """Area of merge(a, b) not covered by a or b alone (overlap counted twice)."""
    return area(merge(a, b)) - area(a) - area(b)
