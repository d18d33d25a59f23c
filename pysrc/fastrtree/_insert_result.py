"""InsertResult dataclass returned by bulk insertion."""

from __future__ import annotations

from dataclasses import dataclass

from ._rect import Rect


@dataclass
class InsertResult:
    """
    Result from bulk insertion operations.

    Attributes:
        count: Number of rectangles inserted.
        bounds: Overall bounds of the tree after insertion, or None if the
            tree is still empty.
    """

    count: int
    bounds: Rect | None

    @property
    def empty(self) -> bool:
        """Return True if nothing was inserted."""
        return self.count == 0
