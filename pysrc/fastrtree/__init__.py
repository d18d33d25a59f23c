"""fastrtree - R-tree spatial indexing of axis-aligned rectangles for Python."""

from ._errors import InvalidConfiguration, InvalidRectangle
from ._insert_result import InsertResult
from ._rect import Rect, distance, enlargement, merge, overlap
from .rtree import RTree

__all__ = [
    "InsertResult",
    "InvalidConfiguration",
    "InvalidRectangle",
    "RTree",
    "Rect",
    "distance",
    "enlargement",
    "merge",
    "overlap",
]
