# rtree.py
"""RTree - Spatial index for axis-aligned rectangles with quadratic node splitting."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator

from ._common import (
    Bounds,
    _is_np_array,
    validate_max_children,
    validate_np_shape,
)
from ._insert_result import InsertResult
from ._node import Node
from ._rect import Rect, contains, enlargement, merge, overlap
from ._split import split_node

logger = logging.getLogger(__name__)


class RTree:
    """
    Spatial index for axis-aligned rectangles.

    Rectangles are grouped into a balanced tree of bounding boxes. A search
    only descends into subtrees whose bounds overlap the query, so large
    parts of the tree are skipped. Stored rectangles are returned by value;
    there are no IDs or associated objects.

    Performance characteristics:
        Inserts: average O(M log n) where M is max_children
        Searches: average O(log n + k) where k is matches returned

    Thread-safety:
        Instances are not thread-safe. Use external synchronization if you
        share the same tree between threads.

    Args:
        max_children: Max number of children per node before it splits. Must be >= 2.

    Raises:
        InvalidConfiguration: If max_children is not an int >= 2.

    Example:
        ```python
        tree = RTree(4)
        tree.insert((10.0, 20.0, 30.0, 40.0))
        for min_x, min_y, max_x, max_y in tree.search((5.0, 5.0, 35.0, 35.0)):
            print(f"Rect at ({min_x}, {min_y}, {max_x}, {max_y})")
        ```
    """

    __slots__ = ("_count", "_max_children", "_root")

    def __init__(self, max_children: int):
        self._max_children = validate_max_children(max_children)
        self._root: Node | None = None
        self._count = 0

    @property
    def max_children(self) -> int:
        """Capacity of a node before it splits."""
        return self._max_children

    @property
    def bounds(self) -> Rect | None:
        """Bounds covering every stored rectangle, or None if the tree is empty."""
        return self._root.bounds if self._root is not None else None

    # ---- Insertion ----

    def insert(self, rect: Bounds) -> None:
        """
        Insert a single rectangle.

        Args:
            rect: Rectangle as (min_x, min_y, max_x, max_y).

        Raises:
            InvalidRectangle: If rect is malformed or has min > max.
        """
        self._insert(Rect.from_bounds(rect))

    def insert_many(self, rects: Iterable[Bounds]) -> InsertResult:
        """
        Insert rectangles one after another.

        Every rectangle is validated before any is inserted, so a malformed
        entry leaves the tree unchanged.

        Args:
            rects: Iterable of (min_x, min_y, max_x, max_y) rectangles.

        Returns:
            InsertResult with the count and the tree's bounds afterwards.

        Raises:
            InvalidRectangle: If any rectangle is malformed.
        """
        validated = [Rect.from_bounds(r) for r in rects]
        for r in validated:
            self._insert(r)
        if validated:
            logger.debug(
                "inserted %d rectangles, tree now holds %d in %d levels",
                len(validated),
                self._count,
                self.height(),
            )
        return InsertResult(count=len(validated), bounds=self.bounds)

    def insert_many_np(self, geoms: Any) -> InsertResult:
        """
        Insert rectangles from a NumPy array of shape (N, 4).

        Args:
            geoms: NumPy array, one (min_x, min_y, max_x, max_y) row per rectangle.

        Returns:
            InsertResult with the count and the tree's bounds afterwards.

        Raises:
            TypeError: If geoms is not a NumPy array.
            InvalidRectangle: If the shape is not (N, 4) or a row is malformed.
            ImportError: If NumPy is not installed.
        """
        if not _is_np_array(geoms):
            raise TypeError("insert_many_np requires a NumPy array")

        import numpy as np

        if not isinstance(geoms, np.ndarray):
            raise TypeError("insert_many_np requires a NumPy array")

        if geoms.size == 0:
            return InsertResult(count=0, bounds=self.bounds)

        validate_np_shape(geoms)
        return self.insert_many(geoms.tolist())

    def _insert(self, r: Rect) -> None:
        self._count += 1
        root = self._root
        if root is None:
            self._root = Node(r)
            return
        if root.is_leaf:
            self._root = Node(merge(root.bounds, r), [root, Node(r)])
            logger.debug("tree grew to height 2")
            return

        # Descend to the level just above the leaves, remembering the path.
        path = [root]
        node = root
        while not node.holds_leaves:
            node = min(node.children, key=lambda c: enlargement(c.bounds, r))
            path.append(node)
        node.children.append(Node(r))

        # Walk back up: cover the new rectangle, split on overflow.
        max_children = self._max_children
        for depth in range(len(path) - 1, -1, -1):
            node = path[depth]
            node.bounds = merge(node.bounds, r)
            if len(node.children) <= max_children:
                continue
            sibling = split_node(node, max_children)
            if depth > 0:
                # The parent's bounds are merged with r on the next iteration,
                # which already covers everything the sibling holds.
                path[depth - 1].children.append(sibling)
            else:
                self._root = Node(merge(node.bounds, sibling.bounds), [node, sibling])
                logger.debug("root split, tree grew to height %d", self.height())

    # ---- Queries ----

    def search(self, query: Bounds) -> list[Rect]:
        """
        Return all stored rectangles that overlap the query rectangle.

        Touching edges count as overlap. Order follows the tree layout and is
        not guaranteed.

        Args:
            query: Query rectangle as (min_x, min_y, max_x, max_y). Infinite
                coordinates are allowed.

        Returns:
            List of Rect (min_x, min_y, max_x, max_y) tuples.

        Raises:
            InvalidRectangle: If the query is malformed.

        Example:
            ```python
            for min_x, min_y, max_x, max_y in tree.search((10.0, 10.0, 20.0, 20.0)):
                print(f"Found rect at ({min_x}, {min_y}, {max_x}, {max_y})")
            ```
        """
        q = Rect.from_bounds(query, allow_infinite=True)
        root = self._root
        if root is None or not overlap(root.bounds, q):
            return []

        out: list[Rect] = []
        stack = [root]
        while stack:
            node = stack.pop()
            if not node.children:
                out.append(node.bounds)
                continue
            # Reversed so children are visited in list order.
            for child in reversed(node.children):
                if overlap(child.bounds, q):
                    stack.append(child)
        return out

    def search_np(self, query: Bounds) -> Any:
        """
        Return search results as a NumPy float64 array of shape (N, 4).

        Raises:
            ImportError: If NumPy is not installed.
        """
        import numpy as np

        return np.asarray(self.search(query), dtype=np.float64).reshape(-1, 4)

    # ---- Utilities ----

    def __len__(self) -> int:
        """Return the number of stored rectangles."""
        return self._count

    def __iter__(self) -> Iterator[Rect]:
        """Iterate over every stored rectangle in depth-first child order."""
        for node in self._walk():
            if node.is_leaf:
                yield node.bounds

    def __contains__(self, rect: Any) -> bool:
        """
        Check if a rectangle with exactly these coordinates is stored.

        Example:
            ```python
            tree.insert((10.0, 20.0, 30.0, 40.0))
            assert (10.0, 20.0, 30.0, 40.0) in tree
            assert (5.0, 5.0, 10.0, 10.0) not in tree
            ```
        """
        target = Rect.from_bounds(rect, allow_infinite=True)
        return any(r == target for r in self.search(target))

    def __repr__(self) -> str:
        return (
            f"RTree(max_children={self._max_children}, "
            f"size={self._count}, height={self.height()})"
        )

    def _walk(self) -> Iterator[Node]:
        if self._root is None:
            return
        stack = [self._root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def height(self) -> int:
        """Return the number of levels: 0 if empty, 1 for a single leaf."""
        levels = 0
        node = self._root
        while node is not None:
            levels += 1
            node = node.children[0] if node.children else None
        return levels

    def get_all_node_boundaries(self) -> list[Rect]:
        """
        Return the bounds of every internal node. Useful for visualization.
        """
        return [node.bounds for node in self._walk() if not node.is_leaf]

    def check_invariants(self) -> None:
        """
        Verify containment, capacity, and equal leaf depth.

        Raises:
            AssertionError: On the first violated invariant.
        """
        if self._root is None:
            if self._count != 0:
                raise AssertionError(f"empty tree reports {self._count} items")
            return

        leaf_depths = set()
        leaves = 0
        stack: list[tuple[Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            if node.is_leaf:
                leaf_depths.add(depth)
                leaves += 1
                continue
            if len(node.children) > self._max_children:
                raise AssertionError(
                    f"{node!r} has {len(node.children)} children, "
                    f"max is {self._max_children}"
                )
            for child in node.children:
                if not contains(node.bounds, child.bounds):
                    raise AssertionError(f"{node!r} does not contain {child!r}")
                stack.append((child, depth + 1))

        if len(leaf_depths) != 1:
            raise AssertionError(f"leaves found at depths {sorted(leaf_depths)}")
        if leaves != self._count:
            raise AssertionError(f"found {leaves} leaves, expected {self._count}")
