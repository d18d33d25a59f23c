# _node.py
"""Tree node. Leaves hold one stored rectangle as their bounds."""

from __future__ import annotations

from ._rect import Rect, merge_all


class Node:
    """
    A node of the R-tree.

    Attributes:
        bounds: For a leaf, the stored rectangle. For an internal node, a
            rectangle covering every child's bounds.
        children: Owned child nodes. Empty if and only if the node is a leaf.
    """

    __slots__ = ("bounds", "children")

    def __init__(self, bounds: Rect, children: list[Node] | None = None):
        self.bounds = bounds
        self.children: list[Node] = children if children is not None else []

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def holds_leaves(self) -> bool:
        """True if this internal node's children are leaves."""
        return bool(self.children) and not self.children[0].children

    def refit(self) -> None:
        """Recompute bounds as the exact union of the children's bounds."""
        self.bounds = merge_all(c.bounds for c in self.children)

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"Node(leaf {tuple(self.bounds)!r})"
        return f"Node({tuple(self.bounds)!r}, children={len(self.children)})"
