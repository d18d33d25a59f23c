# _split.py
"""Quadratic node split: pick the two most distant children as seeds, then place the rest greedily."""

from __future__ import annotations

import logging

from ._node import Node
from ._rect import dead_space, distance, enlargement, merge

logger = logging.getLogger(__name__)


def pick_seeds(children: list[Node]) -> tuple[int, int]:
    """
    Return indices (i, j), i < j, of the two most separated children.

    Pairs are ranked by squared gap distance, then by dead space so that
    overlapping children still produce a meaningful pair. Ties keep the
    first pair found.
    """
    best = (0, 1)
    best_key = (-1.0, -1.0)
    n = len(children)
    for i in range(n):
        bi = children[i].bounds
        for j in range(i + 1, n):
            bj = children[j].bounds
            key = (distance(bi, bj), dead_space(bi, bj))
            if key > best_key:
                best_key = key
                best = (i, j)
    return best


def split_node(node: Node, max_children: int) -> Node:
    """
    Split an overflowing node in place.

    The node keeps one seed and the children placed with it. The returned
    sibling holds the other seed and its group. Neither side exceeds
    max_children, and both bounds are the exact union of their children.

    Args:
        node: Internal node with more than max_children children.
        max_children: Tree capacity.

    Returns:
        The new sibling node. The caller attaches it to node's parent.
    """
    children = node.children
    i, j = pick_seeds(children)

    keep = [children[i]]
    move = [children[j]]
    keep_bounds = children[i].bounds
    move_bounds = children[j].bounds

    rest = [c for k, c in enumerate(children) if k != i and k != j]
    for pos, child in enumerate(rest):
        # One side is full: the remainder must all go to the other.
        if len(keep) == max_children:
            move.extend(rest[pos:])
            break
        if len(move) == max_children:
            keep.extend(rest[pos:])
            break

        cost_keep = enlargement(keep_bounds, child.bounds)
        cost_move = enlargement(move_bounds, child.bounds)
        if cost_keep < cost_move or (
            cost_keep == cost_move and len(keep) <= len(move)
        ):
            keep.append(child)
            keep_bounds = merge(keep_bounds, child.bounds)
        else:
            move.append(child)
            move_bounds = merge(move_bounds, child.bounds)

    node.children = keep
    node.refit()
    sibling = Node(move_bounds, move)
    sibling.refit()

    logger.debug(
        "split node of %d children into %d + %d (seeds %d, %d)",
        len(children),
        len(keep),
        len(move),
        i,
        j,
    )
    return sibling
