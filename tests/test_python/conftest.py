import random

import pytest

from fastrtree import RTree


@pytest.fixture(params=[2, 3, 4, 8])
def max_children(request):
    return request.param


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_rects(rng):
    """Factory for n random rectangles inside (0, 0, extent, extent)."""

    def _make(n, extent=1000.0, max_size=50.0):
        out = []
        for _ in range(n):
            x = rng.uniform(0, extent - max_size)
            y = rng.uniform(0, extent - max_size)
            out.append((x, y, x + rng.uniform(0, max_size), y + rng.uniform(0, max_size)))
        return out

    return _make


@pytest.fixture
def demo_tree():
    tree = RTree(2)
    tree.insert((0, 0, 1, 1))
    tree.insert((2, 2, 3, 3))
    tree.insert((4, 4, 5, 5))
    return tree
