import logging

from fastrtree import Rect, RTree, merge, overlap


def brute_force(rects, query):
    q = Rect(*map(float, query))
    return [r for r in rects if overlap(Rect(*map(float, r)), q)]


def test_empty_tree_search_returns_nothing():
    tree = RTree(4)
    assert tree.search((0, 0, 100, 100)) == []
    assert tree.search((float("-inf"), float("-inf"), float("inf"), float("inf"))) == []
    assert len(tree) == 0
    assert tree.bounds is None
    assert tree.height() == 0
    assert list(tree) == []
    tree.check_invariants()


def test_three_rects_one_split(demo_tree):
    assert demo_tree.search((2.5, 2.5, 4.5, 4.5)) == [(2, 2, 3, 3), (4, 4, 5, 5)]
    assert demo_tree.height() == 3
    assert demo_tree.bounds == (0, 0, 5, 5)
    demo_tree.check_invariants()


def test_split_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="fastrtree")
    tree = RTree(2)
    tree.insert((0, 0, 1, 1))
    tree.insert((2, 2, 3, 3))
    assert not any("split node" in m for m in caplog.messages)
    tree.insert((4, 4, 5, 5))
    assert any("split node of 3 children into 2 + 1" in m for m in caplog.messages)


def test_search_with_stored_rect_finds_it():
    tree = RTree(4)
    tree.insert((1.5, 2.5, 3.5, 4.5))
    assert tree.search((1.5, 2.5, 3.5, 4.5)) == [(1.5, 2.5, 3.5, 4.5)]


def test_touching_edges_count_as_overlap():
    tree = RTree(4)
    tree.insert((0, 0, 1, 1))
    assert tree.search((1, 1, 2, 2)) == [(0, 0, 1, 1)]
    assert tree.search((1, -5, 3, 5)) == [(0, 0, 1, 1)]
    assert tree.search((1.0001, 0, 2, 1)) == []


def test_second_insert_grows_root_from_leaf():
    tree = RTree(4)
    tree.insert((0, 0, 1, 1))
    assert tree.height() == 1
    tree.insert((5, 5, 6, 6))
    assert tree.height() == 2
    assert sorted(tree) == [(0, 0, 1, 1), (5, 5, 6, 6)]
    assert tree.get_all_node_boundaries() == [(0, 0, 6, 6)]


def test_fifty_unit_squares_each_found_exactly_once(rng):
    cells = rng.sample([(i, j) for i in range(20) for j in range(20)], 50)
    squares = [(2.0 * i, 2.0 * j, 2.0 * i + 1, 2.0 * j + 1) for i, j in cells]
    tree = RTree(4)
    for sq in squares:
        tree.insert(sq)

    assert len(tree) == 50
    for sq in squares:
        assert tree.search(sq).count(sq) == 1
        assert tree.search(sq) == [sq]
    tree.check_invariants()


def test_invariants_hold_after_every_insert(max_children, make_rects):
    tree = RTree(max_children)
    for r in make_rects(200):
        tree.insert(r)
        tree.check_invariants()
    assert len(tree) == 200


def test_bounds_grow_by_merge(max_children, make_rects):
    tree = RTree(max_children)
    for r in make_rects(100):
        before = tree.bounds
        tree.insert(r)
        expected = Rect(*r) if before is None else merge(before, Rect(*r))
        assert tree.bounds == expected


def test_search_matches_brute_force(max_children, make_rects):
    rects = make_rects(300)
    tree = RTree(max_children)
    for r in rects:
        tree.insert(r)

    for q in make_rects(40, max_size=300.0):
        got = tree.search(q)
        assert sorted(got) == sorted(brute_force(rects, q))
        assert all(overlap(r, Rect(*q)) for r in got)


def test_search_is_idempotent(make_rects):
    tree = RTree(3)
    for r in make_rects(120):
        tree.insert(r)
    q = (200, 200, 600, 600)
    assert tree.search(q) == tree.search(q)


def test_unbounded_query_returns_everything(make_rects):
    rects = make_rects(64)
    tree = RTree(5)
    for r in rects:
        tree.insert(r)
    inf = float("inf")
    assert sorted(tree.search((-inf, -inf, inf, inf))) == sorted(rects)


def test_duplicates_and_degenerate_rects_are_kept(max_children):
    tree = RTree(max_children)
    for _ in range(10):
        tree.insert((3, 3, 4, 4))
    tree.insert((7, 7, 7, 7))
    tree.check_invariants()
    assert tree.search((3.5, 3.5, 3.5, 3.5)) == [(3, 3, 4, 4)] * 10
    assert tree.search((6, 6, 8, 8)) == [(7, 7, 7, 7)]


def test_len_iter_contains(make_rects):
    rects = make_rects(30)
    tree = RTree(4)
    for r in rects:
        tree.insert(r)

    assert len(tree) == 30
    assert sorted(tree) == sorted(rects)
    assert rects[7] in tree
    assert (2000.0, 2000.0, 2001.0, 2001.0) not in tree


def test_node_boundaries_cover_everything(make_rects):
    tree = RTree(2)
    for r in make_rects(20):
        tree.insert(r)
    boundaries = tree.get_all_node_boundaries()
    assert boundaries
    assert boundaries[0] == tree.bounds
    assert all(len(b) == 4 for b in boundaries)


def test_height_grows_logarithmically(make_rects):
    tree = RTree(4)
    for r in make_rects(500):
        tree.insert(r)
    # Fan-out of at most 4 needs five internal levels above 500 leaves.
    assert 6 <= tree.height() <= 60


def test_repr_and_max_children():
    tree = RTree(6)
    tree.insert((0, 0, 1, 1))
    assert tree.max_children == 6
    assert repr(tree) == "RTree(max_children=6, size=1, height=1)"


def test_insert_many_returns_result(make_rects):
    rects = make_rects(25)
    tree = RTree(4)
    res = tree.insert_many(rects)
    assert res.count == 25
    assert not res.empty
    assert res.bounds == tree.bounds
    assert sorted(tree) == sorted(rects)

    res = tree.insert_many([])
    assert res.count == 0
    assert res.empty
    assert len(tree) == 25
