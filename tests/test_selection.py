import numpy as np
import pytest

from randgraph.candidates import candidates
from randgraph.model import Node, UndirectedEdge
from randgraph.selection import Strategy, select, select_near, select_random, strategy_for

from graph_helpers import ZeroRng, make_parts, pairs


@pytest.mark.parametrize(
    'complete, near, expected',
    [
        (True, True, Strategy.COMPLETE),
        (True, False, Strategy.COMPLETE),
        (False, True, Strategy.NEAR),
        (False, False, Strategy.RANDOM),
    ],
)
def test_strategy_for_maps_flags(complete, near, expected):
    assert strategy_for(complete, near) is expected


def test_complete_keeps_every_candidate():
    pool = candidates(make_parts(5), directed=False)

    assert select(pool, Strategy.COMPLETE, np.random.default_rng(0), order=2) == pool


@pytest.mark.parametrize('order', [1, 3, 6])
def test_random_selection_returns_exactly_order_edges(order):
    pool = candidates(make_parts(4), directed=False)

    chosen = select(pool, Strategy.RANDOM, np.random.default_rng(1), order=order)

    assert len(chosen) == order
    assert chosen <= pool


def test_random_selection_caps_order_to_pool_size():
    pool = candidates(make_parts(4), directed=False)

    chosen = select_random(pool, 1000, np.random.default_rng(2))

    assert chosen == pool


def test_random_selection_of_empty_pool_is_empty():
    assert select_random(frozenset(), 3, np.random.default_rng(0)) == frozenset()


def test_random_selection_is_reproducible():
    pool = candidates(make_parts(3, 4), directed=True)

    first = select_random(pool, 7, np.random.default_rng(11))
    second = select_random(pool, 7, np.random.default_rng(11))

    assert first == second


def test_near_selection_breaks_distance_ties_by_index():
    parts = ((Node(0, 0.0, 0.0), Node(1, 1.0, 0.0), Node(2, -1.0, 0.0)),)
    pool = candidates(parts, directed=False)

    chosen = select_near(pool, parts, ZeroRng())

    assert pairs(chosen) == ((0, 1), (0, 2))


def test_near_selection_with_zero_minimum_can_draw_nothing():
    parts = make_parts(5)
    pool = candidates(parts, directed=False)

    assert select_near(pool, parts, ZeroRng(), min_degree=0) == frozenset()


def test_near_selection_always_links_the_nearest_node():
    parts = ((Node(0, 0.0, 0.0), Node(1, 1.0, 0.0), Node(2, 2.5, 0.0), Node(3, 10.0, 0.0)),)
    pool = candidates(parts, directed=False)

    for seed in range(10):
        chosen = select_near(pool, parts, np.random.default_rng(seed))
        assert UndirectedEdge(0, 1) in chosen
        assert UndirectedEdge(2, 3) in chosen


@pytest.mark.parametrize('directed', [False, True])
@pytest.mark.parametrize('seed', range(5))
def test_near_selection_touches_every_node(directed, seed):
    parts = make_parts(7)
    pool = candidates(parts, directed)

    chosen = select(pool, Strategy.NEAR, np.random.default_rng(seed), parts=parts)

    assert chosen <= pool
    touched = {idx for edge in chosen for idx in edge.endpoints}
    assert touched == set(range(7))


@pytest.mark.parametrize('seed', range(5))
def test_near_selection_across_parts_uses_other_parts_only(seed):
    parts = make_parts(3, 4)
    part_of = {node.index: node.part for part in parts for node in part}
    pool = candidates(parts, directed=False)

    chosen = select_near(pool, parts, np.random.default_rng(seed))

    assert chosen
    for edge in chosen:
        a, b = edge.endpoints
        assert part_of[a] != part_of[b]


def test_near_selection_prefers_outgoing_edges_when_directed():
    parts = make_parts(1, 1)
    pool = candidates(parts, directed=True)

    chosen = select_near(pool, parts, ZeroRng())

    assert pairs(chosen) == ((0, 1), (1, 0))


def test_near_selection_skips_nodes_without_neighbours():
    parts = make_parts(3, 0)
    pool = candidates(parts, directed=False)

    assert select_near(pool, parts, np.random.default_rng(0)) == frozenset()


def test_near_selection_requires_parts():
    pool = candidates(make_parts(3), directed=False)

    with pytest.raises(ValueError):
        select(pool, Strategy.NEAR, np.random.default_rng(0))
