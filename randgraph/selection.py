"""Edge selection strategies: complete, random-bounded and nearest-neighbour."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Set

import numpy as np
from scipy.spatial.distance import cdist

from .logging_utils import apply_debug_logging
from .model import Edge, Node, NodeIndex, Parts

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    COMPLETE = "complete"
    RANDOM = "random"
    NEAR = "near"


def strategy_for(complete: bool, near: bool) -> Strategy:
    if complete:
        return Strategy.COMPLETE
    return Strategy.NEAR if near else Strategy.RANDOM


def _edge_key(edge: Edge):
    return edge.endpoints


def select_random(candidates: Iterable[Edge], order: int, rng: np.random.Generator) -> FrozenSet[Edge]:
    """Draw ``order`` distinct candidates uniformly, capped at the pool size."""

    pool: List[Edge] = sorted(candidates, key=_edge_key)
    if not pool:
        return frozenset()

    target = min(max(int(order), 1), len(pool))
    chosen: Set[Edge] = set()
    while len(chosen) < target:
        pick = int(rng.integers(0, len(pool)))
        chosen.add(pool.pop(pick))
    return frozenset(chosen)


def _links_by_node(candidates: Iterable[Edge]) -> Dict[NodeIndex, Dict[NodeIndex, Edge]]:
    # Prefer the edge leaving the node when both orientations are candidates.
    links: Dict[NodeIndex, Dict[NodeIndex, Edge]] = {}
    for edge in sorted(candidates, key=_edge_key):
        a, b = edge.endpoints
        links.setdefault(a, {})[b] = edge
        links.setdefault(b, {}).setdefault(a, edge)
    return links


def select_near(
    candidates: Iterable[Edge],
    parts: Parts,
    rng: np.random.Generator,
    *,
    min_degree: int = 1,
) -> FrozenSet[Edge]:
    """Connect every node to a random number of its nearest eligible nodes.

    Eligible nodes are those sharing a candidate edge with the node.  Each node
    draws ``k = min_degree + r mod (1 + m // 2)`` for ``m`` eligible nodes and
    keeps the ``k`` nearest, ties broken by node index.
    """

    nodes: List[Node] = sorted((node for part in parts for node in part), key=lambda n: n.index)
    if not nodes:
        return frozenset()

    row = {node.index: i for i, node in enumerate(nodes)}
    coords = np.array([node.pos for node in nodes], dtype=float).reshape(-1, 2)
    distances = cdist(coords, coords)
    links = _links_by_node(candidates)

    chosen: Set[Edge] = set()
    for node in nodes:
        reachable = links.get(node.index)
        if not reachable:
            continue
        others = np.array(sorted(reachable), dtype=int)
        m = len(others)
        k = min(min_degree + int(rng.integers(0, 1 + m // 2)), m)
        if k == 0:
            continue
        dist = distances[row[node.index], [row[int(o)] for o in others]]
        ranked = others[np.lexsort((others, dist))]
        for other in ranked[:k]:
            chosen.add(reachable[int(other)])
    return frozenset(chosen)


def select(
    candidates: FrozenSet[Edge],
    strategy: Strategy,
    rng: np.random.Generator,
    *,
    parts: Optional[Parts] = None,
    order: int = 1,
    min_degree: int = 1,
) -> FrozenSet[Edge]:
    """Reduce ``candidates`` to the final edge set using ``strategy``."""

    strategy = Strategy(strategy)
    if strategy is Strategy.COMPLETE:
        result = frozenset(candidates)
    elif strategy is Strategy.RANDOM:
        result = select_random(candidates, order, rng)
    else:
        if parts is None:
            raise ValueError("nearest-neighbour selection requires node parts")
        result = select_near(candidates, parts, rng, min_degree=min_degree)

    logger.debug("Selected %d of %d candidate edge(s) using %s", len(result), len(candidates), strategy.value)
    return result


__all__ = [
    "Strategy",
    "strategy_for",
    "select_random",
    "select_near",
    "select",
]


apply_debug_logging(globals(), logger=logger, skip={"Strategy", "_edge_key"})
