"""Enumeration of admissible edges for a partitioned node set."""

from __future__ import annotations

import logging
from itertools import combinations
from typing import FrozenSet, Set

from .model import DirectedEdge, Edge, Parts, UndirectedEdge

logger = logging.getLogger(__name__)


def candidates(parts: Parts, directed: bool) -> FrozenSet[Edge]:
    """Return every edge the topology admits.

    A single part yields all pairs ``i < j`` (forward pairs only when
    ``directed``).  With several parts only cross-part pairs are admitted,
    unordered once each, or in both directions when ``directed``.
    """

    found: Set[Edge] = set()

    if len(parts) == 1:
        indices = sorted(node.index for node in parts[0])
        for a, b in combinations(indices, 2):
            found.add(DirectedEdge(a, b) if directed else UndirectedEdge(a, b))
    else:
        for p, q in combinations(range(len(parts)), 2):
            for u in parts[p]:
                for v in parts[q]:
                    if directed:
                        found.add(DirectedEdge(u.index, v.index))
                        found.add(DirectedEdge(v.index, u.index))
                    else:
                        found.add(UndirectedEdge.of(u.index, v.index))

    logger.debug("Enumerated %d candidate edge(s) over %d part(s)", len(found), len(parts))
    return frozenset(found)


__all__ = ["candidates"]
