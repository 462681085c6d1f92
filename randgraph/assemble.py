from __future__ import annotations

from typing import Dict, Iterable

from .model import DirectedEdge, Edge, Graph, Node, NodeIndex, Parts, UndirectedEdge


class InvariantViolation(RuntimeError):
    """Raised when an assembled graph breaks a structural invariant."""


def assemble(parts: Parts, edges: Iterable[Edge], directed: bool) -> Graph:
    """Aggregate ``parts`` and ``edges`` into a :class:`Graph` after checking invariants."""

    table: Dict[NodeIndex, Node] = {}
    for part in parts:
        for node in part:
            if node.index in table:
                raise InvariantViolation(f"node {node.index} appears more than once")
            table[node.index] = node

    expected = DirectedEdge if directed else UndirectedEdge
    multi_part = len(parts) > 1
    edge_set = frozenset(edges)
    for edge in edge_set:
        if not isinstance(edge, expected):
            raise InvariantViolation(f"edge {edge} is not a {expected.__name__}")
        a, b = edge.endpoints
        if a == b:
            raise InvariantViolation(f"edge {edge} is a self-loop")
        missing = [idx for idx in (a, b) if idx not in table]
        if missing:
            raise InvariantViolation(f"edge {edge} references missing node(s) {missing}")
        if multi_part and table[a].part == table[b].part:
            raise InvariantViolation(f"edge {edge} connects two nodes of part {table[a].part}")

    return Graph(parts=tuple(tuple(part) for part in parts), edges=edge_set, directed=directed)


__all__ = ["InvariantViolation", "assemble"]
