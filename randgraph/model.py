"""Core data structures for graph generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple, Union

NodeIndex = int
Point2D = Tuple[float, float]


class Layout(str, Enum):
    SCATTER = "scatter"
    ALIGNED = "aligned"


class Partition(str, Enum):
    """How nodes are distributed over parts when ``part_count > 1``."""

    RANDOM = "random"
    BALANCED = "balanced"
    SPLIT = "split"


class GraphKind(str, Enum):
    UNDIRECTED = "undirected"
    CONNECTED = "connected"
    BIPARTITE = "bipartite"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Node:
    index: NodeIndex
    x: float
    y: float
    part: int = 0

    @property
    def pos(self) -> Point2D:
        return (self.x, self.y)


@dataclass(frozen=True, order=True)
class UndirectedEdge:
    """Unordered pair of distinct nodes stored with ``first < second``."""

    first: NodeIndex
    second: NodeIndex

    def __post_init__(self) -> None:
        if self.first == self.second:
            raise ValueError(f"edge endpoints must be distinct (got {self.first})")
        if self.first > self.second:
            raise ValueError(
                f"undirected edge must be canonical, use UndirectedEdge.of({self.first}, {self.second})"
            )

    @classmethod
    def of(cls, a: NodeIndex, b: NodeIndex) -> "UndirectedEdge":
        return cls(a, b) if a <= b else cls(b, a)

    @property
    def endpoints(self) -> Tuple[NodeIndex, NodeIndex]:
        return (self.first, self.second)

    def __str__(self) -> str:
        return f"{self.first}-{self.second}"


@dataclass(frozen=True, order=True)
class DirectedEdge:
    source: NodeIndex
    target: NodeIndex

    def __post_init__(self) -> None:
        if self.source == self.target:
            raise ValueError(f"edge endpoints must be distinct (got {self.source})")

    @property
    def endpoints(self) -> Tuple[NodeIndex, NodeIndex]:
        return (self.source, self.target)

    def __str__(self) -> str:
        return f"{self.source}->{self.target}"


Edge = Union[UndirectedEdge, DirectedEdge]
Parts = Tuple[Tuple[Node, ...], ...]


def make_edge(a: NodeIndex, b: NodeIndex, directed: bool) -> Edge:
    """Return the edge type matching ``directed`` for the pair ``(a, b)``."""

    if directed:
        return DirectedEdge(a, b)
    return UndirectedEdge.of(a, b)


@dataclass(frozen=True)
class Graph:
    """Immutable result of one generation pass."""

    parts: Parts
    edges: FrozenSet[Edge]
    directed: bool = False
    _by_index: Dict[NodeIndex, Node] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_index = {node.index: node for part in self.parts for node in part}
        object.__setattr__(self, "_by_index", by_index)

    @property
    def nodes(self) -> List[Node]:
        return [self._by_index[idx] for idx in sorted(self._by_index)]

    @property
    def part_count(self) -> int:
        return len(self.parts)

    def __len__(self) -> int:
        return len(self._by_index)

    def node(self, index: NodeIndex) -> Node:
        try:
            return self._by_index[index]
        except KeyError as exc:
            raise KeyError(f"Unknown node {index} in graph") from exc

    def sorted_edges(self) -> List[Edge]:
        return sorted(self.edges, key=lambda edge: edge.endpoints)

    def adjacency(self) -> Dict[NodeIndex, Tuple[NodeIndex, ...]]:
        """Map every node to its neighbors (outgoing only when directed)."""

        neighbors: Dict[NodeIndex, set] = {idx: set() for idx in self._by_index}
        for edge in self.edges:
            a, b = edge.endpoints
            neighbors[a].add(b)
            if not self.directed:
                neighbors[b].add(a)
        return {idx: tuple(sorted(found)) for idx, found in sorted(neighbors.items())}

    def degree(self, index: NodeIndex) -> int:
        self.node(index)
        return sum(1 for edge in self.edges if index in edge.endpoints)


__all__ = [
    "NodeIndex",
    "Point2D",
    "Layout",
    "Partition",
    "GraphKind",
    "Node",
    "UndirectedEdge",
    "DirectedEdge",
    "Edge",
    "Parts",
    "make_edge",
    "Graph",
]
