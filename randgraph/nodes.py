"""Node partitioning and placement."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import get_layout_config
from .model import Layout, Node, Partition, Parts, Point2D

logger = logging.getLogger(__name__)


def assign_parts(
    total_size: int,
    part_count: int,
    rng: np.random.Generator,
    partition: Partition = Partition.RANDOM,
) -> List[int]:
    """Return the part index of every node, in node-index order."""

    if part_count == 1:
        return [0] * total_size

    partition = Partition(partition)
    if partition is Partition.RANDOM:
        return [int(p) for p in rng.integers(0, part_count, size=total_size)]
    if partition is Partition.BALANCED:
        return [i * part_count // total_size for i in range(total_size)]

    # SPLIT: cut the index range at part_count - 1 distinct interior points.
    cuts = np.sort(rng.choice(np.arange(1, total_size), size=part_count - 1, replace=False))
    membership: List[int] = []
    start = 0
    for part, stop in enumerate(list(cuts) + [total_size]):
        membership.extend([part] * (int(stop) - start))
        start = int(stop)
    return membership


def _canvas_radius(width: float, height: float, margin: float) -> float:
    return max(min(width, height) / 2.0 - margin, 0.0)


def _polygon_vertex(center: Point2D, radius: float, k: int, count: int) -> Point2D:
    angle = k * 2.0 * math.pi / count
    return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


def circle_positions(count: int, width: float, height: float, margin: float) -> List[Point2D]:
    """Evenly spaced points on the canvas circle, starting at angle 0."""

    center = (width / 2.0, height / 2.0)
    radius = _canvas_radius(width, height, margin)
    return [_polygon_vertex(center, radius, i, count) for i in range(count)]


def segment_positions(start: Point2D, end: Point2D, count: int) -> List[Point2D]:
    """Place ``count`` points along ``start``-``end`` at ``(j + 0.5) / (count + 1)``."""

    dx = end[0] - start[0]
    dy = end[1] - start[1]
    positions = []
    for j in range(count):
        t = (j + 0.5) / (count + 1)
        positions.append((start[0] + t * dx, start[1] + t * dy))
    return positions


def _scatter_positions(count: int, width: float, height: float, rng: np.random.Generator) -> List[Point2D]:
    xs = rng.uniform(0.0, width, size=count)
    ys = rng.uniform(0.0, height, size=count)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def _aligned_positions(
    membership: Sequence[int], part_count: int, width: float, height: float, margin: float
) -> List[Point2D]:
    total_size = len(membership)
    if part_count == 1:
        return circle_positions(total_size, width, height, margin)

    vertices = circle_positions(part_count, width, height, margin)
    members: List[List[int]] = [[] for _ in range(part_count)]
    for idx, part in enumerate(membership):
        members[part].append(idx)

    positions: List[Optional[Point2D]] = [None] * total_size
    for part, indices in enumerate(members):
        start = vertices[part]
        end = vertices[(part + 1) % part_count]
        for idx, pos in zip(indices, segment_positions(start, end, len(indices))):
            positions[idx] = pos
    return positions  # type: ignore[return-value]


def build_nodes(
    total_size: int,
    part_count: int,
    layout: Layout,
    rng: np.random.Generator,
    *,
    canvas_width: float,
    canvas_height: float,
    partition: Partition = Partition.RANDOM,
    margin: Optional[float] = None,
) -> Parts:
    """Partition ``total_size`` nodes into ``part_count`` parts and position them.

    Parts come back in part order with each part's nodes sorted by index.  With
    random partitioning a part may be empty.
    """

    if margin is None:
        margin = get_layout_config().margin

    membership = assign_parts(total_size, part_count, rng, partition)
    if Layout(layout) is Layout.SCATTER:
        positions = _scatter_positions(total_size, canvas_width, canvas_height, rng)
    else:
        positions = _aligned_positions(membership, part_count, canvas_width, canvas_height, margin)

    buckets: List[List[Node]] = [[] for _ in range(part_count)]
    for idx, (part, (x, y)) in enumerate(zip(membership, positions)):
        buckets[part].append(Node(idx, float(x), float(y), part))

    sizes: Tuple[int, ...] = tuple(len(bucket) for bucket in buckets)
    logger.debug("Built %d node(s) in %d part(s), sizes=%s, layout=%s", total_size, part_count, sizes, layout)
    return tuple(tuple(bucket) for bucket in buckets)


__all__ = [
    "assign_parts",
    "circle_positions",
    "segment_positions",
    "build_nodes",
]
