"""Generation façade running validation, node placement and edge selection."""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from .assemble import assemble
from .candidates import candidates
from .config import GraphConfig, config_for_kind
from .model import Graph, GraphKind
from .nodes import build_nodes
from .selection import select, strategy_for
from .validate import validate_config

logger = logging.getLogger(__name__)


def generate_graph(config: GraphConfig, rng: Optional[np.random.Generator] = None) -> Graph:
    """Build a new :class:`Graph` for ``config``.

    The configuration is validated before any randomness is drawn.  When ``rng``
    is omitted a generator seeded with ``config.rng_seed`` is used, so equal
    seeds give identical graphs.
    """

    validate_config(config)
    if rng is None:
        rng = np.random.default_rng(config.rng_seed)

    logger.info(
        "Generating graph: size=%d parts=%d layout=%s directed=%s",
        config.total_size,
        config.part_count,
        config.layout,
        config.directed,
    )
    parts = build_nodes(
        config.total_size,
        config.part_count,
        config.layout,
        rng,
        canvas_width=config.canvas_width,
        canvas_height=config.canvas_height,
        partition=config.partition,
    )

    pool = candidates(parts, config.directed)
    strategy = strategy_for(config.complete, config.near)
    edges = select(
        pool,
        strategy,
        rng,
        parts=parts,
        order=config.order,
        min_degree=config.min_degree,
    )
    logger.info(
        "Selected %d edge(s) from %d candidate(s) using %s", len(edges), len(pool), strategy.value
    )
    return assemble(parts, edges, config.directed)


def generate_kind(
    kind: GraphKind, total_size: int, *, rng_seed: Optional[int] = None, **overrides: Any
) -> Graph:
    config = config_for_kind(kind, total_size, rng_seed=rng_seed, **overrides)
    return generate_graph(config)


__all__ = ["generate_graph", "generate_kind"]
