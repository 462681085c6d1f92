"""Configuration records and graph-kind presets."""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from typing import Any, Optional

from .model import GraphKind, Layout, Partition


@dataclass
class LayoutConfig:
    """Process-wide layout defaults."""

    margin: float = 20.0


@dataclass
class GraphConfig:
    """Single description of a generation request."""

    total_size: int = 5
    part_count: int = 1
    layout: Layout = Layout.SCATTER
    directed: bool = False
    complete: bool = False
    order: int = 1
    near: bool = True
    canvas_width: float = 800.0
    canvas_height: float = 600.0
    rng_seed: Optional[int] = None
    partition: Partition = Partition.RANDOM
    min_degree: int = 1


_LAYOUT_CONFIG = LayoutConfig()


def get_layout_config() -> LayoutConfig:
    return copy.deepcopy(_LAYOUT_CONFIG)


def set_layout_config(config: LayoutConfig) -> None:
    global _LAYOUT_CONFIG
    _LAYOUT_CONFIG = copy.deepcopy(config)


_KIND_PRESETS = {
    GraphKind.UNDIRECTED: dict(near=True, min_degree=0),
    GraphKind.CONNECTED: dict(near=True, min_degree=1),
    GraphKind.BIPARTITE: dict(part_count=2, partition=Partition.SPLIT, near=True, min_degree=1),
    GraphKind.COMPLETE: dict(complete=True),
}


def config_for_kind(kind: GraphKind, total_size: int, **overrides: Any) -> GraphConfig:
    """Return the :class:`GraphConfig` preset for one of the named graph kinds.

    ``undirected`` lets nearest-neighbour selection draw zero edges for a node,
    ``connected`` always draws at least one, ``bipartite`` splits the nodes into
    two non-empty parts and ``complete`` keeps every candidate edge.  Keyword
    ``overrides`` replace preset fields.
    """

    preset = _KIND_PRESETS[GraphKind(kind)]
    config = replace(GraphConfig(total_size=total_size), **preset)
    if overrides:
        config = replace(config, **overrides)
    return config


__all__ = [
    "LayoutConfig",
    "GraphConfig",
    "get_layout_config",
    "set_layout_config",
    "config_for_kind",
]
