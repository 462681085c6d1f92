from .model import (
    DirectedEdge,
    Edge,
    Graph,
    GraphKind,
    Layout,
    Node,
    Partition,
    UndirectedEdge,
)
from .config import GraphConfig, LayoutConfig, config_for_kind, get_layout_config, set_layout_config
from .validate import validate_config, InvalidConfiguration
from .nodes import build_nodes
from .candidates import candidates
from .selection import Strategy, select, strategy_for
from .assemble import assemble, InvariantViolation
from .generate import generate_graph, generate_kind
from .printer import graph_to_dict, print_graph

__all__ = [
    'DirectedEdge',
    'Edge',
    'Graph',
    'GraphKind',
    'Layout',
    'Node',
    'Partition',
    'UndirectedEdge',
    'GraphConfig',
    'LayoutConfig',
    'config_for_kind',
    'get_layout_config',
    'set_layout_config',
    'validate_config',
    'InvalidConfiguration',
    'build_nodes',
    'candidates',
    'Strategy',
    'select',
    'strategy_for',
    'assemble',
    'InvariantViolation',
    'generate_graph',
    'generate_kind',
    'graph_to_dict',
    'print_graph',
]
