from typing import Any, Dict, List

from .model import Graph, Node


def _coord(value: float) -> str:
    return f'{value:.3f}'


def node_str(node: Node) -> str:
    return f'node {node.index} part={node.part} at ({_coord(node.x)}, {_coord(node.y)})'


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Plain-data form of ``graph`` for renderers and JSON output."""

    parts = [
        [{'index': node.index, 'x': node.x, 'y': node.y} for node in part]
        for part in graph.parts
    ]
    edges: List[List[int]] = []
    for edge in graph.sorted_edges():
        a, b = edge.endpoints
        edges.append([a, b, graph.node(a).part, graph.node(b).part])
    return {'directed': graph.directed, 'parts': parts, 'edges': edges}


def print_graph(graph: Graph) -> str:
    kind = 'directed' if graph.directed else 'undirected'
    lines = [f'graph {kind} nodes={len(graph)} parts={graph.part_count} edges={len(graph.edges)}']
    for node in graph.nodes:
        lines.append(node_str(node))
    for edge in graph.sorted_edges():
        lines.append(f'edge {edge}')
    return '\n'.join(lines) + '\n'
