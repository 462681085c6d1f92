import pytest

from randgraph.assemble import InvariantViolation, assemble
from randgraph.model import DirectedEdge, Node, UndirectedEdge

from graph_helpers import make_parts


def _loop_edge(index):
    edge = object.__new__(UndirectedEdge)
    object.__setattr__(edge, 'first', index)
    object.__setattr__(edge, 'second', index)
    return edge


def test_assemble_returns_graph_with_given_parts_and_edges():
    parts = make_parts(2, 2)
    edges = {UndirectedEdge(0, 2), UndirectedEdge(1, 3)}

    graph = assemble(parts, edges, directed=False)

    assert graph.parts == parts
    assert graph.edges == frozenset(edges)
    assert not graph.directed


def test_assemble_rejects_missing_endpoint():
    with pytest.raises(InvariantViolation) as exc:
        assemble(make_parts(3), [UndirectedEdge(0, 9)], directed=False)

    assert 'missing node' in str(exc.value)


def test_assemble_rejects_self_loop():
    with pytest.raises(InvariantViolation) as exc:
        assemble(make_parts(3), [_loop_edge(1)], directed=False)

    assert 'self-loop' in str(exc.value)


def test_assemble_rejects_same_part_edge_in_multi_part_graph():
    with pytest.raises(InvariantViolation) as exc:
        assemble(make_parts(2, 2), [UndirectedEdge(0, 1)], directed=False)

    assert 'connects two nodes of part 0' in str(exc.value)


@pytest.mark.parametrize(
    'edge, directed',
    [(DirectedEdge(0, 1), False), (UndirectedEdge(0, 1), True)],
)
def test_assemble_rejects_mixed_edge_kinds(edge, directed):
    with pytest.raises(InvariantViolation):
        assemble(make_parts(3), [edge], directed=directed)


def test_assemble_rejects_duplicate_node_index():
    parts = ((Node(0, 0.0, 0.0, 0),), (Node(0, 1.0, 0.0, 1),))

    with pytest.raises(InvariantViolation):
        assemble(parts, [], directed=False)


def test_assemble_accepts_empty_parts():
    graph = assemble(make_parts(3, 0), [], directed=True)

    assert len(graph) == 3
    assert graph.edges == frozenset()
