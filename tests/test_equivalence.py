"""
Tests for the structural equivalence check.
"""

import pytest
from astgraph.graph import Graph, extract_graph_from_source, is_isomorphic
from astgraph.models import Node, NodeKind, Relation
from tests.fixtures import TWO_FUNCTIONS, VARIABLE_DECLARATION_AND_USE


def F(name: str) -> Node:
    return Node(NodeKind.FUNCTION, name)


def V(name: str) -> Node:
    return Node(NodeKind.VARIABLE, name)


def _graph(nodes, edges) -> Graph:
    graph = Graph()
    for node in nodes:
        graph.add_node(node)
    for source, target, relation in edges:
        graph.add_edge(source, target, relation)
    return graph


CASES = [
    pytest.param(
        _graph([F("function1"), V("variable2")], [(F("function1"), V("variable2"), Relation.CALL)]),
        _graph([V("variable1"), V("variable2")], [(V("variable1"), V("variable2"), Relation.CALL)]),
        False,
        id="different node kinds",
    ),
    pytest.param(
        _graph([F("function1"), V("variable2")], [(F("function1"), V("variable2"), Relation.CALL)]),
        _graph([F("function1"), V("variable2")], [(F("function1"), V("variable2"), Relation.USES)]),
        False,
        id="different relations",
    ),
    pytest.param(
        _graph([F("function1"), V("variable1")], [(F("function1"), V("variable1"), Relation.CALL)]),
        _graph([F("function2"), V("variable2")], [(F("function2"), V("variable2"), Relation.CALL)]),
        True,
        id="same kinds and relations, different names",
    ),
    pytest.param(
        _graph(
            [F("function1"), V("variable1"), V("variable2")],
            [
                (F("function1"), V("variable1"), Relation.CALL),
                (F("function1"), V("variable2"), Relation.USES),
            ],
        ),
        _graph(
            [F("function2"), V("variable3"), V("variable4")],
            [
                (F("function2"), V("variable3"), Relation.CALL),
                (F("function2"), V("variable4"), Relation.USES),
            ],
        ),
        True,
        id="multiple nodes and edges",
    ),
    pytest.param(
        _graph([F("function1"), V("variable1")], [(F("function1"), V("variable1"), Relation.CALL)]),
        _graph(
            [F("function2")],
            [
                (F("function2"), V("variable2"), Relation.CALL),
                (F("function2"), V("variable3"), Relation.USES),
            ],
        ),
        False,
        id="different node counts",
    ),
    pytest.param(
        _graph([F("function1"), V("variable1")], [(F("function1"), V("variable1"), Relation.CALL)]),
        _graph([F("function2"), V("variable2")], []),
        False,
        id="different edge counts",
    ),
]


class TestIsIsomorphic:
    """Tests for is_isomorphic."""

    @pytest.mark.parametrize("g1, g2, expected", CASES)
    def test_cases(self, g1, g2, expected):
        """Test the four-condition check on hand-built graphs."""
        assert is_isomorphic(g1, g2) is expected

    @pytest.mark.parametrize("g1, g2, expected", CASES)
    def test_symmetric(self, g1, g2, expected):
        """Test that argument order does not matter."""
        assert is_isomorphic(g1, g2) == is_isomorphic(g2, g1)

    def test_reflexive(self):
        """Test that a graph is equivalent to itself."""
        for source in (TWO_FUNCTIONS, VARIABLE_DECLARATION_AND_USE):
            graph = extract_graph_from_source(source)
            assert is_isomorphic(graph, graph)

    def test_empty_graphs(self):
        """Test that two empty graphs are equivalent."""
        assert is_isomorphic(Graph(), Graph())

    def test_wiring_is_not_compared(self):
        """Test the documented false positive: same histograms, different wiring."""
        a, b, c = F("a"), F("b"), F("c")
        chain = _graph([a, b, c], [(a, b, Relation.CALL), (b, c, Relation.CALL)])
        fan = _graph([a, b, c], [(a, b, Relation.CALL), (a, c, Relation.CALL)])

        assert is_isomorphic(chain, fan)

    def test_renamed_source_is_equivalent(self):
        """Test two sources that differ only in names."""
        renamed = '''
def start():
    relay("Hi")

def relay(text):
    emit(text)
'''
        assert is_isomorphic(
            extract_graph_from_source(TWO_FUNCTIONS),
            extract_graph_from_source(renamed),
        )
