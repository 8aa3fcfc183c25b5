"""
Tests for multi-path pruning search.
"""

import pytest
from astgraph.graph import Graph, extract_graph_from_source
from astgraph.models import Node, NodeKind, Relation
from astgraph.search import find_path, multi_path_pruning
from tests.fixtures import TWO_FUNCTIONS


def _chain_graph(names, pairs) -> tuple[Graph, dict[str, Node]]:
    graph = Graph()
    nodes = {name: Node(NodeKind.FUNCTION, name) for name in names}
    for node in nodes.values():
        graph.add_node(node)
    for source, target in pairs:
        graph.add_edge(nodes[source], nodes[target], Relation.CALL)
    return graph, nodes


def _names(path):
    return [node.name for node in path]


def _goal(name):
    return lambda node: node.name == name


class TestMultiPathPruning:
    """Tests for multi_path_pruning."""

    def test_linear_path(self):
        """Test A -> B -> C -> D."""
        graph, n = _chain_graph("ABCD", [("A", "B"), ("B", "C"), ("C", "D")])

        path = multi_path_pruning(graph, n["A"], _goal("D"))

        assert path == [n["A"], n["B"], n["C"], n["D"]]

    @pytest.mark.parametrize(
        "start, goal, expected",
        [
            ("A", "D", ["A", "E", "D"]),
            ("A", "B", ["A", "B"]),
            ("D", "A", None),
            ("B", "D", ["B", "C", "D"]),
            ("E", "B", None),
            ("C", "D", ["C", "D"]),
            ("D", "B", None),
            ("A", "E", ["A", "E"]),
        ],
    )
    def test_shortcut(self, start, goal, expected):
        """Test the graph A->B->C->D with the shortcut A->E->D."""
        graph, n = _chain_graph(
            "ABCDE",
            [("A", "B"), ("B", "C"), ("C", "D"), ("A", "E"), ("E", "D")],
        )

        path = multi_path_pruning(graph, n[start], _goal(goal))

        if expected is None:
            assert path is None
        else:
            assert _names(path) == expected

    def test_cycle_terminates(self):
        """Test that a 3-cycle does not loop forever."""
        graph, n = _chain_graph("FGH", [("F", "G"), ("G", "H"), ("H", "F")])

        path = multi_path_pruning(graph, n["F"], _goal("H"))

        assert _names(path) == ["F", "G", "H"]

    def test_cycle_without_goal_returns_none(self):
        """Test exhausting a cyclic graph."""
        graph, n = _chain_graph("FGH", [("F", "G"), ("G", "H"), ("H", "F")])

        assert multi_path_pruning(graph, n["F"], _goal("Z")) is None

    def test_no_edges(self):
        """Test a graph without edges and an unsatisfied goal."""
        graph, n = _chain_graph("A", [])

        assert multi_path_pruning(graph, n["A"], _goal("B")) is None

    def test_start_satisfies_goal(self):
        """Test that the start node itself can be the goal."""
        graph, n = _chain_graph("AB", [("A", "B")])

        assert _names(multi_path_pruning(graph, n["A"], _goal("A"))) == ["A"]

    def test_tie_broken_by_edge_order(self):
        """Test that equal-length paths go to the first stored edge."""
        graph, n = _chain_graph(
            "ABCD",
            [("A", "C"), ("A", "B"), ("B", "D"), ("C", "D")],
        )

        assert _names(multi_path_pruning(graph, n["A"], _goal("D"))) == ["A", "C", "D"]

    def test_nodes_compared_by_name(self):
        """Test that equal-named node instances are treated as one node."""
        graph = Graph()
        graph.add_edge(Node(NodeKind.FUNCTION, "A"), Node(NodeKind.FUNCTION, "B"), Relation.CALL)
        graph.add_edge(Node(NodeKind.FUNCTION, "B"), Node(NodeKind.FUNCTION, "C"), Relation.CALL)

        path = multi_path_pruning(graph, Node(NodeKind.FUNCTION, "A"), _goal("C"))

        assert _names(path) == ["A", "B", "C"]


class TestFindPath:
    """Tests for the name-based helper."""

    def test_path_in_extracted_graph(self):
        """Test searching a graph extracted from source."""
        graph = extract_graph_from_source(TWO_FUNCTIONS)

        assert _names(find_path(graph, "main", "println")) == ["main", "printMore", "println"]

    def test_unknown_start(self):
        """Test that an unregistered start name yields no path."""
        graph = extract_graph_from_source(TWO_FUNCTIONS)

        assert find_path(graph, "missing", "println") is None
