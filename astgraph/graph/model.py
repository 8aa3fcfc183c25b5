"""
Program Graph for astgraph

This module holds the in-memory graph of program entities and their
relationships: nodes are functions and variables, edges are calls,
declarations, uses and argument passing.

Design Decisions:
    - Nodes and edges are kept in insertion order; rendering and search
      tie-breaking depend on it
    - Each Graph owns a name index; the first node registered under a
      name wins
    - Edges are append-only and never deduplicated
    - Edge endpoints are not required to be registered nodes
    - NetworkX is used for export and degree analysis, not as the store,
      because a MultiDiGraph does not keep a global edge order

Graph Properties:
    - Directed and labeled
    - May have cycles and parallel edges
    - Not thread-safe: build it from one thread, then share read-only
"""

from typing import Iterator, Optional
import networkx as nx

from astgraph.models import Edge, Node, Relation
from astgraph.query.patterns import EMPTY_GRAPH, render_abstract, render_concrete


class Graph:
    """
    A labeled property graph extracted from source code.

    Provides a small append-only interface:
    - Registering nodes by name (first writer wins)
    - Appending edges
    - Looking up nodes and successors
    - Rendering the concrete pattern

    Attributes:
        nodes: Registered nodes in insertion order
        edges: Edges in insertion order

    Usage:
        graph = Graph()
        main = Node(NodeKind.FUNCTION, "main")
        graph.add_node(main)
        graph.add_edge(main, Node(NodeKind.FUNCTION, "helper"), Relation.CALL)
        print(graph.render())
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._index: dict[str, Node] = {}

    @property
    def nodes(self) -> list[Node]:
        """Registered nodes, in the order they were added."""
        return self._nodes

    @property
    def edges(self) -> list[Edge]:
        """Edges, in the order they were added."""
        return self._edges

    @property
    def node_count(self) -> int:
        """Return the number of registered nodes."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Return the number of edges."""
        return len(self._edges)

    def add_node(self, node: Node) -> bool:
        """
        Register a node under its name.

        If a node with the same name is already registered, nothing
        changes and the existing node stays in place.

        Args:
            node: The node to register

        Returns:
            True if the node was registered, False if the name was known
        """
        if node.name in self._index:
            return False
        self._nodes.append(node)
        self._index[node.name] = node
        return True

    def add_edge(
        self,
        source: Node,
        target: Node,
        relation: Relation = Relation.UNKNOWN,
    ) -> Edge:
        """
        Append a directed edge.

        The endpoints are not checked against the registered nodes.

        Args:
            source: Node the edge leaves
            target: Node the edge points to
            relation: Label of the edge

        Returns:
            The newly appended Edge
        """
        edge = Edge(source, target, relation)
        self._edges.append(edge)
        return edge

    def get_node(self, name: str) -> Optional[Node]:
        """
        Retrieve the node registered under a name.

        Args:
            name: The node name

        Returns:
            The registered Node if found, None otherwise
        """
        return self._index.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def successors(self, node: Node) -> Iterator[Node]:
        """
        Iterate over the targets of edges leaving a node.

        Args:
            node: The source node (matched by key)

        Yields:
            Target nodes in stored edge order, repeated for parallel edges
        """
        for edge in self._edges:
            if edge.source.key == node.key:
                yield edge.target

    def render(self, abstract: bool = False) -> str:
        """
        Render the pattern of the graph.

        Args:
            abstract: Render node kinds instead of node names

        Returns:
            One "(from)-[:Relation]->(to)" line per edge, each terminated
            by a newline, or the empty-graph sentinel
        """
        if not self._edges:
            return EMPTY_GRAPH
        if abstract:
            return render_abstract(self) + "\n"
        return render_concrete(self) + "\n"

    def __str__(self) -> str:
        return self.render()

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Export the graph as a NetworkX MultiDiGraph.

        Registered nodes come first, followed by any edge endpoints that
        were never registered. Nodes are keyed by name and carry a "kind"
        attribute; edges carry a "relation" attribute.

        Returns:
            A new MultiDiGraph
        """
        exported = nx.MultiDiGraph()
        for node in self._nodes:
            exported.add_node(node.key, kind=node.kind.value)
        for edge in self._edges:
            for endpoint in (edge.source, edge.target):
                if endpoint.key not in exported:
                    exported.add_node(endpoint.key, kind=endpoint.kind.value)
            exported.add_edge(
                edge.source.key,
                edge.target.key,
                relation=edge.relation.value,
            )
        return exported

    def degree_sequence(self) -> list[int]:
        """
        Compute the sorted degree sequence of the graph.

        The degree of a node is the number of edge endpoints naming it
        (a self-loop counts twice). Nodes without edges are left out.

        Returns:
            Degrees in ascending order
        """
        exported = self.to_networkx()
        return sorted(degree for _, degree in exported.degree() if degree > 0)
