"""
Structural equivalence check for astgraph.

Two graphs are declared isomorphic when they agree on:

    1. The number of registered nodes
    2. The number of edges
    3. The count of nodes per NodeKind
    4. The count of edges per Relation

Node names and edge endpoints are ignored. This is a necessary condition
for isomorphism, not a sufficient one: graphs with the same kind and
relation histograms but different wiring compare equal.
"""

from collections import Counter

from astgraph.graph.model import Graph


def is_isomorphic(g1: Graph, g2: Graph) -> bool:
    """
    Check whether two graphs have the same coarse structure.

    Args:
        g1: First graph
        g2: Second graph

    Returns:
        True if counts and kind/relation histograms all match

    Example:
        >>> a, b = Graph(), Graph()
        >>> is_isomorphic(a, b)
        True
    """
    if g1.node_count != g2.node_count or g1.edge_count != g2.edge_count:
        return False

    kinds1 = Counter(node.kind for node in g1.nodes)
    kinds2 = Counter(node.kind for node in g2.nodes)
    if kinds1 != kinds2:
        return False

    relations1 = Counter(edge.relation for edge in g1.edges)
    relations2 = Counter(edge.relation for edge in g2.edges)
    return relations1 == relations2
