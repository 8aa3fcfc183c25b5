"""
astgraph

Core engine for turning Python source code into a labeled program graph
(functions, variables, calls, declarations, uses, argument passing) and
for searching, comparing and rendering such graphs.
"""

from astgraph.errors import ExtractionError, ParseFailure, UnsupportedCallShape
from astgraph.models import Edge, Node, NodeKind, Relation
from astgraph.graph import Graph, extract_graph_from_source, is_isomorphic
from astgraph.search import multi_path_pruning
from astgraph.query import render_abstract, render_concrete

__all__ = [
    "Edge",
    "ExtractionError",
    "Graph",
    "Node",
    "NodeKind",
    "ParseFailure",
    "Relation",
    "UnsupportedCallShape",
    "extract_graph_from_source",
    "is_isomorphic",
    "multi_path_pruning",
    "render_abstract",
    "render_concrete",
]
__version__ = "0.1.0"
