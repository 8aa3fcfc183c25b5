"""
Graph module for astgraph.

This module provides the program graph, its construction from Python
source, and the coarse structural equivalence check.
"""

from astgraph.graph.model import Graph
from astgraph.graph.builder import (
    GraphExtractor,
    extract_graph_from_file,
    extract_graph_from_source,
    resolve_callee_name,
)
from astgraph.graph.equivalence import is_isomorphic

__all__ = [
    "Graph",
    "GraphExtractor",
    "extract_graph_from_file",
    "extract_graph_from_source",
    "is_isomorphic",
    "resolve_callee_name",
]
