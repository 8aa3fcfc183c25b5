"""
Graph Builder for astgraph

This module populates a Graph from the structural events produced by a
TreeWalker.

Extraction Rules:
    - A function declaration registers a Function node and becomes the
      current scope
    - A variable declaration registers a Variable node per name and adds
      a Declares edge from the current scope
    - A read of a name resolved as a variable adds a Uses edge from the
      current scope, if the variable is registered
    - A call adds a Call edge from the current scope to the callee
      (registered as a Function on first sight), then a PassesTo edge
      from every registered variable passed as a bare argument to the
      current scope

Design Decisions:
    - The current scope starts as an unregistered Unknown sentinel and is
      not restored when a function body ends
    - Name is the only identity: a declaration reuses whatever node is
      already registered under its name
    - Any callee other than `name` or `receiver.member` with a bare
      receiver aborts the pass; no partial graph is returned

Data Flow:
    source text -> LibCSTWalker -> events -> GraphExtractor -> Graph
"""

import logging
from pathlib import Path

from astgraph.errors import ExtractionError, UnsupportedCallShape
from astgraph.graph.model import Graph
from astgraph.models import Node, NodeKind, Relation
from astgraph.parser.walker import (
    CallExpression,
    Event,
    Expression,
    ExpressionShape,
    FunctionDeclaration,
    IdentifierReference,
    LibCSTWalker,
    TreeWalker,
    VariableDeclaration,
)

logger = logging.getLogger(__name__)


SENTINEL_SCOPE_NAME = ""


def resolve_callee_name(callee: Expression) -> str:
    """
    Resolve the name of a called function.

    Args:
        callee: The callee expression of a call

    Returns:
        "name" for a bare identifier, "receiver.member" for a member
        access on a bare identifier

    Raises:
        UnsupportedCallShape: For any other callee shape
    """
    if callee.shape is ExpressionShape.IDENTIFIER:
        return callee.name
    if callee.shape is ExpressionShape.SELECTOR:
        receiver = callee.receiver
        if receiver is not None and receiver.shape is ExpressionShape.IDENTIFIER:
            return f"{receiver.name}.{callee.name}"
        label = receiver.label if receiver is not None else "nothing"
        raise UnsupportedCallShape(f"selector on {label}")
    raise UnsupportedCallShape(callee.label)


class GraphExtractor:
    """
    Builds a Graph from the events of a TreeWalker.

    Each extract() call runs a fresh pass and returns a new Graph.

    Usage:
        extractor = GraphExtractor(LibCSTWalker(source))
        graph = extractor.extract()
    """

    def __init__(self, walker: TreeWalker) -> None:
        self.walker = walker
        self._graph = Graph()
        self._scope = Node(NodeKind.UNKNOWN, SENTINEL_SCOPE_NAME)

    def extract(self) -> Graph:
        """
        Run one extraction pass.

        Returns:
            The populated Graph

        Raises:
            ParseFailure: If the walker cannot parse its source
            UnsupportedCallShape: If a callee cannot be resolved to a name
        """
        graph = Graph()
        self._graph = graph
        self._scope = Node(NodeKind.UNKNOWN, SENTINEL_SCOPE_NAME)

        try:
            for event in self.walker.walk():
                self._handle(event)
        except ExtractionError as e:
            logger.debug("Extraction aborted: %s", e)
            # The partial graph of an aborted pass is dropped.
            self._graph = Graph()
            self._scope = Node(NodeKind.UNKNOWN, SENTINEL_SCOPE_NAME)
            raise

        logger.debug(
            "Extracted %d node(s) and %d edge(s)", graph.node_count, graph.edge_count
        )
        return graph

    def _handle(self, event: Event) -> None:
        if isinstance(event, FunctionDeclaration):
            self._scope = self._register(NodeKind.FUNCTION, event.name)
        elif isinstance(event, VariableDeclaration):
            for name in event.names:
                variable = self._register(NodeKind.VARIABLE, name)
                self._graph.add_edge(self._scope, variable, Relation.DECLARES)
        elif isinstance(event, IdentifierReference):
            self._on_reference(event)
        elif isinstance(event, CallExpression):
            self._on_call(event)

    def _register(self, kind: NodeKind, name: str) -> Node:
        """Register a node and return the one now held under its name."""
        self._graph.add_node(Node(kind, name))
        return self._graph.get_node(name)

    def _on_reference(self, event: IdentifierReference) -> None:
        if event.kind is not NodeKind.VARIABLE:
            return
        variable = self._graph.get_node(event.name)
        if variable is not None:
            self._graph.add_edge(self._scope, variable, Relation.USES)

    def _on_call(self, event: CallExpression) -> None:
        callee = self._register(NodeKind.FUNCTION, resolve_callee_name(event.callee))
        self._graph.add_edge(self._scope, callee, Relation.CALL)

        for argument in event.arguments:
            if argument.shape is not ExpressionShape.IDENTIFIER:
                continue
            variable = self._graph.get_node(argument.name)
            if variable is not None and variable.kind is NodeKind.VARIABLE:
                # Direction: the variable flows into the enclosing scope.
                self._graph.add_edge(variable, self._scope, Relation.PASSES_TO)


def extract_graph_from_source(source: str) -> Graph:
    """
    Build a Graph from Python source code.

    Args:
        source: Python source code as a string

    Returns:
        A Graph of functions, variables and their relationships

    Raises:
        ParseFailure: If the source has syntax errors
        UnsupportedCallShape: If a call's callee is not a name or
            a member access on a name

    Example:
        >>> source = '''
        ... def main():
        ...     helper()
        ... '''
        >>> graph = extract_graph_from_source(source)
        >>> print(graph.render(), end="")
        (main)-[:Call]->(helper)
    """
    return GraphExtractor(LibCSTWalker(source)).extract()


def extract_graph_from_file(file_path: Path | str) -> Graph:
    """
    Build a Graph from a Python file.

    Args:
        file_path: Path to the Python file

    Returns:
        The extracted Graph

    Raises:
        FileNotFoundError: If the file doesn't exist
        ParseFailure: If the file has syntax errors
        UnsupportedCallShape: If a callee shape is not supported
        UnicodeDecodeError: If the file has encoding issues
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    source = file_path.read_text(encoding="utf-8")
    logger.debug("Extracting graph from %s", file_path)

    return extract_graph_from_source(source)
