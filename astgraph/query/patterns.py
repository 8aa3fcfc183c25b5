"""
Pattern rendering for astgraph.

Serializes a graph's edges as textual triples, one per line, in the
order the edges were added:

    concrete:  (main)-[:Call]->(helper)
    abstract:  (Function)-[:Call]->(Function)

Names containing "-[", "]->" or a newline are not escaped, so their
rendering cannot be parsed back unambiguously.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from astgraph.graph.model import Graph


EMPTY_GRAPH = "Empty graph"


class PatternBuilder:
    """
    Builds concrete and abstract patterns for a graph.

    Usage:
        builder = PatternBuilder(graph)
        print(builder.concrete())
        print(builder.abstract())
    """

    def __init__(self, graph: Optional["Graph"]) -> None:
        self.graph = graph

    def _lines(self, abstract: bool) -> Optional[list[str]]:
        if self.graph is None or not self.graph.edges:
            return None
        if abstract:
            return [edge.abstract() for edge in self.graph.edges]
        return [str(edge) for edge in self.graph.edges]

    def concrete(self) -> str:
        """Render each edge with node names."""
        lines = self._lines(abstract=False)
        if lines is None:
            return EMPTY_GRAPH
        return "\n".join(lines)

    def abstract(self) -> str:
        """Render each edge with node kinds in place of names."""
        lines = self._lines(abstract=True)
        if lines is None:
            return EMPTY_GRAPH
        return "\n".join(lines)


def render_concrete(graph: Optional["Graph"]) -> str:
    return PatternBuilder(graph).concrete()


def render_abstract(graph: Optional["Graph"]) -> str:
    """Abstract lines without a trailing newline; see Graph.render(abstract=True)."""
    return PatternBuilder(graph).abstract()
