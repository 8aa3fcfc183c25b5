"""
Query module for astgraph.

Renders graphs as concrete (name-level) or abstract (kind-level)
textual patterns.
"""

from astgraph.query.patterns import (
    EMPTY_GRAPH,
    PatternBuilder,
    render_abstract,
    render_concrete,
)

__all__ = [
    "EMPTY_GRAPH",
    "PatternBuilder",
    "render_abstract",
    "render_concrete",
]
