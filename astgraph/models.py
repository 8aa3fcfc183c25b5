"""
Core Data Models for astgraph

This module defines the canonical data structures of the program graph:
- NodeKind: What a graph node represents (function, variable, unknown)
- Relation: The meaning of a directed edge between two nodes
- Node: A named program entity
- Edge: A directed, labeled relationship between two nodes

These models are designed to be:
- Immutable (frozen dataclasses, rewrites return new instances)
- Hashable, so they can be used as set members and dict keys
- Rendered directly into the textual pattern grammar
"""

from dataclasses import dataclass, replace
from enum import Enum


class NodeKind(Enum):
    """
    Classification of a graph node.

    The enum value is the text used by abstract pattern rendering.
    """

    FUNCTION = "Function"
    VARIABLE = "Variable"
    UNKNOWN = "Unknown"


class Relation(Enum):
    """
    Semantics of a directed edge.

    States:
        CALL: The source scope calls the target function.
        DECLARES: The source scope declares the target variable.
        USES: The source scope reads the target variable.
        PASSES_TO: The source variable is passed as an argument
                   at a call site inside the target scope.
        UNKNOWN: No classification available.
    """

    CALL = "Call"
    DECLARES = "Declares"
    USES = "Uses"
    PASSES_TO = "PassesTo"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Node:
    """
    A single program entity in the graph.

    Attributes:
        kind: What this node represents
        name: Identifier of the entity; the identity key within one Graph

    Invariants:
        - Two nodes with the same name denote the same entity in a Graph,
          regardless of kind (the first registered one wins)
    """

    kind: NodeKind
    name: str

    @property
    def key(self) -> str:
        """Stable identifier used for identity comparisons."""
        return self.name

    def with_kind(self, kind: NodeKind) -> "Node":
        """Return a new Node with a different kind (immutable update)."""
        return replace(self, kind=kind)

    def with_name(self, name: str) -> "Node":
        """Return a new Node with a different name (immutable update)."""
        return replace(self, name=name)

    def __str__(self) -> str:
        return f"({self.name})"


@dataclass(frozen=True)
class Edge:
    """
    Represents a directed, labeled relationship between two nodes.

    Attributes:
        source: Node the edge leaves
        target: Node the edge points to
        relation: Label describing the relationship

    Note:
        Endpoints are not required to be registered in the Graph holding
        the edge, and identical edges may appear more than once.
    """

    source: Node
    target: Node
    relation: Relation = Relation.UNKNOWN

    def abstract(self) -> str:
        """Render the edge with node kinds in place of names."""
        return (
            f"({self.source.kind.value})-[:{self.relation.value}]->"
            f"({self.target.kind.value})"
        )

    def __str__(self) -> str:
        return f"{self.source}-[:{self.relation.value}]->{self.target}"
