"""
Parser module for astgraph.

This module provides the syntax-tree collaborator contract (event types
and the TreeWalker protocol) and its LibCST implementation for Python
source code.
"""

from astgraph.parser.walker import (
    CallExpression,
    Event,
    EventCollector,
    Expression,
    ExpressionShape,
    FunctionDeclaration,
    IdentifierReference,
    LibCSTWalker,
    TreeWalker,
    VariableDeclaration,
    describe_expression,
)

__all__ = [
    "CallExpression",
    "Event",
    "EventCollector",
    "Expression",
    "ExpressionShape",
    "FunctionDeclaration",
    "IdentifierReference",
    "LibCSTWalker",
    "TreeWalker",
    "VariableDeclaration",
    "describe_expression",
]
