"""
LibCST-based Syntax Tree Walker

This module turns Python source code into the stream of structural events
the graph extractor consumes. The extractor only depends on the event
types and the TreeWalker protocol defined here, so any parser able to
produce these events can stand in for LibCST.

Key Components:
    - FunctionDeclaration, VariableDeclaration, IdentifierReference,
      CallExpression: the four event kinds
    - Expression: parser-independent description of a callee or argument
    - TreeWalker: protocol implemented by event producers
    - EventCollector: CST visitor that records events in depth-first order
    - LibCSTWalker: TreeWalker over a Python source string

Design Decisions:
    - Uses LibCST (not ast) for scope and expression-context metadata
    - A call event is emitted before the events of its callee and arguments
    - Annotated assignments always declare; plain assignments, loop
      targets, with/except aliases and walrus targets declare a name only
      the first time it is bound in the enclosing function
    - Identifier kinds come from LibCST scope analysis; builtins and
      imported names stay unresolved

Limitation: Cannot resolve dynamic dispatch or metaprogramming
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Protocol, Union
import libcst as cst
from libcst.metadata import (
    Assignment,
    ExpressionContext,
    ExpressionContextProvider,
    MetadataWrapper,
    ScopeProvider,
)

from astgraph.errors import ParseFailure
from astgraph.models import NodeKind

logger = logging.getLogger(__name__)


class ExpressionShape(Enum):
    """Shape of a callee or argument expression."""

    IDENTIFIER = "identifier"
    SELECTOR = "selector"
    OTHER = "other"


@dataclass(frozen=True)
class Expression:
    """
    Parser-independent description of an expression.

    Attributes:
        shape: IDENTIFIER for a bare name, SELECTOR for receiver.member,
               OTHER for everything else
        name: The identifier, the member name, or for OTHER the syntax
              class of the expression (e.g. "Subscript")
        receiver: The receiver expression of a SELECTOR
    """

    shape: ExpressionShape
    name: str
    receiver: Optional["Expression"] = None

    @property
    def label(self) -> str:
        """Short description used in error messages."""
        if self.shape is ExpressionShape.OTHER:
            return self.name
        return self.shape.value


@dataclass(frozen=True)
class FunctionDeclaration:
    name: str


@dataclass(frozen=True)
class VariableDeclaration:
    names: tuple[str, ...]


@dataclass(frozen=True)
class IdentifierReference:
    """
    A bare name being read.

    Attributes:
        name: The identifier
        kind: Statically resolved kind, None if unknown
    """

    name: str
    kind: Optional[NodeKind] = None


@dataclass(frozen=True)
class CallExpression:
    callee: Expression
    arguments: tuple[Expression, ...] = ()


Event = Union[FunctionDeclaration, VariableDeclaration, IdentifierReference, CallExpression]


class TreeWalker(Protocol):
    """Anything that can produce extraction events in depth-first order."""

    def walk(self) -> Iterator[Event]:
        ...


def describe_expression(node: cst.BaseExpression) -> Expression:
    """
    Describe a LibCST expression by its shape.

    Args:
        node: The expression to describe

    Returns:
        An Expression; attribute chains nest through receiver
    """
    if isinstance(node, cst.Name):
        return Expression(ExpressionShape.IDENTIFIER, node.value)
    if isinstance(node, cst.Attribute):
        return Expression(
            ExpressionShape.SELECTOR,
            node.attr.value,
            receiver=describe_expression(node.value),
        )
    return Expression(ExpressionShape.OTHER, type(node).__name__)


def _bound_names(node: cst.BaseExpression) -> Iterator[str]:
    """Yield the bare names bound by an assignment target."""
    if isinstance(node, cst.Name):
        yield node.value
    elif isinstance(node, (cst.Tuple, cst.List)):
        for element in node.elements:
            yield from _bound_names(element.value)


class EventCollector(cst.CSTVisitor):
    """
    CST Visitor that records extraction events.

    Handles:
        - Function definitions (top-level, nested, methods, async)
        - Annotated and plain assignments to bare names, including
          tuple and list unpacking
        - Bindings by for targets, with/except aliases and walrus
        - Name reads
        - Calls, with their callee and positional/keyword arguments

    Usage:
        wrapper = MetadataWrapper(module)
        collector = EventCollector()
        wrapper.visit(collector)
        events = collector.events
    """

    METADATA_DEPENDENCIES = (ScopeProvider, ExpressionContextProvider)

    def __init__(self) -> None:
        self.events: list[Event] = []
        # One set of bound names per enclosing function, module scope first.
        self._bound: list[set[str]] = [set()]

    def visit_FunctionDef(self, node: cst.FunctionDef) -> bool:
        self.events.append(FunctionDeclaration(node.name.value))
        self._bound.append(set())
        return True

    def leave_FunctionDef(self, original_node: cst.FunctionDef) -> None:
        self._bound.pop()

    def _declare(self, names: Iterable[str]) -> None:
        """Emit one declaration group for the names not yet bound in this function."""
        bound = self._bound[-1]
        declared: list[str] = []
        for name in names:
            if name not in bound and name not in declared:
                declared.append(name)
        if declared:
            bound.update(declared)
            self.events.append(VariableDeclaration(tuple(declared)))

    def visit_AnnAssign(self, node: cst.AnnAssign) -> bool:
        """An annotated bare name is always a declaration."""
        if isinstance(node.target, cst.Name):
            name = node.target.value
            self._bound[-1].add(name)
            self.events.append(VariableDeclaration((name,)))
        return True

    def visit_Assign(self, node: cst.Assign) -> bool:
        """
        Declare the names this assignment binds for the first time.

        A later assignment to a name already bound in the same function
        is a plain store.
        """
        self._declare(
            name for target in node.targets for name in _bound_names(target.target)
        )
        return True

    def visit_For(self, node: cst.For) -> bool:
        self._declare(_bound_names(node.target))
        return True

    def visit_WithItem(self, node: cst.WithItem) -> bool:
        if node.asname is not None:
            self._declare(_bound_names(node.asname.name))
        return True

    def visit_ExceptHandler(self, node: cst.ExceptHandler) -> bool:
        if node.name is not None:
            self._declare(_bound_names(node.name.name))
        return True

    def visit_NamedExpr(self, node: cst.NamedExpr) -> bool:
        self._declare(_bound_names(node.target))
        return True

    def visit_Name(self, node: cst.Name) -> bool:
        context = self.get_metadata(ExpressionContextProvider, node, None)
        if context is ExpressionContext.LOAD:
            self.events.append(
                IdentifierReference(node.value, self._resolve_kind(node))
            )
        return True

    def visit_Call(self, node: cst.Call) -> bool:
        arguments = tuple(
            describe_expression(arg.value) for arg in node.args if not arg.star
        )
        self.events.append(CallExpression(describe_expression(node.func), arguments))
        return True

    def visit_Arg(self, node: cst.Arg) -> bool:
        # A keyword name is not a read; only the value is walked.
        node.value.visit(self)
        return False

    # Names in these statements bind or alias, they are not reads.

    def visit_Import(self, node: cst.Import) -> bool:
        return False

    def visit_ImportFrom(self, node: cst.ImportFrom) -> bool:
        return False

    def visit_Global(self, node: cst.Global) -> bool:
        # Rebinding an outer name inside this function is not a declaration.
        self._bound[-1].update(item.name.value for item in node.names)
        return False

    def visit_Nonlocal(self, node: cst.Nonlocal) -> bool:
        self._bound[-1].update(item.name.value for item in node.names)
        return False

    def _resolve_kind(self, node: cst.Name) -> Optional[NodeKind]:
        """
        Resolve what a name read refers to.

        Returns:
            VARIABLE if any binding is an assignment, parameter or loop
            target; FUNCTION if it is only bound by def/class; None for
            builtins, imports and unknown names
        """
        scope = self.get_metadata(ScopeProvider, node, None)
        if scope is None:
            return None

        kinds: set[NodeKind] = set()
        for assignment in scope[node.value]:
            # BuiltinAssignment is not an Assignment
            if not isinstance(assignment, Assignment):
                continue
            if isinstance(assignment.node, (cst.FunctionDef, cst.ClassDef)):
                kinds.add(NodeKind.FUNCTION)
            elif isinstance(assignment.node, (cst.Import, cst.ImportFrom)):
                continue
            else:
                kinds.add(NodeKind.VARIABLE)

        if NodeKind.VARIABLE in kinds:
            return NodeKind.VARIABLE
        if NodeKind.FUNCTION in kinds:
            return NodeKind.FUNCTION
        return None


class LibCSTWalker:
    """
    TreeWalker over Python source code.

    Parsing happens when walk() is first advanced; a syntax error is
    reported as ParseFailure before any event is produced.

    Example:
        >>> walker = LibCSTWalker("def main():\\n    helper()\\n")
        >>> [type(e).__name__ for e in walker.walk()]
        ['FunctionDeclaration', 'CallExpression', 'IdentifierReference']
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def walk(self) -> Iterator[Event]:
        try:
            module = cst.parse_module(self.source)
        except cst.ParserSyntaxError as e:
            raise ParseFailure(str(e)) from e

        wrapper = MetadataWrapper(module)
        collector = EventCollector()
        wrapper.visit(collector)

        logger.debug("Collected %d event(s)", len(collector.events))
        yield from collector.events
