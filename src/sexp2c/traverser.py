"""Depth-first visitor traversal over the source AST."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from .ast import CallExpression, Node, NumberLiteral, Program, StringLiteral
from .errors import UnknownNodeKind

Callback = Callable[[Node, "Node | None"], None]

_NODE_KINDS = (Program, CallExpression, NumberLiteral, StringLiteral)


@dataclass(frozen=True)
class VisitorMethods:
    """Callbacks run before (`enter`) and after (`exit`) a node's children."""

    enter: Callback | None = None
    exit: Callback | None = None


Visitor = Mapping[type, VisitorMethods]


def _children(node: Node) -> Iterable[Node]:
    if isinstance(node, Program):
        return node.body
    if isinstance(node, CallExpression):
        return node.params
    return ()


def _traverse_node(node: Node, parent: Node | None, visitor: Visitor) -> None:
    if not isinstance(node, _NODE_KINDS):
        raise UnknownNodeKind(node)

    methods = visitor.get(type(node))
    if methods is not None and methods.enter is not None:
        methods.enter(node, parent)

    for child in _children(node):
        _traverse_node(child, node, visitor)

    if methods is not None and methods.exit is not None:
        methods.exit(node, parent)


def traverse(root: Node, visitor: Visitor) -> None:
    """Walk `root` depth-first, calling visitor callbacks with `(node, parent)`.

    The root is visited with parent `None`. Kinds missing from `visitor` are
    walked silently.
    """
    _traverse_node(root, None, visitor)
