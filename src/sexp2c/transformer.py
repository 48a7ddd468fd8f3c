"""Source AST to target AST transformation driven by `traverse`."""

from __future__ import annotations

from . import ast, c_ast
from .traverser import Visitor, VisitorMethods, traverse


class _AppendTargets:
    """Side table mapping source nodes to the list their target children go into.

    Lists live in an arena and are addressed by integer handle; source nodes
    are keyed by identity, so structurally equal calls never share a target.
    """

    def __init__(self) -> None:
        self.slots: list[list[object]] = []
        self._handles: dict[int, int] = {}

    def open(self, node: ast.Node) -> int:
        handle = len(self.slots)
        self.slots.append([])
        self._handles[id(node)] = handle
        return handle

    def append(self, node: ast.Node, item: object) -> None:
        self.slots[self._handles[id(node)]].append(item)

    def take(self, node: ast.Node) -> tuple:
        return tuple(self.slots[self._handles.pop(id(node))])


class _Transformer:
    def __init__(self) -> None:
        self.targets = _AppendTargets()

    def visitor(self) -> Visitor:
        return {
            ast.NumberLiteral: VisitorMethods(enter=self._enter_number),
            ast.StringLiteral: VisitorMethods(enter=self._enter_string),
            ast.CallExpression: VisitorMethods(enter=self._enter_call, exit=self._exit_call),
        }

    def run(self, program: ast.Program) -> c_ast.Program:
        self.targets.open(program)
        traverse(program, self.visitor())
        return c_ast.Program(body=self.targets.take(program))

    def _enter_number(self, node: ast.NumberLiteral, parent: ast.Node) -> None:
        self.targets.append(parent, c_ast.NumberLiteral(value=node.value))

    def _enter_string(self, node: ast.StringLiteral, parent: ast.Node) -> None:
        self.targets.append(parent, c_ast.StringLiteral(value=node.value))

    def _enter_call(self, node: ast.CallExpression, parent: ast.Node) -> None:
        self.targets.open(node)

    def _exit_call(self, node: ast.CallExpression, parent: ast.Node) -> None:
        # Arguments are complete only once every child has been visited.
        call = c_ast.CallExpression(
            callee=c_ast.Identifier(name=node.name),
            arguments=self.targets.take(node),
        )
        if isinstance(parent, ast.CallExpression):
            self.targets.append(parent, call)
        else:
            self.targets.append(parent, c_ast.ExpressionStatement(expression=call))


def transform(program: ast.Program) -> c_ast.Program:
    """Build the C-like target tree for `program` without touching its nodes."""
    return _Transformer().run(program)
