"""Rendering of the target AST to C-like source text."""

from __future__ import annotations

from .c_ast import CallExpression, ExpressionStatement, Identifier, Node, NumberLiteral, Program, StringLiteral
from .errors import UnknownNodeKind


def _render_number(value: str, *, normalize: bool) -> str:
    if not normalize:
        return value
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"Invalid decimal literal {value!r}")
    # Text form only; int() refuses runs past the interpreter's digit limit.
    return value.lstrip("0") or "0"


def generate(node: Node, *, normalize_numbers: bool = False) -> str:
    """Render `node` and its subtree.

    Number literals are emitted as their stored digit text unless
    `normalize_numbers` is set, in which case leading zeros are dropped.
    """
    if isinstance(node, Program):
        return "\n".join(generate(stmt, normalize_numbers=normalize_numbers) for stmt in node.body)

    if isinstance(node, ExpressionStatement):
        return generate(node.expression, normalize_numbers=normalize_numbers) + ";"

    if isinstance(node, CallExpression):
        callee = generate(node.callee, normalize_numbers=normalize_numbers)
        args = ", ".join(generate(arg, normalize_numbers=normalize_numbers) for arg in node.arguments)
        return f"{callee}({args})"

    if isinstance(node, Identifier):
        return node.name

    if isinstance(node, NumberLiteral):
        return _render_number(node.value, normalize=normalize_numbers)

    if isinstance(node, StringLiteral):
        return f'"{node.value}"'

    raise UnknownNodeKind(node)
