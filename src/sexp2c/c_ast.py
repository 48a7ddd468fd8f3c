"""Target AST nodes for C-like call-expression statements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class NumberLiteral:
    value: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class CallExpression:
    callee: Identifier
    arguments: tuple["Expression", ...] = ()


@dataclass(frozen=True)
class ExpressionStatement:
    expression: CallExpression


@dataclass(frozen=True)
class Program:
    body: tuple[ExpressionStatement, ...] = ()


Expression = Union[CallExpression, Identifier, NumberLiteral, StringLiteral]
Node = Union[Program, ExpressionStatement, CallExpression, Identifier, NumberLiteral, StringLiteral]
