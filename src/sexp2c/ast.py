"""Source AST nodes for the parenthesized call syntax."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumberLiteral:
    value: str


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class CallExpression:
    name: str
    params: tuple["Term", ...] = ()


@dataclass(frozen=True)
class Program:
    body: tuple[CallExpression, ...] = ()


Term = Union[CallExpression, NumberLiteral, StringLiteral]
Node = Union[Program, CallExpression, NumberLiteral, StringLiteral]
