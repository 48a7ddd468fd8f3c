"""Recursive-descent parser for parenthesized call expressions.

Grammar::

    Program        := CallExpression*
    CallExpression := '(' Name Term* ')'
    Term           := CallExpression | Number | String
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from .ast import CallExpression, NumberLiteral, Program, StringLiteral, Term
from .errors import NestingTooDeep, UnexpectedEndOfInput, UnexpectedToken
from .lexer import Token, tokenize

DEFAULT_MAX_DEPTH: Final[int] = max(1, int(os.environ.get("SEXP2C_MAX_DEPTH", "200")))

_OPEN = "PAREN('(')"
_CLOSE = "PAREN(')')"
_TERM_START = ("NUMBER", "STRING", _OPEN)


def _describe(tok: Token) -> str:
    return f"{tok.kind}({tok.text!r})"


@dataclass
class _Parser:
    tokens: Sequence[Token]
    max_depth: int = DEFAULT_MAX_DEPTH
    index: int = 0

    def parse_program(self) -> Program:
        body: list[CallExpression] = []
        while not self._at_end():
            tok = self.tokens[self.index]
            if not self._is_paren(tok, "("):
                raise UnexpectedToken((_OPEN,), _describe(tok), tok.pos, tok.end)
            body.append(self._parse_call(depth=1))
        return Program(body=tuple(body))

    def _at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def _end_pos(self) -> int:
        return self.tokens[-1].end if self.tokens else 0

    def _peek(self, expected: tuple[str, ...]) -> Token:
        if self._at_end():
            raise UnexpectedEndOfInput(expected, self._end_pos())
        return self.tokens[self.index]

    def _advance(self) -> Token:
        tok = self.tokens[self.index]
        self.index += 1
        return tok

    def _expect(self, kind: str) -> Token:
        tok = self._peek((kind,))
        if tok.kind != kind:
            raise UnexpectedToken((kind,), _describe(tok), tok.pos, tok.end)
        return self._advance()

    @staticmethod
    def _is_paren(tok: Token, text: str) -> bool:
        return tok.kind == "PAREN" and tok.text == text

    def _walk(self, depth: int) -> Term:
        tok = self._peek(_TERM_START)

        if tok.kind == "NUMBER":
            self._advance()
            return NumberLiteral(value=tok.text)

        if tok.kind == "STRING":
            self._advance()
            return StringLiteral(value=tok.text)

        if self._is_paren(tok, "("):
            return self._parse_call(depth)

        raise UnexpectedToken(_TERM_START, _describe(tok), tok.pos, tok.end)

    def _parse_call(self, depth: int) -> CallExpression:
        open_tok = self._advance()
        if depth > self.max_depth:
            raise NestingTooDeep(self.max_depth, open_tok.pos, open_tok.end)

        name = self._expect("NAME")
        params: list[Term] = []
        while not self._is_paren(self._peek(_TERM_START + (_CLOSE,)), ")"):
            params.append(self._walk(depth + 1))
        self._advance()
        return CallExpression(name=name.text, params=tuple(params))


def parse(tokens: Sequence[Token], *, max_depth: int | None = None) -> Program:
    parser = _Parser(tokens=tokens, max_depth=DEFAULT_MAX_DEPTH if max_depth is None else max_depth)
    return parser.parse_program()


def parse_program(source: str, *, max_depth: int | None = None) -> Program:
    return parse(tokenize(source), max_depth=max_depth)
