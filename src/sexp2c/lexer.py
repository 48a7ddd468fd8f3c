"""Tokenization for parenthesized call expressions."""

from __future__ import annotations

import string
from dataclasses import dataclass

from .errors import UnknownCharacter, UnterminatedString


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    pos: int
    end: int


_PARENS = {"(", ")"}
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


def _scan_while(source: str, start: int, chars: frozenset[str]) -> tuple[str, int]:
    i = start
    while i < len(source) and source[i] in chars:
        i += 1
    return source[start:i], i


def _scan_string(source: str, start: int) -> tuple[str, int]:
    assert source[start] == '"'
    close = source.find('"', start + 1)
    if close == -1:
        raise UnterminatedString(start, len(source))
    return source[start + 1 : close], close + 1


def tokenize(source: str) -> list[Token]:
    tokens: list[Token] = []
    i = 0

    while i < len(source):
        ch = source[i]

        if ch in _PARENS:
            tokens.append(Token("PAREN", ch, i, i + 1))
            i += 1
            continue

        if ch.isspace():
            i += 1
            continue

        if ch in _DIGITS:
            text, end = _scan_while(source, i, _DIGITS)
            tokens.append(Token("NUMBER", text, i, end))
            i = end
            continue

        if ch == '"':
            value, end = _scan_string(source, i)
            tokens.append(Token("STRING", value, i, end))
            i = end
            continue

        if ch in _LETTERS:
            text, end = _scan_while(source, i, _LETTERS)
            tokens.append(Token("NAME", text, i, end))
            i = end
            continue

        raise UnknownCharacter(ch, i)

    return tokens
