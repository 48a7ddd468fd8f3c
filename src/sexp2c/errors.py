"""Structured error types raised by the compilation pipeline."""

from __future__ import annotations


class CompileError(Exception):
    """Base class for structured sexp2c errors."""

    def __init__(self, message: str, start: int, end: int) -> None:
        super().__init__(message)
        self.message = message
        self.start = start
        self.end = end

    def _detail(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"{self.message} at span [{self.start}, {self.end}){self._detail()}"


class LexError(CompileError):
    """Source text could not be split into tokens."""


class UnknownCharacter(LexError):
    def __init__(self, char: str, pos: int) -> None:
        super().__init__(f"Unknown character {char!r}", pos, pos + 1)
        self.char = char
        self.pos = pos


class UnterminatedString(LexError):
    def __init__(self, start: int, end: int) -> None:
        super().__init__("Unterminated string literal", start, end)
        self.pos = start


class ParseError(CompileError):
    """Token sequence does not match the call-expression grammar."""

    def __init__(
        self,
        message: str,
        start: int,
        end: int,
        expected: tuple[str, ...] = (),
        found: str | None = None,
    ) -> None:
        super().__init__(message, start, end)
        self.expected = expected
        self.found = found

    def _detail(self) -> str:
        expected_text = ""
        if self.expected:
            expected_text = f"; expected {', '.join(self.expected)}"
        found_text = ""
        if self.found is not None:
            found_text = f"; found {self.found}"
        return f"{expected_text}{found_text}"


class UnexpectedToken(ParseError):
    def __init__(self, expected: tuple[str, ...], found: str, start: int, end: int) -> None:
        super().__init__("Unexpected token", start, end, expected=expected, found=found)


class UnexpectedEndOfInput(ParseError):
    def __init__(self, expected: tuple[str, ...], pos: int) -> None:
        super().__init__("Unexpected end of input", pos, pos, expected=expected, found="EOF")
        self.pos = pos


class NestingTooDeep(ParseError):
    def __init__(self, limit: int, start: int, end: int) -> None:
        super().__init__(f"Call nesting exceeds limit of {limit}", start, end)
        self.limit = limit


class UnknownNodeKind(CompileError, TypeError):
    """A tree walk met a node outside the fixed node vocabulary.

    Never raised by well-formed pipeline use; it signals a hand-built or
    corrupted tree.
    """

    def __init__(self, node: object) -> None:
        self.kind = type(node).__name__
        super().__init__(f"Unknown node kind {self.kind}", -1, -1)

    def __str__(self) -> str:
        return self.message
