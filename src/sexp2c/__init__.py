"""sexp2c public API."""

from .codegen import generate
from .compiler import CompilationResult, CompilerOptions, compile, compile_with_stages
from .errors import (
    CompileError,
    LexError,
    NestingTooDeep,
    ParseError,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnknownCharacter,
    UnknownNodeKind,
    UnterminatedString,
)
from .lexer import Token, tokenize
from .parser import DEFAULT_MAX_DEPTH, parse, parse_program
from .transformer import transform
from .traverser import Visitor, VisitorMethods, traverse

__all__ = [
    "compile",
    "compile_with_stages",
    "CompilerOptions",
    "CompilationResult",
    "tokenize",
    "Token",
    "parse",
    "parse_program",
    "DEFAULT_MAX_DEPTH",
    "traverse",
    "Visitor",
    "VisitorMethods",
    "transform",
    "generate",
    "CompileError",
    "LexError",
    "UnknownCharacter",
    "UnterminatedString",
    "ParseError",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "NestingTooDeep",
    "UnknownNodeKind",
]
