"""End-to-end compilation from call syntax to C-like statements."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from . import ast, c_ast
from .codegen import generate
from .lexer import Token, tokenize
from .parser import DEFAULT_MAX_DEPTH, parse
from .transformer import transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompilerOptions:
    """Knobs for a single compilation.

    - `max_depth`: deepest call nesting the parser accepts.
    - `normalize_numbers`: render number literals through integer coercion
      instead of verbatim digit text.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    normalize_numbers: bool = False


@dataclass(frozen=True)
class CompilationResult:
    tokens: tuple[Token, ...]
    source_ast: ast.Program
    target_ast: c_ast.Program
    output: str


def compile_with_stages(source: str, *, options: CompilerOptions | None = None) -> CompilationResult:
    opts = options or CompilerOptions()

    tokens = tokenize(source)
    logger.debug(f"Tokenized {len(source)} characters into {len(tokens)} tokens")

    source_ast = parse(tokens, max_depth=opts.max_depth)
    logger.debug(f"Parsed {len(source_ast.body)} top-level calls")

    target_ast = transform(source_ast)
    output = generate(target_ast, normalize_numbers=opts.normalize_numbers)
    logger.debug(f"Generated {len(target_ast.body)} statements ({len(output)} characters)")

    return CompilationResult(
        tokens=tuple(tokens),
        source_ast=source_ast,
        target_ast=target_ast,
        output=output,
    )


def compile(source: str, *, options: CompilerOptions | None = None) -> str:
    """Translate `(add 3 (subtract 9 7))` style source to `add(3, subtract(9, 7));`.

    Raises a `CompileError` subclass on the first malformed input; no partial
    output is ever returned.
    """
    return compile_with_stages(source, options=options).output
