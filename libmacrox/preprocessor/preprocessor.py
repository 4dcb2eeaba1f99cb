from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.tokens import TokenType

from .directives import consume_macro_directive, is_macro_directive_line
from .expander import expand_tokens

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

    from libmacrox.lexer.tokens import Token

    from ._state import ExpansionContext


def preprocess_tokens(
    tokenizer: Iterable[Token],
    context: ExpansionContext,
) -> Generator[Token]:
    """Expand macros within given token stream.

    If directives are processed, text is expanded in chunks between directive lines,
    so definition is only visible for text below it. Directive lines are dropped (except their line break).
    """
    if not context.config.process_directives:
        yield from expand_tokens(tuple(tokenizer), context)
        return

    chunk: list[Token] = []
    for line in _iterate_lines(tokenizer):
        if not is_macro_directive_line(line):
            chunk.extend(line)
            continue

        yield from expand_tokens(chunk, context)
        chunk = []

        consume_macro_directive(line, context)
        if line[-1].type == TokenType.EOL:
            yield line[-1]

    yield from expand_tokens(chunk, context)


def _iterate_lines(tokenizer: Iterable[Token]) -> Generator[list[Token]]:
    """Group tokens into lines, each line contains its trailing line break (if any)."""
    line: list[Token] = []
    for token in tokenizer:
        line.append(token)
        if token.type == TokenType.EOL:
            yield line
            line = []
    if line:
        yield line
