"""Lexer support for string literals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.helpers import find_quoted_literal_end, find_word_start
from libmacrox.lexer.tokens import Token, TokenType

if TYPE_CHECKING:
    from libmacrox.lexer._state import LexerState


STRING_QUOTE = '"'


def tokenize_string_literal(state: LexerState) -> Token | None:
    """Tokenize string quote at cursor into string literal token or None if string is not closed.

    String literal is kept as-is (quoted and escaped) as it is an opaque token for expansion.
    """
    assert state.line and state.line[state.col] == STRING_QUOTE, (  # noqa: PT018
        f"{tokenize_string_literal.__name__} must be called when cursor is at open string quote"
    )

    ends_at = find_quoted_literal_end(
        state.line,
        state.col + len(STRING_QUOTE),
        quote=STRING_QUOTE,
    )
    if ends_at == -1:
        return None

    location = state.current_location()
    has_leading_whitespace = state.has_leading_whitespace()
    string_literal = state.line[state.col : ends_at]

    # Advance to next word
    state.col = find_word_start(state.line, ends_at)
    return Token(
        type=TokenType.STRING,
        text=string_literal,
        location=location,
        has_leading_whitespace=has_leading_whitespace,
    )
