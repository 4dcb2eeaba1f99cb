"""Lexer support for character literals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.helpers import find_quoted_literal_end, find_word_start
from libmacrox.lexer.tokens import Token, TokenType

if TYPE_CHECKING:
    from libmacrox.lexer._state import LexerState


CHARACTER_QUOTE = "'"


def tokenize_character_literal(state: LexerState) -> Token | None:
    """Tokenize character quote at cursor into character literal token or None if character is not closed.

    Unlike compilers, length of an character literal is not validated
    as it is never evaluated, only passed through.
    """
    assert state.line and state.line[state.col] == CHARACTER_QUOTE, (  # noqa: PT018
        f"{tokenize_character_literal.__name__} must be called when cursor is at open character quote"
    )

    ends_at = find_quoted_literal_end(
        state.line,
        state.col + len(CHARACTER_QUOTE),
        quote=CHARACTER_QUOTE,
    )
    if ends_at == -1:
        # Apostrophes are common in plain text (e.g `don't`), which is not an error
        return None

    location = state.current_location()
    has_leading_whitespace = state.has_leading_whitespace()
    char_literal = state.line[state.col : ends_at]

    # Advance to next word
    state.col = find_word_start(state.line, ends_at)
    return Token(
        type=TokenType.CHARACTER,
        text=char_literal,
        location=location,
        has_leading_whitespace=has_leading_whitespace,
    )
