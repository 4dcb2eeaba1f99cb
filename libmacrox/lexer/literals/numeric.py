"""Lexer support for numeric literals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.helpers import find_digits_end, find_word_start, is_digit
from libmacrox.lexer.tokens import Token, TokenType

if TYPE_CHECKING:
    from libmacrox.lexer._state import LexerState


DECIMAL_POINT = "."


def tokenize_numeric_literal(state: LexerState) -> Token:
    """Tokenize digits at cursor into number token, scanned greedily as `digits[.[digits]]`."""
    assert state.line and is_digit(state.line[state.col]), (  # noqa: PT018
        f"{tokenize_numeric_literal.__name__} must be called when cursor is at digit"
    )

    location = state.current_location()
    has_leading_whitespace = state.has_leading_whitespace()

    ends_at = find_digits_end(state.line, state.col)
    if ends_at < len(state.line) and state.line[ends_at] == DECIMAL_POINT:
        ends_at = find_digits_end(state.line, ends_at + len(DECIMAL_POINT))

    number = state.line[state.col : ends_at]

    # Advance to next word
    state.col = find_word_start(state.line, ends_at)
    return Token(
        type=TokenType.NUMBER,
        text=number,
        location=location,
        has_leading_whitespace=has_leading_whitespace,
    )
