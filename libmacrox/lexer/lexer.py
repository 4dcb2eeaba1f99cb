from __future__ import annotations

import io
from typing import TYPE_CHECKING

from libmacrox.lexer._state import LexerState
from libmacrox.lexer.errors import LexerEncodingError
from libmacrox.lexer.helpers import (
    SINGLE_LINE_COMMENT,
    find_identifier_end,
    find_word_start,
    is_digit,
    is_identifier_start,
)
from libmacrox.lexer.literals import (
    tokenize_character_literal,
    tokenize_numeric_literal,
    tokenize_string_literal,
)
from libmacrox.lexer.literals.character import CHARACTER_QUOTE
from libmacrox.lexer.literals.string import STRING_QUOTE
from libmacrox.lexer.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

    from libmacrox.lexer.tokens import TokenSource

NEWLINE_SYMBOLS = "\r\n"

SINGLE_SYMBOLS_MAPPING = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
}


def tokenize_text(text: str, source: TokenSource = "text") -> Generator[Token]:
    """Stream lexical tokens of an whole (possibly multi-line) text."""
    return tokenize_from_raw(source, io.StringIO(text))


def tokenize_from_raw(
    source: TokenSource,
    lines: Iterable[str],
) -> Generator[Token]:
    """Stream lexical tokens via generator (perform lexical analysis).

    Each line that is terminated with newline yields an `EOL` token after its tokens,
    so an text may be reconstructed with its line structure.

    :returns tokenizer: Generator of tokens, in order from top to bottom of an text (default order)
    """
    state = LexerState(source=source)

    for row, raw_line in enumerate(lines, start=0):
        line = raw_line.rstrip(NEWLINE_SYMBOLS)
        state.set_line(row, line)
        _validate_line_encoding(state)

        state.col = find_word_start(line, 0)
        while state.col < len(line):
            yield _tokenize_line_next_token(state)

        if len(line) != len(raw_line):
            yield Token(
                type=TokenType.EOL,
                text="\n",
                location=state.current_location(),
            )


def _validate_line_encoding(state: LexerState) -> None:
    """Fail on an text that cannot be represented (e.g lone surrogates from broken decoding)."""
    try:
        state.line.encode("utf-8")
    except UnicodeEncodeError as e:
        state.col = e.start
        raise LexerEncodingError(
            location=state.current_location(),
            reason=e.reason,
        ) from e


def _tokenize_line_next_token(state: LexerState) -> Token:
    """Acquire token from current state and modify it to apply next tokenize."""
    symbol = state.line[state.col]

    if state.line.startswith(SINGLE_LINE_COMMENT, state.col):
        return _tokenize_comment(state)

    if symbol == STRING_QUOTE and (token := tokenize_string_literal(state)):
        return token

    if symbol == CHARACTER_QUOTE and (token := tokenize_character_literal(state)):
        return token

    if is_digit(symbol):
        return tokenize_numeric_literal(state)

    if is_identifier_start(symbol):
        return _tokenize_identifier(state)

    return _tokenize_single_symbol(state)


def _tokenize_comment(state: LexerState) -> Token:
    """Tokenize comment mark with rest of an line into single opaque comment token."""
    token = Token(
        type=TokenType.COMMENT,
        text=state.line[state.col :].rstrip(),
        location=state.current_location(),
        has_leading_whitespace=state.has_leading_whitespace(),
    )
    state.col = len(state.line)
    return token


def _tokenize_identifier(state: LexerState) -> Token:
    location = state.current_location()
    has_leading_whitespace = state.has_leading_whitespace()

    ends_at = find_identifier_end(state.line, state.col)
    word = state.line[state.col : ends_at]

    state.col = find_word_start(state.line, ends_at)
    return Token(
        type=TokenType.IDENTIFIER,
        text=word,
        location=location,
        has_leading_whitespace=has_leading_whitespace,
    )


def _tokenize_single_symbol(state: LexerState) -> Token:
    """Tokenize any unrecognized symbol into single-character token (parentheses, operators etc)."""
    location = state.current_location()
    has_leading_whitespace = state.has_leading_whitespace()

    char = state.line[state.col]
    state.col = find_word_start(state.line, state.col + 1)
    return Token(
        type=SINGLE_SYMBOLS_MAPPING.get(char, TokenType.PUNCTUATION),
        text=char,
        location=location,
        has_leading_whitespace=has_leading_whitespace,
    )
