from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


ESCAPE_SYMBOL = "\\"
SINGLE_LINE_COMMENT = "//"


def is_identifier_start(symbol: str) -> bool:
    return symbol == "_" or (symbol.isascii() and symbol.isalpha())


def is_identifier_continue(symbol: str) -> bool:
    return is_identifier_start(symbol) or is_digit(symbol)


def is_digit(symbol: str) -> bool:
    return symbol.isascii() and symbol.isdigit()


def find_word_start(text: str, start: int) -> int:
    """Find start column index of an word."""
    return _find_column(text, start, lambda s: not s.isspace())


def find_identifier_end(text: str, start: int) -> int:
    """Find end column index of an identifier."""
    return _find_column(text, start, lambda s: not is_identifier_continue(s))


def find_digits_end(text: str, start: int) -> int:
    """Find end column index of an digits sequence."""
    return _find_column(text, start, lambda s: not is_digit(s))


def find_quoted_literal_end(line: str, idx: int, *, quote: str) -> int:
    """Find index where given quoted literal ends (after close quote) or -1 if not closed properly.

    `idx` must point right after open quote.
    """
    idx_end = len(line)

    while idx < idx_end:
        current = line[idx]
        if current == ESCAPE_SYMBOL:
            # Escape sequence consumes next symbol whatever it is
            idx += 2
            continue
        if current == quote:
            return idx + 1
        idx += 1

    return -1


def _find_column(text: str, start: int, predicate: Callable[[str], bool]) -> int:
    """Find index of an column by predicate. E.g `.index()` but with predicate."""
    end = len(text)
    while start < end and not predicate(text[start]):
        start += 1
    return start


def is_identifier(text: str) -> bool:
    """Is whole text is an single identifier (e.g valid macro name)."""
    return bool(text) and is_identifier_start(text[0]) and all(map(is_identifier_continue, text))
