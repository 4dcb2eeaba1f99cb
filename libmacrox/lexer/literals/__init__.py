"""Lexer support for literals (numbers, strings, characters)."""

from .character import tokenize_character_literal
from .numeric import tokenize_numeric_literal
from .string import tokenize_string_literal

__all__ = (
    "tokenize_character_literal",
    "tokenize_numeric_literal",
    "tokenize_string_literal",
)
