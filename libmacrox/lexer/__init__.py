"""Lexer package that performs lexical analysis of an text."""

from .lexer import tokenize_from_raw, tokenize_text
from .tokens import Token, TokenLocation, TokenType

__all__ = (
    "Token",
    "TokenLocation",
    "TokenType",
    "tokenize_from_raw",
    "tokenize_text",
)
