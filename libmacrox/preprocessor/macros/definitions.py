from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.lexer import tokenize_text
from libmacrox.lexer.tokens import TokenType

from .exceptions import (
    PreprocessorMacroInvalidParameterError,
    PreprocessorMacroNonIdentifierNameError,
    PreprocessorNoMacroNameError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libmacrox.lexer.tokens import Token, TokenLocation, TokenSource

# Tokens that never belongs to macro body
BODY_EXCLUDED_TOKEN_TYPES = (TokenType.EOL, TokenType.COMMENT)


def tokenize_macro_body(body: str, source: TokenSource = "definition") -> tuple[Token, ...]:
    """Tokenize raw macro body text into body tokens (line breaks and comments are dropped)."""
    return filter_macro_body(tuple(tokenize_text(body, source=source)))


def filter_macro_body(tokens: Sequence[Token]) -> tuple[Token, ...]:
    return tuple(t for t in tokens if t.type not in BODY_EXCLUDED_TOKEN_TYPES)


def parse_raw_macro_signature(
    signature: str,
    location: TokenLocation,
) -> tuple[str, tuple[str, ...] | None]:
    """Parse raw macro signature like `PIE` or `SQR(a)` into name and parameters (None if object-like)."""
    tokens = filter_macro_body(tuple(tokenize_text(signature, source=location.source)))
    if not tokens:
        raise PreprocessorNoMacroNameError(location=location)

    name_token = tokens[0]
    if name_token.type != TokenType.IDENTIFIER:
        raise PreprocessorMacroNonIdentifierNameError(location=location, name=signature)

    name = name_token.text
    if len(tokens) == 1:
        return name, None

    parameters, consumed_to = consume_macro_parameters(tokens, 1, name, location)
    if consumed_to != len(tokens):
        raise PreprocessorMacroNonIdentifierNameError(location=location, name=signature)
    return name, parameters


def consume_macro_parameters(
    tokens: Sequence[Token],
    index: int,
    name: str,
    location: TokenLocation,
) -> tuple[tuple[str, ...], int]:
    """Consume parenthesised parameter list starting at `index` (at open parenthesis).

    :returns: parameter names and index right after close parenthesis.
    """
    if index >= len(tokens) or tokens[index].type != TokenType.LPAREN:
        raise PreprocessorMacroNonIdentifierNameError(location=location, name=name)
    index += 1

    parameters: list[str] = []
    if index < len(tokens) and tokens[index].type == TokenType.RPAREN:
        return (), index + 1

    while index < len(tokens):
        token = tokens[index]
        if token.type != TokenType.IDENTIFIER:
            raise PreprocessorMacroInvalidParameterError(
                location=token.location,
                macro_name=name,
                parameter=token.text,
            )
        parameters.append(token.text)
        index += 1

        if index >= len(tokens):
            break
        separator = tokens[index]
        index += 1
        if separator.type == TokenType.RPAREN:
            return tuple(parameters), index
        if separator.type != TokenType.COMMA:
            raise PreprocessorMacroInvalidParameterError(
                location=separator.location,
                macro_name=name,
                parameter=separator.text,
            )

    # Parameter list ended without closing parenthesis
    raise PreprocessorMacroInvalidParameterError(
        location=location,
        macro_name=name,
        parameter="(",
    )
