from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.tokens import TokenType

from .macros.definitions import consume_macro_parameters, filter_macro_body
from .macros.exceptions import (
    PreprocessorMacroNonIdentifierNameError,
    PreprocessorNoMacroNameError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libmacrox.lexer.tokens import Token

    from ._state import ExpansionContext

DIRECTIVE_MARK = "#"
DEFINE_DIRECTIVE = "define"
UNDEFINE_DIRECTIVE = "undef"


def is_macro_directive_line(line: Sequence[Token]) -> bool:
    """Is given line (tokens of an single line) an `#define` or `#undef` directive."""
    if len(line) < 2:
        return False
    mark, directive = line[0], line[1]
    return (
        mark.type == TokenType.PUNCTUATION
        and mark.text == DIRECTIVE_MARK
        and directive.type == TokenType.IDENTIFIER
        and directive.text in (DEFINE_DIRECTIVE, UNDEFINE_DIRECTIVE)
    )


def consume_macro_directive(line: Sequence[Token], context: ExpansionContext) -> None:
    """Apply directive line onto macros registry of an context."""
    assert is_macro_directive_line(line)
    directive, rest = line[1], filter_macro_body(line[2:])

    match directive.text:
        case "define":
            _consume_macro_definition(directive, rest, context)
        case "undef":
            _consume_macro_undefine(directive, rest, context)
        case _:
            raise AssertionError(directive.text)


def _consume_macro_definition(
    directive: Token,
    tokens: Sequence[Token],
    context: ExpansionContext,
) -> None:
    """Consume `#define NAME body` or `#define NAME(a, b) body` into macro definition.

    Macro is function-like only when parenthesis is adjacent to name, `#define NAME (a) body`
    is an object-like macro with body `(a) body`.
    """
    name_token = _consume_macro_name(directive, tokens)
    body_starts_at = 1
    parameters = None

    is_function_like = (
        len(tokens) > 1
        and tokens[1].type == TokenType.LPAREN
        and not tokens[1].has_leading_whitespace
    )
    if is_function_like:
        parameters, body_starts_at = consume_macro_parameters(
            tokens,
            1,
            name_token.text,
            name_token.location,
        )

    redefinition = context.macros.define(
        name_token.text,
        parameters,
        tokens[body_starts_at:],
        location=directive.location,
    )
    if redefinition is not None:
        context.on_redefinition(redefinition)


def _consume_macro_undefine(
    directive: Token,
    tokens: Sequence[Token],
    context: ExpansionContext,
) -> None:
    name_token = _consume_macro_name(directive, tokens)
    context.macros.undefine(name_token.text)


def _consume_macro_name(directive: Token, tokens: Sequence[Token]) -> Token:
    """Consume and validate macro name from beginning of an macro directive."""
    if not tokens:
        raise PreprocessorNoMacroNameError(location=directive.location)

    token = tokens[0]
    if token.type != TokenType.IDENTIFIER:
        raise PreprocessorMacroNonIdentifierNameError(
            location=token.location,
            name=token.text,
        )
    return token
