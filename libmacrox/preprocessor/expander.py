"""Macro expander, substitutes macro invocations and rescans substitution results.

Expansion is not hygienic and does not evaluate anything:
arguments of an function-like macro are substituted as raw tokens, so argument `++x`
is repeated (and would be evaluated) as many times as parameter occurs in the body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.tokens import TokenType

from .errors import RecursionLimitExceededError
from .invocation import Invocation, scan_macro_invocation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libmacrox.lexer.tokens import Token

    from ._state import ExpansionContext


def expand_tokens(
    tokens: Sequence[Token],
    context: ExpansionContext,
    *,
    depth: int = 0,
) -> list[Token]:
    """Expand all macro invocations within given tokens (left to right, with rescanning).

    Each substitution is expanded again alone (rescan), while its macro is marked as being expanded,
    so macro never expands into itself (directly or through another macros) and is left as-is.
    """
    expanded: list[Token] = []
    # Token that follows spliced expansion has lost its neighbour, so its adjacency is unknown
    after_splice = False

    index = 0
    while index < len(tokens):
        token = tokens[index]
        invocation = None
        if token.type == TokenType.IDENTIFIER and not context.is_expanding(token.text):
            invocation = scan_macro_invocation(tokens, index, context.macros)

        if invocation is None:
            expanded.append(_after_splice(token) if after_splice else token)
            after_splice = False
            index += 1
            continue

        substitution = _expand_invocation(invocation, tokens, context, depth=depth)
        if substitution:
            leading_whitespace = token.has_leading_whitespace
            if after_splice and leading_whitespace is False:
                leading_whitespace = None
            expanded.append(substitution[0].with_leading_whitespace(leading_whitespace))
            expanded.extend(substitution[1:])
        after_splice = True
        index = invocation.end

    return expanded


def substitute_invocation(invocation: Invocation) -> list[Token]:
    """Get macro body with each parameter replaced by the whole raw argument of an invocation.

    Argument tokens are copied for each occurrence of an parameter,
    they are not expanded nor evaluated before substitution.
    """
    macro = invocation.macro
    if not macro.is_function_like:
        return list(macro.tokens)

    assert macro.parameters is not None
    assert invocation.arguments is not None
    parameters = {name: position for position, name in enumerate(macro.parameters)}

    substitution: list[Token] = []
    after_argument = False
    for body_token in macro.tokens:
        position = None
        if body_token.type == TokenType.IDENTIFIER:
            position = parameters.get(body_token.text)

        if position is None:
            substitution.append(_after_splice(body_token) if after_argument else body_token)
            after_argument = False
            continue

        argument = invocation.arguments[position]
        if argument:
            substitution.append(argument[0].with_leading_whitespace(body_token.has_leading_whitespace))
            substitution.extend(argument[1:])
        after_argument = True

    return substitution


def _expand_invocation(
    invocation: Invocation,
    tokens: Sequence[Token],
    context: ExpansionContext,
    *,
    depth: int,
) -> list[Token]:
    if depth + 1 > context.config.max_expansion_depth:
        name_token = tokens[invocation.start]
        raise RecursionLimitExceededError(
            macro_name=invocation.name,
            location=name_token.location,
            limit=context.config.max_expansion_depth,
        )

    substitution = substitute_invocation(invocation)
    with context.expanding_macro(invocation.name):
        return expand_tokens(substitution, context, depth=depth + 1)


def _after_splice(token: Token) -> Token:
    if token.has_leading_whitespace is False:
        return token.with_leading_whitespace(None)
    return token
