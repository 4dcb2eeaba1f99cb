from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from libmacrox.lexer.tokens import Token, TokenType

from .errors import ArgumentCountMismatchError, UnterminatedInvocationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .macros import Macro, MacrosRegistry


@dataclass(frozen=True)
class Invocation:
    """Located occurrence of an macro within token sequence.

    Span is `tokens[start:end]`, e.g for `SQR(x)` it is name, parentheses and everything within.
    """

    macro: Macro

    start: int
    end: int

    # Raw (unexpanded) argument tokens for each parameter, `None` for object-like macros
    arguments: tuple[tuple[Token, ...], ...] | None = None

    @property
    def name(self) -> str:
        return self.macro.name


def scan_macro_invocation(
    tokens: Sequence[Token],
    index: int,
    macros: MacrosRegistry,
) -> Invocation | None:
    """Detect macro invocation that starts at given index or None if there is no invocation.

    Function-like macro name that is not followed by an open parenthesis is not an invocation
    (and passed through as-is), whitespace and line breaks are allowed before parenthesis.
    """
    token = tokens[index]
    if token.type != TokenType.IDENTIFIER:
        return None

    if not (macro := macros.lookup(token.text)):
        # Macro definition does not exists - do not expand
        return None

    if not macro.is_function_like:
        return Invocation(macro=macro, start=index, end=index + 1)

    lparen_at = _skip_line_breaks(tokens, index + 1)
    if lparen_at >= len(tokens) or tokens[lparen_at].type != TokenType.LPAREN:
        return None

    arguments, end = _consume_invocation_arguments(tokens, lparen_at, name_token=token)
    arguments = _validate_arguments_count(macro, arguments, name_token=token)

    return Invocation(
        macro=macro,
        start=index,
        end=end,
        arguments=arguments,
    )


def _consume_invocation_arguments(
    tokens: Sequence[Token],
    lparen_at: int,
    name_token: Token,
) -> tuple[tuple[tuple[Token, ...], ...], int]:
    """Consume balanced parenthesised argument list, splitting it on top-level commas.

    :returns: arguments and index right after matching close parenthesis.
    """
    arguments: list[tuple[Token, ...]] = []
    argument: list[Token] = []
    depth = 1

    for index in range(lparen_at + 1, len(tokens)):
        token = tokens[index]
        match token.type:
            case TokenType.LPAREN:
                depth += 1
            case TokenType.RPAREN:
                depth -= 1
                if depth == 0:
                    arguments.append(tuple(argument))
                    return tuple(arguments), index + 1
            case TokenType.COMMA if depth == 1:
                arguments.append(tuple(argument))
                argument = []
                continue
            case TokenType.EOL | TokenType.COMMENT:
                # Line breaks (and comments before them) within argument list are whitespace
                continue
        argument.append(token)

    raise UnterminatedInvocationError(
        macro_name=name_token.text,
        location=name_token.location,
    )


def _validate_arguments_count(
    macro: Macro,
    arguments: tuple[tuple[Token, ...], ...],
    name_token: Token,
) -> tuple[tuple[Token, ...], ...]:
    """Validate arity of an invocation, returning arguments that match parameters."""
    assert macro.parameters is not None
    expected = len(macro.parameters)

    if expected == 0 and arguments == ((),):
        # `F()` is an single empty argument, which is no arguments for macro without parameters
        arguments = ()

    actual = len(arguments)
    if actual != expected:
        raise ArgumentCountMismatchError(
            macro_name=macro.name,
            location=name_token.location,
            expected=expected,
            actual=actual,
        )
    return arguments


def _skip_line_breaks(tokens: Sequence[Token], index: int) -> int:
    while index < len(tokens) and tokens[index].type == TokenType.EOL:
        index += 1
    return index
