from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.lexer import tokenize_text
from libmacrox.lexer.tokens import TokenType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libmacrox.lexer.tokens import Token

TOKENS_SEPARATOR = " "


def render_tokens(tokens: Iterable[Token]) -> str:
    """Serialize tokens into text, separating tokens with single space where needed.

    Space is emitted where token had whitespace before it, and for tokens with unknown adjacency
    (spliced by expansion) only if two tokens would otherwise be glued into different token(s).
    Line breaks are preserved, but indentation is not.
    """
    text: list[str] = []
    previous: Token | None = None

    for token in tokens:
        if (
            previous is not None
            and previous.type != TokenType.EOL
            and token.type != TokenType.EOL
            and _requires_separator(previous, token)
        ):
            text.append(TOKENS_SEPARATOR)
        text.append(token.text)
        previous = token

    return "".join(text)


def _requires_separator(previous: Token, token: Token) -> bool:
    if token.has_leading_whitespace is None:
        return would_tokens_merge(previous, token)
    return token.has_leading_whitespace


def would_tokens_merge(left: Token, right: Token) -> bool:
    """Would given tokens be lexed differently if they are written without any whitespace between."""
    glued = tuple(tokenize_text(left.text + right.text))
    return len(glued) != 2 or not (glued[0].matches(left) and glued[1].matches(right))
