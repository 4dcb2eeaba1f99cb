from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libmacrox.lexer.tokens import Token, TokenLocation


@dataclass(frozen=True)
class Macro:
    """Macro definition for text substitution.

    Macros are named containers of sequence of tokens (e.g raw text) to be expanded
    when the macro name invocation is encountered during expansion.

    There is two kinds of macros:
        Object-like, e.g `PIE` -> `3.14`:
            Invocation is an name alone, it is replaced with body as-is.
        Function-like, e.g `SQR(a)` -> `((a) * (a))`:
            Invocation is an name followed by parenthesised argument list `SQR(++radius)`.
            Each parameter within body is replaced with an *raw* argument tokens
            (not evaluated, not expanded), so `SQR(++radius)` is `((++radius) * (++radius))`
            and argument side-effect is duplicated. That is intended and must be preserved.

    Read more:
        Text substitution macros: https://en.wikipedia.org/wiki/Macro_(computer_science)#Text-substitution_macros
    """

    # Where is that definition begins
    # There is possibility that definition is comes from CLI or API call
    location: TokenLocation

    name: str

    # Ordered unique parameter names, `None` for object-like macros
    # (function-like macro may have no parameters, e.g `F()`)
    parameters: tuple[str, ...] | None = None

    # Actual macro container, contains tokens which that macro would expand into
    tokens: tuple[Token, ...] = ()

    @property
    def is_function_like(self) -> bool:
        return self.parameters is not None

    def sameas(self, other: Macro) -> bool:
        """Is other definition is same as that one (same parameters and same body with same spacing)."""
        return (
            self.parameters == other.parameters
            and _body_signature(self.tokens) == _body_signature(other.tokens)
        )


def _body_signature(tokens: tuple[Token, ...]) -> list[tuple[object, ...]]:
    # Leading whitespace of an first token does not change the body
    return [
        (t.type, t.text, bool(t.has_leading_whitespace) and i > 0)
        for i, t in enumerate(tokens)
    ]
