from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.exceptions import MacroxError

if TYPE_CHECKING:
    from libmacrox.lexer.tokens import TokenLocation


class PreprocessorError(MacroxError):
    """Parent for errors that occur while defining or expanding macros.

    Carries structured information about an failure (kind, macro name, location)
    so callers are not required to parse messages.
    """

    location: TokenLocation
    macro_name: str | None
