"""Textual macro expansion engine.

Performs object-like and function-like macro substitution over token stream,
as classic (non-hygienic, non-evaluating) preprocessor does.
"""

from .engine import MacroEngine
from .exceptions import ErrorKind, MacroxError

__all__ = [
    "ErrorKind",
    "MacroEngine",
    "MacroxError",
]
