from libmacrox.exceptions import ErrorKind
from libmacrox.lexer.tokens import TokenLocation
from libmacrox.preprocessor.exceptions import PreprocessorError


class RecursionLimitExceededError(PreprocessorError):
    kind = ErrorKind.RECURSION_LIMIT_EXCEEDED

    def __init__(self, macro_name: str, location: TokenLocation, limit: int) -> None:
        self.macro_name = macro_name
        self.location = location
        self.limit = limit

    def __repr__(self) -> str:
        return f"""Macro recursion limit exceeded while expanding '{self.macro_name}' at {self.location}!

Expansion went deeper than {self.limit} nested macro(s).
Is there an chain of macros that expands into each other?
(limit may be configured via `--max-expansion-depth`)

{self.generic_error_name}"""
