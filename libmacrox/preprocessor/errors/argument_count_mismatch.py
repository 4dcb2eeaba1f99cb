from libmacrox.exceptions import ErrorKind
from libmacrox.lexer.tokens import TokenLocation
from libmacrox.preprocessor.exceptions import PreprocessorError


class ArgumentCountMismatchError(PreprocessorError):
    kind = ErrorKind.ARGUMENT_COUNT_MISMATCH

    def __init__(
        self,
        macro_name: str,
        location: TokenLocation,
        expected: int,
        actual: int,
    ) -> None:
        self.macro_name = macro_name
        self.location = location
        self.expected = expected
        self.actual = actual

    def __repr__(self) -> str:
        return f"""Invocation of an macro '{self.macro_name}' at {self.location} has wrong number of arguments!

Expected {self.expected} argument(s) but got {self.actual}.
Commas inside nested parentheses does not separate arguments, consider wrapping argument into parentheses.

{self.generic_error_name}"""
