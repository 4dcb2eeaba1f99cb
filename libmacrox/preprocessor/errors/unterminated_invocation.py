from libmacrox.exceptions import ErrorKind
from libmacrox.lexer.tokens import TokenLocation
from libmacrox.preprocessor.exceptions import PreprocessorError


class UnterminatedInvocationError(PreprocessorError):
    kind = ErrorKind.UNTERMINATED_INVOCATION

    def __init__(self, macro_name: str, location: TokenLocation) -> None:
        self.macro_name = macro_name
        self.location = location

    def __repr__(self) -> str:
        return f"""Unterminated invocation of an macro '{self.macro_name}' at {self.location}!

Expected closing parenthesis `)` for an argument list but reached end of input.
Did you forgot to close an argument list or one of nested parentheses?

{self.generic_error_name}"""
