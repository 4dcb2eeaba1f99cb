from libmacrox.exceptions import ErrorKind, MacroxError
from libmacrox.lexer.tokens import TokenLocation


class LexerEncodingError(MacroxError):
    kind = ErrorKind.ENCODING_ERROR
    macro_name = None

    def __init__(self, location: TokenLocation, reason: str) -> None:
        self.location = location
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Malformed input text at {self.location}!

Text cannot be represented as UTF-8: {self.reason}
Is input file an text file with proper encoding?

{self.generic_error_name}"""
