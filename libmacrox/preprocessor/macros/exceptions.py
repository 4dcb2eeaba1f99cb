from libmacrox.exceptions import ErrorKind
from libmacrox.lexer.tokens import TokenLocation
from libmacrox.preprocessor.exceptions import PreprocessorError


class PreprocessorMacroNonIdentifierNameError(PreprocessorError):
    kind = ErrorKind.INVALID_DEFINITION

    def __init__(self, location: TokenLocation, name: str) -> None:
        self.location = location
        self.name = name
        self.macro_name = name

    def __repr__(self) -> str:
        return f"""Non-identifier name for macro at {self.location}!

Macros should have name as 'identifier' but got '{self.name}'!

{self.generic_error_name}"""


class PreprocessorNoMacroNameError(PreprocessorError):
    kind = ErrorKind.INVALID_DEFINITION
    macro_name = None

    def __init__(self, location: TokenLocation) -> None:
        self.location = location

    def __repr__(self) -> str:
        return f"""No macro name specified at {self.location}!

Do you have unfinished macro definition?

{self.generic_error_name}"""


class PreprocessorMacroInvalidParameterError(PreprocessorError):
    kind = ErrorKind.INVALID_DEFINITION

    def __init__(self, location: TokenLocation, macro_name: str, parameter: str) -> None:
        self.location = location
        self.macro_name = macro_name
        self.parameter = parameter

    def __repr__(self) -> str:
        return f"""Macro '{self.macro_name}' at {self.location} has invalid parameter '{self.parameter}'!

Parameters of an function-like macro must be comma-separated identifiers, e.g `SQR(a)` or `ADD(a, b)`.

{self.generic_error_name}"""


class PreprocessorMacroDuplicateParameterError(PreprocessorError):
    kind = ErrorKind.INVALID_DEFINITION

    def __init__(self, location: TokenLocation, macro_name: str, parameter: str) -> None:
        self.location = location
        self.macro_name = macro_name
        self.parameter = parameter

    def __repr__(self) -> str:
        return f"""Macro '{self.macro_name}' at {self.location} has duplicate parameter '{self.parameter}'!

Parameter names must be unique within single definition.

{self.generic_error_name}"""
