import re
from abc import abstractmethod
from enum import Enum, auto


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class ErrorKind(Enum):
    """Kind of an failure, exposed so callers may react without matching on exception classes."""

    UNTERMINATED_INVOCATION = auto()
    ARGUMENT_COUNT_MISMATCH = auto()
    RECURSION_LIMIT_EXCEEDED = auto()
    ENCODING_ERROR = auto()
    INVALID_DEFINITION = auto()


class MacroxError(Exception):
    """Parent for all macrox errors (exceptions)."""

    kind: ErrorKind

    @abstractmethod
    def __repr__(self) -> str:
        return f"Some internal error occurred ({super().__repr__()}), that is currently not documented"

    def __str__(self) -> str:
        return repr(self)

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"
