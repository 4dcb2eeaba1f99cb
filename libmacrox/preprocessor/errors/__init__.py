from .argument_count_mismatch import ArgumentCountMismatchError
from .recursion_limit_exceeded import RecursionLimitExceededError
from .unterminated_invocation import UnterminatedInvocationError

__all__ = (
    "ArgumentCountMismatchError",
    "RecursionLimitExceededError",
    "UnterminatedInvocationError",
)
