import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit an message for user into stderr (stdout is reserved for expanded text).

    INFO messages are emitted only when verbose.
    """
    if level == "INFO" and not verbose:
        return
    print(f"[{level}] {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error message and exit with failure exit code."""
    cli_message("ERROR", text)
    sys.exit(1)
