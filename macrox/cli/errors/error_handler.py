import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from libmacrox.exceptions import MacroxError
from macrox.cli.output import cli_fatal_abort, cli_message

# Conventional exit code of an process terminated by SIGINT
INTERRUPTED_EXIT_CODE = 130


@contextmanager
def cli_macrox_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Turn failures of an goal (malformed text, bad definition, failed expansion, unreadable input) into fatal message.

    Goal must exit by itself, so leaving that context without an exit is an bug.
    """
    try:
        yield
    except MacroxError as me:
        if not debug_user_friendly_errors:
            raise  # Raw traceback requested via `--debug-unwrap-errors`
        return cli_fatal_abort(repr(me))
    except BrokenPipeError:
        # Consumer of expanded text is gone (e.g `macrox file | head`), there is no one to report to
        return sys.exit(1)
    except OSError as e:
        return cli_fatal_abort(f"Unable to read input text: {e}")
    except KeyboardInterrupt:
        cli_message("INFO", "Expansion interrupted by user (Ctrl+C)!")
        return sys.exit(INTERRUPTED_EXIT_CODE)
    cli_fatal_abort("Bug in a CLI: goal finished without an exit")
