from __future__ import annotations

import sys

from macrox.cli.errors.error_handler import cli_macrox_error_handler
from macrox.cli.goals import perform_desired_goal
from macrox.cli.parser.builder import build_cli_parser
from macrox.cli.parser.parser import parse_cli_arguments
from macrox.executable import cli_get_executable_program, warn_on_improper_installation

from .output import cli_message


def cli_entry_point(argv: list[str] | None = None) -> None:
    """CLI main entry."""
    prog = cli_get_executable_program()
    warn_on_improper_installation()

    parser = build_cli_parser(prog)
    args = parse_cli_arguments(parser.parse_args(argv))
    wrapper = cli_macrox_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    )

    with wrapper:
        # Wrap goal into error handler as in unwraps errors into user-friendly ones (except internal ones as bugs)
        perform_desired_goal(args)

    # This is unreachable but error wrapper must fail
    cli_message("ERROR", "Bug in a CLI: must perform at least one goal!")
    sys.exit(1)


if __name__ == "__main__":
    cli_entry_point()
