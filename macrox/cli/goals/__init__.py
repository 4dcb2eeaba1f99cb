"""Goals of CLI, each goal is an terminal action (expand text, show version) that exits the process."""

from time import perf_counter
from typing import NoReturn

from macrox.cli.goals.expand import cli_perform_expand_goal
from macrox.cli.goals.version import cli_perform_version_goal
from macrox.cli.output import cli_fatal_abort, cli_message
from macrox.cli.parser.arguments import CLIArguments


def perform_desired_goal(args: CLIArguments) -> NoReturn:
    """Show version if requested, otherwise expand given source text."""
    goal_name, goal = ("version", cli_perform_version_goal) if args.version else ("expand", cli_perform_expand_goal)

    started_at = perf_counter()
    try:
        goal(args)
    except SystemExit as e:
        cli_message(
            "INFO",
            f"Goal '{goal_name}' finished with exit code {e.code} in {perf_counter() - started_at:.3f}s",
            verbose=args.verbose,
        )
        raise
    cli_fatal_abort(f"Bug in a CLI: goal '{goal_name}' must exit!")
