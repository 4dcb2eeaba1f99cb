import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from macrox.cli.parser.arguments import CLIArguments

DISTRIBUTION_NAME = "macrox"


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[macrox]")
    print(f"\tVersion: {_get_distribution_version()}")
    print("Expander:")
    print(f"\tMax expansion depth: {args.expander.max_expansion_depth}")
    print(f"\tProcess directives: {args.expander.process_directives}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    return sys.exit(0)


def _get_distribution_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "(not installed)"
