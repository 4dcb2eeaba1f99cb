import argparse
from argparse import ArgumentParser

from libmacrox.preprocessor.config import DEFAULT_MAX_EXPANSION_DEPTH


def add_preprocessor_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with macro definitions options into given parser."""
    group = parser.add_argument_group("Preprocessor", "Macro definitions")
    group.add_argument(
        "-D",
        required=False,
        help="Define an macro, e.g `-DPIE=3.14`, `-D'SQR(a)=((a) * (a))'` or `-DFLAG` (same as `-DFLAG=1`)",
        dest="definitions",
        default=[],
        action="append",
    )
    group.add_argument(
        "-U",
        required=False,
        help="Undefine an macro (applied after all `-D` definitions)",
        dest="undefinitions",
        default=[],
        action="append",
    )
    group.add_argument(
        "--no-directives",
        dest="expander_process_directives",
        action="store_false",
        default=True,
        help="If passed, `#define` / `#undef` lines within input are not treated as definitions and passed through as-is.",
    )


def add_expander_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with expander options into given parser."""
    group = parser.add_argument_group("Expander", "Macro expansion configuration")
    group.add_argument(
        "--max-expansion-depth",
        dest="expander_max_expansion_depth",
        type=int,
        default=None,
        metavar="N",
        help=f"Maximal nesting of macro expansions before failing (default: {DEFAULT_MAX_EXPANSION_DEPTH})",
    )


def add_logging_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with logging options into given parser."""
    group = parser.add_argument_group("Logging", "Diagnostics output")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs.",
    )
    group.add_argument(
        "--no-redefinition-warnings",
        dest="display_redefinition_warnings",
        action="store_false",
        default=True,
        required=False,
        help="If passed, will hide warnings about macros redefined with different body",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
