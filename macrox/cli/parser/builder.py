from argparse import ArgumentParser

from macrox.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="macrox - textual macro expansion (object-like and function-like macros)",
        usage=f"{prog} file [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_file",
        help="Input text file to expand macros within (`-` for standard input)",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_preprocessor_group(parser)
    groups.add_expander_group(parser)
    groups.add_logging_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
