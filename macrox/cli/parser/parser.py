from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, cast

from libmacrox.preprocessor.config import (
    ExpanderConfig,
    build_default_expander_config,
    merge_into_expander_config,
)
from macrox.cli.output import cli_fatal_abort
from macrox.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace

STDIN_SOURCE = "-"


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    source_filepath = _process_source_filepath(args)
    definitions = _process_definitions(args)
    expander = _process_expander_config(args)

    return CLIArguments(
        version=bool(args.version),
        source_filepath=source_filepath,
        definitions=definitions,
        undefinitions=cast("list[str]", args.undefinitions),
        verbose=bool(args.verbose),
        display_redefinition_warnings=bool(args.display_redefinition_warnings),
        expander=expander,
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_definitions(args: Namespace) -> dict[str, str]:
    """Process CLI propagated definitions as raw macro source text that requires lexing / parsing."""
    user_definitions: dict[str, str] = {}

    raw_definitions = cast("list[str]", args.definitions)
    for cli_definition in raw_definitions:
        if "=" in cli_definition:
            signature, value = cli_definition.split("=", maxsplit=1)
            user_definitions[signature] = value

            continue
        user_definitions[cli_definition] = "1"

    return user_definitions


def _process_source_filepath(args: Namespace) -> Path | None:
    """Process input source file as path and validate it."""
    if args.version:
        return None

    if args.source_file is None:
        return cli_fatal_abort("Expected source file to expand (or `-` for standard input)!")

    if args.source_file == STDIN_SOURCE:
        return None

    path = Path(args.source_file)
    if not path.exists() or not path.is_file():
        return cli_fatal_abort(
            text=f"Input source file '{path}' does not exists or is not an file!",
        )
    return path


def _process_expander_config(args: Namespace) -> ExpanderConfig:
    """Process whole configuration of expander from CLI into config."""
    config = build_default_expander_config()
    try:
        return merge_into_expander_config(config, args, prefix="expander")
    except ValueError as e:
        return cli_fatal_abort(str(e))
