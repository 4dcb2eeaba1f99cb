from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libmacrox.engine import MacroEngine
from libmacrox.lexer.io import decode_source_text, open_source_file_line_stream
from libmacrox.lexer.tokens import TokenLocation
from libmacrox.preprocessor.macros import (
    MacroRedefinition,
    on_redefinition_suppressed,
    registry_from_raw_definitions,
)
from macrox.cli.output import cli_message

if TYPE_CHECKING:
    from macrox.cli.parser.arguments import CLIArguments


def cli_perform_expand_goal(args: CLIArguments) -> NoReturn:
    """Perform expand goal that emits text with expanded macros into stdout."""
    macros_registry = registry_from_raw_definitions(
        location=TokenLocation.cli(),
        definitions=args.definitions,
    )
    for name in args.undefinitions:
        macros_registry.undefine(name)

    engine = MacroEngine(
        macros_registry,
        args.expander,
        on_redefinition=(
            _warn_on_redefinition
            if args.display_redefinition_warnings
            else on_redefinition_suppressed
        ),
    )
    cli_message(
        "INFO",
        f"Expanding '{args.source_filepath or 'stdin'}' with {len(macros_registry)} predefined macro(s)",
        verbose=args.verbose,
    )

    text = _read_source_text(args)
    sys.stdout.write(engine.expand(text))
    sys.stdout.flush()
    return sys.exit(0)


def _read_source_text(args: CLIArguments) -> str:
    if args.source_filepath is None:
        return decode_source_text(sys.stdin.buffer.read())
    return "".join(open_source_file_line_stream(args.source_filepath))


def _warn_on_redefinition(redefinition: MacroRedefinition) -> None:
    cli_message("WARNING", str(redefinition))
