"""How macrox was launched: as an installed `macrox` script or straight from a source checkout."""

from __future__ import annotations

import sys
from pathlib import Path

from macrox.cli.output import cli_message

INSTALLED_PROGRAM = "macrox"


def cli_get_executable_program() -> str:
    """Get program name shown in usage, `python -m macrox` is shown as an installed program."""
    program = Path(sys.argv[0]).name
    if is_launched_from_source(program):
        return INSTALLED_PROGRAM
    return program


def is_launched_from_source(program: str) -> bool:
    return program.endswith(".py")


def warn_on_improper_installation() -> None:
    """Warn when macrox is launched from a source file, so there is no `macrox` script on PATH."""
    launched_as = Path(sys.argv[0]).name
    if not is_launched_from_source(launched_as):
        return
    cli_message(
        level="WARNING",
        text=(
            f"macrox is launched from '{launched_as}' instead of `{INSTALLED_PROGRAM}` script, "
            "install it with `pip install .`"
        ),
        verbose=True,  # Emitted before arguments (and verbosity) are parsed
    )
