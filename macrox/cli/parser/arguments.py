from dataclasses import dataclass
from pathlib import Path

from libmacrox.preprocessor.config import ExpanderConfig


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole macrox process."""

    # `None` when text is read from standard input
    source_filepath: Path | None

    # Raw definitions, signature (`NAME` or `NAME(a, b)`) to body
    definitions: dict[str, str]
    undefinitions: list[str]

    version: bool

    verbose: bool
    display_redefinition_warnings: bool

    expander: ExpanderConfig

    cli_debug_user_friendly_errors: bool
