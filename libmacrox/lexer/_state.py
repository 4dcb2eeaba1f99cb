from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .tokens import TokenLocation

if TYPE_CHECKING:
    from .tokens import TokenSource


@dataclass(frozen=False)
class LexerState:
    """State for lexical analysis which only required for internal usages."""

    source: TokenSource

    _row: int = 0
    col: int = 0

    _line: str = ""

    def current_location(self) -> TokenLocation:
        if self.source == "cli":
            return TokenLocation.cli()

        return TokenLocation(
            line_number=self.row,
            col_number=self.col,
            source=self.source,
        )

    def has_leading_whitespace(self) -> bool:
        """Is cursor placed right after an whitespace (line break is an whitespace too)."""
        if self.col == 0:
            return self._row > 0
        return self._line[self.col - 1].isspace()

    @property
    def row(self) -> int:
        return self._row

    @property
    def line(self) -> str:
        return self._line

    def set_line(self, row: int, line: str) -> None:
        self._row = row
        self._line = line
        self.col = 0
