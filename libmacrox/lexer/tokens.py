from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Literal, TypeAlias

TokenSource: TypeAlias = Literal["text", "definition", "cli"]


@dataclass(frozen=True)
class TokenLocation:
    """Location of any token within expanded text or macro definition body."""

    line_number: int
    col_number: int

    source: TokenSource = "text"

    def __repr__(self) -> str:
        if self.source == "cli":
            return "'(command-line-interface)'"
        where = "<definition>" if self.source == "definition" else "<text>"
        return f"'{where}:{self.line_number + 1}:{self.col_number + 1}'"

    @classmethod
    def cli(cls) -> TokenLocation:
        """Create a location for command-line originated tokens."""
        return cls(
            line_number=0,
            col_number=0,
            source="cli",
        )


class TokenType(IntEnum):
    """Type of the lexical token.

    Lexer does not know anything about target language grammar,
    so everything that is not an word, number or literal is an punctuation.
    https://en.wikipedia.org/wiki/Lexical_analysis
    """

    # Language
    IDENTIFIER = auto()
    NUMBER = auto()

    # Opaque literals, never scanned for macro names
    STRING = auto()
    CHARACTER = auto()
    COMMENT = auto()

    # Parentheses and separators (used by invocation scanner)
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    COMMA = auto()  # ,

    # Any other single symbol (e.g operators)
    PUNCTUATION = auto()

    # Content
    EOL = auto()


@dataclass(frozen=True)
class Token:
    """Lexical token obtained by lexer."""

    type: TokenType

    # Real text of an token within source code
    text: str

    # Location within text (or definition body)
    location: TokenLocation

    # Adjacency flag, whether there was an whitespace between that token and previous one
    # `None` means no adjacency recorded (e.g token was spliced next to an new neighbour by expander)
    has_leading_whitespace: bool | None = False

    def matches(self, other: Token) -> bool:
        """Compare tokens by type and text (ignoring location and adjacency)."""
        return self.type == other.type and self.text == other.text

    def with_leading_whitespace(self, flag: bool | None) -> Token:
        if flag == self.has_leading_whitespace:
            return self
        return Token(
            type=self.type,
            text=self.text,
            location=self.location,
            has_leading_whitespace=flag,
        )
