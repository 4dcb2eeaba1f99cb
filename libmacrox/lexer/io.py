from __future__ import annotations

from typing import TYPE_CHECKING

from libmacrox.lexer.errors import LexerEncodingError
from libmacrox.lexer.tokens import TokenLocation

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from pathlib import Path

SOURCE_ENCODING = "utf-8"


def open_source_file_line_stream(path: Path) -> Generator[str]:
    """Read file as stream of decoded lines (with line breaks preserved)."""
    with path.open("rb") as fd:
        yield from decode_source_line_stream(fd)


def decode_source_line_stream(lines: Iterable[bytes]) -> Generator[str]:
    """Decode raw lines, failing with location of an first malformed byte sequence."""
    for row, raw_line in enumerate(lines, start=0):
        try:
            yield raw_line.decode(SOURCE_ENCODING)
        except UnicodeDecodeError as e:
            raise LexerEncodingError(
                location=TokenLocation(line_number=row, col_number=e.start),
                reason=e.reason,
            ) from e


def decode_source_text(raw: str | bytes) -> str:
    """Get text from raw input (bytes are decoded, text is passed as-is)."""
    if isinstance(raw, str):
        return raw
    return "".join(decode_source_line_stream(raw.splitlines(keepends=True)))
