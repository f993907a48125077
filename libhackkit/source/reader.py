"""Source reader that strips comments and whitespace from raw lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .location import SourceLine, SourceLocation

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from pathlib import Path

SINGLE_LINE_COMMENT = "//"


def clean_source_lines(
    source: Path | None,
    iterable: Iterable[str],
) -> Generator[SourceLine]:
    """Stream cleaned instruction lines from raw source lines.

    Full-line and trailing comments are stripped, lines are trimmed and empty ones are dropped.
    Source of `None` means in-memory (toolchain) source.
    """
    for row, line in enumerate(iterable, start=0):
        text = strip_line_comment(line).strip()
        if not text:
            continue

        if source is None:
            location = SourceLocation.toolchain(line_number=row)
        else:
            location = SourceLocation(line_number=row, filepath=source)
        yield SourceLine(text=text, location=location)


def strip_line_comment(line: str) -> str:
    comment_starts_at = line.find(SINGLE_LINE_COMMENT)
    if comment_starts_at == -1:
        return line
    return line[:comment_starts_at]
