"""File-level IO for source and output files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import OutputFileWriteError, SourceFileReadError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path


def open_source_file_line_stream(path: Path) -> Sequence[str]:
    """Read whole source file into list of raw lines (without line terminators).

    File is consumed eagerly, so read failure never leaves a half-processed stream.
    """
    try:
        with path.open(mode="r", errors="strict", encoding="UTF-8") as fd:
            return fd.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceFileReadError(path, reason=str(e)) from e


def write_output_lines(path: Path, lines: Iterable[str]) -> None:
    """Write given lines into output file, each newline-terminated.

    On write failure, partially written file is removed and error is raised.
    """
    try:
        fd = path.open(
            mode="w",
            errors="strict",
            newline="",
            encoding="UTF-8",
        )
    except OSError as e:
        raise OutputFileWriteError(path, reason=str(e)) from e

    try:
        with fd:
            fd.writelines(f"{line}\n" for line in lines)
    except OSError as e:
        path.unlink(missing_ok=True)
        raise OutputFileWriteError(path, reason=str(e)) from e
