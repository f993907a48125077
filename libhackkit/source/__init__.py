"""Reading raw source text into cleaned instruction lines."""

from .io import open_source_file_line_stream, write_output_lines
from .location import SourceLine, SourceLocation
from .reader import clean_source_lines

__all__ = [
    "SourceLine",
    "SourceLocation",
    "clean_source_lines",
    "open_source_file_line_stream",
    "write_output_lines",
]
