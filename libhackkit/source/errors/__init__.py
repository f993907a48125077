"""Errors collections that source reading/writing may raise (user-facing ones)."""

from .output_file_write import OutputFileWriteError
from .source_file_read import SourceFileReadError

__all__ = [
    "OutputFileWriteError",
    "SourceFileReadError",
]
