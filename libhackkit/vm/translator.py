"""VM translator driver that lowers stack VM source of single file into assembly lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libhackkit.source import clean_source_lines, open_source_file_line_stream

from ._context import VMTranslatorContext, sanitize_module_name
from .codegen import bootstrap as emit_bootstrap
from .codegen import generate_command_instructions
from .parser import parse_commands
from .writer import HackBufferedWriter

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from libhackkit.source.location import SourceLine

DEFAULT_MODULE_NAME = "Main"


def translate_file(
    path: Path,
    *,
    bootstrap: bool = False,
    annotate: bool = False,
) -> list[str]:
    """Translate given VM source file into assembly lines, static segment is scoped to file stem."""
    raw_lines = open_source_file_line_stream(path)
    return translate_lines(
        clean_source_lines(path, raw_lines),
        module_name=path.stem,
        bootstrap=bootstrap,
        annotate=annotate,
    )


def translate_source(
    source: str,
    *,
    module_name: str = DEFAULT_MODULE_NAME,
    bootstrap: bool = False,
    annotate: bool = False,
) -> list[str]:
    """Translate in-memory VM source text into assembly lines."""
    return translate_lines(
        clean_source_lines(None, source.splitlines()),
        module_name=module_name,
        bootstrap=bootstrap,
        annotate=annotate,
    )


def translate_lines(
    lines: Iterable[SourceLine],
    *,
    module_name: str,
    bootstrap: bool = False,
    annotate: bool = False,
) -> list[str]:
    """Translate cleaned VM lines into assembly lines.

    Any error aborts whole translation, there is no partial result.
    """
    context = VMTranslatorContext(
        module_name=sanitize_module_name(module_name),
        writer=HackBufferedWriter(emit_comments=annotate),
    )

    if bootstrap:
        emit_bootstrap(context)

    for command in parse_commands(lines):
        generate_command_instructions(context, command)

    return context.writer.lines()
