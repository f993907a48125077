from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from hackkit.cli.goals._perf import wrap_with_perf_time_taken
from hackkit.cli.output import cli_message
from libhackkit.source import write_output_lines
from libhackkit.vm import translate_file

if TYPE_CHECKING:
    from hackkit.cli.parser.arguments import CLIArguments


def cli_perform_translate_goal(args: CLIArguments) -> NoReturn:
    """Translate input VM file into assembly file."""
    cli_message(
        level="INFO",
        text=f"Translating `{args.source_filepath.name}`...",
        verbose=args.verbose,
    )

    with wrap_with_perf_time_taken("VM translator", verbose=args.verbose):
        lines = translate_file(
            args.source_filepath,
            bootstrap=args.bootstrap,
            annotate=args.annotate,
        )

    write_output_lines(args.output_filepath, lines)
    cli_message(
        level="INFO",
        text=f"Translated into {len(lines)} assembly line(s) in `{args.output_filepath.name}`!",
        verbose=args.verbose,
    )
    return sys.exit(0)
