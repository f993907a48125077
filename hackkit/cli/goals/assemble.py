from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from hackkit.cli.goals._perf import wrap_with_perf_time_taken
from hackkit.cli.output import cli_message, cli_toolchain_warning
from libhackkit.assembler import assemble_file
from libhackkit.source import write_output_lines

if TYPE_CHECKING:
    from collections.abc import Mapping

    from hackkit.cli.parser.arguments import CLIArguments


def cli_perform_assemble_goal(args: CLIArguments) -> NoReturn:
    """Assemble input assembly file into binary file."""
    cli_message(
        level="INFO",
        text=f"Assembling `{args.source_filepath.name}`...",
        verbose=args.verbose,
    )

    with wrap_with_perf_time_taken("Assembler (two passes)", verbose=args.verbose):
        result = assemble_file(
            args.source_filepath,
            on_warning=cli_toolchain_warning,
        )

    if args.display_symbols:
        emit_symbol_table_into_stdout(result.symbols)

    write_output_lines(args.output_filepath, result.words)
    cli_message(
        level="INFO",
        text=f"Assembled {len(result.words)} instruction(s) into `{args.output_filepath.name}`!",
        verbose=args.verbose,
    )
    return sys.exit(0)


def emit_symbol_table_into_stdout(symbols: Mapping[str, int]) -> None:
    """Display labels and variables ordered by address."""
    for name, address in sorted(symbols.items(), key=lambda kv: (kv[1], kv[0])):
        print(f"{address:>5} {name}")
