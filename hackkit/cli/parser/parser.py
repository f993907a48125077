from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from hackkit.cli.infer import infer_goal_from_source, infer_output_filename
from hackkit.cli.output import cli_fatal_abort
from hackkit.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace

    from hackkit.cli.parser.arguments import GOAL_T


def parse_cli_arguments(args: Namespace, goal: GOAL_T | None = None) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    version = bool(args.version)
    source_filepath = _process_source_filepath(args, version=version)
    if goal is None:
        # Version goal is pipeline agnostic
        goal = "assemble" if version else infer_goal_from_source(source_filepath)
    output = _process_output_path(source_filepath, args, goal)

    return CLIArguments(
        source_filepath=source_filepath,
        output_filepath=output,
        goal=goal,
        version=version,
        verbose=bool(args.verbose),
        display_symbols=bool(getattr(args, "display_symbols", False)),
        bootstrap=bool(getattr(args, "bootstrap", False)),
        annotate=bool(getattr(args, "annotate", False)),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_source_filepath(args: Namespace, *, version: bool) -> Path:
    if args.source_file is None:
        if version:
            # Version goal does not touch any files
            return Path()
        return cli_fatal_abort("Expected exactly one source file given!")
    return Path(args.source_file)


def _process_output_path(
    source_filepath: Path,
    args: Namespace,
    goal: GOAL_T,
) -> Path:
    output_path = (
        Path(args.output)
        if args.output
        else infer_output_filename(source_filepath, goal=goal)
    )
    if output_path == source_filepath:
        return cli_fatal_abort(
            "Inferred/specified output file path will rewrite existing input file, please specify another output path.",
        )
    return output_path
