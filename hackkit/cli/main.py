from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from hackkit.cli.errors.error_handler import cli_hackkit_error_handler
from hackkit.cli.goals import perform_desired_toolchain_goal
from hackkit.cli.parser.builder import build_cli_parser
from hackkit.cli.output import cli_message
from hackkit.cli.parser.parser import parse_cli_arguments

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hackkit.cli.parser.arguments import GOAL_T

DEFAULT_PROGRAM_NAME = "hackkit"
MODULE_ENTRY_FILENAME = "__main__.py"


def cli_entry_point(
    prog: str | None = None,
    goal: GOAL_T | None = None,
    argv: Sequence[str] | None = None,
) -> None:
    """CLI main entry."""
    prog = cli_get_program_name(override=prog)

    parser = build_cli_parser(prog, goal=goal)
    args = parse_cli_arguments(parser.parse_args(argv), goal=goal)
    wrapper = cli_hackkit_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    )

    with wrapper:
        # Wrap goal into error handler as in unwraps errors into user-friendly ones (except internal ones as bugs)
        perform_desired_toolchain_goal(args)

    # This is unreachable but error wrapper must fail
    cli_message("ERROR", "Bug in a CLI: toolchain must perform at least one goal!")
    sys.exit(1)


def cli_get_program_name(*, override: str | None = None) -> str:
    """Program name shown in usage, `python -m hackkit` reports module file instead of script."""
    if override:
        return override
    program = Path(sys.argv[0]).name
    if program == MODULE_ENTRY_FILENAME:
        return DEFAULT_PROGRAM_NAME
    return program


def assembler_entry_point() -> None:
    """`assembler <file.asm>` entry."""
    cli_entry_point(goal="assemble")


def vmtranslator_entry_point() -> None:
    """`vmtranslator <file.vm>` entry."""
    cli_entry_point(goal="translate")


if __name__ == "__main__":
    cli_entry_point(prog=None)
