from __future__ import annotations

from argparse import ArgumentParser
from typing import TYPE_CHECKING

from hackkit.cli.parser import groups

if TYPE_CHECKING:
    from hackkit.cli.parser.arguments import GOAL_T

GOAL_DESCRIPTIONS: dict[GOAL_T | None, str] = {
    None: "Hack toolkit - CLI for assembling and translating Hack platform sources",
    "assemble": "Hack assembler - translates symbolic assembly (`.asm`) into binary (`.hack`)",
    "translate": "Hack VM translator - translates stack VM code (`.vm`) into assembly (`.asm`)",
}


def build_cli_parser(prog: str, goal: GOAL_T | None = None) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments.

    Goal of `None` means goal is inferred from input file suffix.
    """
    parser = ArgumentParser(
        description=GOAL_DESCRIPTIONS[goal],
        usage=f"{prog} file [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "source_file",
        help="Input source file to process (exactly one)",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_output_group(parser)
    groups.add_logging_group(parser)
    if goal in ("assemble", None):
        groups.add_assembler_group(parser)
    if goal in ("translate", None):
        groups.add_translator_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
