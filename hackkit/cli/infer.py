from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from hackkit.cli.output import cli_fatal_abort

if TYPE_CHECKING:
    from hackkit.cli.parser.arguments import GOAL_T

ASSEMBLY_SUFFIX = ".asm"
BINARY_SUFFIX = ".hack"
VM_SUFFIX = ".vm"


def infer_goal_from_source(source_filepath: Path) -> GOAL_T:
    """Infer which pipeline to run from input file suffix."""
    match source_filepath.suffix:
        case ".asm":
            return "assemble"
        case ".vm":
            return "translate"
        case _:
            return cli_fatal_abort(
                f"Unable to infer goal from file '{source_filepath.name}', expected `{ASSEMBLY_SUFFIX}` or `{VM_SUFFIX}` file!",
            )


def infer_output_filename(source_filepath: Path, goal: GOAL_T) -> Path:
    """Try to infer filename for output from input source file."""
    suffix: str
    match goal:
        case "assemble":
            suffix = BINARY_SUFFIX
        case "translate":
            suffix = ASSEMBLY_SUFFIX

    if source_filepath == Path():
        return Path("out").with_suffix(suffix)

    if source_filepath.suffix == suffix:
        suffix = source_filepath.suffix + suffix
    return source_filepath.with_suffix(suffix)
