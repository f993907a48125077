from dataclasses import dataclass
from pathlib import Path
from typing import Literal, TypeAlias

GOAL_T: TypeAlias = Literal["assemble", "translate"]


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole toolchain process."""

    source_filepath: Path
    output_filepath: Path

    goal: GOAL_T
    version: bool

    verbose: bool

    # Assembler
    display_symbols: bool

    # VM translator
    bootstrap: bool
    annotate: bool

    cli_debug_user_friendly_errors: bool
