"""Console output for CLI, messages go into stderr so stdout is left for goal output."""

import sys
from typing import Literal, NoReturn, TypeAlias

MESSAGE_LEVEL: TypeAlias = Literal["INFO", "WARNING", "ERROR"]


def cli_message(
    level: MESSAGE_LEVEL,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit message with given level, INFO messages are only shown when verbose."""
    if level == "INFO" and not verbose:
        return
    print(f"[{level}] {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error message and exit with failure."""
    cli_message("ERROR", text)
    sys.exit(1)


def cli_toolchain_warning(text: str) -> None:
    """Callback for non-fatal toolchain diagnostics."""
    cli_message("WARNING", text)
