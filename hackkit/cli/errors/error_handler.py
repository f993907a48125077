import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from hackkit.cli.output import cli_fatal_abort, cli_message
from libhackkit.exceptions import HackError


@contextmanager
def cli_hackkit_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap function to properly emit toolchain internal errors."""
    try:
        yield
    except HackError as he:
        if debug_user_friendly_errors:
            return cli_fatal_abort(repr(he))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")
