from collections.abc import Generator
from contextlib import contextmanager
from time import perf_counter_ns

from hackkit.cli.output import cli_message

NANOS_TO_SECONDS = 1_000_000_000


@contextmanager
def wrap_with_perf_time_taken(message: str, *, verbose: bool) -> Generator[None]:
    start_time = perf_counter_ns()
    yield
    time_taken = (perf_counter_ns() - start_time) / NANOS_TO_SECONDS
    cli_message(
        level="INFO",
        text=f"{message} took {time_taken:.2f}s",
        verbose=verbose,
    )
