"""Goals for CLI (e.g assemble, translate, show version) as different goals that output different result."""

import sys
from time import perf_counter_ns
from typing import NoReturn

from hackkit.cli.goals._perf import NANOS_TO_SECONDS
from hackkit.cli.goals.assemble import cli_perform_assemble_goal
from hackkit.cli.goals.translate import cli_perform_translate_goal
from hackkit.cli.goals.version import cli_perform_version_goal
from hackkit.cli.output import cli_message
from hackkit.cli.parser.arguments import CLIArguments


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform toolchain goal based on CLI arguments."""
    start = perf_counter_ns()
    try:
        if args.version:
            return cli_perform_version_goal(args)

        match args.goal:
            case "assemble":
                return cli_perform_assemble_goal(args)
            case "translate":
                return cli_perform_translate_goal(args)
    except SystemExit as e:
        end = perf_counter_ns()
        time_taken = (end - start) / NANOS_TO_SECONDS
        cli_message(
            "INFO",
            f"Performing a goal took {time_taken:.2f} seconds!",
            verbose=args.verbose,
        )
        sys.exit(e.code)
