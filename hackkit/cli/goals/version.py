import sys
from platform import platform, python_implementation, python_version
from typing import NoReturn

from hackkit.cli.parser.arguments import CLIArguments
from libhackkit.assembler.encoder import WORD_SIZE
from libhackkit.assembler.symbols import VARIABLES_BASE_ADDRESS
from libhackkit.vm.codegen.functions import BOOTSTRAP_STACK_POINTER


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:
    """Perform version goal that display information about host and toolchain."""
    print("[Hack toolchain]")
    print("Target platform:")
    print(f"\tWord size: {WORD_SIZE} bits")
    print(f"\tVariables base address: {VARIABLES_BASE_ADDRESS}")
    print(f"\tBootstrap stack pointer: {BOOTSTRAP_STACK_POINTER}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    if args.verbose:
        print("Goal:")
        print(f"\t{args.goal}")
    return sys.exit(0)
