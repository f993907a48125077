from argparse import ArgumentParser


def add_output_group(parser: ArgumentParser) -> None:
    group = parser.add_argument_group(
        title="Output",
        description="Flags for output artifact.",
    )
    group.add_argument(
        "--output",
        "-o",
        type=str,
        required=False,
        help="Output file path to generate, by default will be inferred from input filename (`.asm` -> `.hack`, `.vm` -> `.asm`)",
    )


def add_logging_group(parser: ArgumentParser) -> None:
    group = parser.add_argument_group(
        title="Logging",
        description="Flags for toolchain messages.",
    )
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from toolchain.",
    )


def add_assembler_group(parser: ArgumentParser) -> None:
    group = parser.add_argument_group(
        title="Assembler",
        description="Flags for the assembler (assembly -> binary).",
    )
    group.add_argument(
        "--display-symbols",
        dest="display_symbols",
        required=False,
        action="store_true",
        help="If passed will emit resolved labels and variables into stdout.",
    )


def add_translator_group(parser: ArgumentParser) -> None:
    group = parser.add_argument_group(
        title="VM translator",
        description="Flags for the VM translator (stack VM -> assembly).",
    )
    group.add_argument(
        "--bootstrap",
        required=False,
        action="store_true",
        help="If passed will prepend bootstrap code (SP=256, call Sys.init 0).",
    )
    group.add_argument(
        "--annotate",
        required=False,
        action="store_true",
        help="If passed will emit source VM command as comment before its assembly.",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    group = parser.add_argument_group(
        title="Toolchain debug",
        description="Flags for debugging toolchain itself.",
    )
    group.add_argument(
        "--no-user-friendly-errors",
        dest="cli_debug_user_friendly_errors",
        default=True,
        action="store_false",
        help="If passed will re-raise toolchain errors with traceback instead of user-friendly message.",
    )
