"""Two-pass assembler driver.

First pass binds labels to ROM addresses, second pass allocates variables and encodes instructions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from libhackkit.source import clean_source_lines, open_source_file_line_stream

from ._context import AssemblerContext
from .encoder import encode_instruction
from .instructions import Instruction, InstructionType
from .parser import is_integer_literal, parse_instructions

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, Sequence
    from pathlib import Path

    from libhackkit.source.location import SourceLine


@dataclass(frozen=True)
class AssemblyResult:
    """Binary words (16-character strings) in source order and final symbol table."""

    words: Sequence[str]
    symbols: Mapping[str, int]


def assemble_file(
    path: Path,
    *,
    on_warning: Callable[[str], None] | None = None,
) -> AssemblyResult:
    """Assemble given source file into binary words."""
    raw_lines = open_source_file_line_stream(path)
    return assemble_lines(
        clean_source_lines(path, raw_lines),
        on_warning=on_warning,
    )


def assemble_source(
    source: str,
    *,
    on_warning: Callable[[str], None] | None = None,
) -> AssemblyResult:
    """Assemble in-memory source text into binary words."""
    return assemble_lines(
        clean_source_lines(None, source.splitlines()),
        on_warning=on_warning,
    )


def assemble_lines(
    lines: Iterable[SourceLine],
    *,
    on_warning: Callable[[str], None] | None = None,
) -> AssemblyResult:
    """Assemble cleaned source lines into binary words.

    Any error aborts whole assembly, there is no partial result.
    """
    context = AssemblerContext()
    if on_warning:
        context.on_warning = on_warning

    instructions = first_pass(parse_instructions(lines), context)
    words = second_pass(instructions, context)
    return AssemblyResult(words=words, symbols=context.symbols.user_symbols)


def first_pass(
    instructions: Iterable[Instruction],
    context: AssemblerContext,
) -> list[Instruction]:
    """Bind labels to ROM address of next real instruction.

    :returns instructions: Real (non-label) instructions in source order
    """
    real_instructions: list[Instruction] = []

    for instruction in instructions:
        if instruction.is_real:
            real_instructions.append(instruction)
            continue

        assert instruction.symbol is not None
        rom_address = len(real_instructions)
        if context.symbols.is_predefined(instruction.symbol):
            context.on_warning(
                f"Label '{instruction.symbol}' at {instruction.location} collides with reserved symbol, "
                f"references resolve to reserved address {context.symbols[instruction.symbol]}",
            )
            continue
        context.symbols.bind(instruction.symbol, rom_address, at=instruction.location)

    return real_instructions


def second_pass(
    instructions: Iterable[Instruction],
    context: AssemblerContext,
) -> list[str]:
    """Encode real instructions, allocating variables in order of first reference."""
    words: list[str] = []

    for instruction in instructions:
        match instruction.type:
            case InstructionType.ADDRESS:
                words.append(
                    encode_instruction(
                        instruction,
                        address=_resolve_address(instruction, context),
                    ),
                )
            case InstructionType.COMPUTE:
                words.append(encode_instruction(instruction))
            case InstructionType.LABEL:
                msg = f"Label {instruction!r} must be consumed by first pass"
                raise ValueError(msg)

    return words


def _resolve_address(instruction: Instruction, context: AssemblerContext) -> int:
    assert instruction.symbol is not None
    if is_integer_literal(instruction.symbol):
        return int(instruction.symbol)
    return context.symbols.resolve_or_allocate(instruction.symbol)
