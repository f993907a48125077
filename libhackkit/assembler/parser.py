"""Parser that classifies cleaned assembly lines into instructions."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .encoder import COMP_TABLE, DEST_TABLE, JUMP_TABLE
from .errors import (
    MalformedAddressError,
    MalformedComputeError,
    MalformedLabelError,
    UnknownCompMnemonicError,
    UnknownDestMnemonicError,
    UnknownJumpMnemonicError,
)
from .instructions import Instruction, InstructionType

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

    from libhackkit.source.location import SourceLine

ADDRESS_MARK = "@"
LABEL_OPEN = "("
LABEL_CLOSE = ")"
DEST_SEPARATOR = "="
JUMP_SEPARATOR = ";"

SYMBOL_PATTERN = re.compile(r"[A-Za-z_.$:][A-Za-z0-9_.$:]*")


def is_valid_symbol(text: str) -> bool:
    return SYMBOL_PATTERN.fullmatch(text) is not None


def is_integer_literal(text: str) -> bool:
    return text.isascii() and text.isdigit()


def parse_instructions(lines: Iterable[SourceLine]) -> Generator[Instruction]:
    """Stream parsed instructions from cleaned source lines."""
    for line in lines:
        yield parse_instruction(line)


def parse_instruction(line: SourceLine) -> Instruction:
    """Classify single cleaned line into address, label or compute instruction."""
    if line.text.startswith(ADDRESS_MARK):
        return _parse_address_instruction(line)
    if line.text.startswith(LABEL_OPEN):
        return _parse_label_instruction(line)
    return _parse_compute_instruction(line)


def _parse_address_instruction(line: SourceLine) -> Instruction:
    payload = line.text.removeprefix(ADDRESS_MARK)
    if not is_integer_literal(payload) and not is_valid_symbol(payload):
        raise MalformedAddressError(line.text, at=line.location)

    return Instruction(
        type=InstructionType.ADDRESS,
        location=line.location,
        symbol=payload,
    )


def _parse_label_instruction(line: SourceLine) -> Instruction:
    if not line.text.endswith(LABEL_CLOSE):
        raise MalformedLabelError(line.text, at=line.location)

    payload = line.text[len(LABEL_OPEN) : -len(LABEL_CLOSE)]
    if not is_valid_symbol(payload):
        raise MalformedLabelError(line.text, at=line.location)

    return Instruction(
        type=InstructionType.LABEL,
        location=line.location,
        symbol=payload,
    )


def _parse_compute_instruction(line: SourceLine) -> Instruction:
    text = line.text
    if text.count(DEST_SEPARATOR) > 1:
        raise MalformedComputeError(
            text,
            at=line.location,
            reason=f"Only one '{DEST_SEPARATOR}' is allowed",
        )
    if text.count(JUMP_SEPARATOR) > 1:
        raise MalformedComputeError(
            text,
            at=line.location,
            reason=f"Only one '{JUMP_SEPARATOR}' is allowed",
        )

    dest: str | None = None
    jump: str | None = None

    comp = text
    if DEST_SEPARATOR in comp:
        dest, comp = (part.strip() for part in comp.split(DEST_SEPARATOR))
    if JUMP_SEPARATOR in comp:
        comp, jump = (part.strip() for part in comp.split(JUMP_SEPARATOR))

    if JUMP_SEPARATOR in (dest or ""):
        raise MalformedComputeError(
            text,
            at=line.location,
            reason="Jump condition must follow computation",
        )
    if dest == "" or jump == "" or not comp:
        raise MalformedComputeError(
            text,
            at=line.location,
            reason="Destination, computation and jump fields must not be empty",
        )

    if comp not in COMP_TABLE:
        raise UnknownCompMnemonicError(comp, at=line.location)
    if dest not in DEST_TABLE:
        raise UnknownDestMnemonicError(dest or "", at=line.location)
    if jump not in JUMP_TABLE:
        raise UnknownJumpMnemonicError(jump or "", at=line.location)

    return Instruction(
        type=InstructionType.COMPUTE,
        location=line.location,
        dest=dest,
        comp=comp,
        jump=jump,
    )
