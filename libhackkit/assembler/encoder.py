"""Binary encoding of assembly instructions into 16-bit words.

Compute instruction layout: `111a cccc ccdd djjj`
where `a` selects M (memory) instead of A register as ALU operand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from .errors import (
    AddressOutOfRangeError,
    UnknownCompMnemonicError,
    UnknownDestMnemonicError,
    UnknownJumpMnemonicError,
)
from .instructions import Instruction, InstructionType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from libhackkit.source.location import SourceLocation

WORD_SIZE = 16
MAX_ADDRESS_VALUE = (1 << (WORD_SIZE - 1)) - 1

COMPUTE_INSTRUCTION_PREFIX = "111"
ADDRESS_INSTRUCTION_PREFIX = "0"

# `a` bit + 6 ALU control bits (zx, nx, zy, ny, f, no)
COMP_TABLE: Mapping[str, str] = {
    # a = 0, operates on A register
    "0": "0101010",
    "1": "0111111",
    "-1": "0111010",
    "D": "0001100",
    "A": "0110000",
    "!D": "0001101",
    "!A": "0110001",
    "-D": "0001111",
    "-A": "0110011",
    "D+1": "0011111",
    "A+1": "0110111",
    "D-1": "0001110",
    "A-1": "0110010",
    "D+A": "0000010",
    "D-A": "0010011",
    "A-D": "0000111",
    "D&A": "0000000",
    "D|A": "0010101",
    # a = 1, operates on M (RAM[A])
    "M": "1110000",
    "!M": "1110001",
    "-M": "1110011",
    "M+1": "1110111",
    "M-1": "1110010",
    "D+M": "1000010",
    "D-M": "1010011",
    "M-D": "1000111",
    "D&M": "1000000",
    "D|M": "1010101",
}

# Bits are (A, D, M) targets
DEST_TABLE: Mapping[str | None, str] = {
    None: "000",
    "M": "001",
    "D": "010",
    "MD": "011",
    "A": "100",
    "AM": "101",
    "AD": "110",
    "AMD": "111",
}

# Bits are (out < 0, out = 0, out > 0)
JUMP_TABLE: Mapping[str | None, str] = {
    None: "000",
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
}


def encode_address(value: int, at: SourceLocation) -> str:
    """Encode address instruction loading given value as 16-bit binary string."""
    if not 0 <= value <= MAX_ADDRESS_VALUE:
        raise AddressOutOfRangeError(value, at=at, limit=MAX_ADDRESS_VALUE)
    return ADDRESS_INSTRUCTION_PREFIX + format(value, f"0{WORD_SIZE - 1}b")


def encode_compute(
    comp: str,
    dest: str | None,
    jump: str | None,
    at: SourceLocation,
) -> str:
    """Encode compute instruction fields as 16-bit binary string."""
    return (
        COMPUTE_INSTRUCTION_PREFIX
        + encode_comp(comp, at)
        + encode_dest(dest, at)
        + encode_jump(jump, at)
    )


def encode_comp(comp: str, at: SourceLocation) -> str:
    if comp not in COMP_TABLE:
        raise UnknownCompMnemonicError(comp, at=at)
    return COMP_TABLE[comp]


def encode_dest(dest: str | None, at: SourceLocation) -> str:
    if dest not in DEST_TABLE:
        raise UnknownDestMnemonicError(dest or "", at=at)
    return DEST_TABLE[dest]


def encode_jump(jump: str | None, at: SourceLocation) -> str:
    if jump not in JUMP_TABLE:
        raise UnknownJumpMnemonicError(jump or "", at=at)
    return JUMP_TABLE[jump]


def encode_instruction(instruction: Instruction, address: int | None = None) -> str:
    """Encode real instruction, address instructions require resolved address."""
    match instruction.type:
        case InstructionType.ADDRESS:
            assert address is not None, "Address instruction requires resolved address"
            return encode_address(address, at=instruction.location)
        case InstructionType.COMPUTE:
            assert instruction.comp is not None
            return encode_compute(
                instruction.comp,
                instruction.dest,
                instruction.jump,
                at=instruction.location,
            )
        case InstructionType.LABEL:
            msg = "Label pseudo-instruction has no binary encoding"
            raise ValueError(msg)
        case _:
            assert_never(instruction.type)
