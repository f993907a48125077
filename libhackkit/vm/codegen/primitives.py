"""Assembly abstraction layer that hides repeated stack fragments into functions that generates that for you.

Stack pointer always addresses next free cell: push writes then increments, pop decrements then reads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from libhackkit.assembler.symbols import STACK_POINTER

if TYPE_CHECKING:
    from libhackkit.vm._context import VMTranslatorContext

# General purpose registers free for translator internal usage
SCRATCH_REGISTER = "R13"
RETURN_ADDRESS_REGISTER = "R14"


def push_d_register_onto_stack(context: VMTranslatorContext) -> None:
    """Store D register under current stack pointer and increment it."""
    context.write(
        f"@{STACK_POINTER}",
        "A=M",
        "M=D",
        f"@{STACK_POINTER}",
        "M=M+1",
    )


def pop_stack_into_d_register(context: VMTranslatorContext) -> None:
    """Decrement stack pointer and load cell under it into D register."""
    context.write(
        f"@{STACK_POINTER}",
        "AM=M-1",
        "D=M",
    )


def push_integer_onto_stack(context: VMTranslatorContext, value: int) -> None:
    """Push given integer onto stack, zero and one are pushed without loading constant."""
    assert value >= 0, "Tried to push negative integer onto stack!"
    if value in (0, 1):
        context.write(
            f"@{STACK_POINTER}",
            "A=M",
            f"M={value}",
            f"@{STACK_POINTER}",
            "M=M+1",
        )
        return

    context.write(f"@{value}", "D=A")
    push_d_register_onto_stack(context)


def push_symbol_value_onto_stack(context: VMTranslatorContext, symbol: str) -> None:
    """Push value stored in RAM at given symbol address."""
    context.write(f"@{symbol}", "D=M")
    push_d_register_onto_stack(context)


def push_symbol_address_onto_stack(context: VMTranslatorContext, symbol: str) -> None:
    """Push address of given symbol (label or variable) itself."""
    context.write(f"@{symbol}", "D=A")
    push_d_register_onto_stack(context)


def unconditional_jump(context: VMTranslatorContext, label: str) -> None:
    context.write(f"@{label}", "0;JMP")
