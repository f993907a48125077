"""Function declaration and calling convention.

Frame pushed by caller on call (from lower to higher addresses):
return address, caller LCL, caller ARG, caller THIS, caller THAT.
Callee LCL points right after the frame, callee ARG points to the first argument.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from libhackkit.assembler.symbols import (
    ARGUMENT_BASE,
    LOCAL_BASE,
    STACK_POINTER,
    THAT_BASE,
    THIS_BASE,
)

from .primitives import (
    RETURN_ADDRESS_REGISTER,
    SCRATCH_REGISTER,
    pop_stack_into_d_register,
    push_integer_onto_stack,
    push_symbol_address_onto_stack,
    push_symbol_value_onto_stack,
    unconditional_jump,
)

if TYPE_CHECKING:
    from libhackkit.vm._context import VMTranslatorContext

# Base pointers saved in frame, in push order
FRAME_SAVED_POINTERS = (LOCAL_BASE, ARGUMENT_BASE, THIS_BASE, THAT_BASE)

# Saved pointers + return address
FRAME_SIZE = len(FRAME_SAVED_POINTERS) + 1

BOOTSTRAP_STACK_POINTER = 256
BOOTSTRAP_ENTRY_FUNCTION = "Sys.init"


def function_begin(context: VMTranslatorContext, name: str, locals_count: int) -> None:
    """Emit function entry label and zero-initialize its local variables."""
    context.current_function = name
    context.label(name)
    for _ in range(locals_count):
        push_integer_onto_stack(context, 0)


def function_call(context: VMTranslatorContext, name: str, arguments_count: int) -> None:
    """Save caller frame, reposition ARG and LCL for callee and jump into it."""
    return_address = context.next_return_address_label()

    push_symbol_address_onto_stack(context, return_address)
    for pointer in FRAME_SAVED_POINTERS:
        push_symbol_value_onto_stack(context, pointer)

    # ARG = SP - 5 - nArgs
    context.write(
        f"@{STACK_POINTER}",
        "D=M",
        f"@{FRAME_SIZE + arguments_count}",
        "D=D-A",
        f"@{ARGUMENT_BASE}",
        "M=D",
    )
    # LCL = SP
    context.write(
        f"@{STACK_POINTER}",
        "D=M",
        f"@{LOCAL_BASE}",
        "M=D",
    )
    unconditional_jump(context, name)
    context.label(return_address)


def function_return(context: VMTranslatorContext) -> None:
    """Place return value for caller, restore caller frame and jump to return address."""
    # Frame base (LCL) into scratch, as LCL is restored from it
    context.write(
        f"@{LOCAL_BASE}",
        "D=M",
        f"@{SCRATCH_REGISTER}",
        "M=D",
    )
    # Return address must be saved before return value is written,
    # as with zero arguments it is stored exactly at ARG
    context.write(
        f"@{FRAME_SIZE}",
        "A=D-A",
        "D=M",
        f"@{RETURN_ADDRESS_REGISTER}",
        "M=D",
    )

    # *ARG = pop()
    pop_stack_into_d_register(context)
    context.write(f"@{ARGUMENT_BASE}", "A=M", "M=D")

    # SP = ARG + 1
    context.write(
        f"@{ARGUMENT_BASE}",
        "D=M+1",
        f"@{STACK_POINTER}",
        "M=D",
    )

    # Restore THAT, THIS, ARG, LCL walking down from frame base
    for pointer in reversed(FRAME_SAVED_POINTERS):
        context.write(
            f"@{SCRATCH_REGISTER}",
            "AM=M-1",
            "D=M",
            f"@{pointer}",
            "M=D",
        )

    context.write(f"@{RETURN_ADDRESS_REGISTER}", "A=M", "0;JMP")


def bootstrap(context: VMTranslatorContext) -> None:
    """Initialize stack pointer and call entry function."""
    context.comment("bootstrap")
    context.write(
        f"@{BOOTSTRAP_STACK_POINTER}",
        "D=A",
        f"@{STACK_POINTER}",
        "M=D",
    )
    function_call(context, BOOTSTRAP_ENTRY_FUNCTION, arguments_count=0)
