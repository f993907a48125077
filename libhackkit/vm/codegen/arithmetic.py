"""Arithmetic, logical and comparison operations on stack top cells."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libhackkit.assembler.symbols import STACK_POINTER
from libhackkit.vm.commands import ArithmeticOperation

from .primitives import SCRATCH_REGISTER, unconditional_jump

if TYPE_CHECKING:
    from collections.abc import Mapping

    from libhackkit.vm._context import VMTranslatorContext

# Computation with second operand in D and first operand in M
BINARY_COMPUTATIONS: Mapping[ArithmeticOperation, str] = {
    ArithmeticOperation.ADD: "D+M",
    ArithmeticOperation.SUB: "M-D",
    ArithmeticOperation.AND: "D&M",
    ArithmeticOperation.OR: "D|M",
}

UNARY_COMPUTATIONS: Mapping[ArithmeticOperation, str] = {
    ArithmeticOperation.NEG: "-M",
    ArithmeticOperation.NOT: "!M",
}

# Jump condition on `first - second` that holds when comparison is true
COMPARISON_JUMPS: Mapping[ArithmeticOperation, str] = {
    ArithmeticOperation.EQ: "JEQ",
    ArithmeticOperation.GT: "JGT",
    ArithmeticOperation.LT: "JLT",
}


def perform_operation_onto_stack(
    context: VMTranslatorContext,
    operation: ArithmeticOperation,
) -> None:
    """Perform arithmetic/logical/comparison operation on stack top."""
    match operation:
        case (
            ArithmeticOperation.ADD
            | ArithmeticOperation.SUB
            | ArithmeticOperation.AND
            | ArithmeticOperation.OR
        ):
            binary_operation_onto_stack(context, BINARY_COMPUTATIONS[operation])
        case ArithmeticOperation.NEG | ArithmeticOperation.NOT:
            unary_operation_onto_stack(context, UNARY_COMPUTATIONS[operation])
        case ArithmeticOperation.EQ | ArithmeticOperation.GT | ArithmeticOperation.LT:
            compare_onto_stack(
                context,
                mnemonic=operation.value,
                jump=COMPARISON_JUMPS[operation],
            )
        case _:
            assert_never(operation)


def binary_operation_onto_stack(context: VMTranslatorContext, computation: str) -> None:
    """Pop second operand into D and combine it in place with first one, net stack shrink by one."""
    context.write(
        f"@{STACK_POINTER}",
        "AM=M-1",
        "D=M",
        "A=A-1",
        f"M={computation}",
    )


def unary_operation_onto_stack(context: VMTranslatorContext, computation: str) -> None:
    """Operate in place on stack top without moving stack pointer."""
    context.write(
        f"@{STACK_POINTER}",
        "A=M-1",
        f"M={computation}",
    )


def compare_onto_stack(
    context: VMTranslatorContext,
    *,
    mnemonic: str,
    jump: str,
) -> None:
    """Replace two stack top cells with comparison result, true is -1 (all ones) and false is 0."""
    comparison_id = context.next_comparison_id()
    label_true = context.comparison_label(mnemonic, "TRUE", comparison_id)
    label_end = context.comparison_label(mnemonic, "END", comparison_id)

    if mnemonic == ArithmeticOperation.EQ.value:
        # Wrapped difference is zero only for equal operands
        context.write(
            f"@{STACK_POINTER}",
            "AM=M-1",
            "D=M",
            "A=A-1",
            "D=M-D",
        )
    else:
        load_ordering_into_d_register(context, mnemonic, comparison_id)

    context.write(
        f"@{label_true}",
        f"D;{jump}",
        f"@{STACK_POINTER}",
        "A=M-1",
        "M=0",
    )
    unconditional_jump(context, label_end)
    context.label(label_true)
    context.write(
        f"@{STACK_POINTER}",
        "A=M-1",
        "M=-1",
    )
    context.label(label_end)


def load_ordering_into_d_register(
    context: VMTranslatorContext,
    mnemonic: str,
    comparison_id: int,
) -> None:
    """Pop second operand and load into D value with sign of `first - second`.

    Difference of operands with opposite signs may overflow a word (e.g `32767 - (-2)`),
    so it is only computed for operands of same sign, otherwise sign of first operand decides.
    """
    first_negative = context.comparison_label(mnemonic, "FIRST_NEG", comparison_id)
    same_sign = context.comparison_label(mnemonic, "SAME_SIGN", comparison_id)
    greater = context.comparison_label(mnemonic, "GREATER", comparison_id)
    less = context.comparison_label(mnemonic, "LESS", comparison_id)
    done = context.comparison_label(mnemonic, "ORDERED", comparison_id)

    context.write(
        f"@{STACK_POINTER}",
        "AM=M-1",
        "D=M",
        f"@{SCRATCH_REGISTER}",
        "M=D",
        f"@{STACK_POINTER}",
        "A=M-1",
        "D=M",
        f"@{first_negative}",
        "D;JLT",
        # First is non-negative, so it is greater than any negative second
        f"@{SCRATCH_REGISTER}",
        "D=M",
        f"@{greater}",
        "D;JLT",
    )
    unconditional_jump(context, same_sign)

    context.label(first_negative)
    # First is negative, so it is less than any non-negative second
    context.write(
        f"@{SCRATCH_REGISTER}",
        "D=M",
        f"@{less}",
        "D;JGE",
    )

    context.label(same_sign)
    context.write(
        f"@{SCRATCH_REGISTER}",
        "D=M",
        f"@{STACK_POINTER}",
        "A=M-1",
        "D=M-D",
    )
    unconditional_jump(context, done)

    context.label(greater)
    context.write("D=1")
    unconditional_jump(context, done)

    context.label(less)
    context.write("D=-1")
    context.label(done)
