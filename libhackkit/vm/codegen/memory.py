"""Push/pop access to virtual memory segments."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libhackkit.assembler.symbols import (
    ARGUMENT_BASE,
    LOCAL_BASE,
    THAT_BASE,
    THIS_BASE,
)
from libhackkit.vm.commands import Segment

from .primitives import (
    SCRATCH_REGISTER,
    pop_stack_into_d_register,
    push_d_register_onto_stack,
    push_integer_onto_stack,
    push_symbol_value_onto_stack,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from libhackkit.vm._context import VMTranslatorContext

TEMP_SEGMENT_BASE_ADDRESS = 5

# Segments addressed relative to base pointer stored in RAM
BASE_POINTER_SEGMENTS: Mapping[Segment, str] = {
    Segment.LOCAL: LOCAL_BASE,
    Segment.ARGUMENT: ARGUMENT_BASE,
    Segment.THIS: THIS_BASE,
    Segment.THAT: THAT_BASE,
}

POINTER_SEGMENT_SYMBOLS = (THIS_BASE, THAT_BASE)


def push_segment_onto_stack(
    context: VMTranslatorContext,
    segment: Segment,
    index: int,
) -> None:
    """Load value from segment cell and push it onto stack."""
    match segment:
        case Segment.CONSTANT:
            push_integer_onto_stack(context, index)
        case Segment.LOCAL | Segment.ARGUMENT | Segment.THIS | Segment.THAT:
            base = BASE_POINTER_SEGMENTS[segment]
            if index == 0:
                context.write(f"@{base}", "A=M", "D=M")
            else:
                context.write(f"@{base}", "D=M", f"@{index}", "A=D+A", "D=M")
            push_d_register_onto_stack(context)
        case Segment.STATIC | Segment.TEMP | Segment.POINTER:
            push_symbol_value_onto_stack(
                context,
                _fixed_segment_symbol(context, segment, index),
            )
        case _:
            assert_never(segment)


def pop_stack_into_segment(
    context: VMTranslatorContext,
    segment: Segment,
    index: int,
) -> None:
    """Pop stack top and store it into segment cell."""
    match segment:
        case Segment.CONSTANT:
            msg = "Constant segment cannot be pop target, must be rejected by parser"
            raise ValueError(msg)
        case Segment.LOCAL | Segment.ARGUMENT | Segment.THIS | Segment.THAT:
            base = BASE_POINTER_SEGMENTS[segment]
            if index == 0:
                context.write(f"@{base}", "D=M")
            else:
                context.write(f"@{base}", "D=M", f"@{index}", "D=D+A")

            # Destination is kept in scratch register as popping clobbers A and D
            context.write(f"@{SCRATCH_REGISTER}", "M=D")
            pop_stack_into_d_register(context)
            context.write(f"@{SCRATCH_REGISTER}", "A=M", "M=D")
        case Segment.STATIC | Segment.TEMP | Segment.POINTER:
            pop_stack_into_d_register(context)
            context.write(f"@{_fixed_segment_symbol(context, segment, index)}", "M=D")
        case _:
            assert_never(segment)


def _fixed_segment_symbol(
    context: VMTranslatorContext,
    segment: Segment,
    index: int,
) -> str:
    """Symbol (or literal address) of segment cell whose address is known at translation time."""
    match segment:
        case Segment.STATIC:
            return context.static_symbol(index)
        case Segment.TEMP:
            return str(TEMP_SEGMENT_BASE_ADDRESS + index)
        case Segment.POINTER:
            return POINTER_SEGMENT_SYMBOLS[index]
        case _:
            msg = f"Segment '{segment.value}' has no fixed address"
            raise ValueError(msg)
