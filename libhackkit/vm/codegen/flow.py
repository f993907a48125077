"""Branching within function: labels, unconditional and conditional jumps."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .primitives import pop_stack_into_d_register, unconditional_jump

if TYPE_CHECKING:
    from libhackkit.vm._context import VMTranslatorContext


def declare_label(context: VMTranslatorContext, name: str) -> None:
    context.label(context.scoped_label(name))


def goto_label(context: VMTranslatorContext, name: str) -> None:
    unconditional_jump(context, context.scoped_label(name))


def if_goto_label(context: VMTranslatorContext, name: str) -> None:
    """Pop stack top and jump to label if it is non-zero."""
    pop_stack_into_d_register(context)
    context.write(f"@{context.scoped_label(name)}", "D;JNE")
