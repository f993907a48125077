"""Core VM codegen, lowers each command into assembly fragment."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from libhackkit.vm.commands import Command, CommandType

from .arithmetic import perform_operation_onto_stack
from .flow import declare_label, goto_label, if_goto_label
from .functions import bootstrap, function_begin, function_call, function_return
from .memory import pop_stack_into_segment, push_segment_onto_stack

if TYPE_CHECKING:
    from libhackkit.vm._context import VMTranslatorContext

__all__ = [
    "bootstrap",
    "generate_command_instructions",
]


def generate_command_instructions(
    context: VMTranslatorContext,
    command: Command,
) -> None:
    """Write assembly instructions for given command."""
    context.comment(repr(command))

    match command.type:
        case CommandType.ARITHMETIC:
            assert command.operation is not None
            perform_operation_onto_stack(context, command.operation)
        case CommandType.PUSH:
            assert command.segment is not None
            assert command.index is not None
            push_segment_onto_stack(context, command.segment, command.index)
        case CommandType.POP:
            assert command.segment is not None
            assert command.index is not None
            pop_stack_into_segment(context, command.segment, command.index)
        case CommandType.LABEL:
            assert command.name is not None
            declare_label(context, command.name)
        case CommandType.GOTO:
            assert command.name is not None
            goto_label(context, command.name)
        case CommandType.IF_GOTO:
            assert command.name is not None
            if_goto_label(context, command.name)
        case CommandType.FUNCTION:
            assert command.name is not None
            assert command.index is not None
            function_begin(context, command.name, locals_count=command.index)
        case CommandType.CALL:
            assert command.name is not None
            assert command.index is not None
            function_call(context, command.name, arguments_count=command.index)
        case CommandType.RETURN:
            function_return(context)
        case _:
            assert_never(command.type)
