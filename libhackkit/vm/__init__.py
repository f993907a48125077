"""Translator that lowers stack virtual machine language into symbolic assembly."""

from .commands import ArithmeticOperation, Command, CommandType, Segment
from .translator import translate_file, translate_lines, translate_source

__all__ = [
    "ArithmeticOperation",
    "Command",
    "CommandType",
    "Segment",
    "translate_file",
    "translate_lines",
    "translate_source",
]
