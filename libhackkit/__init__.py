"""Toolchain library for 16-bit Hack computer platform.

Provides assembler (assembly -> binary) and VM translator (stack VM -> assembly).
"""

from .assembler import AssemblyResult, assemble_file, assemble_source
from .exceptions import HackError
from .vm import translate_file, translate_source

__all__ = [
    "AssemblyResult",
    "HackError",
    "assemble_file",
    "assemble_source",
    "translate_file",
    "translate_source",
]
