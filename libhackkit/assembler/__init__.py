"""Assembler that translates symbolic assembly into 16-bit binary instructions."""

from .assembler import (
    AssemblyResult,
    assemble_file,
    assemble_lines,
    assemble_source,
    first_pass,
    second_pass,
)
from .symbols import PREDEFINED_SYMBOLS, SymbolTable

__all__ = [
    "PREDEFINED_SYMBOLS",
    "AssemblyResult",
    "SymbolTable",
    "assemble_file",
    "assemble_lines",
    "assemble_source",
    "first_pass",
    "second_pass",
]
