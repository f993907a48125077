from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libhackkit.source.location import SourceLocation


class CommandType(Enum):
    """Kind of stack virtual machine command."""

    # Operation on stack top cells (see `ArithmeticOperation`)
    ARITHMETIC = auto()

    # Memory segment access
    PUSH = auto()
    POP = auto()

    # Branching within function
    LABEL = auto()
    GOTO = auto()
    IF_GOTO = auto()

    # Function declaration and calling convention
    FUNCTION = auto()
    CALL = auto()
    RETURN = auto()


class ArithmeticOperation(StrEnum):
    """Arithmetic and logical operations on stack cells, values are VM mnemonics."""

    # Binary, consume two cells and push one
    ADD = "add"
    SUB = "sub"
    AND = "and"
    OR = "or"

    # Unary, operate in place on stack top
    NEG = "neg"
    NOT = "not"

    # Comparison, consume two cells and push boolean (-1 / 0)
    EQ = "eq"
    GT = "gt"
    LT = "lt"


class Segment(StrEnum):
    """Virtual memory segment, values are VM mnemonics."""

    ARGUMENT = "argument"
    LOCAL = "local"
    STATIC = "static"
    CONSTANT = "constant"
    THIS = "this"
    THAT = "that"
    POINTER = "pointer"
    TEMP = "temp"


COMMAND_KEYWORDS: dict[str, CommandType] = {
    "push": CommandType.PUSH,
    "pop": CommandType.POP,
    "label": CommandType.LABEL,
    "goto": CommandType.GOTO,
    "if-goto": CommandType.IF_GOTO,
    "function": CommandType.FUNCTION,
    "call": CommandType.CALL,
    "return": CommandType.RETURN,
    **{operation.value: CommandType.ARITHMETIC for operation in ArithmeticOperation},
}


@dataclass(frozen=True)
class Command:
    """Parsed virtual machine command.

    Meaning of the arguments depends on command type:
    arithmetic carries `operation`, push/pop carry `segment` and `index`,
    branching carries label `name`, function/call carry `name` and locals/arguments count in `index`.
    """

    type: CommandType
    location: SourceLocation

    operation: ArithmeticOperation | None = None
    segment: Segment | None = None
    name: str | None = None
    index: int | None = None

    def __repr__(self) -> str:
        match self.type:
            case CommandType.ARITHMETIC:
                assert self.operation is not None
                return self.operation.value
            case CommandType.PUSH | CommandType.POP:
                assert self.segment is not None
                return f"{self.type.name.lower()} {self.segment.value} {self.index}"
            case CommandType.LABEL | CommandType.GOTO:
                return f"{self.type.name.lower()} {self.name}"
            case CommandType.IF_GOTO:
                return f"if-goto {self.name}"
            case CommandType.FUNCTION | CommandType.CALL:
                return f"{self.type.name.lower()} {self.name} {self.index}"
            case CommandType.RETURN:
                return "return"
