from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libhackkit.source.location import SourceLocation


class InstructionType(Enum):
    """Kind of an assembly instruction line."""

    # `@value` or `@symbol`, loads A register
    ADDRESS = auto()

    # `dest=comp;jump`, ALU computation with optional store and jump
    COMPUTE = auto()

    # `(symbol)`, pseudo-instruction marking ROM address of the next real instruction
    LABEL = auto()


@dataclass(frozen=True)
class Instruction:
    """Parsed assembly instruction.

    Address and label instructions carry `symbol`, compute ones carry `comp` and optional `dest` / `jump`.
    """

    type: InstructionType
    location: SourceLocation

    symbol: str | None = None

    dest: str | None = None
    comp: str | None = None
    jump: str | None = None

    @property
    def is_real(self) -> bool:
        """Real instructions occupy ROM slot, labels are not."""
        return self.type != InstructionType.LABEL

    def __repr__(self) -> str:
        match self.type:
            case InstructionType.ADDRESS:
                return f"@{self.symbol}"
            case InstructionType.LABEL:
                return f"({self.symbol})"
            case InstructionType.COMPUTE:
                dest = f"{self.dest}=" if self.dest else ""
                jump = f";{self.jump}" if self.jump else ""
                return f"{dest}{self.comp}{jump}"
