from dataclasses import dataclass
from typing import Literal


@dataclass
class AsmLine:
    type: Literal["instruction", "label", "comment"]
    text: str


class HackBufferedWriter:
    """Buffer of emitted assembly lines, flushed only after whole file is translated."""

    buffer: list[AsmLine]
    emit_comments: bool

    def __init__(self, *, emit_comments: bool = False) -> None:
        self.buffer = []
        self.emit_comments = emit_comments

    def instruction(self, *instructions: str) -> None:
        self.buffer.extend(AsmLine(type="instruction", text=i) for i in instructions)

    def label(self, label: str) -> None:
        """Emit label pseudo-instruction to code."""
        self.buffer.append(AsmLine(type="label", text=f"({label})"))

    def comment(self, line: str) -> None:
        if not self.emit_comments:
            return
        self.buffer.append(AsmLine(type="comment", text=f"// {line}"))

    def lines(self) -> list[str]:
        return [asm_line.text for asm_line in self.buffer]
