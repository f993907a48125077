from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class SourceLocation:
    """Location of any instruction line within source code file."""

    line_number: int

    filepath: Path | None = None
    source: Literal["file", "toolchain"] = "file"

    def __post_init__(self) -> None:
        if self.source == "file":
            assert self.filepath is not None

    def __repr__(self) -> str:
        if self.source == "toolchain":
            return f"'(hackkit-toolchain-internals):{self.line_number + 1}'"
        assert self.filepath is not None
        return f"'{self.filepath.name}:{self.line_number + 1}'"

    @classmethod
    def toolchain(cls, line_number: int = 0) -> SourceLocation:
        """Create a location for toolchain originated (in-memory) source."""
        return cls(line_number=line_number, source="toolchain")


@dataclass(frozen=True)
class SourceLine:
    """Cleaned instruction line (no comments, no surrounding whitespace, never empty)."""

    text: str
    location: SourceLocation
