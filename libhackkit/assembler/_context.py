from collections.abc import Callable
from dataclasses import dataclass, field

from .symbols import SymbolTable


def _ignore_warning(_: str) -> None:
    return None


@dataclass(frozen=False)
class AssemblerContext:
    """Context for single assembly run, exclusively owned by it.

    Passed through both passes, never shared between files.
    """

    symbols: SymbolTable = field(default_factory=SymbolTable)
    on_warning: Callable[[str], None] = _ignore_warning
