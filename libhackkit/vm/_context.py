from __future__ import annotations

import re
from dataclasses import dataclass, field

from .writer import HackBufferedWriter

# Scope separator, reserved for translator: VM names and module names never contain it
LABEL_SCOPE_SEPARATOR = "$"
SYMBOL_UNSAFE_CHARACTERS = re.compile(r"[^A-Za-z0-9_.:]")

# User labels carry one separator, generated labels carry two
SCOPED_LABEL = f"%s{LABEL_SCOPE_SEPARATOR}%s"
RETURN_ADDRESS_LABEL = f"%s{LABEL_SCOPE_SEPARATOR}ret{LABEL_SCOPE_SEPARATOR}%d"
COMPARISON_LABEL = f"%s{LABEL_SCOPE_SEPARATOR}%s_%s{LABEL_SCOPE_SEPARATOR}%d"
STATIC_SYMBOL = "%s.%d"


def sanitize_module_name(name: str) -> str:
    """Make module name usable as symbol prefix (e.g file stem with dashes or leading digit)."""
    name = SYMBOL_UNSAFE_CHARACTERS.sub("_", name) or "_"
    if name[0].isdigit():
        return f"_{name}"
    return name


@dataclass(frozen=False)
class VMTranslatorContext:
    """General context for emitting assembly from VM commands of single file.

    Owns label counters, so labels are unique within whole file.
    """

    module_name: str
    writer: HackBufferedWriter = field(default_factory=HackBufferedWriter)

    # Function which body is being translated, labels are scoped to it
    current_function: str | None = None

    comparisons_count: int = 0
    calls_count: int = 0

    def write(self, *lines: str) -> None:
        self.writer.instruction(*lines)

    def label(self, label: str) -> None:
        self.writer.label(label)

    def comment(self, line: str) -> None:
        self.writer.comment(line)

    @property
    def label_scope(self) -> str:
        return self.current_function or self.module_name

    def scoped_label(self, name: str) -> str:
        """User label name composed with enclosing function (or module outside of functions)."""
        return SCOPED_LABEL % (self.label_scope, name)

    def static_symbol(self, index: int) -> str:
        return STATIC_SYMBOL % (self.module_name, index)

    def next_comparison_id(self) -> int:
        comparison_id = self.comparisons_count
        self.comparisons_count += 1
        return comparison_id

    def next_return_address_label(self) -> str:
        label = RETURN_ADDRESS_LABEL % (self.label_scope, self.calls_count)
        self.calls_count += 1
        return label

    def comparison_label(self, mnemonic: str, kind: str, comparison_id: int) -> str:
        """Label of given kind (e.g `TRUE`, `END`) for comparison with given id."""
        return COMPARISON_LABEL % (self.module_name, mnemonic.upper(), kind, comparison_id)
