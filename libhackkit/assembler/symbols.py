from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from .errors import SymbolRebindError

if TYPE_CHECKING:
    from libhackkit.source.location import SourceLocation

VARIABLES_BASE_ADDRESS = 16

STACK_POINTER = "SP"
LOCAL_BASE = "LCL"
ARGUMENT_BASE = "ARG"
THIS_BASE = "THIS"
THAT_BASE = "THAT"
SCREEN = "SCREEN"
KEYBOARD = "KBD"

PREDEFINED_SYMBOLS: Mapping[str, int] = {
    STACK_POINTER: 0,
    LOCAL_BASE: 1,
    ARGUMENT_BASE: 2,
    THIS_BASE: 3,
    THAT_BASE: 4,
    **{f"R{register}": register for register in range(16)},
    SCREEN: 16384,
    KEYBOARD: 24576,
}


class SymbolTable(Mapping[str, int]):
    """Mapping from symbol name to address, preloaded with platform reserved symbols.

    Once bound, symbol is never rebound to another address.
    """

    def __init__(self) -> None:
        self._symbols: dict[str, int] = dict(PREDEFINED_SYMBOLS)
        self._next_variable_address = VARIABLES_BASE_ADDRESS

    def __getitem__(self, name: str) -> int:
        return self._symbols[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def lookup(self, name: str) -> int | None:
        return self._symbols.get(name)

    def is_predefined(self, name: str) -> bool:
        return name in PREDEFINED_SYMBOLS

    def bind(
        self,
        name: str,
        address: int,
        at: SourceLocation | None = None,
    ) -> None:
        """Bind symbol to address, binding already bound symbol to other address is an error."""
        bound_to = self._symbols.get(name)
        if bound_to is not None and bound_to != address:
            raise SymbolRebindError(name, bound_to=bound_to, rebind_to=address, at=at)
        self._symbols[name] = address

    def resolve_or_allocate(self, name: str) -> int:
        """Resolve symbol address or allocate next free variable address for it."""
        if (address := self._symbols.get(name)) is not None:
            return address

        address = self._next_variable_address
        self._next_variable_address += 1
        self._symbols[name] = address
        return address

    @property
    def user_symbols(self) -> Mapping[str, int]:
        """Labels and variables, without platform reserved symbols."""
        return {
            name: address
            for name, address in self._symbols.items()
            if name not in PREDEFINED_SYMBOLS
        }
