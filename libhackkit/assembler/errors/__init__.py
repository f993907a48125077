"""Errors collections that assembler may raise (user-facing ones)."""

from .address_out_of_range import AddressOutOfRangeError
from .malformed_address import MalformedAddressError
from .malformed_compute import MalformedComputeError
from .malformed_label import MalformedLabelError
from .symbol_rebind import SymbolRebindError
from .unknown_comp_mnemonic import UnknownCompMnemonicError
from .unknown_dest_mnemonic import UnknownDestMnemonicError
from .unknown_jump_mnemonic import UnknownJumpMnemonicError

__all__ = [
    "AddressOutOfRangeError",
    "MalformedAddressError",
    "MalformedComputeError",
    "MalformedLabelError",
    "SymbolRebindError",
    "UnknownCompMnemonicError",
    "UnknownDestMnemonicError",
    "UnknownJumpMnemonicError",
]
