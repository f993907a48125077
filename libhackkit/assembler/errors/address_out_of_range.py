from libhackkit.exceptions import SymbolMisuseError
from libhackkit.source.location import SourceLocation


class AddressOutOfRangeError(SymbolMisuseError):
    def __init__(self, value: int, at: SourceLocation, limit: int) -> None:
        self.value = value
        self.at = at
        self.limit = limit

    def __repr__(self) -> str:
        return f"""Address {self.value} out of range at {self.at}!

Address instruction can only load values within [0, {self.limit}] (15 bits).

{self.generic_error_name}"""
