from libhackkit.exceptions import SymbolMisuseError
from libhackkit.source.location import SourceLocation


class PopIntoConstantSegmentError(SymbolMisuseError):
    def __init__(self, at: SourceLocation) -> None:
        self.at = at

    def __repr__(self) -> str:
        return f"""Tried to pop into 'constant' segment at {self.at}!

'constant' segment is virtual and can only be pushed from.

{self.generic_error_name}"""
