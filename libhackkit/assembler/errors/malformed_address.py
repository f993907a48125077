from libhackkit.exceptions import InstructionSyntaxError
from libhackkit.source.location import SourceLocation


class MalformedAddressError(InstructionSyntaxError):
    def __init__(self, text: str, at: SourceLocation) -> None:
        self.text = text
        self.at = at

    def __repr__(self) -> str:
        return f"""Malformed address instruction '{self.text}' at {self.at}!

Expected '@' followed by non-negative decimal integer or symbol name.
Symbols consist of letters, digits, '_', '.', '$', ':' and must not start with digit.

{self.generic_error_name}"""
