from libhackkit.exceptions import InstructionSyntaxError
from libhackkit.source.location import SourceLocation


class MalformedLabelError(InstructionSyntaxError):
    def __init__(self, text: str, at: SourceLocation) -> None:
        self.text = text
        self.at = at

    def __repr__(self) -> str:
        return f"""Malformed label declaration '{self.text}' at {self.at}!

Expected '(' followed by symbol name and closing ')'.
Did you forgot to close label parenthesis?

{self.generic_error_name}"""
