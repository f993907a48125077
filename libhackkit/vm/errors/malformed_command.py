from libhackkit.exceptions import InstructionSyntaxError
from libhackkit.source.location import SourceLocation


class MalformedCommandError(InstructionSyntaxError):
    def __init__(self, text: str, at: SourceLocation, reason: str) -> None:
        self.text = text
        self.at = at
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Malformed command '{self.text}' at {self.at}!

{self.reason}

{self.generic_error_name}"""
