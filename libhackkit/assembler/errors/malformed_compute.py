from libhackkit.exceptions import InstructionSyntaxError
from libhackkit.source.location import SourceLocation


class MalformedComputeError(InstructionSyntaxError):
    def __init__(self, text: str, at: SourceLocation, reason: str) -> None:
        self.text = text
        self.at = at
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Malformed compute instruction '{self.text}' at {self.at}!

{self.reason}
Expected form is 'dest=comp;jump' where 'dest=' and ';jump' are optional.

{self.generic_error_name}"""
