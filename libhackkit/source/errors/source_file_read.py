from pathlib import Path

from libhackkit.exceptions import HackError


class SourceFileReadError(HackError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to read source file '{self.path}'!

Reason: {self.reason}
No output was produced.

{self.generic_error_name}"""
