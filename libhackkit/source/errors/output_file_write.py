from pathlib import Path

from libhackkit.exceptions import HackError


class OutputFileWriteError(HackError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to write output file '{self.path}'!

Reason: {self.reason}
Partially written output (if any) was removed.

{self.generic_error_name}"""
