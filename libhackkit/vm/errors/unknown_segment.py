from libhackkit.exceptions import UnknownMnemonicError
from libhackkit.source.location import SourceLocation


class UnknownSegmentError(UnknownMnemonicError):
    def __init__(self, segment: str, at: SourceLocation) -> None:
        self.segment = segment
        self.at = at

    def __repr__(self) -> str:
        return f"""Unknown memory segment '{self.segment}' at {self.at}!

Segment must be one of: argument, local, static, constant, this, that, pointer, temp

{self.generic_error_name}"""
