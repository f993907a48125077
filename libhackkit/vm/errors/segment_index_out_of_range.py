from libhackkit.exceptions import SymbolMisuseError
from libhackkit.source.location import SourceLocation


class SegmentIndexOutOfRangeError(SymbolMisuseError):
    def __init__(
        self,
        segment: str,
        index: int,
        limit: int,
        at: SourceLocation,
    ) -> None:
        self.segment = segment
        self.index = index
        self.limit = limit
        self.at = at

    def __repr__(self) -> str:
        return f"""Index {self.index} is out of range for segment '{self.segment}' at {self.at}!

Expected index within [0, {self.limit}] for that segment.

{self.generic_error_name}"""
