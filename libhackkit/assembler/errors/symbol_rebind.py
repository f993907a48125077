from libhackkit.exceptions import SymbolMisuseError
from libhackkit.source.location import SourceLocation


class SymbolRebindError(SymbolMisuseError):
    def __init__(
        self,
        name: str,
        bound_to: int,
        rebind_to: int,
        at: SourceLocation | None = None,
    ) -> None:
        self.name = name
        self.bound_to = bound_to
        self.rebind_to = rebind_to
        self.at = at

    def __repr__(self) -> str:
        at = f" at {self.at}" if self.at else ""
        return f"""Symbol '{self.name}' is already bound{at}!

Symbol is bound to address {self.bound_to} and cannot be rebound to {self.rebind_to}.
Did you declare same label twice?

{self.generic_error_name}"""
