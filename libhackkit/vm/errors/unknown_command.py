from collections.abc import Iterable

from libhackkit.exceptions import UnknownMnemonicError
from libhackkit.source.location import SourceLocation


class UnknownCommandError(UnknownMnemonicError):
    def __init__(
        self,
        mnemonic: str,
        at: SourceLocation,
        commands_available: Iterable[str],
    ) -> None:
        self.mnemonic = mnemonic
        self.at = at
        self.commands_available = commands_available

    def __repr__(self) -> str:
        return f"""Unknown command '{self.mnemonic}' at {self.at}!

Available commands: {", ".join(self.commands_available)}

{self.generic_error_name}"""
