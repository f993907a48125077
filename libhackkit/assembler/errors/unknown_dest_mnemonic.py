from libhackkit.exceptions import UnknownMnemonicError
from libhackkit.source.location import SourceLocation


class UnknownDestMnemonicError(UnknownMnemonicError):
    def __init__(self, mnemonic: str, at: SourceLocation) -> None:
        self.mnemonic = mnemonic
        self.at = at

    def __repr__(self) -> str:
        return f"""Unknown destination '{self.mnemonic}' at {self.at}!

Destination must be one of: M, D, MD, A, AM, AD, AMD

{self.generic_error_name}"""
