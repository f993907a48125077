from libhackkit.exceptions import UnknownMnemonicError
from libhackkit.source.location import SourceLocation


class UnknownCompMnemonicError(UnknownMnemonicError):
    def __init__(self, mnemonic: str, at: SourceLocation) -> None:
        self.mnemonic = mnemonic
        self.at = at

    def __repr__(self) -> str:
        return f"""Unknown computation '{self.mnemonic}' at {self.at}!

Computation must be one of the 28 supported ALU expressions (e.g 'D+1', 'M-D', 'D|A').
Operands order matters: 'A+D' is not an alias for 'D+A'.

{self.generic_error_name}"""
