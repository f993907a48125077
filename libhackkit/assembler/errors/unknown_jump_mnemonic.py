from libhackkit.exceptions import UnknownMnemonicError
from libhackkit.source.location import SourceLocation


class UnknownJumpMnemonicError(UnknownMnemonicError):
    def __init__(self, mnemonic: str, at: SourceLocation) -> None:
        self.mnemonic = mnemonic
        self.at = at

    def __repr__(self) -> str:
        return f"""Unknown jump condition '{self.mnemonic}' at {self.at}!

Jump must be one of: JGT, JEQ, JGE, JLT, JNE, JLE, JMP

{self.generic_error_name}"""
