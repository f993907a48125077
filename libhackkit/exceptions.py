import re
from abc import abstractmethod


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class HackError(Exception):
    """Parent for all toolchain errors (exceptions)."""

    @abstractmethod
    def __repr__(self) -> str:
        return f"Some internal error occurred ({super().__repr__()}), that is currently not documented"

    def __str__(self) -> str:
        return repr(self)

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"


class InstructionSyntaxError(HackError):
    """Parent for errors of lines that cannot be parsed into an instruction/command."""


class UnknownMnemonicError(HackError):
    """Parent for errors of unsupported instruction classes (mnemonics, segments)."""


class SymbolMisuseError(HackError):
    """Parent for errors of symbol/segment misuse caught before emission."""
