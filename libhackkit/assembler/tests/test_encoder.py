import pytest

from libhackkit.assembler.encoder import (
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    encode_address,
    encode_compute,
)
from libhackkit.assembler.errors import (
    AddressOutOfRangeError,
    UnknownCompMnemonicError,
)
from libhackkit.source.location import SourceLocation

AT = SourceLocation.toolchain()


def test_tables_sizes() -> None:
    assert len(COMP_TABLE) == 28
    assert len(DEST_TABLE) == 8
    assert len(JUMP_TABLE) == 8


def test_tables_are_bijective() -> None:
    assert len(set(COMP_TABLE.values())) == len(COMP_TABLE)
    assert len(set(DEST_TABLE.values())) == len(DEST_TABLE)
    assert len(set(JUMP_TABLE.values())) == len(JUMP_TABLE)

    assert all(len(code) == 7 for code in COMP_TABLE.values())
    assert {len(code) for code in (*DEST_TABLE.values(), *JUMP_TABLE.values())} == {3}


def test_comp_memory_operand_selects_a_bit() -> None:
    for mnemonic, code in COMP_TABLE.items():
        assert (code[0] == "1") == ("M" in mnemonic)


def test_compute_decodes_back_into_fields() -> None:
    comp_by_code = {code: mnemonic for mnemonic, code in COMP_TABLE.items()}
    dest_by_code = {code: mnemonic for mnemonic, code in DEST_TABLE.items()}
    jump_by_code = {code: mnemonic for mnemonic, code in JUMP_TABLE.items()}

    word = encode_compute("D-M", "AM", "JLE", at=AT)
    assert len(word) == 16
    assert word[:3] == "111"
    assert comp_by_code[word[3:10]] == "D-M"
    assert dest_by_code[word[10:13]] == "AM"
    assert jump_by_code[word[13:]] == "JLE"


@pytest.mark.parametrize(
    ("fields", "word"),
    [
        (("D+A", "D", None), "1110000010010000"),
        (("D", "M", None), "1110001100001000"),
        (("0", None, "JMP"), "1110101010000111"),
        (("M+1", "AM", None), "1111110111101000"),
        (("-1", "M", None), "1110111010001000"),
        (("D", None, "JNE"), "1110001100000101"),
    ],
)
def test_encode_compute(fields: tuple[str, str | None, str | None], word: str) -> None:
    comp, dest, jump = fields
    assert encode_compute(comp, dest, jump, at=AT) == word


def test_encode_compute_unknown_comp() -> None:
    with pytest.raises(UnknownCompMnemonicError):
        encode_compute("D*A", None, None, at=AT)


@pytest.mark.parametrize("value", [0, 1, 2, 16, 16384, 32767])
def test_encode_address_recovers_value(value: int) -> None:
    word = encode_address(value, at=AT)
    assert len(word) == 16
    assert word[0] == "0"
    assert int(word[1:], 2) == value


def test_encode_address_out_of_range() -> None:
    with pytest.raises(AddressOutOfRangeError):
        encode_address(32768, at=AT)
