from pathlib import Path

import pytest

from hackkit.cli.infer import infer_output_filename
from hackkit.cli.main import cli_entry_point, cli_get_program_name
from libhackkit.assembler.errors import UnknownCompMnemonicError

ADD_PROGRAM = "@2\nD=A\n@3\nD=D+A\n@0\nM=D\n"
ADD_PROGRAM_BINARY = [
    "0000000000000010",
    "1110110000010000",
    "0000000000000011",
    "1110000010010000",
    "0000000000000000",
    "1110001100001000",
]


def _run_cli(*argv: str | Path, goal: str | None = None) -> int | str | None:
    with pytest.raises(SystemExit) as exit_info:
        cli_entry_point(prog="hackkit", goal=goal, argv=[str(arg) for arg in argv])
    return exit_info.value.code


def test_assemble_goal_writes_binary(tmp_path: Path) -> None:
    source = tmp_path / "add.asm"
    source.write_text(ADD_PROGRAM, encoding="UTF-8")

    assert _run_cli(source, goal="assemble") == 0
    output = tmp_path / "add.hack"
    assert output.read_text(encoding="UTF-8").splitlines() == ADD_PROGRAM_BINARY


def test_goal_inferred_from_suffix(tmp_path: Path) -> None:
    source = tmp_path / "add.asm"
    source.write_text(ADD_PROGRAM, encoding="UTF-8")
    assert _run_cli(source) == 0
    assert (tmp_path / "add.hack").exists()

    vm_source = tmp_path / "Seven.vm"
    vm_source.write_text("push constant 7\n", encoding="UTF-8")
    assert _run_cli(vm_source) == 0
    assert (tmp_path / "Seven.asm").read_text(encoding="UTF-8").splitlines()[:2] == ["@7", "D=A"]


def test_explicit_output_path(tmp_path: Path) -> None:
    source = tmp_path / "add.asm"
    source.write_text(ADD_PROGRAM, encoding="UTF-8")
    output = tmp_path / "custom.bin"

    assert _run_cli(source, "-o", output, goal="assemble") == 0
    assert output.exists()
    assert not (tmp_path / "add.hack").exists()


def test_assemble_error_leaves_no_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "broken.asm"
    source.write_text("@1\nD=X\n", encoding="UTF-8")

    assert _run_cli(source, goal="assemble") == 1
    assert not (tmp_path / "broken.hack").exists()
    assert "[ERROR]" in capsys.readouterr().err


def test_translate_error_leaves_no_output(tmp_path: Path) -> None:
    source = tmp_path / "Broken.vm"
    source.write_text("push constant 1\npop constant 0\n", encoding="UTF-8")

    assert _run_cli(source, goal="translate") == 1
    assert not (tmp_path / "Broken.asm").exists()


def test_unfriendly_errors_are_reraised(tmp_path: Path) -> None:
    source = tmp_path / "broken.asm"
    source.write_text("D=X\n", encoding="UTF-8")

    with pytest.raises(UnknownCompMnemonicError):
        cli_entry_point(
            prog="hackkit",
            goal="assemble",
            argv=[str(source), "--no-user-friendly-errors"],
        )


def test_missing_source_file(tmp_path: Path) -> None:
    assert _run_cli(goal="assemble") == 1
    assert _run_cli(tmp_path / "absent.asm", goal="assemble") == 1


def test_unknown_suffix_without_goal(tmp_path: Path) -> None:
    source = tmp_path / "program.txt"
    source.write_text(ADD_PROGRAM, encoding="UTF-8")
    assert _run_cli(source) == 1


def test_extra_arguments_rejected(tmp_path: Path) -> None:
    assert _run_cli(tmp_path / "a.asm", tmp_path / "b.asm", goal="assemble") == 2


def test_output_must_not_overwrite_input(tmp_path: Path) -> None:
    source = tmp_path / "add.asm"
    source.write_text(ADD_PROGRAM, encoding="UTF-8")
    assert _run_cli(source, "-o", source, goal="assemble") == 1
    assert source.read_text(encoding="UTF-8") == ADD_PROGRAM


def test_version_goal(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run_cli("--version") == 0
    assert "[Hack toolchain]" in capsys.readouterr().out


def test_display_symbols(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "loop.asm"
    source.write_text("@i\nM=0\n(LOOP)\n@LOOP\n0;JMP\n", encoding="UTF-8")

    assert _run_cli(source, "--display-symbols", goal="assemble") == 0
    assert capsys.readouterr().out.splitlines() == ["    2 LOOP", "   16 i"]


def test_reserved_label_warns(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "reserved.asm"
    source.write_text("(SCREEN)\n@SCREEN\n", encoding="UTF-8")

    assert _run_cli(source, goal="assemble") == 0
    assert "[WARNING]" in capsys.readouterr().err
    assert (tmp_path / "reserved.hack").read_text(encoding="UTF-8") == "0100000000000000\n"


def test_translate_flags(tmp_path: Path) -> None:
    source = tmp_path / "Sys.vm"
    source.write_text("function Sys.init 0\npush constant 7\n", encoding="UTF-8")

    assert _run_cli(source, "--bootstrap", "--annotate", goal="translate") == 0
    lines = (tmp_path / "Sys.asm").read_text(encoding="UTF-8").splitlines()
    assert lines[0] == "// bootstrap"
    assert "@Sys.init" in lines
    assert "// push constant 7" in lines


def test_assembler_flags_not_accepted_by_translator(tmp_path: Path) -> None:
    assert _run_cli(tmp_path / "Main.vm", "--display-symbols", goal="translate") == 2


@pytest.mark.parametrize(
    ("source", "goal", "expected"),
    [
        (Path("Prog.asm"), "assemble", Path("Prog.hack")),
        (Path("dir/Prog.vm"), "translate", Path("dir/Prog.asm")),
        (Path("Prog.hack"), "assemble", Path("Prog.hack.hack")),
        (Path(), "translate", Path("out.asm")),
    ],
)
def test_infer_output_filename(source: Path, goal: str, expected: Path) -> None:
    assert infer_output_filename(source, goal) == expected


def test_verbose_reports_goal_timing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "add.asm"
    source.write_text(ADD_PROGRAM, encoding="UTF-8")

    assert _run_cli(source, "--verbose", goal="assemble") == 0
    err = capsys.readouterr().err
    assert "[INFO] Performing a goal took" in err
    assert "[INFO] Assembler (two passes) took" in err


def test_program_name(monkeypatch: pytest.MonkeyPatch) -> None:
    assert cli_get_program_name(override="assembler") == "assembler"

    monkeypatch.setattr("sys.argv", ["/usr/local/bin/vmtranslator", "Main.vm"])
    assert cli_get_program_name() == "vmtranslator"

    monkeypatch.setattr("sys.argv", ["/site-packages/hackkit/__main__.py"])
    assert cli_get_program_name() == "hackkit"
