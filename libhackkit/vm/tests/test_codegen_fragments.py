from pathlib import Path

from libhackkit.assembler import assemble_source
from libhackkit.vm import translate_file, translate_source

PUSH_D = ["@SP", "A=M", "M=D", "@SP", "M=M+1"]


def _labels(assembly: list[str]) -> list[str]:
    return [line[1:-1] for line in assembly if line.startswith("(")]


def test_push_constant() -> None:
    assert translate_source("push constant 7") == ["@7", "D=A", *PUSH_D]


def test_add_moves_stack_pointer_once() -> None:
    assert translate_source("add") == ["@SP", "AM=M-1", "D=M", "A=A-1", "M=D+M"]


def test_unary_operates_in_place() -> None:
    assert translate_source("neg") == ["@SP", "A=M-1", "M=-M"]
    assert translate_source("not") == ["@SP", "A=M-1", "M=!M"]


def test_pop_local_through_scratch_register() -> None:
    assert translate_source("pop local 2") == [
        "@LCL",
        "D=M",
        "@2",
        "D=D+A",
        "@R13",
        "M=D",
        "@SP",
        "AM=M-1",
        "D=M",
        "@R13",
        "A=M",
        "M=D",
    ]


def test_fixed_segments_addresses() -> None:
    assert translate_source("pop temp 3")[-2:] == ["@8", "M=D"]
    assert translate_source("pop pointer 0")[-2:] == ["@THIS", "M=D"]
    assert translate_source("pop pointer 1")[-2:] == ["@THAT", "M=D"]
    assert translate_source("push static 4", module_name="Foo")[:2] == ["@Foo.4", "D=M"]


def test_comparison_labels_are_unique() -> None:
    assembly = translate_source("eq\neq\ngt\nlt")
    labels = _labels(assembly)
    assert len(set(labels)) == len(labels)
    assert "Main$EQ_TRUE$0" in labels
    assert "Main$EQ_TRUE$1" in labels
    assert "Main$GT_TRUE$2" in labels
    assert "Main$LT_END$3" in labels


def test_labels_scoped_by_function() -> None:
    source = """
    label TOP
    function Foo.a 0
    label LOOP
    goto LOOP
    function Foo.b 0
    label LOOP
    if-goto LOOP
    """
    assembly = translate_source(source, module_name="Foo")
    assert _labels(assembly) == ["Foo$TOP", "Foo.a", "Foo.a$LOOP", "Foo.b", "Foo.b$LOOP"]
    assert "@Foo.a$LOOP" in assembly
    assert "@Foo.b$LOOP" in assembly


def test_function_initializes_locals() -> None:
    assembly = translate_source("function Foo.bar 3")
    assert assembly[0] == "(Foo.bar)"
    assert assembly.count("M=0") == 3
    assert assembly.count("M=M+1") == 3


def test_call_return_address_labels_are_unique() -> None:
    source = "function Foo.main 0\ncall Foo.f 0\ncall Foo.f 1\ncall Foo.g 2"
    labels = _labels(translate_source(source))
    assert labels == ["Foo.main", "Foo.main$ret$0", "Foo.main$ret$1", "Foo.main$ret$2"]


def test_bootstrap_prepended() -> None:
    assembly = translate_source("function Sys.init 0", bootstrap=True)
    assert assembly[:4] == ["@256", "D=A", "@SP", "M=D"]
    assert "@Sys.init" in assembly
    assert translate_source("function Sys.init 0")[0] == "(Sys.init)"


def test_annotate_emits_commands_as_comments() -> None:
    assembly = translate_source("push constant 1\nadd // sum", annotate=True)
    assert assembly[0] == "// push constant 1"
    assert "// add" in assembly
    assert assemble_source("\n".join(assembly)).words == assemble_source(
        "\n".join(translate_source("push constant 1\nadd")),
    ).words


def test_generated_labels_never_collide_with_user_labels() -> None:
    source = """
    function f 0
    call g 0
    eq
    label ret.0
    label ret
    label EQ_TRUE
    return
    function Main.EQ_TRUE.0 0
    push constant 2
    return
    """
    assembly = translate_source(source)
    labels = _labels(assembly)
    assert len(set(labels)) == len(labels)
    assert {"f$ret$0", "f$ret.0", "f$ret", "Main$EQ_TRUE$0", "f$EQ_TRUE"} <= set(labels)
    assert assemble_source("\n".join(assembly)).words


def test_module_name_scope_separator_replaced() -> None:
    assert translate_source("push static 1", module_name="a$b")[0] == "@a_b.1"


def test_translate_file_scopes_static_to_sanitized_stem(tmp_path: Path) -> None:
    path = tmp_path / "my-module.vm"
    path.write_text("push constant 1\npop static 0\n", encoding="UTF-8")
    assembly = translate_file(path)
    assert "@my_module.0" in assembly


def test_every_command_produces_valid_assembly() -> None:
    source = """
    function Main.main 2
    push constant 10
    push argument 0
    push local 1
    push this 2
    push that 3
    push temp 4
    push pointer 1
    push static 5
    add
    sub
    neg
    eq
    gt
    lt
    and
    or
    not
    pop argument 0
    pop local 1
    pop this 2
    pop that 3
    pop temp 4
    pop pointer 0
    pop static 5
    label LOOP
    if-goto LOOP
    goto LOOP
    call Main.main 1
    return
    """
    assembly = translate_source(source, bootstrap=True, annotate=True)
    result = assemble_source("\n".join(assembly))
    assert result.words
    assert "Main.5" in result.symbols
