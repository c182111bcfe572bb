"""Command-line driver tests."""

import pytest

import slc


@pytest.fixture
def source(tmp_path):
    def _write(text: str, name: str = "prog.sl"):
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write


def test_compiles_to_stdout(source, capsys):
    slc.main([str(source("int x; x = 5;"))])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "// SimpleLang -> assembly"
    assert "mov M A 0x10" in out
    assert out[-1] == "hlt"


def test_compiles_to_file(source, tmp_path, capsys):
    target = tmp_path / "prog.asm"
    slc.main([str(source("int x;")), str(target)])
    assert capsys.readouterr().out == ""
    assert target.read_text().splitlines()[-3:] == ["ldi A 0", "mov M A 0x10", "hlt"]


def test_ast_flag(source, capsys):
    slc.main([str(source("int x;")), "--ast"])
    out = capsys.readouterr().out
    assert out.startswith("=== Parsed AST ===\nProgram (stmts=1)\n  Decl: int x (line 1)\n")
    assert "=== Generated assembly (stdout) ===" in out


def test_syntax_error_exits(source, tmp_path, capsys):
    target = tmp_path / "prog.asm"
    with pytest.raises(SystemExit) as excinfo:
        slc.main([str(source("int x int y;")), str(target)])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "[ Fatal Error ]" in err
    assert "Syntax error (line 1): Expected ';' after declaration. Got token 'int'" in err
    assert not target.exists()


def test_semantic_error_exits(source, capsys):
    with pytest.raises(SystemExit) as excinfo:
        slc.main([str(source("int x;\ny = 1;"))])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "undeclared variable 'y'" in captured.err
    assert "(line 2)" in captured.err
    assert captured.out == ""


def test_missing_input_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        slc.main([str(tmp_path / "absent.sl")])
    assert excinfo.value.code == 1
    assert "cannot read input file" in capsys.readouterr().err


def test_wrong_extension(source, capsys):
    with pytest.raises(SystemExit) as excinfo:
        slc.main([str(source("int x;", name="prog.txt"))])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "expected '.sl' file" in err
    assert "error backlog at checkpoint" in err


def test_long_expression_with_ast_flag(source, capsys):
    slc.main([str(source("int x; x = " + " + ".join(["2"] * 1500) + ";")), "--ast"])
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "hlt"
    assert out.count("add") == 1499
