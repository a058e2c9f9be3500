import pytest

from scanparse.__main__ import USAGE, main


@pytest.mark.parametrize("argv", [[], ["a.txt", "b.txt"]])
def test_usage(argv, capsys):
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.out == USAGE + "\n"
    assert captured.err == ""


def test_valid(write_program, capsys):
    path = write_program("x+y\n\n42\n")
    assert main([path]) == 0

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "EXPR",
        "TERM EXPRDASH",
        "FACTOR TERMDASH PLUS TERM EXPRDASH",
        "IDENTIFIER(x) EPSILON FACTOR TERMDASH EPSILON",
        "IDENTIFIER(y) EPSILON",
        "",
        "",
        "EXPR",
        "TERM EXPRDASH",
        "FACTOR TERMDASH EPSILON",
        "NUMBER(42) EPSILON",
        "",
    ]
    assert captured.err == ""


def test_syntax_error(write_program, capsys):
    path = write_program("7\n(1+2\nx\n")
    assert main([path]) == 1

    captured = capsys.readouterr()
    # Lines before the error are printed, nothing after it
    assert captured.out == "EXPR\nTERM EXPRDASH\nFACTOR TERMDASH EPSILON\nNUMBER(7) EPSILON\n\n"
    assert "BracketError" in captured.err and "-> 2. " in captured.err


def test_unexpected_token(write_program, capsys):
    path = write_program(")\n")
    assert main([path]) == 1
    assert "SyntaxError" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 2
    assert "Failed to open file" in capsys.readouterr().err


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    assert main([str(path)]) == 2
    assert "Failed to open file" in capsys.readouterr().err
