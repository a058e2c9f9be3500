import os

from scanparse.util import Span, is_alphabetic, is_whitespace, open_file, split_lines

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


def expected_output(filename: str) -> str:
    return open_file(os.path.splitext(filename)[0] + ".out")


def test_split_lines():
    assert split_lines("") == []
    assert split_lines("a\nb") == ["a", "b"]
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("a\r\n\r\nb\r\n") == ["a", "", "b"]
    assert split_lines("\n") == [""]
    # Form feeds are whitespace within a line, not a line break
    assert split_lines("a\x0cb") == ["a\x0cb"]


def test_span_and():
    left = Span(1, (0, 1))
    right = Span(1, (4, 6))
    assert left & right == Span(1, (0, 6))
    assert right & left == Span(1, (0, 6))

    multiline = Span(1, (3, 4)) & Span(2, (0, 2))
    assert multiline.ln == (1, 2)
    assert multiline.col == (3, 2)
    assert multiline.lines_str == "lines [1-2]"


def test_is_alphabetic():
    assert is_alphabetic("a") and is_alphabetic("π") and is_alphabetic("\u0947")
    assert is_alphabetic("ⅷ")
    assert not is_alphabetic("1") and not is_alphabetic("_") and not is_alphabetic("²")


def test_is_whitespace():
    assert is_whitespace("") and is_whitespace(" \t\x0c\u00a0\u3000\x85")
    assert not is_whitespace("\x1c") and not is_whitespace(" x ")
