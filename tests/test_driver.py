from scanparse import LineResult, parse_line, process
from scanparse.error.parser_error import (
    ParserException,
    UnclosedBracketError,
    UnexpectedTokenError,
)
from scanparse.util import open_file
from tests.test_util import expected_output


def test_valid_file(valid_file: str):
    program: str = open_file(valid_file)
    output = "".join(result.render() for result in process(program))
    assert output == expected_output(valid_file)


def test_blank_lines():
    results = list(process("\n   \n\t\nx\n"))
    assert [result.blank for result in results] == [True, True, True, False]
    assert [result.line_no for result in results] == [1, 2, 3, 4]
    assert "".join(result.render() for result in results[:3]) == "\n\n\n"


def test_empty_program():
    assert list(process("")) == []


def test_fail_fast():
    results = list(process("x\n)\ny\n(z\n"))
    assert len(results) == 2
    assert results[0].tree is not None
    assert isinstance(results[1].error, ParserException)
    assert results[1].line_no == 2
    assert results[1].render() == ""


def test_collect_all_errors():
    results = list(process("x\n)\ny\n(z\n", fail_fast=False))
    assert [result.line_no for result in results] == [1, 2, 3, 4]
    assert results[2].tree is not None

    errors = [result.error.errors[0] for result in results if result.error]
    assert [type(error) for error in errors] == [
        UnexpectedTokenError,
        UnclosedBracketError,
    ]
    # Spans refer to the line within the full program
    assert errors[1].span.start_ln == 4
    assert "-> 4. " in str(results[3].error)


def test_parse_line():
    tree = parse_line("a + 1")
    assert str(tree).splitlines()[:2] == ["EXPR", "TERM EXPRDASH"]


def test_render_tree():
    result = LineResult(1, "7", tree=parse_line("7"))
    assert result.render() == "EXPR\nTERM EXPRDASH\nFACTOR TERMDASH EPSILON\nNUMBER(7) EPSILON\n\n"


def test_separator_line_is_not_blank():
    results = list(process("\x1c\nx\n"))
    assert len(results) == 1
    assert not results[0].blank
    assert isinstance(results[0].error.errors[0], UnexpectedTokenError)


def test_unicode_whitespace_line_is_blank():
    results = list(process("\u2003\u3000\n"))
    assert results[0].blank
    assert results[0].render() == "\n"
