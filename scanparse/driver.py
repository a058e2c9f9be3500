from dataclasses import dataclass
from typing import Iterator, Optional

from scanparse.error.parser_error import ParserException
from scanparse.parser.parser import Parser
from scanparse.scanner.scanner import Scanner
from scanparse.tree.tree import ParseNode
from scanparse.util import is_whitespace, split_lines


@dataclass
class LineResult:
    line_no: int
    line: str
    tree: Optional[ParseNode] = None
    error: Optional[ParserException] = None

    @property
    def blank(self) -> bool:
        return self.tree is None and self.error is None

    def render(self) -> str:
        """The output for this line: the tree level by level followed by an empty line,
        a single empty line for a blank input line, and nothing for a failed line."""
        if self.tree is not None:
            return f"{self.tree}\n\n"
        if self.error is None:
            return "\n"
        return ""


def parse_line(line: str, line_no: int = 1, program: Optional[str] = None) -> ParseNode:
    """Scan and parse a single non-blank line.

    Args:
        line (str): The line to parse.
        line_no (int, optional): The 1-based position of the line in `program`. Defaults to 1.
        program (Optional[str], optional): The full program, used for error messages.
            Defaults to `line` itself.

    Returns:
        ParseNode: The EXPR root of the parse tree. A ParserException is raised on
            syntax errors.
    """
    tokens = Scanner(line, line_no).scan()
    parser = Parser(line if program is None else program)
    return parser.parse(tokens)


def process(program: str, fail_fast: bool = True) -> Iterator[LineResult]:
    """Parse every line of `program`, yielding one LineResult per line.

    Blank and whitespace-only lines are not scanned at all. A line with a syntax error
    yields a LineResult carrying the ParserException; with `fail_fast`, no further lines
    are processed after that.

    Args:
        program (str): The input text, containing one expression per line.
        fail_fast (bool, optional): Whether to stop at the first failing line. Defaults to True.

    Yields:
        Iterator[LineResult]: The result of each processed line, in order.
    """
    for line_no, line in enumerate(split_lines(program), start=1):
        if is_whitespace(line):
            yield LineResult(line_no, line)
            continue

        try:
            tree = parse_line(line, line_no, program)
        except ParserException as exc:
            yield LineResult(line_no, line, error=exc)
            if fail_fast:
                return
            continue

        yield LineResult(line_no, line, tree=tree)
