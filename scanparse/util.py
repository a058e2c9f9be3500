from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import regex

# Unicode character properties, which `str.isalpha` and `str.isspace` only approximate
ALPHABETIC = regex.compile(r"\p{Alphabetic}")
WHITE_SPACE = regex.compile(r"\p{White_Space}*")


@dataclass
class Span:
    ln: Tuple[int, int]
    col: Tuple[int, int]

    @property
    def start_ln(self) -> int:
        return self.ln[0]

    @property
    def end_ln(self) -> int:
        return self.ln[1]

    @property
    def start_col(self) -> int:
        return self.col[0]

    @property
    def end_col(self) -> int:
        return self.col[1]

    @property
    def multiline(self) -> bool:
        return self.start_ln != self.end_ln

    @property
    def lines_str(self) -> str:
        if self.multiline:
            return f"lines [{self.start_ln}-{self.end_ln}]"
        return f"line [{self.start_ln}]"

    @classmethod
    def default(cls):
        return cls(-1, (0, -1))

    def __init__(self, line_no: int | Tuple[int, int], span: Tuple[int, int]) -> None:
        if isinstance(line_no, int):
            self.ln = (line_no, line_no)
        else:
            self.ln = line_no
        self.col = span

    def __and__(self, other: Span) -> Span:
        # Determine the correct columns based on the starting line
        if self.start_ln < other.start_ln:
            col = (self.start_col, other.end_col)
        elif self.start_ln > other.start_ln:
            col = (other.start_col, self.end_col)
        else:
            col = (
                min(self.start_col, other.start_col),
                max(self.end_col, other.end_col),
            )

        return Span(
            line_no=(
                min(self.start_ln, other.start_ln),
                max(self.end_ln, other.end_ln),
            ),
            span=col,
        )


def is_alphabetic(char: str) -> bool:
    return ALPHABETIC.fullmatch(char) is not None


def is_whitespace(text: str) -> bool:
    """Whether `text` consists of Unicode White_Space characters only. True for an empty string."""
    return WHITE_SPACE.fullmatch(text) is not None


def split_lines(program: str) -> List[str]:
    """Split a program into lines the way text files are read.

    Only `\\n` separates lines, a single trailing `\\r` is dropped from each line,
    and a final newline does not introduce an extra empty line. Unlike
    `str.splitlines`, form feeds and other exotic separators stay inside the line,
    where the scanner treats them as whitespace.

    Args:
        program (str): The full input text.

    Returns:
        List[str]: The lines of the program, without line terminators.
    """
    if not program:
        return []
    lines = program.split("\n")
    if program.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"


def open_file(filename: str) -> str:
    # Line endings are left untouched, `split_lines` deals with them
    with open(filename, "r", encoding="utf8", newline="") as f:
        return f.read()
