from string import digits
from typing import Callable, List, Optional

from scanparse.token import Token
from scanparse.type import Type
from scanparse.util import Span, is_alphabetic, is_whitespace


class Scanner:
    def __init__(self, line: str, line_no: int = 1) -> None:
        self.line = line
        self.line_no = line_no
        self.index = 0

    def peek(self) -> Optional[str]:
        if self.index < len(self.line):
            return self.line[self.index]
        return None

    def advance(self) -> Optional[str]:
        char = self.peek()
        if char is not None:
            self.index += 1
        return char

    def skip_whitespace(self) -> None:
        while (char := self.peek()) is not None and is_whitespace(char):
            self.advance()

    def take_while(self, keep: Callable[[str], bool]) -> None:
        while (char := self.peek()) is not None and keep(char):
            self.advance()

    def next_token(self) -> Optional[Token]:
        """Scan the next token, starting at the current position in the line.

        Whitespace is skipped first. Characters that cannot start a token are not
        rejected here: they become a single ERROR token, which the parser reports.

        Returns:
            Optional[Token]: The next token, or None if the end of the line was reached.
        """
        self.skip_whitespace()
        start = self.index
        char = self.advance()
        if char is None:
            return None

        match char:
            case "+" | "*" | "(" | ")":
                token_type = Type(char)
            case _ if char in digits:
                # Only ASCII digits, `str.isdigit` also accepts e.g. superscripts
                self.take_while(lambda c: c in digits)
                token_type = Type.NUMBER
            case _ if is_alphabetic(char):
                # Identifiers consist of letters only, so "ab12" is "ab" followed by "12"
                self.take_while(is_alphabetic)
                token_type = Type.IDENTIFIER
            case _:
                token_type = Type.ERROR

        span = Span(self.line_no, (start, self.index))
        match token_type:
            case Type.IDENTIFIER | Type.NUMBER:
                text = self.line[start : self.index]
            case Type.ERROR:
                text = ""
            case _:
                text = token_type.value
        return Token(text, token_type, span)

    def tokenize_line(self) -> List[Token]:
        """Extract all tokens from the line passed to `Scanner(line)`.

        The line is scanned in full before anything is returned, and the list is always
        terminated by exactly one EOF token, positioned at the end of the line.
        Scanning never fails.

        Returns:
            List[Token]: A list of Token instances, ending with an EOF token.
        """
        tokens = []
        while (token := self.next_token()) is not None:
            tokens.append(token)
        tokens.append(
            Token("", Type.EOF, Span(self.line_no, (len(self.line), len(self.line))))
        )
        return tokens

    def scan(self) -> List[Token]:
        return self.tokenize_line()
