from typing import List

from scanparse.error.communicator import ErrorRaiser
from scanparse.token import Token
from scanparse.tree.tree import ParseNode
from scanparse.type import Type

from scanparse.error.parser_error import (  # isort:skip
    NestingTooDeepError,
    UnclosedBracketError,
    UnexpectedTokenError,
)


class Parser:
    """Recursive descent parser for the grammar

        EXPR      -> TERM EXPRDASH
        EXPRDASH  -> PLUS TERM EXPRDASH | ε
        TERM      -> FACTOR TERMDASH
        TERMDASH  -> STAR FACTOR TERMDASH | ε
        FACTOR    -> IDENTIFIER | NUMBER | BOPEN EXPR BCLOSE

    with one method per non-terminal.
    """

    def __init__(self, program: str) -> None:
        self.og_program = program
        self.tokens: List[Token] = []
        self.index = 0

    def parse(self, tokens: List[Token]) -> ParseNode:
        """Given a list of Tokens from the scanner, produce the parse tree of an EXPR.

        Parsing stops at the first syntax error, which is raised as a ParserException.
        Tokens that follow a complete EXPR are not consumed.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Scanner(line).scan()`

        Returns:
            ParseNode: The root of the parse tree, labeled EXPR.
        """
        self.tokens = tokens
        self.index = 0
        n_errors = len(ErrorRaiser.ERRORS)
        try:
            return self.parse_expr()
        except RecursionError:
            # The limit may be hit while an error was being communicated, drop it
            del ErrorRaiser.ERRORS[n_errors:]
        # Reported outside of the except clause, once the stack has unwound
        NestingTooDeepError(self.og_program, self.tokens[0].span & self.current().span)

    def current(self) -> Token:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        # Only reachable if the token list lacks its EOF token
        if self.tokens:
            return Token("", Type.EOF, self.tokens[-1].span)
        return Token("", Type.EOF)

    def advance(self) -> None:
        if self.index < len(self.tokens):
            self.index += 1

    def parse_expr(self) -> ParseNode:
        term = self.parse_term()
        exprdash = self.parse_exprdash()
        return ParseNode.with_children("EXPR", [term, exprdash])

    def parse_exprdash(self) -> ParseNode:
        token = self.current()
        if not token.match(Type.PLUS):
            return ParseNode.with_children("EXPRDASH", [ParseNode.epsilon()])

        self.advance()
        term = self.parse_term()
        exprdash = self.parse_exprdash()
        return ParseNode.with_children(
            "EXPRDASH", [ParseNode.leaf(token), term, exprdash]
        )

    def parse_term(self) -> ParseNode:
        factor = self.parse_factor()
        termdash = self.parse_termdash()
        return ParseNode.with_children("TERM", [factor, termdash])

    def parse_termdash(self) -> ParseNode:
        token = self.current()
        if not token.match(Type.STAR):
            return ParseNode.with_children("TERMDASH", [ParseNode.epsilon()])

        self.advance()
        factor = self.parse_factor()
        termdash = self.parse_termdash()
        return ParseNode.with_children(
            "TERMDASH", [ParseNode.leaf(token), factor, termdash]
        )

    def parse_factor(self) -> ParseNode:
        token = self.current()
        match token.type:
            case Type.IDENTIFIER | Type.NUMBER:
                self.advance()
                return ParseNode.with_children("FACTOR", [ParseNode.leaf(token)])

            case Type.BOPEN:
                self.advance()
                expr = self.parse_expr()
                closing = self.current()
                if not closing.match(Type.BCLOSE):
                    UnclosedBracketError(
                        self.og_program, token.span, token.type, closing
                    )
                self.advance()
                return ParseNode.with_children(
                    "FACTOR",
                    [ParseNode.leaf(token), expr, ParseNode.leaf(closing)],
                )

            case _:
                # Includes EOF, ERROR and any misplaced operator or closing bracket
                UnexpectedTokenError(self.og_program, token.span, token)
