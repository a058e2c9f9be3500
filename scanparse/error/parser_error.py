from dataclasses import dataclass

from scanparse.error.error import CompilerException, UnrecoverableError
from scanparse.token import Token
from scanparse.type import Type

# What may start a FACTOR, as a readable enumeration
FACTOR_START = f"{Type.IDENTIFIER.article_str()}, {Type.NUMBER.article_str()} or {str(Type.BOPEN)}"


class ParserException(CompilerException):
    pass


class ParserError(UnrecoverableError):
    stage = ParserException

    def describe(self, token: Token) -> str:
        if token.type == Type.ERROR:
            return f"{token.type.article_str()} {self.chars(token.span)!r}"
        return token.type.article_str()


@dataclass
class UnexpectedTokenError(ParserError):
    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Expected {FACTOR_START} on {self.span.lines_str} column {self.span.start_col + 1}.",
            f"Got {self.describe(self.got)} instead.",
            class_name="SyntaxError",
        )


@dataclass
class UnclosedBracketError(ParserError):
    bracket: Type
    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"The {str(self.bracket)} bracket on {self.span.lines_str} was never closed.",
            f"Expected {Type.BCLOSE.article_str()}, but got {self.describe(self.got)} instead on {self.got.span.lines_str} column {self.got.span.start_col + 1}.",
            class_name="BracketError",
        )


class NestingTooDeepError(ParserError):
    def __str__(self) -> str:
        return self.create_error(
            f"The expression on {self.span.lines_str} is nested too deeply to be parsed.",
            class_name="SyntaxError",
        )
