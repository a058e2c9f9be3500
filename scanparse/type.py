from enum import Enum


class Type(Enum):
    IDENTIFIER = "identifier"
    NUMBER = "number"
    PLUS = "+"
    STAR = "*"
    BOPEN = "("
    BCLOSE = ")"
    ERROR = "invalid character"
    EOF = "end of line"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.IDENTIFIER | Type.NUMBER | Type.ERROR | Type.EOF:
                return self.value
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.IDENTIFIER | Type.ERROR:
                return f"an {self}"
            case Type.EOF:
                return str(self)
            case _:
                return f"a {self}"
