from __future__ import annotations

from dataclasses import dataclass, field

from scanparse.type import Type
from scanparse.util import Span


@dataclass
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, default_factory=Span.default)

    def __post_init__(self) -> None:
        if not isinstance(self.type, Type):
            self.type = Type.to_type(self.type)

    @property
    def label(self) -> str:
        """The label of the parse tree leaf for this token, e.g. `IDENTIFIER(x)` or `PLUS`."""
        if self.type in (Type.IDENTIFIER, Type.NUMBER):
            return f"{self.type.name}({self.text})"
        return self.type.name

    def match(self, other_type: Type) -> bool:
        return self.type == other_type

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Token):
            return False
        return self.text == __o.text and self.type == __o.type

    def __str__(self) -> str:
        return self.text
