from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterator, List, Optional

from scanparse.token import Token
from scanparse.util import Span

EPSILON = "EPSILON"


@dataclass
class ParseNode:
    label: str
    children: List[ParseNode] = field(default_factory=list)
    span: Optional[Span] = field(repr=False, kw_only=True, compare=False, default=None)

    @classmethod
    def leaf(cls, token: Token) -> ParseNode:
        return cls(token.label, span=token.span)

    @classmethod
    def epsilon(cls) -> ParseNode:
        return cls(EPSILON)

    @classmethod
    def with_children(cls, label: str, children: List[ParseNode]) -> ParseNode:
        # The span covers the spans of all children that consumed input
        spans = [child.span for child in children if child.span is not None]
        span = reduce(lambda left, right: left & right, spans) if spans else None
        return cls(label, children, span=span)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_epsilon(self) -> bool:
        return self.label == EPSILON

    def __str__(self) -> str:
        from scanparse.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def iter_fields(self) -> Iterator[tuple]:
        yield "children", self.children

    def leaves(self) -> Iterator[ParseNode]:
        """Yield the leaves of this tree from left to right."""
        from scanparse.tree.visitor import LeafVisitor

        yield from LeafVisitor().visit(self)
