"""Tagged expression values produced by the interval search.

Every candidate carries its :class:`ExprKind` from the moment it is built, so
deciding whether it needs parentheses inside a parent expression is a lookup
on the tag rather than a pattern match on the text.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["ExprKind", "Expr", "combine"]


class ExprKind(Enum):
    LITERAL = "literal"
    NEGATIVE_LITERAL = "negative_literal"
    COMPOSITE = "composite"


@dataclass(frozen=True, slots=True)
class Expr:
    """Expression text plus the syntactic kind it was built as."""

    text: str
    kind: ExprKind

    @classmethod
    def literal(cls, digits: str) -> "Expr":
        return cls(digits, ExprKind.LITERAL)

    @classmethod
    def negative(cls, digits: str) -> "Expr":
        return cls(f"-{digits}", ExprKind.NEGATIVE_LITERAL)

    def wrapped(self) -> str:
        """Return the text as it must appear as an operand of a binary operator.

        Bare non-negative literals stay as they are; negative literals and
        composites are parenthesized so precedence is always explicit.
        """
        if self.kind is ExprKind.LITERAL:
            return self.text
        return f"({self.text})"

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text


def combine(left: Expr, op: str, right: Expr) -> Expr:
    """Join two operands with ``op`` into a composite expression."""
    return Expr(f"{left.wrapped()}{op}{right.wrapped()}", ExprKind.COMPOSITE)
