"""Bounded, length-ranked expression lists keyed by value."""
from __future__ import annotations

from .expr import Expr

__all__ = ["SolutionSet", "register", "best_length"]

# value -> distinct expressions, shortest first
SolutionSet = dict[int, list[Expr]]


def register(solutions: SolutionSet, value: int, expr: Expr, keep_top_k: int) -> None:
    """Insert ``expr`` as a candidate for ``value`` in ``solutions``.

    Texts already present are ignored. Otherwise the list is re-sorted by text
    length (stable, so equal lengths keep insertion order) and cut back to the
    ``keep_top_k`` shortest entries.
    """
    exprs = solutions.get(value)
    if exprs is None:
        solutions[value] = [expr]
        return
    if any(e.text == expr.text for e in exprs):
        return
    exprs.append(expr)
    exprs.sort(key=len)
    if len(exprs) > keep_top_k:
        del exprs[keep_top_k:]


def best_length(exprs: list[Expr]) -> int:
    return len(exprs[0])
