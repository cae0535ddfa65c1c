"""SymPy-backed checks that generated aliases mean what they claim.

Aliases are restricted to digits, ``+ - * /`` and parentheses before being
handed to :func:`sympy.parsing.sympy_parser.parse_expr`, and arithmetic is
exact, so ``7/2`` is a rational rather than a float and never passes as an
integer.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .assembler import fallback_one

__all__ = [
    "AliasMismatch",
    "evaluate_alias",
    "digits_in_order",
    "verify_aliases",
]

_ALIAS_CHARS_RE = re.compile(r"[0-9+\-*/()]+")
# leading zeros of an integer literal, keeping a lone 0
_LEADING_ZEROS_RE = re.compile(r"\b0+(?=[0-9])")


@dataclass
class AliasMismatch:
    value: int
    alias: str
    reason: str
    evaluated: Any = None


def _normalize(text: str) -> str:
    # Python's tokenizer rejects literals like 05
    return _LEADING_ZEROS_RE.sub("", text)


def evaluate_alias(text: str) -> tuple[bool, Any]:  # noqa: ANN401 - generic
    """Evaluate an alias exactly.

    Returns ``(True, int)`` when the expression is well formed and its exact
    value is an integer, ``(False, value)`` for a non-integer rational and
    ``(False, None)`` when it cannot be evaluated (bad characters, syntax,
    division by zero).
    """
    if not _ALIAS_CHARS_RE.fullmatch(text):
        return False, None
    try:
        from sympy.parsing.sympy_parser import parse_expr, standard_transformations

        expr = parse_expr(_normalize(text), transformations=standard_transformations)
    except Exception:
        return False, None
    # x/0 parses to zoo or nan, neither of which is Rational
    if getattr(expr, "is_Integer", False):
        return True, int(expr)
    if getattr(expr, "is_Rational", False):
        return False, expr
    return False, None


def digits_in_order(text: str) -> str:
    """Return the digit characters of ``text`` in the order they appear."""
    return "".join(ch for ch in text if ch.isdigit())


def verify_aliases(
    aliases: Mapping[int, Sequence[str]],
    seed: str | None = None,
) -> list[AliasMismatch]:
    """Return every alias that does not evaluate to its key.

    When ``seed`` is given, searched aliases must also spell the seed's
    digits in order; the ``seed/seed`` fallback for ``1`` is exempt.
    """
    mismatches: list[AliasMismatch] = []
    for value, exprs in aliases.items():
        for alias in exprs:
            if seed is not None and value == 1 and alias == fallback_one(seed):
                continue
            ok, got = evaluate_alias(alias)
            if not ok:
                mismatches.append(AliasMismatch(value, alias, "not-an-integer", got))
                continue
            if got != value:
                mismatches.append(AliasMismatch(value, alias, "wrong-value", got))
                continue
            if seed is not None and digits_in_order(alias) != seed:
                mismatches.append(AliasMismatch(value, alias, "digits-mismatch", got))
    return mismatches
