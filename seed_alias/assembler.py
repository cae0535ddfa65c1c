"""Flatten the root interval into the public alias map."""
from __future__ import annotations

import re

from .ranker import SolutionSet

__all__ = ["AliasMap", "assemble", "strip_outer_parens", "fallback_one"]

AliasMap = dict[int, list[str]]

# one paren group spanning the whole string with no parens inside
_SINGLE_GROUP_RE = re.compile(r"^\(([^()]+)\)$")


def strip_outer_parens(text: str) -> str:
    """Drop a single enclosing ``(...)`` pair when it wraps paren-free text.

    Purely cosmetic; nested groups such as ``((1+2))`` are left as they are.
    """
    m = _SINGLE_GROUP_RE.match(text)
    return m.group(1) if m else text


def fallback_one(seed: str) -> str:
    return f"{seed}/{seed}"


def assemble(root: SolutionSet, seed: str) -> AliasMap:
    """Build the alias map from the solution set covering the whole seed.

    Negative values are dropped, each expression is cosmetically unwrapped and
    deduplicated per value in first-seen order. Value ``1`` is always present,
    falling back to ``seed/seed``.
    """
    aliases: AliasMap = {}
    for value, exprs in root.items():
        if value < 0:
            continue
        out = aliases.setdefault(value, [])
        for expr in exprs:
            text = strip_outer_parens(expr.text)
            if text not in out:
                out.append(text)

    if not aliases.get(1):
        aliases[1] = [fallback_one(seed)]
    return aliases
