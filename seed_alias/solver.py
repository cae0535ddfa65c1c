"""Interval dynamic program over the seed's digit positions.

Each interval ``(l, r)`` covers ``seed[l:r + 1]``. Its solution set holds the
leaf reading of that substring (optionally negated) plus every value obtained
by splitting the interval in two and joining one expression from each side
with ``+``, ``-``, ``*`` or an exact ``/``.

Intervals are filled bottom-up by increasing length into a write-once memo
table, which yields the same sets as the top-down recursion without growing
the call stack with the seed length.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import AliasConfig
from .expr import Expr, combine
from .ranker import SolutionSet, best_length, register

__all__ = ["IntervalSolver", "SolverStats"]


@dataclass(slots=True)
class SolverStats:
    intervals: int = 0
    candidates: int = 0
    pruned_values: int = 0
    pruned_intervals: int = 0


class IntervalSolver:
    """Memoized solver for one seed and one configuration."""

    def __init__(self, seed: str, config: AliasConfig | None = None) -> None:
        self.seed = seed
        self.config = config or AliasConfig()
        self.stats = SolverStats()
        self.logger = logging.getLogger(__name__)
        self._memo: dict[tuple[int, int], SolutionSet] = {}

    def solve(self, left: int, right: int) -> SolutionSet:
        """Return the solution set for ``seed[left:right + 1]``.

        The returned mapping is shared with the memo table and must be treated
        as read-only.
        """
        n = len(self.seed)
        if not (0 <= left <= right < n):
            raise IndexError(f"interval ({left}, {right}) outside seed of length {n}")
        key = (left, right)
        cached = self._memo.get(key)
        if cached is not None:
            return cached

        for length in range(1, right - left + 2):
            for lo in range(left, right - length + 2):
                hi = lo + length - 1
                if (lo, hi) not in self._memo:
                    self._memo[(lo, hi)] = self._solve_interval(lo, hi)
        return self._memo[key]

    def solve_all(self) -> SolutionSet:
        return self.solve(0, len(self.seed) - 1)

    # ------------------------------------------------------------------
    def _solve_interval(self, left: int, right: int) -> SolutionSet:
        keep = self.config.keep_top_k
        res: SolutionSet = {}

        digits = self.seed[left : right + 1]
        leaf_val = int(digits)
        register(res, leaf_val, Expr.literal(digits), keep)
        generated = 1
        # negating zero only duplicates the leaf
        if self.config.allow_unary_minus and leaf_val != 0:
            register(res, -leaf_val, Expr.negative(digits), keep)
            generated += 1

        for split in range(left, right):
            lhs = self._memo[(left, split)]
            rhs = self._memo[(split + 1, right)]
            for v1, e1s in lhs.items():
                for v2, e2s in rhs.items():
                    exact = v2 != 0 and v1 % v2 == 0
                    for e1 in e1s:
                        for e2 in e2s:
                            register(res, v1 + v2, combine(e1, "+", e2), keep)
                            register(res, v1 - v2, combine(e1, "-", e2), keep)
                            register(res, v1 * v2, combine(e1, "*", e2), keep)
                            generated += 3
                            if exact:
                                register(res, v1 // v2, combine(e1, "/", e2), keep)
                                generated += 1

        res = self._prune(res, left, right)
        self.stats.intervals += 1
        self.stats.candidates += generated
        self.logger.debug(
            "[seed-alias] interval (%d, %d) %r: %d candidates, %d values",
            left,
            right,
            digits,
            generated,
            len(res),
        )
        return res

    def _prune(self, res: SolutionSet, left: int, right: int) -> SolutionSet:
        limit = self.config.max_results_per_node
        if len(res) <= limit:
            return res
        # sorted() is stable: equal best lengths keep discovery order
        ranked = sorted(res.items(), key=lambda item: best_length(item[1]))
        dropped = len(ranked) - limit
        self.stats.pruned_values += dropped
        self.stats.pruned_intervals += 1
        self.logger.debug(
            "[seed-alias] interval (%d, %d): pruned %d of %d values",
            left,
            right,
            dropped,
            len(ranked),
        )
        return dict(ranked[:limit])
