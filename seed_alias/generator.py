"""Top-level entry point: seed in, alias map out."""
from __future__ import annotations

import logging
import re
from typing import Any

from .assembler import AliasMap, assemble
from .config import AliasConfig
from .constants import (
    DEFAULT_ALLOW_UNARY_MINUS,
    DEFAULT_KEEP_TOP_K,
    DEFAULT_MAX_RESULTS_PER_NODE,
)
from .errors import InvalidSeedError
from .solver import IntervalSolver

__all__ = ["validate_seed", "generate_aliases", "generate_aliases_with_config"]

logger = logging.getLogger(__name__)

_SEED_RE = re.compile(r"[0-9]+")


def validate_seed(seed: Any) -> str:  # noqa: ANN401 - accepts str or int
    """Return ``seed`` as a digit string or raise :class:`InvalidSeedError`.

    Non-negative ``int`` values are converted with ``str``. The result must be
    one or more ASCII digits and must not be exactly ``"0"``.
    """
    if isinstance(seed, bool):
        raise InvalidSeedError("seed must be a positive decimal integer, got bool")
    if isinstance(seed, int):
        seed = str(seed)
    if not isinstance(seed, str):
        raise InvalidSeedError(
            f"seed must be a positive decimal integer, got {type(seed).__name__}"
        )
    if not _SEED_RE.fullmatch(seed) or seed == "0":
        raise InvalidSeedError(f"seed must be a positive decimal integer, got {seed!r}")
    return seed


def generate_aliases_with_config(seed: Any, config: AliasConfig) -> AliasMap:  # noqa: ANN401
    """Run the interval search for ``seed`` under ``config``."""
    digits = validate_seed(seed)
    solver = IntervalSolver(digits, config)
    root = solver.solve_all()
    aliases = assemble(root, digits)
    logger.info(
        "[seed-alias] seed %s: %d intervals, %d candidates, %d root values, %d aliases (%d values pruned)",
        digits,
        solver.stats.intervals,
        solver.stats.candidates,
        len(root),
        len(aliases),
        solver.stats.pruned_values,
    )
    return aliases


def generate_aliases(
    seed: Any,  # noqa: ANN401
    *,
    allow_unary_minus: bool = DEFAULT_ALLOW_UNARY_MINUS,
    keep_top_k: int = DEFAULT_KEEP_TOP_K,
    max_results_per_node: int = DEFAULT_MAX_RESULTS_PER_NODE,
) -> AliasMap:
    """Map every reachable non-negative value of ``seed`` to its shortest aliases.

    Leaves are contiguous digit substrings (optionally negated); they are
    combined with ``+ - * /`` under every binary parenthesization, division only
    when exact. Each value keeps up to ``keep_top_k`` distinct expressions,
    shortest first, and value ``1`` is always present.

    >>> generate_aliases("7")
    {7: ['7'], 1: ['7/7']}
    """
    config = AliasConfig(
        allow_unary_minus=allow_unary_minus,
        keep_top_k=keep_top_k,
        max_results_per_node=max_results_per_node,
    )
    return generate_aliases_with_config(seed, config)
