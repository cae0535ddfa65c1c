"""Validated search configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import (
    DEFAULT_ALLOW_UNARY_MINUS,
    DEFAULT_KEEP_TOP_K,
    DEFAULT_MAX_RESULTS_PER_NODE,
)
from .errors import InvalidConfigError

__all__ = ["AliasConfig"]


def _require_positive_int(name: str, value: Any) -> None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise InvalidConfigError(f"{name} must be >= 1, got {value}")


@dataclass(frozen=True)
class AliasConfig:
    """Knobs bounding the interval search.

    ``keep_top_k`` caps how many expressions are kept per value and
    ``max_results_per_node`` caps how many distinct values each interval may
    hold before the longest-expression values are pruned.
    """

    allow_unary_minus: bool = DEFAULT_ALLOW_UNARY_MINUS
    keep_top_k: int = DEFAULT_KEEP_TOP_K
    max_results_per_node: int = DEFAULT_MAX_RESULTS_PER_NODE

    def __post_init__(self) -> None:
        _require_positive_int("keep_top_k", self.keep_top_k)
        _require_positive_int("max_results_per_node", self.max_results_per_node)
        if not isinstance(self.allow_unary_minus, bool):
            raise InvalidConfigError("allow_unary_minus must be a bool")
