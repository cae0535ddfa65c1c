"""Exceptions raised by the alias generator."""
from __future__ import annotations

__all__ = ["AliasError", "InvalidSeedError", "InvalidConfigError"]


class AliasError(ValueError):
    """Base class for invalid-argument errors raised by :mod:`seed_alias`."""


class InvalidSeedError(AliasError):
    """The seed is not a positive decimal digit string."""


class InvalidConfigError(AliasError):
    """A configuration value is out of range."""
