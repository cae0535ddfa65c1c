"""Public package interface for the seed alias generator.

Given a fixed digit string, the generator finds short arithmetic expressions
over its contiguous substrings for every integer value they can produce.

Typical usage
-------------
>>> from seed_alias import generate_aliases
>>> aliases = generate_aliases("352", keep_top_k=1)
>>> aliases[37]
['35+2']
"""
from importlib.metadata import version as _version  # type: ignore

from .assembler import AliasMap, assemble, strip_outer_parens
from .config import AliasConfig
from .errors import AliasError, InvalidConfigError, InvalidSeedError
from .expr import Expr, ExprKind
from .generator import generate_aliases, generate_aliases_with_config, validate_seed
from .ranker import SolutionSet, register
from .solver import IntervalSolver, SolverStats
from .verification import evaluate_alias, verify_aliases

__all__ = [
    "generate_aliases",
    "generate_aliases_with_config",
    "validate_seed",
    "AliasConfig",
    "AliasMap",
    "AliasError",
    "InvalidSeedError",
    "InvalidConfigError",
    "Expr",
    "ExprKind",
    "SolutionSet",
    "register",
    "IntervalSolver",
    "SolverStats",
    "assemble",
    "strip_outer_parens",
    "evaluate_alias",
    "verify_aliases",
    "__version__",
]

try:
    __version__ = _version("seed_alias")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
