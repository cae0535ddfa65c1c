"""Package‑wide defaults and demo seeds."""

DEFAULT_ALLOW_UNARY_MINUS = True
DEFAULT_KEEP_TOP_K = 3
DEFAULT_MAX_RESULTS_PER_NODE = 20000

_DEMO_SEED = "7846"

__all__ = [
    "DEFAULT_ALLOW_UNARY_MINUS",
    "DEFAULT_KEEP_TOP_K",
    "DEFAULT_MAX_RESULTS_PER_NODE",
    "_DEMO_SEED",
]
