"""Command‑line interface wrapper around :pyfunc:`seed_alias.generate_aliases`."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import constants as C
from .assembler import AliasMap
from .config import AliasConfig
from .errors import AliasError
from .generator import generate_aliases_with_config
from .verification import verify_aliases

__all__ = ["main"]


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(description="Generate arithmetic aliases from a digit seed")
    parser.add_argument(
        "seed",
        nargs="?",
        default=C._DEMO_SEED,
        help=f"Decimal digit seed (default: {C._DEMO_SEED})",
    )
    parser.add_argument(
        "--keep-top-k",
        type=int,
        default=C.DEFAULT_KEEP_TOP_K,
        help="Expressions kept per value, shortest first",
    )
    parser.add_argument(
        "--max-results-per-node",
        type=int,
        default=C.DEFAULT_MAX_RESULTS_PER_NODE,
        help="Distinct values kept per digit interval before pruning",
    )
    parser.add_argument(
        "--no-unary-minus",
        action="store_true",
        help="Do not negate digit substrings",
    )
    parser.add_argument(
        "--value",
        type=int,
        action="append",
        help="Only print aliases for this target value (repeatable)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Re-evaluate every alias and fail on any mismatch",
    )
    parser.add_argument("--out", help="Write JSON output to file")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for seed_alias",
    )
    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("seed_alias")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def _select(aliases: AliasMap, values: list[int] | None) -> AliasMap:
    if not values:
        return aliases
    return {v: aliases.get(v, []) for v in values}


def main(argv: list[str] | None = None) -> int:
    ns = _parse_cli(argv)
    _configure_logging(ns.log_level)

    try:
        config = AliasConfig(
            allow_unary_minus=not ns.no_unary_minus,
            keep_top_k=ns.keep_top_k,
            max_results_per_node=ns.max_results_per_node,
        )
        aliases = generate_aliases_with_config(ns.seed, config)
    except AliasError as exc:
        sys.exit(f"Error: {exc}")

    status = 0
    if ns.verify:
        mismatches = verify_aliases(aliases, ns.seed)
        for m in mismatches:
            print(f"mismatch: {m.value}: {m.alias} ({m.reason}: {m.evaluated})", file=sys.stderr)
        if mismatches:
            status = 1

    selected = _select(aliases, ns.value)
    json_out = json.dumps(
        {str(k): v for k, v in selected.items()},
        ensure_ascii=False,
        separators=(",", ":"),
    )
    if ns.out:
        Path(ns.out).write_text(json_out, "utf-8")
        print(f"✔ Alias JSON written to {ns.out}")
    else:
        print(json_out)
    return status


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
