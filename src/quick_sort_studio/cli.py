"""Command-line interface for Quick Sort Studio."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random
import sys
from typing import Iterable, Optional, Sequence

from quick_sort_studio.config import AppConfig, load_config
from quick_sort_studio.errors import InvalidInput
from quick_sort_studio.logging_setup import init_logging
from quick_sort_studio.narration import CATALOGS
from quick_sort_studio.playback import MAX_SPEED, MIN_SPEED, clamp_speed
from quick_sort_studio.sampling import values_for_config
from quick_sort_studio.trace import generate
from quick_sort_studio.ui.step_rendering import describe_step

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="qs-studio", description="Step-by-step quicksort visualizer"
    )
    parser.add_argument(
        "--values",
        nargs="+",
        type=int,
        default=None,
        help="Array to sort (random when omitted)",
    )
    parser.add_argument("--size", type=int, default=None, help="Random array size")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--speed",
        type=int,
        default=None,
        help=f"Playback speed ({MIN_SPEED}-{MAX_SPEED})",
    )
    parser.add_argument(
        "--locale",
        choices=sorted(CATALOGS),
        default=None,
        help="Narration language",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the trace instead of starting the TUI",
    )
    return parser


def _apply_overrides(cfg: AppConfig, args: argparse.Namespace) -> AppConfig:
    changes: dict[str, object] = {}
    if args.size is not None:
        changes["array_size"] = args.size
    if args.speed is not None:
        changes["speed"] = clamp_speed(args.speed)
    if args.locale is not None:
        changes["locale"] = args.locale
    return dataclasses.replace(cfg, **changes) if changes else cfg


def dump_trace(values: Sequence[int], *, locale: str) -> int:
    trace = generate(values, locale=locale)
    for position, step in enumerate(trace):
        print(describe_step(position, step))
    return 0


def _run_tui(cfg: AppConfig, values: Optional[Sequence[int]]) -> int:
    try:
        from quick_sort_studio.tui import run_tui
    except (ImportError, RuntimeError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return run_tui(cfg, values)


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Entry point for the CLI."""
    init_logging()
    logger.info("App start")

    def excepthook(exc_type, exc, tb) -> None:
        logger.exception("Uncaught exception", exc_info=(exc_type, exc, tb))

    sys.excepthook = excepthook

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    cfg = _apply_overrides(load_config(), args)

    try:
        if args.values is not None:
            values: list[int] = list(args.values)
        else:
            values = values_for_config(cfg, rng=random.Random(args.seed))
        if args.dump:
            exit_code = dump_trace(values, locale=cfg.locale)
        else:
            exit_code = _run_tui(cfg, values)
    except InvalidInput as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    logger.info("App exit code=%s", exit_code)
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
