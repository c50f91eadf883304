"""Command line entry point for the pouring solver."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from typing import List, Mapping

from contracts.errors import InvalidValue
from project_config import get_section, resolve_report_format

from . import eventlog
from .report import render_json, render_text
from .search import SolveResult, solve

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_INVALID = 2


def _puzzle_from_args(args: argparse.Namespace) -> tuple[int, List[int]]:
    if args.capacities:
        if args.goal is None:
            raise InvalidValue("invalid-goal", "--goal is required when capacities are given")
        return args.goal, list(args.capacities)
    example = get_section("EXAMPLE")
    goal = args.goal if args.goal is not None else example["goal"]
    return goal, list(example["capacities"])


def _print_moves(result: SolveResult) -> None:
    for step in result.path[1:]:
        if step.move is not None:
            print(f"Step {step.index}: {step.move.describe()}", file=sys.stderr)


def run(args: argparse.Namespace, env: Mapping[str, str] | None = None) -> int:
    try:
        report_format = resolve_report_format(args.format, env)
        goal, capacities = _puzzle_from_args(args)
    except (KeyError, ValueError) as exc:
        # InvalidValue and malformed config.toml both land here.
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID

    started = time.perf_counter()
    try:
        result = solve(goal, capacities)
    except InvalidValue as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    elapsed_ms = int((time.perf_counter() - started) * 1000)

    if report_format == "json":
        print(render_json(result))
    else:
        sys.stdout.write(render_text(result))
        if not result.solved:
            sys.stdout.write("\n")

    if args.verbose:
        _print_moves(result)
        print(f"Time: {elapsed_ms} ms", file=sys.stderr)

    if args.log or args.log_dir:
        eventlog.configure(args.log_dir)
        eventlog.record_solve(result, elapsed_ms)

    return EXIT_SOLVED if result.solved else EXIT_UNSOLVED


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find a shortest fill/empty/pour sequence reaching a target quantity",
    )
    parser.add_argument(
        "capacities",
        nargs="*",
        type=int,
        help="Container capacities (defaults to the configured example)",
    )
    parser.add_argument("--goal", type=int, default=None, help="Quantity to measure out")
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default=None,
        help="Report format (overrides POURING_REPORT_FORMAT and config.toml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        help="Append a solve.completed event to the configured JSONL log",
    )
    parser.add_argument("--log-dir", default=None, help="Log directory (implies --log)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging and timing")
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run(args, os.environ)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
