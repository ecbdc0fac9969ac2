"""Command line entry point for running the puzzle solutions."""

from __future__ import annotations

import argparse
import sys

from .solutions import INPUT_DIR, NUM_DAYS, run_all, run_one


def _day(value: str) -> int:
    try:
        day = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if not 1 <= day <= NUM_DAYS:
        raise argparse.ArgumentTypeError(
            f"invalid argument: -day must be between 1 and {NUM_DAYS}, got {day}"
        )
    return day


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc",
        description=(
            "Run solutions for the Advent of Code 2024 event. "
            "If -day is not set, all solutions are run."
        ),
    )
    parser.add_argument(
        "-day",
        "--day",
        type=_day,
        default=None,
        help=f"If set, only run this day's solution. Must be an integer between 1 and {NUM_DAYS}.",
    )
    parser.add_argument(
        "--input-dir",
        default=str(INPUT_DIR),
        help="Directory holding the puzzle inputs, named day<N>.txt.",
    )
    return parser


def _describe(err: BaseException) -> str:
    if isinstance(err, BaseExceptionGroup):
        return "; ".join(_describe(inner) for inner in err.exceptions)
    return ": ".join([*getattr(err, "__notes__", ()), str(err)])


def main(argv: list[str] | None = None) -> int:
    """Run the requested solutions; return the process exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.day is None:
            run_all(args.input_dir)
        else:
            run_one(args.day, args.input_dir)
    except Exception as err:
        print(f"aoc: one or more solutions failed: {_describe(err)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())