"""Running the daily solutions, one at a time or all in sequence."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from os import PathLike
from pathlib import Path
from typing import Protocol

from . import day1, day2, day3, day4, day5, day6, day7, day8, pending

INPUT_DIR = Path("inputs")
NUM_DAYS = 25

_PARSERS: dict[int, Callable[[str], "_Runnable"]] = {
    1: day1.parse_input,
    2: day2.parse_input,
    3: day3.parse_input,
    4: day4.parse_input,
    5: day5.parse_input,
    6: day6.parse_input,
    7: day7.parse_input,
    8: day8.parse_input,
}


class _Runnable(Protocol):
    def run_to_console(self) -> None: ...


class InvalidDayError(ValueError):
    """The requested day is not part of the event."""


def _input_path(input_dir: Path, day: int) -> Path:
    return input_dir / f"day{day}.txt"


def _build(day: int, input_dir: Path) -> _Runnable:
    path = _input_path(input_dir, day)
    parser = _PARSERS.get(day)
    if parser is None:
        text = path.read_text(encoding="utf-8") if path.is_file() else ""
        return pending.parse_input(day, text)
    return parser(path.read_text(encoding="utf-8"))


def builders(input_dir: str | PathLike[str] = INPUT_DIR) -> list[Callable[[], _Runnable]]:
    """Return one solution builder per day, in day order.

    Each builder reads ``day<N>.txt`` from ``input_dir`` when called.
    """
    directory = Path(input_dir)
    return [partial(_build, day, directory) for day in range(1, NUM_DAYS + 1)]


def _build_with_context(day: int, build: Callable[[], _Runnable]) -> _Runnable:
    try:
        return build()
    except Exception as err:
        err.add_note(f"building day {day} solution")
        raise


def run_all(input_dir: str | PathLike[str] = INPUT_DIR) -> None:
    """Run every day's solution in order.

    A failure to build a solution stops immediately. A solution that fails
    while running does not stop the following days; all such failures are
    raised together as an ExceptionGroup at the end.
    """
    errors: list[Exception] = []
    for day, build in enumerate(builders(input_dir), start=1):
        solution = _build_with_context(day, build)
        try:
            solution.run_to_console()
        except Exception as err:
            err.add_note(f"day {day}")
            errors.append(err)
    if errors:
        raise ExceptionGroup("one or more solutions failed", errors)


def run_one(day: int, input_dir: str | PathLike[str] = INPUT_DIR) -> None:
    """Run the solution for ``day``, which must be between 1 and 25."""
    all_builders = builders(input_dir)
    if not 1 <= day <= len(all_builders):
        raise InvalidDayError(f"invalid day ({day})")
    _build_with_context(day, all_builders[day - 1]).run_to_console()