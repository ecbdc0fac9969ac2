"""Days whose puzzles have no solution yet: they only announce themselves."""

from __future__ import annotations

from dataclasses import dataclass

PENDING_DAYS = range(9, 26)


def _check_day(day: int) -> None:
    if day not in PENDING_DAYS:
        raise ValueError(
            f"day {day} is not a pending day ({PENDING_DAYS.start}-{PENDING_DAYS.stop - 1})"
        )


@dataclass(frozen=True)
class PendingSolution:
    """A day that has a place in the event but no solution yet."""

    day: int

    def __post_init__(self) -> None:
        _check_day(self.day)

    @property
    def header(self) -> str:
        """The line that announces this day."""
        return f"DAY {self.day}:"

    def run_to_console(self) -> str:
        """Print the day's header and return it."""
        header = self.header
        print(header)
        return header


def parse_input(day: int, text: str) -> PendingSolution:
    """Build the pending solution for ``day``; its input is not used yet."""
    return PendingSolution(day)