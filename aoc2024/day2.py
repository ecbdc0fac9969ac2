"""Day 2: counting safe reactor reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise

from .parsing import iter_ssv
from .transform import atois

Report = list[int]


@dataclass
class Solution:
    """The engineers' reports; each value is a level."""

    reports: list[Report] = field(default_factory=list)

    def run_to_console(self) -> None:
        """Solve both parts and print the results."""
        print("DAY 2:")

        safe = safe_reports(self.reports, False)
        print("  PART 1:")
        print(f"    Safe reports: {safe}")

        dampened = safe_reports(self.reports, True)
        print("  PART 2:")
        print(f"    Safe reports after problem dampening: {dampened}")


def parse_input(text: str) -> Solution:
    """Build a solution with one report per line of integers."""
    return Solution(reports=[atois(*row) for row in iter_ssv(text)])


def _is_safe(report: Report) -> bool:
    deltas = [after - before for before, after in pairwise(report)]
    if not all(1 <= abs(delta) <= 3 for delta in deltas):
        return False
    return all(delta > 0 for delta in deltas) or all(delta < 0 for delta in deltas)


def _without(report: Report, index: int) -> Report:
    return report[:index] + report[index + 1 :]


def safe_reports(reports: list[Report], problem_dampening: bool) -> int:
    """Count the safe reports.

    A report is safe if it is strictly increasing or decreasing and adjacent
    levels differ by 1 to 3. With problem dampening, removing any single
    level that makes the report safe counts it as safe.
    """
    count = 0
    for report in reports:
        if _is_safe(report):
            count += 1
        elif problem_dampening and any(
            _is_safe(_without(report, index)) for index in range(len(report))
        ):
            count += 1
    return count