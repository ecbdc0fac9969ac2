"""Day 5: checking and fixing the page order of safety manual updates."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import cmp_to_key

from .parsing import InvalidDataError
from .transform import atois


@dataclass
class Solution:
    """Page ordering rules and the updates to check against them.

    ``pages_after`` maps a page to the pages that must come after it.
    """

    pages_after: dict[int, list[int]] = field(default_factory=dict)
    updates: list[list[int]] = field(default_factory=list)

    def run_to_console(self) -> None:
        """Solve both parts and print the results."""
        print("DAY 5:")

        for index, pages in enumerate(self.updates):
            if len(pages) % 2 == 0:
                raise InvalidDataError(f"update {index} has an even number of pages")

        correct = sum_correct_updates(self.updates, self.pages_after)
        print("  PART 1:")
        print(f"    Middle page sum for correct: {correct}")

        incorrect = sum_incorrect_updates(self.updates, self.pages_after)
        print("  PART 2:")
        print(f"    Middle page sum for reordered incorrect updates: {incorrect}")


def parse_input(text: str) -> Solution:
    """Build a solution from "a|b" rule lines, a blank line, then comma-separated updates."""
    solution = Solution()
    reached_updates = False
    for line in text.splitlines():
        if not line:
            reached_updates = True
            continue

        if reached_updates:
            try:
                solution.updates.append(atois(*line.split(",")))
            except ValueError as err:
                raise ValueError(f"parsing update line as ints ({line!r}): {err}") from err
            continue

        parts = line.split("|", 1)
        if len(parts) != 2:
            raise InvalidDataError(f"rule line {line!r} is not of the form a|b")
        try:
            page, after = atois(*parts)
        except ValueError as err:
            raise ValueError(f"parsing rule line as ints ({line!r}): {err}") from err
        solution.pages_after.setdefault(page, []).append(after)

    return solution


def _is_correct(update: list[int], pages_after: dict[int, list[int]]) -> bool:
    seen: set[int] = set()
    for page in update:
        if any(after in seen for after in pages_after.get(page, ())):
            return False
        seen.add(page)
    return True


def _filter_by_correctness(
    updates: list[list[int]], pages_after: dict[int, list[int]], want_correct: bool
) -> Iterator[list[int]]:
    return (u for u in updates if _is_correct(u, pages_after) == want_correct)


def _middle(pages: list[int]) -> int:
    return pages[len(pages) // 2]


def sum_correct_updates(updates: list[list[int]], pages_after: dict[int, list[int]]) -> int:
    """Sum the middle page of every correctly ordered update."""
    return sum(_middle(u) for u in _filter_by_correctness(updates, pages_after, True))


def sum_incorrect_updates(updates: list[list[int]], pages_after: dict[int, list[int]]) -> int:
    """Sum the middle page of every incorrectly ordered update once reordered."""

    def compare(a: int, b: int) -> int:
        if b in pages_after.get(a, ()):
            return -1
        if a in pages_after.get(b, ()):
            return 1
        return 0

    key = cmp_to_key(compare)
    return sum(
        _middle(sorted(update, key=key))
        for update in _filter_by_correctness(updates, pages_after, False)
    )