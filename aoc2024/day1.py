"""Day 1: comparing two lists of location IDs."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from .parsing import iter_ssv
from .transform import atois


class MismatchedLengthsError(ValueError):
    """The left and right lists do not have the same length."""


@dataclass
class Solution:
    """The two groups' reported location IDs."""

    left: list[int] = field(default_factory=list)
    right: list[int] = field(default_factory=list)

    def run_to_console(self) -> None:
        """Solve both parts and print the results."""
        print("DAY 1:")

        distance = total_distance(self.left, self.right)
        print("  PART 1:")
        print(f"    Total distance: {distance}")

        score = similarity(self.left, self.right)
        print("  PART 2:")
        print(f"    Similarity score: {score}")


def parse_input(text: str) -> Solution:
    """Build a solution from two whitespace-separated integer columns."""
    solution = Solution()
    for row in iter_ssv(text, 2):
        left, right = atois(*row)
        solution.left.append(left)
        solution.right.append(right)
    return solution


def _validate_lengths(left: list[int], right: list[int]) -> None:
    if len(left) != len(right):
        raise MismatchedLengthsError(
            f"mismatched list lengths (left = {len(left)}, right = {len(right)})"
        )


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum the distances between the lists' values paired in sorted order."""
    _validate_lengths(left, right)
    return sum(abs(lv - rv) for lv, rv in zip(sorted(left), sorted(right)))


def similarity(left: list[int], right: list[int]) -> int:
    """Sum each left value times the number of times it appears on the right."""
    _validate_lengths(left, right)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)