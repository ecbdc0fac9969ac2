"""Day 7: finding which calibration equations can be made true."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .day7_operators import DoublePipe, Operator, Plus, Star, operator_combinations
from .transform import atois


@dataclass
class Solution:
    """The calibration equations: each test value mapped to its operands."""

    operands_by_result: dict[int, list[int]] = field(default_factory=dict)

    def run_to_console(self) -> None:
        """Solve both parts and print the results."""
        print("DAY 7:")

        print("  PART 1:")
        print(f"    +, *: {total_calibration(self.operands_by_result, Plus(), Star())}")

        print("  PART 2:")
        total = total_calibration(self.operands_by_result, Plus(), Star(), DoublePipe())
        print(f"    +, *, ||: {total}")


def parse_input(text: str) -> Solution:
    """Build a solution from lines of the form "result: a b c"."""
    solution = Solution()
    for line in text.splitlines():
        result_text, _, operands_text = line.partition(":")
        try:
            (result,) = atois(result_text)
        except ValueError as err:
            raise ValueError(f"parsing result on line {line!r}: {err}") from err
        try:
            operands = atois(*operands_text.split())
        except ValueError as err:
            raise ValueError(f"parsing operands on line {line!r}: {err}") from err
        solution.operands_by_result[result] = operands
    return solution


def _can_be_true(expected: int, operands: Sequence[int], operators: Sequence[Operator]) -> bool:
    for combination in operator_combinations(len(operands), operators):
        result = operands[0]
        for operator, operand in zip(combination, operands[1:]):
            result = operator.apply(result, operand)
        if result == expected:
            return True
    return False


def total_calibration(operands_by_result: dict[int, list[int]], *args: Operator) -> int:
    """Sum the test values whose operands can produce them with the given operators."""
    return sum(
        result
        for result, operands in operands_by_result.items()
        if _can_be_true(result, operands, args)
    )