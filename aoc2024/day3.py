"""Day 3: executing mul instructions found in corrupted memory."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .transform import atois

_MUL = r"(mul)\(([1-9][0-9]{0,2}),([1-9][0-9]{0,2})\)"
_CONDITIONALS = r"|do\(\)|don't\(\)"


@dataclass
class Solution:
    """The corrupted program memory."""

    memory: str = ""

    def run_to_console(self) -> None:
        """Solve both parts and print the results."""
        print("DAY 3:")

        total = sum_muls(self.memory, False)
        print("  PART 1:")
        print(f"    Sum: {total}")

        conditional = sum_muls(self.memory, True)
        print("  PART 2:")
        print(f"    Sum with conditionals: {conditional}")


def parse_input(text: str) -> Solution:
    """Build a solution holding the raw memory text."""
    return Solution(memory=text)


def sum_muls(memory: str, with_conditionals: bool) -> int:
    """Sum the products of all valid mul(a,b) instructions.

    With conditionals, do() enables and don't() disables the mul
    instructions that follow it; they start enabled.
    """
    pattern = re.compile(_MUL + _CONDITIONALS if with_conditionals else _MUL)

    total = 0
    enabled = True
    for match in pattern.finditer(memory):
        instruction = match.group(0)
        if instruction == "do()":
            enabled = True
        elif instruction == "don't()":
            enabled = False
        elif enabled:
            left, right = atois(match.group(2), match.group(3))
            total += left * right
    return total