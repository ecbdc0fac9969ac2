"""Operators that can be placed between the operands of a calibration equation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import product


class Operator(ABC):
    """A binary operator, evaluated strictly left to right."""

    symbol: str = ""

    @abstractmethod
    def apply(self, left: int, right: int) -> int:
        """Apply this operator to the given left and right operands."""

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Plus(Operator):
    """The + operator: adds two operands."""

    symbol = "+"

    def apply(self, left: int, right: int) -> int:
        return left + right


@dataclass(frozen=True)
class Star(Operator):
    """The * operator: multiplies two operands."""

    symbol = "*"

    def apply(self, left: int, right: int) -> int:
        return left * right


@dataclass(frozen=True)
class DoublePipe(Operator):
    """The || operator: concatenates the digits of two non-negative operands."""

    symbol = "||"

    def apply(self, left: int, right: int) -> int:
        if right == 0:
            return left * 10
        return left * 10 ** len(str(right)) + right


def operator_combinations(
    num_operands: int, operators: Sequence[Operator]
) -> list[tuple[Operator, ...]]:
    """Return every sequence of operators that fits between ``num_operands`` operands.

    The first position varies fastest, in the order ``operators`` are given.
    Fewer than two operands need no operators, so the result is empty.
    """
    if num_operands < 2:
        return []
    return [
        tuple(reversed(combination))
        for combination in product(operators, repeat=num_operands - 1)
    ]