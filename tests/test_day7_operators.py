import pytest

from aoc2024.day7_operators import DoublePipe, Plus, Star, operator_combinations


@pytest.mark.parametrize(
    ("op", "left", "right", "expected"),
    [
        (Plus(), 0, 0, 0),
        (Plus(), 1, 0, 1),
        (Plus(), 2, 5, 7),
        (Star(), 0, 0, 0),
        (Star(), 1, 0, 0),
        (Star(), 2, 5, 10),
        (DoublePipe(), 0, 0, 0),
        (DoublePipe(), 1, 0, 10),
        (DoublePipe(), 2, 5, 25),
    ],
)
def test_operators(op, left, right, expected):
    assert op.apply(left, right) == expected


def test_double_pipe_multi_digit():
    assert DoublePipe().apply(12, 345) == 12345
    assert DoublePipe().apply(15, 6) == 156


def test_symbols():
    assert [str(op) for op in (Plus(), Star(), DoublePipe())] == ["+", "*", "||"]


OPERATORS = [Plus(), Star(), DoublePipe()]


@pytest.mark.parametrize("num_operands", [0, 1])
def test_combinations_empty(num_operands):
    assert operator_combinations(num_operands, OPERATORS) == []


def test_combinations_two_operands():
    assert operator_combinations(2, OPERATORS) == [
        (Plus(),),
        (Star(),),
        (DoublePipe(),),
    ]


def test_combinations_three_operands():
    assert operator_combinations(3, OPERATORS) == [
        (Plus(), Plus()),
        (Star(), Plus()),
        (DoublePipe(), Plus()),
        (Plus(), Star()),
        (Star(), Star()),
        (DoublePipe(), Star()),
        (Plus(), DoublePipe()),
        (Star(), DoublePipe()),
        (DoublePipe(), DoublePipe()),
    ]


def test_combinations_count_and_uniqueness():
    combos = operator_combinations(5, OPERATORS)
    assert len(combos) == len(OPERATORS) ** 4
    assert len(set(combos)) == len(combos)
    assert all(len(combo) == 4 for combo in combos)