import pytest

from aoc2024.day7 import Solution, parse_input, total_calibration
from aoc2024.day7_operators import DoublePipe, Plus, Star

EXAMPLE = {
    190: [10, 19],
    3267: [81, 40, 27],
    83: [17, 5],
    156: [15, 6],
    7290: [6, 8, 6, 15],
    161011: [16, 10, 13],
    192: [17, 8, 14],
    21037: [9, 7, 18, 13],
    292: [11, 6, 16, 20],
}

EXAMPLE_TEXT = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_example_part1():
    assert total_calibration(EXAMPLE, Plus(), Star()) == 3749


def test_example_part2():
    assert total_calibration(EXAMPLE, Plus(), Star(), DoublePipe()) == 11387


def test_single_operand_never_calibrates():
    assert total_calibration({5: [5]}, Plus(), Star()) == 0


def test_parse_input():
    assert parse_input(EXAMPLE_TEXT).operands_by_result == EXAMPLE


def test_parse_input_invalid_result():
    with pytest.raises(ValueError, match="parsing result"):
        parse_input("abc: 1 2")


def test_parse_input_invalid_operand():
    with pytest.raises(ValueError, match="parsing operands"):
        parse_input("3: 1 x")


def test_run_to_console(capsys):
    Solution(operands_by_result=EXAMPLE).run_to_console()
    assert capsys.readouterr().out == (
        "DAY 7:\n  PART 1:\n    +, *: 3749\n  PART 2:\n    +, *, ||: 11387\n"
    )