import pytest

from aoc2024.day2 import Solution, parse_input, safe_reports

EXAMPLE = [
    [7, 6, 4, 2, 1],
    [1, 2, 7, 8, 9],
    [9, 7, 6, 2, 1],
    [1, 3, 2, 4, 5],
    [8, 6, 4, 4, 1],
    [1, 3, 6, 7, 9],
]


@pytest.mark.parametrize(
    ("reports", "dampening", "expected"),
    [
        (EXAMPLE, False, 2),
        (EXAMPLE, True, 4),
        ([[4, 5, 4, 7]], True, 1),
        ([[], [123]], True, 2),
    ],
)
def test_safe_reports(reports, dampening, expected):
    assert safe_reports(reports, dampening) == expected


def test_dampening_never_lowers_count():
    assert safe_reports(EXAMPLE, True) >= safe_reports(EXAMPLE, False)


def test_reports_not_modified():
    reports = [list(report) for report in EXAMPLE]
    safe_reports(reports, True)
    assert reports == EXAMPLE


def test_parse_input():
    text = "\n".join(" ".join(map(str, report)) for report in EXAMPLE) + "\n"
    assert parse_input(text).reports == EXAMPLE


def test_parse_input_rejects_non_integers():
    with pytest.raises(ValueError):
        parse_input("1 2 a\n")


def test_run_to_console(capsys):
    Solution(reports=EXAMPLE).run_to_console()
    assert capsys.readouterr().out == (
        "DAY 2:\n"
        "  PART 1:\n"
        "    Safe reports: 2\n"
        "  PART 2:\n"
        "    Safe reports after problem dampening: 4\n"
    )