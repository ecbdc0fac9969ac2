import pytest

from aoc2024.transform import absolute, atois


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, 0), (-1, 1), (1, 1)],
)
def test_absolute(value, expected):
    assert absolute(value) == expected


def test_absolute_keeps_float_type():
    result = absolute(-2.5)
    assert result == 2.5
    assert isinstance(result, float)


def test_atois_parses_signed_values():
    assert atois("1", "-2", "+3") == [1, -2, 3]


def test_atois_no_arguments():
    assert atois() == []


def test_atois_reports_column_of_invalid_value():
    with pytest.raises(ValueError, match="column 1"):
        atois("4", "x", "5")


@pytest.mark.parametrize("text", ["", " 1", "1_000", "1.5", "+"])
def test_atois_rejects_non_integer_syntax(text):
    with pytest.raises(ValueError):
        atois(text)