import pytest

from aoc2024.parsing import InvalidDataError
from aoc2024.pending import PendingSolution
from aoc2024.solutions import InvalidDayError, builders, run_all, run_one

DAY1_EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"

MINIMAL_INPUTS = {
    1: "1 2\n",
    2: "1 2 3\n",
    3: "mul(2,4)",
    4: "XMAS",
    5: "1|2\n\n1,2,3\n",
    6: "^\n",
    7: "3: 1 2\n",
    8: "..\n",
}


def write_inputs(directory, inputs):
    for day, text in inputs.items():
        (directory / f"day{day}.txt").write_text(text, encoding="utf-8")


@pytest.mark.parametrize("day", [0, 26])
def test_run_one_rejects_invalid_day(tmp_path, day):
    with pytest.raises(InvalidDayError):
        run_one(day, tmp_path)


def test_run_one_valid_day(tmp_path, capsys):
    write_inputs(tmp_path, {1: DAY1_EXAMPLE})
    run_one(1, tmp_path)
    out = capsys.readouterr().out
    assert out.startswith("DAY 1:\n")
    assert "Total distance: 11" in out
    assert "Similarity score: 31" in out


def test_run_one_pending_day_without_input(tmp_path, capsys):
    run_one(9, tmp_path)
    assert capsys.readouterr().out == "DAY 9:\n"


def test_run_one_missing_input_notes_day(tmp_path):
    with pytest.raises(FileNotFoundError) as excinfo:
        run_one(1, tmp_path)
    assert excinfo.value.__notes__ == ["building day 1 solution"]


def test_builders_cover_every_day(tmp_path):
    all_builders = builders(tmp_path)
    assert len(all_builders) == 25
    assert all_builders[8]() == PendingSolution(9)
    assert all_builders[24]() == PendingSolution(25)


def test_run_all_prints_every_day_in_order(tmp_path, capsys):
    write_inputs(tmp_path, MINIMAL_INPUTS)
    run_all(tmp_path)
    headers = [line for line in capsys.readouterr().out.splitlines() if line.startswith("DAY")]
    assert headers == [f"DAY {day}:" for day in range(1, 26)]


def test_run_all_continues_after_failing_day(tmp_path, capsys):
    write_inputs(tmp_path, {**MINIMAL_INPUTS, 5: "1|2\n\n1,2\n"})
    with pytest.raises(ExceptionGroup) as excinfo:
        run_all(tmp_path)
    errors = excinfo.value.exceptions
    assert len(errors) == 1
    assert isinstance(errors[0], InvalidDataError)
    assert errors[0].__notes__ == ["day 5"]
    assert "DAY 25:" in capsys.readouterr().out


def test_run_all_stops_on_build_failure(tmp_path, capsys):
    write_inputs(tmp_path, {1: MINIMAL_INPUTS[1], 2: MINIMAL_INPUTS[2]})
    with pytest.raises(FileNotFoundError) as excinfo:
        run_all(tmp_path)
    assert excinfo.value.__notes__ == ["building day 3 solution"]
    out = capsys.readouterr().out
    assert "DAY 2:" in out
    assert "DAY 3:" not in out