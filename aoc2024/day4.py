"""Day 4: a word search for XMAS."""

from __future__ import annotations

from dataclasses import dataclass, field

_DIRECTIONS = [(di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)]


@dataclass
class Solution:
    """The word search grid, one string per row."""

    search: list[str] = field(default_factory=list)

    def run_to_console(self) -> tuple[int, int]:
        """Solve both parts, print the results and return them."""
        xmases = count_xmas(self.search)
        cross_mases = count_cross_mas(self.search)

        print("DAY 4:")
        print("  PART 1:")
        print(f"    XMASes: {xmases}")
        print("  PART 2:")
        print(f"    X-MASes: {cross_mases}")

        return xmases, cross_mases


def parse_input(text: str) -> Solution:
    """Build a solution with one grid row per line."""
    return Solution(search=text.split("\n"))


def _at(search: list[str], i: int, j: int) -> str:
    if 0 <= i < len(search) and 0 <= j < len(search[i]):
        return search[i][j]
    return ""


def _cells(search: list[str]):
    for i, row in enumerate(search):
        for j, char in enumerate(row):
            yield i, j, char


def count_xmas(search: list[str]) -> int:
    """Count the times "XMAS" appears in the grid in any of the 8 directions."""
    return sum(
        "".join(_at(search, i + k * di, j + k * dj) for k in range(4)) == "XMAS"
        for i, j, char in _cells(search)
        if char == "X"
        for di, dj in _DIRECTIONS
    )


def _is_mas_center(search: list[str], i: int, j: int) -> bool:
    diagonals = (
        (_at(search, i - 1, j - 1), _at(search, i + 1, j + 1)),
        (_at(search, i - 1, j + 1), _at(search, i + 1, j - 1)),
    )
    return all(sorted(ends) == ["M", "S"] for ends in diagonals)


def count_cross_mas(search: list[str]) -> int:
    """Count the times two "MAS" words cross diagonally in an X shape."""
    return sum(
        _is_mas_center(search, i, j)
        for i, j, char in _cells(search)
        if char == "A"
    )