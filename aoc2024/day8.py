"""Day 8: locating the antinodes of resonant antenna pairs."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import combinations

EMPTY = "."


@dataclass(frozen=True, slots=True)
class Position:
    """A position on the city map."""

    x: int
    y: int

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)


class CityMap:
    """A grid of tiles; any tile other than "." is an antenna of that frequency."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[str]] = ()) -> None:
        self._rows: tuple[str, ...] = tuple("".join(row) for row in rows)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CityMap):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"CityMap({list(self._rows)!r})"

    def contains(self, position: Position) -> bool:
        """Whether ``position`` lies on the map."""
        return 0 <= position.y < len(self._rows) and 0 <= position.x < len(self._rows[position.y])


@dataclass
class Solution:
    """The map of the city's antennae."""

    city_map: CityMap = field(default_factory=CityMap)

    def run_to_console(self) -> None:
        """Solve both parts and print the results."""
        print("DAY 8:")

        print("  PART 1:")
        print(f"    Unique antinode locations: {unique_antinode_locations(self.city_map, False)}")

        print("  PART 2:")
        with_harmonics = unique_antinode_locations(self.city_map, True)
        print(f"    Unique antinode locations, with harmonics: {with_harmonics}")


def parse_input(text: str) -> Solution:
    """Build a solution with one map row per line."""
    return Solution(city_map=CityMap(text.splitlines()))


def _antinodes_after(
    city_map: CityMap, first: Position, second: Position, include_harmonics: bool
) -> Iterator[Position]:
    distance = second - first
    if include_harmonics:
        yield first
        yield second

    candidate = first - distance
    while city_map.contains(candidate):
        yield candidate
        if not include_harmonics:
            return
        candidate -= distance


def _all_antinodes(city_map: CityMap, include_harmonics: bool) -> Iterator[Position]:
    antennae: dict[str, list[Position]] = defaultdict(list)
    for y, row in enumerate(city_map):
        for x, tile in enumerate(row):
            if tile != EMPTY:
                antennae[tile].append(Position(x, y))

    for positions in antennae.values():
        for first, second in combinations(positions, 2):
            yield from _antinodes_after(city_map, first, second, include_harmonics)
            yield from _antinodes_after(city_map, second, first, include_harmonics)


def unique_antinode_locations(city_map: CityMap, include_harmonics: bool) -> int:
    """Count the distinct map positions holding at least one antinode."""
    return len(set(_all_antinodes(city_map, include_harmonics)))