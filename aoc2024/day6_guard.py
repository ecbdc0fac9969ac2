"""The guard, the room map and the rules the guard walks by."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, StrEnum


@dataclass(frozen=True, slots=True)
class Position:
    """A position on the map grid."""

    x: int
    y: int


class Direction(Enum):
    """A direction of movement on the map grid, as (dx, dy)."""

    NONE = (0, 0)
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def turn_right(self) -> Direction:
        """Return the direction after a 90 degree clockwise rotation."""
        try:
            return _RIGHT_TURNS[self]
        except KeyError:
            raise ValueError(f"cannot turn from non-cardinal direction {self.name}") from None


_RIGHT_TURNS = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}


class Tile(StrEnum):
    """A tile on the map grid."""

    EMPTY = "."
    OBSTACLE = "#"
    GUARD_EAST = ">"
    GUARD_NORTH = "^"
    GUARD_WEST = "<"
    GUARD_SOUTH = "v"

    def is_guard(self) -> bool:
        """Whether this tile shows a guard's state, past or present."""
        return self in _TILE_DIRECTIONS

    def direction(self) -> Direction:
        """The direction the guard moves on this tile, or NONE if it is not a guard tile."""
        return _TILE_DIRECTIONS.get(self, Direction.NONE)


_TILE_DIRECTIONS = {
    Tile.GUARD_NORTH: Direction.NORTH,
    Tile.GUARD_EAST: Direction.EAST,
    Tile.GUARD_SOUTH: Direction.SOUTH,
    Tile.GUARD_WEST: Direction.WEST,
}
_DIRECTION_TILES = {direction: tile for tile, direction in _TILE_DIRECTIONS.items()}


class FloorMap:
    """An immutable map of the room; updates return new maps sharing unchanged rows."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[str]] = ()) -> None:
        self._rows: tuple[tuple[Tile, ...], ...] = tuple(
            tuple(Tile(tile) for tile in row) for row in rows
        )

    @classmethod
    def _wrap(cls, rows: tuple[tuple[Tile, ...], ...]) -> FloorMap:
        floor_map = cls.__new__(cls)
        floor_map._rows = rows
        return floor_map

    def __iter__(self) -> Iterator[tuple[Tile, ...]]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloorMap):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self._rows)

    def __repr__(self) -> str:
        return f"FloorMap({['' .join(row) for row in self._rows]!r})"

    def get(self, pos: Position) -> Tile | None:
        """Return the tile at ``pos``, or None if it lies outside the map."""
        if 0 <= pos.y < len(self._rows) and 0 <= pos.x < len(self._rows[pos.y]):
            return self._rows[pos.y][pos.x]
        return None

    def with_tile(self, pos: Position, new_value: Tile) -> FloorMap:
        """Return a new map with ``pos`` set to ``new_value``."""
        if self.get(pos) is None:
            raise IndexError(f"position {pos} is outside the map")
        row = self._rows[pos.y]
        new_row = row[: pos.x] + (Tile(new_value),) + row[pos.x + 1 :]
        return FloorMap._wrap(self._rows[: pos.y] + (new_row,) + self._rows[pos.y + 1 :])


@dataclass(frozen=True, slots=True)
class GuardState:
    """Where the guard is and which way they are walking."""

    position: Position
    direction: Direction

    def advance_one(self, floor_map: FloorMap) -> tuple[GuardState | None, FloorMap]:
        """Step forward, or turn right if blocked, marking the new state on the map.

        The returned state is None once the guard has left the room.
        """
        ahead = Position(self.position.x + self.direction.dx, self.position.y + self.direction.dy)
        tile = floor_map.get(ahead)
        if tile is None:
            return None, floor_map

        if tile is Tile.OBSTACLE:
            turned = GuardState(self.position, self.direction.turn_right())
            return turned, floor_map.with_tile(turned.position, turned.tile())

        moved = GuardState(ahead, self.direction)
        return moved, floor_map.with_tile(moved.position, moved.tile())

    def tile(self) -> Tile:
        """The tile showing this state on the map."""
        return _DIRECTION_TILES.get(self.direction, Tile.EMPTY)