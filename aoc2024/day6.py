"""Day 6: following a patrolling guard and finding where to trap them in a loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise

from .day6_guard import FloorMap, GuardState, Position, Tile
from .parsing import InvalidDataError


class GuardLoopError(Exception):
    """The guard is stuck walking in a loop."""


@dataclass
class Solution:
    """The map of the room."""

    floor_map: FloorMap = field(default_factory=FloorMap)

    def run_to_console(self) -> None:
        """Solve both parts and print the results."""
        print("DAY 6:")

        visited, states = count_guard_positions(self.floor_map)
        print("  PART 1:")
        print(f"    Guard visited tiles: {visited}")

        loops = count_loop_positions(self.floor_map, states)
        print("  PART 2:")
        print(f"    Loop candidates: {loops}")


def parse_input(text: str) -> Solution:
    """Build a solution with one map row per line."""
    try:
        return Solution(floor_map=FloorMap(text.splitlines()))
    except ValueError as err:
        raise InvalidDataError(f"unknown tile in map: {err}") from err


def _find_guard_states(floor_map: FloorMap) -> list[GuardState]:
    return [
        GuardState(Position(x, y), tile.direction())
        for y, row in enumerate(floor_map)
        for x, tile in enumerate(row)
        if tile.is_guard()
    ]


def count_guard_positions(floor_map: FloorMap) -> tuple[int, list[GuardState]]:
    """Walk the guard until they leave the room.

    Returns the number of distinct positions visited and every state the
    guard passed through, in order. Raises GuardLoopError if the guard never
    leaves and InvalidDataError unless the map holds exactly one guard.
    """
    initial = _find_guard_states(floor_map)
    if len(initial) != 1:
        raise InvalidDataError(f"expected 1 guard state, got {len(initial)}")

    states: list[GuardState] = []
    seen: set[GuardState] = set()
    guard: GuardState | None = initial[0]
    while guard is not None:
        if guard in seen:
            raise GuardLoopError("guard is in a loop")
        seen.add(guard)
        states.append(guard)
        guard, floor_map = guard.advance_one(floor_map)

    return len({state.position for state in states}), states


def _obstacle_ahead_causes_loop(
    current: GuardState, following: GuardState, floor_map: FloorMap
) -> bool:
    if following.position == current.position:
        return False
    try:
        count_guard_positions(floor_map.with_tile(following.position, Tile.OBSTACLE))
    except GuardLoopError:
        return True
    return False


def count_loop_positions(floor_map: FloorMap, original_states: list[GuardState]) -> int:
    """Count the positions on the guard's path where a new obstacle traps them in a loop.

    The guard's starting position is never a candidate.
    """
    if not original_states:
        raise InvalidDataError("no guard states to search from")
    start = original_states[0].position

    loop_positions = {
        following.position
        for current, following in pairwise(original_states)
        if following.position != start
        and _obstacle_ahead_causes_loop(current, following, floor_map)
    }
    return len(loop_positions)