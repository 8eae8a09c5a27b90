"""Checking that the player can reach every collectible and the exit."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import replace

from .errors import ErrorKind, MapError
from .mapfile import MapInfo, Position


def _flood(
    rows: Sequence[str], start: Position, blocked: frozenset[str]
) -> Iterator[tuple[Position, str]]:
    """Yield each reachable cell and its tile, depth first.

    Neighbours are tried right, left, down, then up.
    """
    seen: set[Position] = set()
    stack = [start]
    while stack:
        x, y = stack.pop()
        if y < 0 or y >= len(rows) or x < 0 or x >= len(rows[y]):
            continue
        if (x, y) in seen:
            continue
        tile = rows[y][x]
        if tile in blocked:
            continue
        seen.add((x, y))
        yield (x, y), tile
        stack.extend([(x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)])


def _blocked(walls: str, bonus: bool) -> frozenset[str]:
    return frozenset(walls + ("Z" if bonus else ""))


def find_exit(
    rows: Sequence[str], start: Position, bonus: bool = False
) -> list[Position]:
    """Return the exits reachable from *start*, in the order they are met.

    Walls stop the search; in bonus mode zombies do too.
    """
    return [pos for pos, tile in _flood(rows, start, _blocked("1", bonus)) if tile == "E"]


def count_collectibles(
    rows: Sequence[str], start: Position, bonus: bool = False
) -> int:
    """Count the collectibles reachable from *start* without passing the exit."""
    reached = _flood(rows, start, _blocked("1E", bonus))
    return sum(1 for _, tile in reached if tile == "C")


def check_paths(rows: Sequence[str], info: MapInfo, bonus: bool = False) -> MapInfo:
    """Check that every collectible and every exit can be reached.

    Returns *info* with the door position filled in. Raises
    MapError(PATH_BLOCKED) when something cannot be reached.
    """
    start = info.player if info.player is not None else (0, 0)
    exits = find_exit(rows, start, bonus)
    found_c = count_collectibles(rows, start, bonus)
    if found_c != info.collectibles or len(exits) != info.exits:
        raise MapError(ErrorKind.PATH_BLOCKED)
    door = exits[-1] if exits else (0, 0)
    return replace(info, door=door)


_Check = Callable[[Sequence[str], MapInfo, bool], MapInfo]