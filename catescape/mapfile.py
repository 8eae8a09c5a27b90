"""Checking the map file name and the layout of a map."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import ErrorKind, MapError
from .textio import read_lines

MAP_SUFFIX = ".ber"
MAX_WIDTH = 40
MAX_HEIGHT = 21

_SYMBOLS = frozenset("01CEP")
_BONUS_SYMBOLS = frozenset("01CEPZ")

Position = tuple[int, int]


@dataclass(frozen=True)
class MapInfo:
    """What a valid map holds: its size, the player and the counted tiles."""

    width: int
    height: int
    player: Position | None
    players: int
    collectibles: int
    exits: int
    zombies: int = 0
    door: Position | None = None


def check_map_name(argv: Sequence[str]) -> str:
    """Return the map path from the command-line arguments.

    *argv* holds the arguments after the program name. Exactly one is
    expected, and the text from its last dot on must be ``.ber``.
    Raises MapError(USAGE) otherwise.
    """
    if len(argv) != 1:
        raise MapError(ErrorKind.USAGE)
    name = argv[0]
    dot = name.rfind(".")
    if dot == -1 or name[dot:] != MAP_SUFFIX:
        raise MapError(ErrorKind.USAGE)
    return name


def measure(lines: Sequence[str]) -> tuple[int, int]:
    """Return the (width, height) of a map read as raw lines.

    The width is taken from the first line less its final character, the
    height is the number of lines. Raises MapError(EMPTY) for no lines and
    MapError(BIG_MAP) when the map exceeds the allowed size.
    """
    if not lines:
        raise MapError(ErrorKind.EMPTY)
    width = max(len(lines[0]) - 1, 0)
    height = len(lines)
    if height > MAX_HEIGHT or width > MAX_WIDTH:
        raise MapError(ErrorKind.BIG_MAP)
    return width, height


def validate_rows(
    rows: Sequence[str], width: int, height: int, bonus: bool = False
) -> MapInfo:
    """Check every row of the map and count its pieces.

    Raises MapError with RECT for a row of the wrong width, MAP_GAP for a
    border tile that is not a wall, SYMBOL for an unknown tile and PARAMS
    when there is not exactly one player and one exit and at least one
    collectible.
    """
    symbols = _BONUS_SYMBOLS if bonus else _SYMBOLS
    counts: Counter[str] = Counter()
    player: Position | None = None
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MapError(ErrorKind.RECT)
        for x, symbol in enumerate(row):
            on_edge = x in (0, width - 1) or y in (0, height - 1)
            if on_edge and symbol != "1":
                raise MapError(ErrorKind.MAP_GAP)
            if symbol not in symbols:
                raise MapError(ErrorKind.SYMBOL)
            if symbol == "P":
                player = (x, y)
            counts[symbol] += 1
    if counts["E"] != 1 or counts["P"] != 1 or counts["C"] < 1:
        raise MapError(ErrorKind.PARAMS)
    return MapInfo(
        width=width,
        height=height,
        player=player,
        players=counts["P"],
        collectibles=counts["C"],
        exits=counts["E"],
        zombies=counts["Z"],
    )


def load_map(path: str | Path, bonus: bool = False) -> tuple[list[str], MapInfo]:
    """Read the map at *path* and check its layout.

    Returns the rows without line endings and the map's MapInfo. Paths
    through the map are not checked here.
    """
    lines = read_lines(path)
    width, height = measure(lines)
    rows = [line.removesuffix("\n") for line in lines]
    return rows, validate_rows(rows, width, height, bonus)