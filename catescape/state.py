"""The state of a running game: the grid, the player and the rules of a move."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from .mapfile import MapInfo, Position
from .textio import write_moves

PLAYER_TILES = frozenset("PRLUD")
ITEM_TILES = frozenset("CEO")
_BLOCKING = frozenset("1E")

_PLAYER_SPRITES = {
    "P": "catr",
    "R": "catr",
    "L": "catl",
    "U": "catu",
    "D": "catd",
}
_ITEM_SPRITES = {"C": "food", "E": "exit_c", "O": "exit_o"}


class Direction(Enum):
    """A step on the grid as (dx, dy)."""

    RIGHT = (1, 0)
    LEFT = (-1, 0)
    UP = (0, -1)
    DOWN = (0, 1)


class Outcome(Enum):
    """How a game ended; the value is the message printed for it."""

    WON = "You Won!"
    LOST = "You Lost!"
    QUIT = ""


def _facing(dx: int, dy: int) -> str:
    """The tile that marks the player after a step of (dx, dy)."""
    tile = "P"
    if dx > 0:
        tile = "R"
    elif dx < 0:
        tile = "L"
    if dy > 0:
        tile = "D"
    elif dy < 0:
        tile = "U"
    return tile


@dataclass
class Game:
    """A game in progress.

    The grid holds one character per tile. The player is marked with one
    of ``PRLUD`` for the way it faces. The first move request is swallowed,
    as the game only starts listening after it.
    """

    grid: list[list[str]]
    width: int
    height: int
    player: Position
    door: Position | None
    food: int
    bonus: bool = False
    out: TextIO | None = None
    on_zombie: Callable[[Game, int, int], object] | None = None
    moves: int = 0
    outcome: Outcome | None = None
    previous: Position | None = None
    _armed: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_map(cls, rows: Sequence[str], info: MapInfo) -> Game:
        """Build a game from checked map rows and their MapInfo.

        The player starts facing right in the left half of the map and
        left in the right half.
        """
        grid = [list(row) for row in rows]
        player = info.player if info.player is not None else (0, 0)
        px, py = player
        if grid and grid[py][px] == "P":
            grid[py][px] = "R" if info.width // 2 - px >= 0 else "L"
        return cls(
            grid=grid,
            width=info.width,
            height=info.height,
            player=player,
            door=info.door,
            food=info.collectibles,
        )

    @property
    def over(self) -> bool:
        """Whether the game has ended."""
        return self.outcome is not None

    def tile_at(self, x: int, y: int) -> str:
        """The tile character at (x, y)."""
        return self.grid[y][x]

    def move(self, direction: Direction) -> Outcome | None:
        """Try to step the player one tile; return the outcome if the game ends."""
        if self.outcome is not None:
            return self.outcome
        x, y = self.player
        dx, dy = direction.value
        nx, ny = x + dx, y + dy
        target = self.grid[ny][nx]
        if not self._armed or target in _BLOCKING:
            self._armed = True
            return None
        self.previous = (x, y)
        if target == "C":
            self.food -= 1
        elif target == "O":
            return self.finish(Outcome.WON)
        elif self.bonus and target == "Z":
            return self.finish(Outcome.LOST)
        self.grid[y][x] = "0"
        self.player = (nx, ny)
        self.grid[ny][nx] = _facing(dx, dy)
        self.moves += 1
        if not self.bonus:
            write_moves(self.moves, self.out)
        return None

    def refresh(self) -> Outcome | None:
        """Advance one frame: open the door once all food is eaten, move zombies."""
        if self.outcome is not None:
            return self.outcome
        if self.food <= 0 and self.door is not None:
            dx, dy = self.door
            self.grid[dy][dx] = "O"
        if self.on_zombie is not None:
            for y in range(self.height):
                for x in range(self.width):
                    if self.grid[y][x] == "Z":
                        self.on_zombie(self, x, y)
                        if self.outcome is not None:
                            return self.outcome
        return self.outcome

    def sprite_at(self, x: int, y: int) -> str:
        """The name of the texture shown at (x, y)."""
        tile = self.grid[y][x]
        if tile in _PLAYER_SPRITES:
            return _PLAYER_SPRITES[tile]
        if tile == "Z":
            return "zright"
        if tile in _ITEM_SPRITES:
            return _ITEM_SPRITES[tile]
        if tile != "1":
            return "grass"
        if y + 1 < self.height and self.grid[y + 1][x] == "1":
            return "cobble_t"
        return "cobble"

    def finish(self, outcome: Outcome) -> Outcome:
        """End the game with *outcome*, printing its message if it has one."""
        self.outcome = outcome
        if outcome.value:
            (self.out if self.out is not None else sys.stdout).write(
                f"{outcome.value}\n"
            )
        return outcome