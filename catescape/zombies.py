"""Bonus features: the animated food, wandering zombies and the move counter."""

from __future__ import annotations

from dataclasses import dataclass

from .state import PLAYER_TILES, Direction, Game, Outcome

ZSPEED = 50
DELAY = 250
FRAME_COUNT = 5
MOVES_LABEL = "[+] ==> Moves :"

_CYCLE = 4
_ZOMBIE_WALLS = frozenset("1CEO")


@dataclass
class FoodAnimation:
    """A frame counter shared by every piece of food on the map."""

    delay: int = DELAY
    counter: int = 0
    current: int = 0

    def frame(self) -> int:
        """Return the frame index to draw now and advance the counter."""
        self.counter += 1
        shown = self.current
        if self.counter >= self.delay:
            self.counter = 0
            self.current += 1
            if self.current >= _CYCLE:
                self.current = 0
        return shown


@dataclass
class ZombieHorde:
    """The pace and heading shared by every zombie on the map."""

    speed: int = ZSPEED
    counter: int = 0
    direction: Direction = Direction.RIGHT

    def tick(self, game: Game, x: int, y: int) -> None:
        """Count one visit of the zombie at (x, y); move it every *speed* visits."""
        self.counter += 1
        if self.counter >= self.speed:
            self.step(game, x, y)
            self.counter = 0

    def step(self, game: Game, x: int, y: int) -> None:
        """Move the zombie at (x, y) one tile along the shared heading.

        A zombie turns at walls, food and exits; stepping onto the player
        ends the game.
        """
        row = game.grid[y]
        if self.direction is Direction.RIGHT and row[x + 1] not in _ZOMBIE_WALLS:
            if row[x + 1] in PLAYER_TILES:
                game.finish(Outcome.LOST)
                return
            row[x + 1] = "Z"
            row[x] = "0"
        else:
            self.direction = Direction.LEFT
        if self.direction is Direction.LEFT and row[x - 1] not in _ZOMBIE_WALLS:
            if row[x - 1] in PLAYER_TILES:
                game.finish(Outcome.LOST)
                return
            row[x - 1] = "Z"
            row[x] = "0"
        else:
            self.direction = Direction.RIGHT


def format_moves(count: int) -> str:
    """The on-screen move counter text."""
    return f"{MOVES_LABEL} {count}"