"""Command-line entry points: check the map, then open the game window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .errors import ErrorKind, MapError
from .mapfile import check_map_name, load_map
from .pathcheck import check_paths
from .render import run
from .state import Game

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def prepare(argv: Sequence[str], bonus: bool = False) -> Game:
    """Check the arguments and the map they name, and build a game from it.

    *argv* holds the arguments after the program name. Raises MapError
    for a bad command line, an unreadable file, a malformed map or a map
    whose pieces cannot all be reached.
    """
    path = check_map_name(argv)
    rows, info = load_map(path, bonus)
    info = check_paths(rows, info, bonus)
    game = Game.from_map(rows, info)
    game.bonus = bonus
    return game


def _play(argv: Sequence[str] | None, bonus: bool) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        game = prepare(args, bonus)
    except MapError as exc:
        sys.stderr.write(exc.report)
        return EXIT_FAILURE
    try:
        run(game, bonus)
    except MapError as exc:
        sys.stderr.write(exc.report)
        # A missing texture is reported, but the game still shuts down cleanly.
        return EXIT_SUCCESS if exc.kind is ErrorKind.IMAGE else EXIT_FAILURE
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """Play the plain game on the map named in *argv*; return the exit status."""
    return _play(argv, bonus=False)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Play the bonus game, with zombies and animated food; return the exit status."""
    return _play(argv, bonus=True)


if __name__ == "__main__":
    sys.exit(main())