"""Error kinds reported while checking a map or starting the game."""

from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """Every failure the game can report to the user."""

    USAGE = 1
    INVALID = 2
    OP_FAIL = 3
    EMPTY = 4
    MAP_GAP = 5
    SYMBOL = 6
    RECT = 7
    PARAMS = 8
    MALLOC_F = 9
    PATH_BLOCKED = 10
    IMAGE = 11
    BIG_MAP = 12

    @property
    def message(self) -> str:
        """The one-line description shown for this kind."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.USAGE: "Usage: ./so_long <map_name>.ber",
    ErrorKind.INVALID: "Invalid Map.",
    ErrorKind.OP_FAIL: "Failed To Open File.",
    ErrorKind.EMPTY: "Empty Map.",
    ErrorKind.MAP_GAP: "Found A Gap In The Map.",
    ErrorKind.SYMBOL: "Please Enter A Valid Map Configuration.",
    ErrorKind.RECT: "The Map Must Be Rectangular.",
    ErrorKind.PARAMS: "Invalid (Player-Exit-Collec) Count.",
    ErrorKind.MALLOC_F: "Malloc Failure.",
    ErrorKind.PATH_BLOCKED: "Player Path Blocked.",
    ErrorKind.IMAGE: "Invalid Texture.",
    ErrorKind.BIG_MAP: "Map Is Way Too Big.",
}


def format_error(kind: ErrorKind | int) -> str:
    """Return the full error report for *kind*, as written to stderr.

    An unknown kind yields only the ``Error`` header line.
    """
    try:
        known = ErrorKind(kind)
    except ValueError:
        return "Error\n"
    return f"Error\n{known.message}\n"


class MapError(Exception):
    """Raised when a map or the game setup fails one of the checks."""

    def __init__(self, kind: ErrorKind | int) -> None:
        self.kind = ErrorKind(kind)
        super().__init__(self.kind.message)

    @property
    def report(self) -> str:
        """The text to print to stderr for this error."""
        return format_error(self.kind)