"""Reading map files line by line and printing the move counter."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .errors import ErrorKind, MapError


def _iter_lines(text: str) -> Iterator[str]:
    """Yield lines of *text*, each keeping its trailing newline if it has one."""
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield text[start : end + 1]
        start = end + 1


def read_lines(path: str | Path) -> list[str]:
    """Read *path* and return its lines with their newlines kept.

    Raises MapError(OP_FAIL) when the file cannot be opened or read.
    """
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(ErrorKind.OP_FAIL) from exc
    return list(_iter_lines(text))


def split_rows(text: str) -> list[str]:
    """Split *text* into map rows with the line endings removed."""
    return [line.removesuffix("\n") for line in _iter_lines(text)]


def write_moves(count: int, stream: TextIO | None = None) -> str:
    """Write the move counter line to *stream* (stdout by default) and return it."""
    line = f"[+] Moves ==> {count}.\n"
    (stream if stream is not None else sys.stdout).write(line)
    return line