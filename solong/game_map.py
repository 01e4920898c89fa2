"""Map tiles, loading a map file and checking its shape."""

from __future__ import annotations

import os
from enum import Enum
from typing import Sequence

from solong.linereader import LineReader

TILE_SIZE = 128


class Tile(str, Enum):
    """The characters a map file is made of."""

    FLOOR = "0"
    WALL = "1"
    PLAYER = "P"
    COLLECT = "C"
    EXIT = "E"


class MapError(Exception):
    """Raised when a map cannot be loaded or is malformed."""


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read the map at ``path`` and return its rows without line endings.

    Raises MapError when the file cannot be opened or holds no rows.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            rows = [line.rstrip("\n") for line in LineReader(stream)]
    except OSError as exc:
        raise MapError("Failed to load map") from exc
    if not rows:
        raise MapError("Failed to load map")
    return rows


def check_rectangle(rows: Sequence[Sequence[str]]) -> None:
    """Raise MapError unless every row has the length of the first one."""
    if not rows:
        raise MapError("not rectangle")
    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise MapError("not rectangle")


def map_size(rows: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return the map's size in pixels as ``(width, height)``."""
    if not rows:
        raise MapError("empty map")
    return len(rows[0]) * TILE_SIZE, len(rows) * TILE_SIZE