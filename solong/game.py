"""Game state: the player's moves, collectibles and the exit."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable

from solong.game_map import MapError, Tile
from solong.printf import printf


class Direction(Enum):
    """A step on the grid as ``(row offset, column offset)``."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


class Key(Enum):
    """The keys the game responds to."""

    ESCAPE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


_KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class Game:
    """A running level: the map, the player's position and the counters."""

    def __init__(self, rows: Iterable[str]) -> None:
        self.rows: list[list[str]] = [list(row) for row in rows]
        cells = [
            ((y, x), ch)
            for y, row in enumerate(self.rows)
            for x, ch in enumerate(row)
        ]
        player = next((pos for pos, ch in cells if ch == Tile.PLAYER), None)
        if player is None:
            raise MapError("map has no starting position")
        self.player: tuple[int, int] = player
        self.collectibles: set[tuple[int, int]] = {
            pos for pos, ch in cells if ch == Tile.COLLECT
        }
        self.collect_amount = len(self.collectibles)
        self.collect_count = 0
        self.move_count = 0
        self.exit_open = False
        self.running = True

    def _tile(self, row: int, col: int) -> str | None:
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return None

    def move(self, direction: Direction) -> bool:
        """Step the player one tile unless a wall is in the way.

        Return True when the player moved.
        """
        dy, dx = direction.value
        row, col = self.player[0] + dy, self.player[1] + dx
        target = self._tile(row, col)
        if target is None or target == Tile.WALL:
            return False
        self.player = (row, col)
        self.move_count += 1
        printf("MOVES: %i\n", self.move_count)
        if target == Tile.COLLECT:
            self.collect_found()
        elif target == Tile.EXIT:
            self.exit_found()
        return True

    def move_up(self) -> bool:
        return self.move(Direction.UP)

    def move_down(self) -> bool:
        return self.move(Direction.DOWN)

    def move_left(self) -> bool:
        return self.move(Direction.LEFT)

    def move_right(self) -> bool:
        return self.move(Direction.RIGHT)

    def handle_key(self, key: Key) -> None:
        """Close the game on Escape; move on an arrow key."""
        if key is Key.ESCAPE:
            self.running = False
        elif key in _KEY_DIRECTIONS:
            self.move(_KEY_DIRECTIONS[key])

    def collect_found(self) -> None:
        """Pick up the collectible under the player, opening the exit after the last."""
        if self.player not in self.collectibles:
            return
        self.collectibles.discard(self.player)
        row, col = self.player
        self.rows[row][col] = Tile.FLOOR.value
        self.collect_count += 1
        if self.collect_count == self.collect_amount:
            self.exit_open = True

    def exit_found(self) -> None:
        """Finish the game when every collectible has been picked up."""
        if self.collect_count == self.collect_amount:
            printf("Succes\n")
            self.running = False