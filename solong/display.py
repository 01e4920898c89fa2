"""Window, drawing and the command that starts a level."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Game, Key  # noqa: E402
from solong.game_map import (  # noqa: E402
    TILE_SIZE,
    MapError,
    Tile,
    check_rectangle,
    map_size,
    read_map,
)

DEFAULT_IMAGES_DIR = "./images"
TITLE = "so_long"

IMAGE_FILES = {
    "floor": "background128.png",
    "wall": "2wall128.png",
    "player": "mouse128.png",
    "collect": "cheese128.png",
    "exit": "exit128.png",
    "open": "open128.png",
    "enemy": "spook128.png",
}

_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}

_REPEAT_DELAY_MS = 300
_REPEAT_INTERVAL_MS = 100
_FPS = 60


def load_images(images_dir: str | os.PathLike[str] = DEFAULT_IMAGES_DIR) -> dict[str, pygame.Surface]:
    """Load every sprite from ``images_dir``, keyed by its role."""
    directory = Path(images_dir)
    images = {}
    for name, filename in IMAGE_FILES.items():
        path = directory / filename
        if not path.is_file():
            raise FileNotFoundError(f"missing image: {path}")
        images[name] = pygame.image.load(str(path))
    return images


def _draw(screen: pygame.Surface, game: Game, images: dict[str, pygame.Surface]) -> None:
    for y, row in enumerate(game.rows):
        for x, ch in enumerate(row):
            pos = (x * TILE_SIZE, y * TILE_SIZE)
            screen.blit(images["floor"], pos)
            if ch == Tile.WALL:
                screen.blit(images["wall"], pos)
            elif ch == Tile.EXIT:
                screen.blit(images["open"], pos)
                if not game.exit_open:
                    screen.blit(images["exit"], pos)
    for y, x in game.collectibles:
        screen.blit(images["collect"], (x * TILE_SIZE, y * TILE_SIZE))
    py, px = game.player
    screen.blit(images["player"], (px * TILE_SIZE, py * TILE_SIZE))


def run(game: Game, images_dir: str | os.PathLike[str] = DEFAULT_IMAGES_DIR) -> None:
    """Open a window and play ``game`` until it ends or the window is closed."""
    size = map_size(game.rows)
    pygame.init()
    try:
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(TITLE)
        images = load_images(images_dir)
        pygame.key.set_repeat(_REPEAT_DELAY_MS, _REPEAT_INTERVAL_MS)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN and event.key in _KEYS:
                    game.handle_key(_KEYS[event.key])
                if not game.running:
                    break
            _draw(screen, game, images)
            pygame.display.flip()
            clock.tick(_FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named by the first argument and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Failed to load map")
        return 1
    try:
        rows = read_map(args[0])
    except MapError as exc:
        print(exc)
        return 1
    for row in rows:
        print(row)
    try:
        check_rectangle(rows)
        game = Game(rows)
    except MapError as exc:
        print(exc)
        return 1
    run(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())