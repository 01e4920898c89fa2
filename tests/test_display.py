from unittest import mock

import pygame
import pytest

from solong.display import IMAGE_FILES, load_images, main, run
from solong.game import Game

ROWS = ["111111", "1PC0E1", "111111"]


def _write_images(directory):
    directory.mkdir(parents=True, exist_ok=True)
    surface = pygame.Surface((128, 128))
    surface.fill((10, 20, 30))
    for filename in IMAGE_FILES.values():
        pygame.image.save(surface, str(directory / filename))
    return directory


@pytest.fixture
def images_dir(tmp_path):
    return _write_images(tmp_path / "images")


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_load_images_reads_every_sprite(images_dir):
    images = load_images(images_dir)
    assert set(images) == set(IMAGE_FILES)
    assert all(image.get_size() == (128, 128) for image in images.values())


def test_load_images_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_images(tmp_path)


def test_run_stops_on_escape(headless, images_dir):
    game = Game(ROWS)
    with mock.patch("pygame.event.get", return_value=[_key(pygame.K_ESCAPE)]):
        run(game, images_dir)
    assert game.running is False
    assert game.move_count == 0


def test_run_moves_player_until_window_closes(headless, images_dir):
    game = Game(ROWS)
    events = [[_key(pygame.K_RIGHT)], [pygame.event.Event(pygame.QUIT)]]
    with mock.patch("pygame.event.get", side_effect=events):
        run(game, images_dir)
    assert game.player == (1, 2)
    assert game.collect_count == 1
    assert game.running is False


def test_run_ends_when_level_is_won(headless, images_dir):
    game = Game(ROWS)
    events = [[_key(pygame.K_RIGHT), _key(pygame.K_RIGHT), _key(pygame.K_RIGHT)]]
    with mock.patch("pygame.event.get", side_effect=events):
        run(game, images_dir)
    assert game.running is False
    assert game.move_count == 3


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert "Failed to load map" in capsys.readouterr().out


def test_main_missing_map(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert "Failed to load map" in capsys.readouterr().out


def test_main_rejects_non_rectangle(tmp_path, capsys):
    path = tmp_path / "ragged.ber"
    path.write_text("1111\n1P1\n1111\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "not rectangle" in capsys.readouterr().out


def test_main_plays_a_level(headless, tmp_path, monkeypatch, capsys):
    _write_images(tmp_path / "images")
    path = tmp_path / "level.ber"
    path.write_text("\n".join(ROWS) + "\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert all(row in out for row in ROWS)