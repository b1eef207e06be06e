import random

import pygame
import pytest

from mazerun.app import Game, main
from mazerun.mapmanager import GRID_SIZE, parse_map
from mazerun.player import MOVE_DURATION_MS

SPAWN_MAP = "5x3\nWWWWW\nWSPPW\nWWWWW\n"
NO_SPAWN_MAP = "4x2\nPPPP\nPPPP\n"


@pytest.fixture
def game():
    return Game(parse_map(SPAWN_MAP), density=0, rng=random.Random(1))


def test_player_starts_on_first_spawn(game):
    assert game.player.pos == (GRID_SIZE, GRID_SIZE)
    assert game.player in game.scene


def test_player_centred_without_spawn():
    maze = parse_map(NO_SPAWN_MAP)
    g = Game(maze, density=0)
    assert g.player.pos == (4 * GRID_SIZE // 2, 2 * GRID_SIZE // 2)


def test_coin_count_follows_density():
    maze = parse_map(NO_SPAWN_MAP)
    g = Game(maze, density=50, rng=random.Random(3))
    assert len(g.coins) == len(maze.path_tiles()) * 50 // 100
    assert all(coin in g.scene for coin in g.coins)


def test_move_right_completes_after_duration(game):
    assert game.handle_key(pygame.K_d) is True
    game.tick(MOVE_DURATION_MS)
    assert game.player.pos == (2 * GRID_SIZE, GRID_SIZE)
    assert game.player.is_moving is False


def test_move_into_wall_is_refused(game):
    assert game.handle_key(pygame.K_w) is False
    assert game.handle_key(pygame.K_a) is False
    assert game.player.pos == (GRID_SIZE, GRID_SIZE)


def test_unknown_key_is_ignored(game):
    assert game.handle_key(pygame.K_q) is False
    assert game.player.is_moving is False


def test_second_key_ignored_while_moving(game):
    assert game.handle_key(pygame.K_d) is True
    assert game.handle_key(pygame.K_d) is False
    game.tick(MOVE_DURATION_MS / 2)
    assert game.player.is_moving is True


def test_negative_tick_rejected_while_moving(game):
    game.handle_key(pygame.K_d)
    with pytest.raises(ValueError):
        game.tick(-1)


def test_collected_coins_match_gold():
    g = Game(parse_map(SPAWN_MAP), density=100, rng=random.Random(7))
    initial = len(g.coins)
    g.handle_key(pygame.K_d)
    g.tick(MOVE_DURATION_MS)
    remaining = sum(1 for coin in g.coins if coin in g.scene)
    assert g.player.gold >= 1
    assert g.player.gold + remaining == initial


def test_main_returns_error_for_missing_map(tmp_path):
    assert main([str(tmp_path / "absent.map")]) == 1


def test_main_returns_error_for_bad_map(tmp_path):
    path = tmp_path / "bad.map"
    path.write_text("not a size\n", encoding="utf-8")
    assert main([str(path)]) == 1