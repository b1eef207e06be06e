"""Drawing of the maze grid and the items placed on it."""

from __future__ import annotations

import pygame

from mazerun.collider import Scene
from mazerun.items import Coin
from mazerun.mapmanager import GRID_SIZE, MazeMap
from mazerun.player import Player

WALKABLE_COLOR = (255, 255, 255)
WALL_COLOR = (128, 128, 128)
BORDER_COLOR = (255, 0, 0)
COIN_COLOR = (255, 200, 0)
COIN_EDGE_COLOR = (180, 120, 0)
PLAYER_FILL = (0, 128, 255, 200)
PLAYER_EDGE = (0, 0, 128, 255)


def _fill_tiles(surface: pygame.Surface, maze: MazeMap, cell_size: int) -> None:
    width, height = maze.grid_size()
    for y in range(height):
        for x in range(width):
            color = WALKABLE_COLOR if maze.is_walkable(x, y) else WALL_COLOR
            surface.fill(color, pygame.Rect(x * cell_size, y * cell_size, cell_size, cell_size))


def render_map(maze: MazeMap, cell_size: int = 50) -> pygame.Surface:
    """Return a surface showing every cell of the maze with a red outline."""
    if cell_size <= 0:
        raise ValueError("cell_size must be positive")
    width, height = maze.grid_size()
    surface = pygame.Surface((width * cell_size, height * cell_size), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    _fill_tiles(surface, maze, cell_size)
    if width and height:
        pygame.draw.rect(surface, BORDER_COLOR, surface.get_rect(), 1)
    return surface


def _draw_coin(surface: pygame.Surface, coin: Coin) -> None:
    x, y = coin.pos
    _, _, w, h = coin.bounding_rect()
    rect = pygame.Rect(round(x), round(y), round(w), round(h))
    pygame.draw.ellipse(surface, COIN_COLOR, rect)
    pygame.draw.ellipse(surface, COIN_EDGE_COLOR, rect, 2)


def _draw_player(surface: pygame.Surface, player: Player) -> None:
    _, _, w, h = player.bounding_rect()
    sprite = pygame.Surface((round(w), round(h)), pygame.SRCALPHA)
    inner = sprite.get_rect().inflate(-4, -4)
    pygame.draw.ellipse(sprite, PLAYER_FILL, inner)
    pygame.draw.ellipse(sprite, PLAYER_EDGE, inner, 2)
    x, y = player.pos
    surface.blit(sprite, (round(x), round(y)))


def draw_scene(surface: pygame.Surface, scene: Scene, maze: MazeMap) -> pygame.Surface:
    """Draw the maze tiles and the visible scene items, lowest z first."""
    _fill_tiles(surface, maze, GRID_SIZE)
    for item in sorted(scene, key=lambda entry: entry.z):
        if not item.visible:
            continue
        if isinstance(item, Coin):
            _draw_coin(surface, item)
        elif isinstance(item, Player):
            _draw_player(surface, item)
    return surface