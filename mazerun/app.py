"""The game window: scene setup, keyboard control and the main loop."""

from __future__ import annotations

import argparse
import os
import random
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from mazerun.collider import Scene  # noqa: E402
from mazerun.mapmanager import GRID_SIZE, MapError, MazeMap, load_map  # noqa: E402
from mazerun.player import Player  # noqa: E402
from mazerun.renderer import draw_scene  # noqa: E402

WINDOW_SIZE = (1500, 800)
BACKGROUND = (0x33, 0x33, 0x33)
FRAME_MS = 16
DEFAULT_DENSITY = 50

_KEY_MOVES = {
    pygame.K_w: (0, -1),
    pygame.K_s: (0, 1),
    pygame.K_a: (-1, 0),
    pygame.K_d: (1, 0),
}


class Game:
    """A maze with coins and a player, driven by keys and time."""

    def __init__(
        self,
        maze: MazeMap,
        density: int = DEFAULT_DENSITY,
        rng: random.Random | None = None,
    ) -> None:
        self.maze = maze
        self.scene = Scene()
        self.coins = maze.generate_coins(density, rng)
        for coin in self.coins:
            self.scene.add_item(coin)
        self.player = Player(maze, self._start_position())
        self.player.z = 100
        self.scene.add_item(self.player)

    def _start_position(self) -> tuple[int, int]:
        if self.maze.spawn_points:
            x, y = self.maze.spawn_points[0]
            return (x * GRID_SIZE, y * GRID_SIZE)
        width, height = self.maze.grid_size()
        return (width * GRID_SIZE // 2, height * GRID_SIZE // 2)

    def handle_key(self, key: int) -> bool:
        """Move the player for W/A/S/D; return True if a move started."""
        step = _KEY_MOVES.get(key)
        if step is None:
            return False
        return self.player.move(*step)

    def tick(self, dt: float) -> None:
        """Advance the game by dt milliseconds."""
        self.player.advance(dt)

    def _draw(self, screen: pygame.Surface) -> None:
        width, height = self.maze.grid_size()
        canvas = pygame.Surface((max(1, width * GRID_SIZE), max(1, height * GRID_SIZE)))
        draw_scene(canvas, self.scene, self.maze)
        screen.fill(BACKGROUND)
        sw, sh = screen.get_size()
        cw, ch = canvas.get_size()
        scale = min(sw / cw, sh / ch)
        size = (max(1, int(cw * scale)), max(1, int(ch * scale)))
        scaled = pygame.transform.smoothscale(canvas, size)
        screen.blit(scaled, ((sw - size[0]) // 2, (sh - size[1]) // 2))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mazerun", description="Walk the maze and collect coins.")
    parser.add_argument("map", help="path of the map file")
    parser.add_argument(
        "--density",
        type=int,
        default=DEFAULT_DENSITY,
        help="percentage of path cells that get a coin",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Load a map and run the game window until it is closed."""
    args = _parse_args(argv)
    try:
        maze = load_map(args.map)
    except MapError as exc:
        print(f"Failed to load map: {exc}", file=sys.stderr)
        return 1

    game = Game(maze, args.density)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Maze Adventure")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(event.key)
            game.tick(clock.tick(1000 // FRAME_MS))
            game._draw(screen)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())