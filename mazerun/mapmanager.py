"""Maze map parsing, tile queries and coin placement."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from mazerun.items import Coin

GRID_SIZE = 25


class TileType(Enum):
    """Kind of a single map cell, keyed by its character in a map file."""

    WALL = "W"
    PATH = "P"
    SPAWN = "S"

    @classmethod
    def from_char(cls, char: str) -> TileType:
        """Return the tile for a map character; unknown characters are walls."""
        try:
            return cls(char)
        except ValueError:
            return cls.WALL


class MapError(ValueError):
    """Raised when a map cannot be read or is malformed."""


@dataclass(frozen=True)
class MazeMap:
    """A rectangular grid of tiles with its spawn points."""

    width: int
    height: int
    tiles: tuple[tuple[TileType, ...], ...]
    spawn_points: tuple[tuple[int, int], ...] = ()

    def is_walkable(self, x: int, y: int) -> bool:
        """Return True if the cell is inside the map and not a wall."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return self.tiles[y][x] is not TileType.WALL

    def grid_size(self) -> tuple[int, int]:
        """Return (width, height) in cells."""
        return (self.width, self.height)

    def path_tiles(self) -> list[tuple[int, int]]:
        """Return the coordinates of all plain path cells, row by row."""
        return [
            (x, y)
            for y, row in enumerate(self.tiles)
            for x, tile in enumerate(row)
            if tile is TileType.PATH
        ]

    def generate_coins(self, density: int, rng: random.Random | None = None) -> list[Coin]:
        """Place coins on a random `density` percent of the path cells."""
        if rng is None:
            rng = random.Random()
        tiles = self.path_tiles()
        count = max(0, min(len(tiles) * density // 100, len(tiles)))
        rng.shuffle(tiles)
        offset = (GRID_SIZE - Coin.SIZE) / 2
        return [
            Coin(pos=(x * GRID_SIZE + offset, y * GRID_SIZE + offset))
            for x, y in tiles[:count]
        ]


def _parse_dimension(part: str, header: str) -> int:
    try:
        value = int(part)
    except ValueError:
        raise MapError(f"invalid map size format: {header!r}") from None
    if value < 0:
        raise MapError(f"negative map size: {header!r}")
    return value


def parse_map(text: str) -> MazeMap:
    """Parse map text: a 'WIDTHxHEIGHT' line followed by rows of tiles."""
    lines = text.splitlines()
    header = lines[0] if lines else ""
    parts = header.split("x")
    if len(parts) != 2:
        raise MapError(f"invalid map size format: {header!r}")
    width = _parse_dimension(parts[0], header)
    height = _parse_dimension(parts[1], header)

    rows: list[tuple[TileType, ...]] = []
    spawns: list[tuple[int, int]] = []
    for raw in lines[1:]:
        if len(rows) >= height:
            break
        line = raw.strip()[:width]
        if len(line) != width:
            raise MapError(f"map line length mismatch at line {len(rows) + 1}")
        y = len(rows)
        row = tuple(TileType.from_char(char) for char in line)
        spawns.extend((x, y) for x, tile in enumerate(row) if tile is TileType.SPAWN)
        rows.append(row)

    if len(rows) < height:
        raise MapError(f"expected {height} map rows, found {len(rows)}")
    return MazeMap(width, height, tuple(rows), tuple(spawns))


def load_map(path: str | Path) -> MazeMap:
    """Read and parse a map file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MapError(f"failed to open map file: {path}") from exc
    return parse_map(text)