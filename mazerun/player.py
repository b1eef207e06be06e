"""The player piece: grid movement, animation and coin pickup."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from mazerun.collider import ColliderComponent
from mazerun.mapmanager import GRID_SIZE, MazeMap

MOVE_DURATION_MS = 100


def _qround(value: float) -> int:
    return math.floor(value + 0.5)


def _tdiv(a: int, b: int) -> int:
    quotient = abs(a) // b
    return quotient if a >= 0 else -quotient


@dataclass
class _Animation:
    start: tuple[float, float]
    end: tuple[float, float]
    elapsed: float = 0.0


class Player:
    """A one-cell piece that slides between cells of a maze."""

    SIZE = GRID_SIZE

    def __init__(self, maze: MazeMap, pos: tuple[float, float] = (0.0, 0.0)) -> None:
        self.maze = maze
        self.pos = (float(pos[0]), float(pos[1]))
        self.gold = 0
        self.visible = True
        self.z = 100
        self.scene = None
        self.gold_listeners: list[Callable[[int], None]] = []
        self.collider = ColliderComponent(self)
        self._anim: _Animation | None = None
        self._progress = 0.0

    @property
    def is_moving(self) -> bool:
        return self._anim is not None

    @property
    def progress(self) -> float:
        return self._progress

    @progress.setter
    def progress(self, value: float) -> None:
        self._progress = value
        self.update_collision()

    def bounding_rect(self) -> tuple[float, float, float, float]:
        """Return the local rectangle as (x, y, width, height)."""
        return (0.0, 0.0, float(self.SIZE), float(self.SIZE))

    def move(self, dx: int, dy: int) -> bool:
        """Start sliding by (dx, dy) cells; return False if refused."""
        if self._anim is not None:
            return False
        x, y = self.pos
        target = (_qround(x) + dx * GRID_SIZE, _qround(y) + dy * GRID_SIZE)
        if not self.check_collision(target):
            return False
        self._anim = _Animation(self.pos, (float(target[0]), float(target[1])))
        return True

    def advance(self, dt: float) -> None:
        """Advance the running move by dt milliseconds."""
        anim = self._anim
        if anim is None:
            return
        if dt < 0:
            raise ValueError("dt must not be negative")
        anim.elapsed += dt
        t = min(1.0, anim.elapsed / MOVE_DURATION_MS)
        (sx, sy), (ex, ey) = anim.start, anim.end
        self.pos = (sx + (ex - sx) * t, sy + (ey - sy) * t)
        if not self.check_collision((_qround(self.pos[0]), _qround(self.pos[1]))):
            self.pos = anim.start
            self._anim = None
            return
        if t >= 1.0:
            self._anim = None
            self.collider.check_collisions()

    def check_collision(self, pos: tuple[int, int]) -> bool:
        """Return True if a player at pixel position pos is on open cells only."""
        x, y = int(pos[0]), int(pos[1])
        left = _tdiv(x, GRID_SIZE)
        right = _tdiv(x + GRID_SIZE - 1, GRID_SIZE)
        top = _tdiv(y, GRID_SIZE)
        bottom = _tdiv(y + GRID_SIZE - 1, GRID_SIZE)
        return all(
            self.maze.is_walkable(cx, cy)
            for cx in range(left, right + 1)
            for cy in range(top, bottom + 1)
        )

    def update_collision(self) -> bool:
        """Undo a running move if the player overlaps a blocked cell."""
        x, y = self.pos
        left = math.floor(x / GRID_SIZE)
        right = math.ceil((x + self.SIZE) / GRID_SIZE) - 1
        top = math.floor(y / GRID_SIZE)
        bottom = math.ceil((y + self.SIZE) / GRID_SIZE) - 1
        for cx in range(left, right + 1):
            for cy in range(top, bottom + 1):
                if not self.maze.is_walkable(cx, cy):
                    if self._anim is not None:
                        self.pos = self._anim.start
                        self._anim = None
                    return False
        return True

    def add_gold(self, amount: int) -> int:
        """Add gold, notify listeners and return the new total."""
        self.gold += amount
        for listener in list(self.gold_listeners):
            listener(self.gold)
        return self.gold