"""Collectable items placed in the maze."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar


class Item(ABC):
    """Something that reacts when the player touches it."""

    @abstractmethod
    def on_collide(self, player: Any) -> None:
        """React to the player colliding with this item."""


@dataclass(eq=False)
class Coin(Item):
    """A coin worth one gold, drawn as a 32x32 image."""

    SIZE: ClassVar[int] = 32
    VALUE: ClassVar[int] = 1

    pos: tuple[float, float] = (0.0, 0.0)
    visible: bool = True
    z: int = 100
    scene: Any = field(default=None, repr=False)

    def bounding_rect(self) -> tuple[float, float, float, float]:
        """Return the local rectangle as (x, y, width, height)."""
        return (0.0, 0.0, float(self.SIZE), float(self.SIZE))

    def on_collide(self, player: Any) -> None:
        """Give the player this coin's gold and hide it."""
        if player is None:
            return
        player.add_gold(self.VALUE)
        self.visible = False