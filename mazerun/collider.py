"""Scene bookkeeping and coin pickup on collision."""

from __future__ import annotations

from typing import Any, Iterator

from mazerun.items import Coin

Rect = tuple[float, float, float, float]


def _scene_rect(item: Any) -> Rect:
    x, y = item.pos
    lx, ly, width, height = item.bounding_rect()
    return (x + lx, y + ly, width, height)


def _overlaps(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


class Scene:
    """A set of positioned items that can be queried for overlaps."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._items)

    def add_item(self, item: Any) -> None:
        """Add an item, taking it from any scene it was in."""
        if item.scene is self:
            return
        if item.scene is not None:
            item.scene.remove_item(item)
        self._items.append(item)
        item.scene = self

    def remove_item(self, item: Any) -> None:
        """Remove an item that belongs to this scene."""
        if item.scene is not self or item not in self:
            raise ValueError("item is not in this scene")
        self._items = [existing for existing in self._items if existing is not item]
        item.scene = None

    def colliding_items(self, item: Any) -> list[Any]:
        """Return the visible items whose rectangles overlap the item's."""
        if item.scene is not self:
            return []
        rect = _scene_rect(item)
        return [
            other
            for other in self._items
            if other is not item and other.visible and _overlaps(rect, _scene_rect(other))
        ]


class ColliderComponent:
    """Collects the coins its owner touches."""

    def __init__(self, owner: Any) -> None:
        self.owner = owner

    def check_collisions(self) -> list[Coin]:
        """Collect every coin overlapping the owner and return them."""
        if self.owner is None:
            return []
        scene = getattr(self.owner, "scene", None)
        if scene is None:
            return []
        collected = []
        for item in scene.colliding_items(self.owner):
            if isinstance(item, Coin):
                item.on_collide(self.owner)
                if item.scene is not None:
                    item.scene.remove_item(item)
                collected.append(item)
        return collected