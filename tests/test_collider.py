import pytest

from mazerun.collider import ColliderComponent, Scene
from mazerun.items import Coin


class _Owner:
    def __init__(self, pos=(0.0, 0.0)):
        self.pos = pos
        self.visible = True
        self.scene = None
        self.gold = 0

    def bounding_rect(self):
        return (0.0, 0.0, 25.0, 25.0)

    def add_gold(self, amount):
        self.gold += amount


def test_add_and_remove_item():
    scene = Scene()
    coin = Coin()
    scene.add_item(coin)
    assert coin in scene
    assert coin.scene is scene
    scene.remove_item(coin)
    assert coin not in scene
    assert coin.scene is None
    assert len(scene) == 0


def test_adding_twice_keeps_one_entry():
    scene = Scene()
    coin = Coin()
    scene.add_item(coin)
    scene.add_item(coin)
    assert list(scene) == [coin]


def test_moving_item_between_scenes():
    first, second = Scene(), Scene()
    coin = Coin()
    first.add_item(coin)
    second.add_item(coin)
    assert coin not in first
    assert coin in second


def test_remove_unknown_item_raises():
    with pytest.raises(ValueError):
        Scene().remove_item(Coin())


def test_colliding_items_overlap_only():
    scene = Scene()
    owner = _Owner()
    near = Coin(pos=(10.0, 10.0))
    far = Coin(pos=(200.0, 200.0))
    for item in (owner, near, far):
        scene.add_item(item)
    assert scene.colliding_items(owner) == [near]


def test_touching_edges_do_not_collide():
    scene = Scene()
    owner = _Owner()
    edge = Coin(pos=(25.0, 0.0))
    scene.add_item(owner)
    scene.add_item(edge)
    assert scene.colliding_items(owner) == []


def test_hidden_items_do_not_collide():
    scene = Scene()
    owner = _Owner()
    coin = Coin(pos=(0.0, 0.0), visible=False)
    scene.add_item(owner)
    scene.add_item(coin)
    assert scene.colliding_items(owner) == []


def test_item_outside_scene_has_no_collisions():
    scene = Scene()
    scene.add_item(Coin())
    assert scene.colliding_items(_Owner()) == []


def test_check_collisions_collects_coin():
    scene = Scene()
    owner = _Owner()
    coin = Coin(pos=(5.0, 5.0))
    scene.add_item(owner)
    scene.add_item(coin)
    collected = ColliderComponent(owner).check_collisions()
    assert collected == [coin]
    assert owner.gold == Coin.VALUE
    assert coin not in scene
    assert owner in scene


def test_check_collisions_without_scene():
    owner = _Owner()
    assert ColliderComponent(owner).check_collisions() == []
    assert owner.gold == 0


def test_check_collisions_without_owner():
    assert ColliderComponent(None).check_collisions() == []