"""Tests for the entity capability and the game's content."""

import pytest

from fabula.content import create_entities
from fabula.content.forest import Key, Leaves
from fabula.content.kitchen import Bread, BreadBox, GoldRing, Knife, Sink
from fabula.engine.actions import (
    Attack,
    Describe,
    DualTarget,
    Drop,
    Examine,
    Open,
    Take,
    Use,
)
from fabula.engine.atlas import Atlas
from fabula.engine.entity import INVENTORY, NOWHERE, Entity, Item, Room
from fabula.engine.outcomes import (
    Carried,
    CurrentLocation,
    Handled,
    MoveObject,
    ReplaceObject,
    Unhandled,
)


class Plain(Entity):
    name = "plain"


class Picky(Entity):
    name = "picky"
    handles = (Take, Examine)


def test_entity_defaults():
    entity = Plain()
    assert entity.location == NOWHERE
    assert entity.can_handle(Attack("x"))
    assert entity.handle(Attack("x")) == Unhandled()


def test_entity_ignores_relocation():
    entity = Plain()
    entity.set_location("kitchen")
    assert entity.location == NOWHERE


def test_whitelist():
    entity = Picky()
    assert entity.can_handle(Take())
    assert entity.can_handle(Examine("picky"))
    assert not entity.can_handle(Open("picky"))


def test_item_location():
    item = Item("kitchen")
    assert item.location == "kitchen"
    item.set_location(INVENTORY)
    assert item.location == INVENTORY


def test_item_default_location():
    assert Key().location == "leaves"
    assert Bread().location == NOWHERE


def test_names_are_unique():
    names = [e.name for e in create_entities()]
    assert len(names) == len(set(names))


def _probe(entity: Entity, action_type: type) -> object:
    return action_type(entity.name)


@pytest.mark.parametrize(
    "entity", create_entities(), ids=lambda e: e.name,
)
def test_can_handle_agrees_with_handle(entity: Entity):
    """Anything an item says it can handle, it actually handles."""
    if entity.handles is None:
        pytest.skip("rooms are offered actions directly, never through scope")
    for action_type in entity.handles:
        action = _probe(entity, action_type)
        assert entity.can_handle(action)
        assert entity.handle(action) != Unhandled(), action


def test_rooms_never_in_scope(atlas: Atlas):
    """Rooms accept any action, so they must stay out of object filling."""
    rooms = {e.name for e in atlas if isinstance(e, Room)}
    for room in sorted(rooms):
        atlas.set_here(room)
        assert rooms.isdisjoint(atlas.scope())


def test_carryable_only_targets_itself():
    """Two-object verbs aimed at something else are not the item's business."""
    key = Key(INVENTORY)
    assert key.can_handle(Drop("key"))
    assert key.can_handle(Drop())
    assert not key.can_handle(Drop("knife"))


def test_tool_accepts_any_target():
    knife = Knife(INVENTORY)
    assert knife.can_handle(Attack("bread"))
    assert knife.can_handle(Use("breadbox"))
    assert isinstance(Attack("bread"), DualTarget)


def test_take_and_drop():
    key = Key("forest")
    taken = key.handle(Take("key"))
    assert taken == MoveObject("key", Carried(), message="You take the key.")

    key.set_location(INVENTORY)
    assert key.handle(Take("key")) == Handled(message="You already have the key.")
    dropped = key.handle(Drop("key"))
    assert isinstance(dropped, MoveObject)
    assert dropped.destination == CurrentLocation()


def test_gold_ring_reveal_is_one_time():
    """The first description differs from every later one."""
    ring = GoldRing("kitchen")
    first = ring.handle(Describe("gold ring")).message
    second = ring.handle(Describe("gold ring")).message
    third = ring.handle(Describe("gold ring")).message
    assert first != second
    assert second == third
    assert "falls onto the counter" in first


def test_leaves_hide_key_once():
    leaves = Leaves()
    assert leaves.handle(Examine("leaves")) == MoveObject(
        "key",
        CurrentLocation(),
        message="The leaves flutter and fly as you kick through them. "
        "Something small and metal glints underneath.",
    )
    assert isinstance(leaves.handle(Examine("leaves")), Handled)


def test_sink_reveals_knife_once():
    sink = Sink()
    outcome = sink.handle(Examine("sink"))
    assert outcome.name == "knife"
    assert "knife?" in outcome.message
    assert "Gross" in sink.handle(Examine("sink")).message


def test_breadbox_locked_without_key():
    box = BreadBox()
    outcome = box.handle(Open("breadbox"))
    assert "locked" in outcome.message
    assert not box.unlocked


def test_breadbox_wrong_tool():
    box = BreadBox()
    outcome = box.handle(Open("breadbox", "knife"))
    assert outcome == Handled(message="You can't open the breadbox with that.")


def test_breadbox_opens_with_key():
    box = BreadBox()
    outcome = box.handle(Open("breadbox", "key"))
    assert isinstance(outcome, ReplaceObject)
    assert (outcome.old, outcome.new) == ("key", "bread")
    assert box.unlocked
    assert box.handle(Open("breadbox")) == Handled(message="It's empty.")


def test_knife_cuts_bread_once():
    knife = Knife(INVENTORY)
    outcome = knife.handle(Attack("bread", "knife"))
    assert outcome == MoveObject(
        "gold ring",
        CurrentLocation(),
        message="You hack the crusty loaf clean in two. Take that you vile loaf!!",
    )
    again = knife.handle(Use("bread", "knife"))
    assert again == Handled(message="The bread is already in pieces.")


def test_knife_on_anything_else():
    knife = Knife(INVENTORY)
    outcome = knife.handle(Attack("breadbox", "knife"))
    assert "can't use a knife" in outcome.message


def test_bread_resists_other_tools():
    bread = Bread(INVENTORY)
    assert bread.handle(Attack("bread", "key")).message == "The loaf resists the key."
    assert "punch" in bread.handle(Attack("bread")).message
