"""Game content: the forest clearing and the kitchen north of it."""

from ..engine.atlas import Atlas
from ..engine.dispatch import DEFAULT_ORDER, DispatchOrder
from ..engine.entity import Entity
from . import forest, kitchen
from .forest import FOREST
from .title import TITLE

__all__ = ["FOREST", "TITLE", "create_atlas", "create_entities"]


def create_entities() -> list[Entity]:
    """Fresh instances of every entity in the game."""
    return forest.create() + kitchen.create()


def create_atlas(
    start: str = FOREST, order: DispatchOrder = DEFAULT_ORDER,
) -> Atlas:
    """Build an Atlas holding the whole game, with the player at ``start``."""
    atlas = Atlas(order=order)
    atlas.add_all(create_entities())
    atlas.start(start)
    return atlas
