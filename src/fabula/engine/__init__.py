"""Parser, entity registry and dispatcher."""

from .atlas import Atlas, Dispatch
from .dispatch import DispatchOrder
from .entity import INVENTORY, NOWHERE, Entity, Item, Room
from .game import Game
from .parser import parse, resolve, tokenize

__all__ = [
    "Atlas",
    "Dispatch",
    "DispatchOrder",
    "Entity",
    "Game",
    "INVENTORY",
    "Item",
    "NOWHERE",
    "Room",
    "parse",
    "resolve",
    "tokenize",
]
