"""Actions produced by the parser and consumed by entities.

An Action is a small frozen dataclass. The variant is the class; the slots it
carries depend on the verb category.
"""

from dataclasses import dataclass, replace
from enum import Enum


class Direction(Enum):
    """Closed set of movement directions."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"  # the way in, as "here" understands it
    EXIT = "exit"  # the way back out


@dataclass(frozen=True)
class Action:
    """Base class of every action variant."""

    verb = ""

    @property
    def target(self) -> str | None:
        return None

    @property
    def indirect(self) -> str | None:
        return None

    @property
    def is_error(self) -> bool:
        return False

    def with_target(self, name: str) -> "Action":
        return self

    def with_indirect(self, name: str) -> "Action":
        return self


# --- Movement ---


@dataclass(frozen=True)
class Go(Action):
    verb = "go"
    direction: Direction = Direction.EXIT


# --- Single-target verbs: no target means "here" ---


@dataclass(frozen=True)
class SingleTarget(Action):
    object: str | None = None

    @property
    def target(self) -> str | None:
        return self.object

    def with_target(self, name: str) -> "Action":
        return replace(self, object=name)


@dataclass(frozen=True)
class Climb(SingleTarget):
    verb = "climb"


@dataclass(frozen=True)
class Describe(SingleTarget):
    verb = "describe"


@dataclass(frozen=True)
class Examine(SingleTarget):
    verb = "examine"


@dataclass(frozen=True)
class Follow(SingleTarget):
    verb = "follow"


@dataclass(frozen=True)
class Listen(SingleTarget):
    verb = "listen"


@dataclass(frozen=True)
class Take(SingleTarget):
    verb = "take"


# --- Dual-target verbs: direct target required, indirect optional ---


@dataclass(frozen=True)
class DualTarget(Action):
    # None only while the parser is probing entities for a blank slot.
    object: str | None = None
    tool: str | None = None

    @property
    def target(self) -> str | None:
        return self.object

    @property
    def indirect(self) -> str | None:
        return self.tool

    def with_target(self, name: str) -> "Action":
        return replace(self, object=name)

    def with_indirect(self, name: str) -> "Action":
        return replace(self, tool=name)


@dataclass(frozen=True)
class Attack(DualTarget):
    verb = "attack"


@dataclass(frozen=True)
class Drop(DualTarget):
    verb = "drop"


@dataclass(frozen=True)
class Light(DualTarget):
    verb = "light"


@dataclass(frozen=True)
class Open(DualTarget):
    verb = "open"


@dataclass(frozen=True)
class Read(DualTarget):
    verb = "read"


@dataclass(frozen=True)
class Use(DualTarget):
    verb = "use"


# --- Meta verbs ---


@dataclass(frozen=True)
class Die(Action):
    verb = "die"


@dataclass(frozen=True)
class Help(Action):
    verb = "help"


@dataclass(frozen=True)
class Inventory(Action):
    verb = "inventory"


@dataclass(frozen=True)
class Wait(Action):
    verb = "wait"


@dataclass(frozen=True)
class Quit(Action):
    verb = "quit"


# --- Lifecycle notifications, sent by the engine only ---


@dataclass(frozen=True)
class Arrive(Action):
    verb = "arrive"
    location: str = ""


@dataclass(frozen=True)
class Leave(Action):
    verb = "leave"
    location: str = ""


# --- Errors ---


@dataclass(frozen=True)
class ParseError(Action):
    @property
    def is_error(self) -> bool:
        return True


@dataclass(frozen=True)
class UnknownAction(ParseError):
    word: str = ""


@dataclass(frozen=True)
class UnknownObject(ParseError):
    name: str = ""


@dataclass(frozen=True)
class UnknownDirection(ParseError):
    word: str = ""


@dataclass(frozen=True)
class MissingTarget(ParseError):
    word: str = ""


@dataclass(frozen=True)
class AmbiguousObject(ParseError):
    candidates: tuple[str, ...] = ()
