"""The forest clearing where the game starts."""

from ..engine.actions import (
    Action,
    Arrive,
    Describe,
    Direction,
    Drop,
    Examine,
    Go,
    Listen,
    Take,
)
from ..engine.entity import Entity, Room
from ..engine.outcomes import (
    CurrentLocation,
    Handled,
    MoveObject,
    Outcome,
    SetLocation,
    Unhandled,
)
from .props import Carryable, Fixture

FOREST = "forest"
LEAVES = "leaves"
KEY = "key"


def create() -> list[Entity]:
    return [Forest(), Leaves(), Key()]


class Forest(Room):
    name = FOREST

    def __init__(self):
        self.seen = False

    def handle(self, action: Action) -> Outcome:
        match action:
            case Go(direction=Direction.NORTH | Direction.ENTER):
                return SetLocation("kitchen", message="You follow the path north.")
            case Arrive():
                if self.seen:
                    return Unhandled()
                self.seen = True
                return Handled(message="The fog clears...")
            case Describe():
                return Handled(
                    message="You find yourself standing in a forest clearing, "
                    "surrounded by trees. There is a path to the north."
                )
            case Examine():
                return Handled(
                    message="One of the trees nearby has been carved with "
                    "the inscription: O+5."
                )
            case Listen():
                return Handled(message="Birds bicker somewhere overhead.")
        return Unhandled()


class Leaves(Fixture):
    name = LEAVES
    home = FOREST
    handles = (Describe, Examine, Take)

    def __init__(self):
        self.hides_key = True

    def handle(self, action: Action) -> Outcome:
        match action:
            case Describe():
                return Handled(message="You see a pile of leaves.")
            case Examine():
                text = "The leaves flutter and fly as you kick through them."
                if self.hides_key:
                    self.hides_key = False
                    return MoveObject(
                        KEY, CurrentLocation(),
                        message=text + " Something small and metal glints underneath.",
                    )
                return Handled(message=text)
            case Take():
                return Handled(message="The leaves crumble to dust in your hand.")
        return Unhandled()


class Key(Carryable):
    name = KEY
    start = LEAVES
    handles = (Describe, Examine, Take, Drop)

    def handle(self, action: Action) -> Outcome:
        match action:
            case Describe():
                if self.location == FOREST:
                    return Handled(message="A shiny key glints in the grass.")
                return Handled(message="A small brass key.")
            case Examine():
                return Handled(
                    message="A small brass key. Its bow is shaped like a loaf of bread."
                )
        return super().handle(action)
