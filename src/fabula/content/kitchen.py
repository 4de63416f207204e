"""The kitchen north of the clearing, and the bread puzzle inside it."""

from ..engine.actions import (
    Action,
    Arrive,
    Attack,
    Describe,
    Direction,
    Drop,
    Examine,
    Go,
    Listen,
    Open,
    Take,
    Use,
)
from ..engine.entity import Entity, Room
from ..engine.outcomes import (
    Carried,
    CurrentLocation,
    Handled,
    MoveObject,
    Outcome,
    ReplaceObject,
    SetLocation,
    Unhandled,
)
from .forest import FOREST, KEY
from .props import Carryable, Fixture

KITCHEN = "kitchen"
SINK = "sink"
KNIFE = "knife"
BREADBOX = "breadbox"
BREAD = "bread"
GOLD_RING = "gold ring"


def create() -> list[Entity]:
    return [Kitchen(), Sink(), Knife(), BreadBox(), Bread(), GoldRing()]


class Kitchen(Room):
    name = KITCHEN

    def __init__(self):
        self.seen = False

    def handle(self, action: Action) -> Outcome:
        match action:
            case Arrive():
                if self.seen:
                    return Handled(
                        message="You are in a kitchen. The dishes are still piled "
                        "in the sink. The refrigerator is still empty. The "
                        "breadbox is still on the counter."
                    )
                self.seen = True
                return Handled(
                    message="You are in a kitchen. The dishes are piled in the "
                    "sink. The refrigerator is empty. There is a breadbox on "
                    "the counter."
                )
            case Listen():
                return Handled(
                    message="You hear the faint buzzing of flies and a slow drip "
                    "into the sink."
                )
            case Describe():
                return Handled(message="You are in a kitchen. It's a mess.")
            case Examine():
                return Handled(
                    message="Somebody left in a hurry. Nobody has done the "
                    "dishes in weeks."
                )
            case Go(direction=Direction.EXIT | Direction.SOUTH):
                return SetLocation(FOREST, message="You head toward fresher air.")
        return Unhandled()


class Sink(Fixture):
    name = SINK
    home = KITCHEN
    handles = (Describe, Examine)

    def __init__(self):
        self.holds_knife = True

    def handle(self, action: Action) -> Outcome:
        match action:
            case Describe():
                return Handled(message="A sink full of dirty dishes.")
            case Examine():
                if not self.holds_knife:
                    return Handled(
                        message="The dishes are covered in mold and a milky "
                        "slime. Gross."
                    )
                self.holds_knife = False
                return MoveObject(
                    KNIFE, CurrentLocation(),
                    message="The dishes are covered in mold and a milky slime. "
                    "Wait... is that a knife?",
                )
        return Unhandled()


class Knife(Carryable):
    name = KNIFE
    start = SINK
    handles = (Describe, Examine, Take, Drop, Use, Attack)
    tool_for = (Use, Attack)

    def __init__(self, location: str | None = None):
        super().__init__(location)
        self.cut_bread = False

    def handle(self, action: Action) -> Outcome:
        match action:
            case Describe():
                return Handled(message="A rusty knife.")
            case Examine():
                return Handled(
                    message="This blade won't slay a dragon, but it might work "
                    "on bread."
                )
            case Take() if not self.carried:
                return MoveObject(
                    self.name, Carried(),
                    message="You reach in gingerly and take the knife, barely "
                    "resisting the urge to vomit.",
                )
            case Use(object=target) | Attack(object=target) if target == BREAD:
                if self.cut_bread:
                    return Handled(message="The bread is already in pieces.")
                self.cut_bread = True
                return MoveObject(
                    GOLD_RING, CurrentLocation(),
                    message="You hack the crusty loaf clean in two. Take that "
                    "you vile loaf!!",
                )
            case Use() | Attack():
                return Handled(
                    message="Are you serious? You can't use a knife on that."
                )
        return super().handle(action)


class BreadBox(Fixture):
    name = BREADBOX
    home = KITCHEN
    handles = (Describe, Examine, Open)

    def __init__(self):
        self.unlocked = False

    def handle(self, action: Action) -> Outcome:
        match action:
            case Describe():
                if self.unlocked:
                    return Handled(message="An empty breadbox.")
                return Handled(message="A breadbox.")
            case Examine():
                if self.unlocked:
                    return Handled(message="It's an empty breadbox.")
                return Handled(
                    message="You give the breadbox a shake and something heavy "
                    "and hard rattles inside.\nUnfortunately, you can't see "
                    "what it is because the breadbox is locked."
                )
            case Open(tool=None):
                if self.unlocked:
                    return Handled(message="It's empty.")
                return Handled(
                    message="You try to open the breadbox, but it's locked.\n"
                    "What kind of person locks a breadbox?"
                )
            case Open(tool=tool) if tool != KEY:
                return Handled(message="You can't open the breadbox with that.")
            case Open():
                if self.unlocked:
                    return Handled(message="It's already open, and empty.")
                self.unlocked = True
                return ReplaceObject(
                    KEY, BREAD,
                    message="You open the breadbox and take the loaf of bread.",
                )
        return Unhandled()


class Bread(Carryable):
    name = BREAD
    handles = (Describe, Examine, Take, Drop, Attack, Use)

    def handle(self, action: Action) -> Outcome:
        match action:
            case Describe():
                return Handled(message="A crusty loaf of bread.")
            case Examine():
                return Handled(
                    message="The crust is so dry and hard that you'd break a "
                    "tooth trying to eat it."
                )
            case Attack(tool=None):
                return Handled(
                    message="You punch the bread and scrape your knuckles "
                    "badly. Ouch!"
                )
            case Attack(tool=tool):
                return Handled(message=f"The loaf resists the {tool}.")
            case Use():
                return Handled(message="It's bread. You could try cutting it.")
        return super().handle(action)


class GoldRing(Carryable):
    name = GOLD_RING
    start = BREAD
    handles = (Describe, Examine, Take, Drop)

    def __init__(self, location: str | None = None):
        super().__init__(location)
        self.seen = False

    def handle(self, action: Action) -> Outcome:
        match action:
            case Describe():
                if self.seen:
                    return Handled(
                        message="A gold ring, barely big enough for your pinky "
                        "finger."
                    )
                self.seen = True
                return Handled(
                    message="A gold ring, barely big enough for your pinky "
                    "finger, falls onto the counter with a clear tinkling "
                    "sound."
                )
            case Examine():
                return Handled(message="It's a pretty, albeit small, gold ring.")
            case Take() if not self.carried:
                return MoveObject(
                    self.name, Carried(), message="You slip the ring into your pocket."
                )
        return super().handle(action)
