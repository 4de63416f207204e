"""Building blocks shared by the content modules."""

from ..engine.actions import Action, DualTarget, Drop, Take
from ..engine.entity import INVENTORY, Entity, Item
from ..engine.outcomes import Carried, CurrentLocation, Handled, MoveObject, Outcome


class Fixture(Entity):
    """Scenery that stays where it was put."""

    home: str = ""

    @property
    def location(self) -> str:
        return self.home


class Carryable(Item):
    """An item the player can pick up and put down.

    Verbs with two objects are only accepted when this item is the direct
    object, unless the item is a tool for that verb (``tool_for``). That keeps
    it out of the running when the parser looks for a missing indirect object.
    """

    tool_for: tuple[type[Action], ...] = ()

    def can_handle(self, action: Action) -> bool:
        if not super().can_handle(action):
            return False
        if isinstance(action, DualTarget) and not isinstance(action, self.tool_for):
            return action.target in (None, self.name)
        return True

    @property
    def carried(self) -> bool:
        return self.location == INVENTORY

    def take(self) -> Outcome:
        if self.carried:
            return Handled(message=f"You already have the {self.name}.")
        return MoveObject(self.name, Carried(), message=f"You take the {self.name}.")

    def drop(self) -> Outcome:
        if not self.carried:
            return Handled(message=f"You aren't carrying the {self.name}.")
        return MoveObject(
            self.name, CurrentLocation(), message=f"You drop the {self.name}."
        )

    def handle(self, action: Action) -> Outcome:
        match action:
            case Take():
                return self.take()
            case Drop():
                return self.drop()
        return super().handle(action)
