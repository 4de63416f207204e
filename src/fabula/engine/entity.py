"""The capability every game entity implements."""

from .actions import Action
from .outcomes import Outcome, Unhandled

# Reserved pseudo-locations. Any other location is the name of an entity.
NOWHERE = "__nowhere"
INVENTORY = "__inv"

RESERVED_LOCATIONS = frozenset({NOWHERE, INVENTORY})


class Entity:
    """Anything the Atlas can hold: rooms, props, items.

    Subclasses set ``name`` and override ``handle``. An entity that lists
    action classes in ``handles`` only answers ``can_handle`` for those;
    without a list it accepts everything.
    """

    name: str = ""
    handles: tuple[type[Action], ...] | None = None

    @property
    def location(self) -> str:
        return NOWHERE

    def set_location(self, location: str) -> None:
        """Entities that never move ignore relocation."""

    def can_handle(self, action: Action) -> bool:
        if self.handles is None:
            return True
        return isinstance(action, self.handles)

    def handle(self, action: Action) -> Outcome:
        return Unhandled()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} @ {self.location}>"


class Room(Entity):
    """A location. Rooms are never inside anything.

    Rooms keep the accept-everything ``can_handle``. They are never in scope,
    so the parser never asks them to fill an object slot; they are only
    offered actions directly, and an Unhandled answer falls back to the
    game's default text.
    """


class Item(Entity):
    """An entity whose location the Atlas can change."""

    start: str = NOWHERE

    def __init__(self, location: str | None = None):
        self._location = self.start if location is None else location

    @property
    def location(self) -> str:
        return self._location

    def set_location(self, location: str) -> None:
        self._location = location
