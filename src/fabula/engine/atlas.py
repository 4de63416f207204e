"""The Atlas owns every entity and the player's current location.

It is the only object that moves entities. Entities report what they want
through an Outcome; the Atlas checks it and applies it once the entity call
has returned.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from ..errors import DuplicateEntityError, EntityError, UnknownLocationError
from ..logging import get_logger
from .actions import Action
from .dispatch import DEFAULT_ORDER, DispatchOrder, candidates
from .entity import INVENTORY, NOWHERE, RESERVED_LOCATIONS, Entity
from .outcomes import (
    Carried,
    CurrentLocation,
    Handled,
    MoveObject,
    Named,
    Outcome,
    ReplaceObject,
    SetLocation,
    Unhandled,
)

logger = get_logger(__name__)


@dataclass
class Dispatch:
    """Result of invoking one or more entities."""

    handled: bool = False
    lines: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.handled

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def extend(self, other: "Dispatch") -> None:
        self.handled = self.handled or other.handled
        self.lines.extend(other.lines)


class Atlas:
    """Name-keyed registry of entities plus the current location."""

    def __init__(
        self,
        here: str = NOWHERE,
        order: DispatchOrder = DEFAULT_ORDER,
    ):
        self._here = here
        self.order = order
        self._entities: dict[str, Entity] = {}

    # --- Registration ---

    def add(self, entity: Entity) -> None:
        """Register an entity under its name."""
        if not entity.name:
            raise EntityError(f"entity has no name: {entity!r}")
        if entity.name in self._entities:
            raise DuplicateEntityError(entity.name)
        self._entities[entity.name] = entity

    def add_all(self, entities: Iterable[Entity]) -> None:
        for entity in entities:
            self.add(entity)

    def start(self, name: str) -> None:
        """Place the player at the starting location."""
        if name not in self._entities:
            raise UnknownLocationError(name)
        self._here = name
        logger.debug("atlas_started", here=name, entities=len(self._entities))

    # --- Lookup ---

    def __contains__(self, name: object) -> bool:
        return name in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    def get(self, name: str) -> Entity | None:
        return self._entities.get(name)

    @property
    def here(self) -> str:
        return self._here

    def location_of(self, name: str) -> str | None:
        entity = self._entities.get(name)
        return entity.location if entity else None

    def locals(self, location: str | None = None) -> list[str]:
        """Names of entities at a location (default: here), sorted."""
        location = self._here if location is None else location
        return sorted(e.name for e in self if e.location == location)

    def inventory(self) -> list[str]:
        return self.locals(INVENTORY)

    def scope(self) -> list[str]:
        """Everything the player can act on: locals first, then carried."""
        return self.locals() + self.inventory()

    def _is_valid_location(self, location: str) -> bool:
        return location in RESERVED_LOCATIONS or location in self._entities

    # --- Mutation ---

    def move(self, name: str, location: str) -> bool:
        """Relocate an entity. Returns False if either name is unknown."""
        entity = self._entities.get(name)
        if entity is None or not self._is_valid_location(location):
            return False
        old = entity.location
        entity.set_location(location)
        logger.debug("object_moved", object=name, old=old, new=location)
        return True

    def remove(self, name: str) -> bool:
        """Retire an entity to nowhere."""
        return self.move(name, NOWHERE)

    def replace(self, old: str, new: str) -> bool:
        """Put ``new`` where ``old`` is and retire ``old``."""
        old_entity = self._entities.get(old)
        new_entity = self._entities.get(new)
        if old_entity is None or new_entity is None:
            return False
        location = old_entity.location
        new_entity.set_location(location)
        old_entity.set_location(NOWHERE)
        logger.debug("object_replaced", old=old, new=new, location=location)
        return True

    def set_here(self, name: str) -> bool:
        if name not in self._entities or name == self._here:
            return False
        logger.info("location_changed", old=self._here, new=name)
        self._here = name
        return True

    def apply(self, outcome: Outcome) -> bool:
        """Apply an entity's outcome. Returns whether it counts as handled."""
        match outcome:
            case Handled():
                return True
            case Unhandled():
                return False
            case SetLocation(location=name):
                applied = self.set_here(name)
            case MoveObject(name=name, destination=CurrentLocation()):
                applied = self.move(name, self._here)
            case MoveObject(name=name, destination=Carried()):
                applied = self.move(name, INVENTORY)
            case MoveObject(name=name, destination=Named(location=location)):
                applied = self.move(name, location)
            case ReplaceObject(old=old, new=new):
                applied = self.replace(old, new)
            case _:
                applied = False

        if not applied:
            logger.warning("outcome_rejected", outcome=outcome, here=self._here)
        return applied

    # --- Dispatch ---

    def invoke(self, action: Action, name: str) -> Dispatch:
        """Offer an action to one entity and apply what it asks for."""
        entity = self._entities.get(name)
        if entity is None or not entity.can_handle(action):
            return Dispatch()

        outcome = entity.handle(action)
        handled = self.apply(outcome)
        lines = [outcome.message] if handled and outcome.message else []
        return Dispatch(handled, lines)

    def invoke_until(self, action: Action, names: Iterable[str | None]) -> Dispatch:
        """Try each candidate in turn; stop at the first that handles it."""
        for name in names:
            if name is None:
                continue
            result = self.invoke(action, name)
            if result:
                logger.debug("action_dispatched", action=action, entity=name)
                return result
        return Dispatch()

    def invoke_all(self, action: Action, names: Iterable[str | None]) -> Dispatch:
        """Offer the action to every candidate."""
        result = Dispatch()
        for name in names:
            if name is not None:
                result.extend(self.invoke(action, name))
        return result

    def invoke_here(self, action: Action) -> Dispatch:
        return self.invoke(action, self._here)

    def dispatch(self, action: Action) -> Dispatch:
        """Route an action through the candidate chain."""
        return self.invoke_until(action, candidates(action, self._here, self.order))
