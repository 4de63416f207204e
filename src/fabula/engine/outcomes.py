"""Outcomes an entity returns after handling an action.

Entities only describe the change they want. The Atlas reads the outcome
after the entity call has returned and applies it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Destination:
    """Where a MoveObject outcome sends an entity."""


@dataclass(frozen=True)
class CurrentLocation(Destination):
    """Wherever the player is when the outcome is applied."""


@dataclass(frozen=True)
class Carried(Destination):
    """The player's inventory."""


@dataclass(frozen=True)
class Named(Destination):
    location: str


@dataclass(frozen=True, kw_only=True)
class Outcome:
    """Base class of handler results. ``message`` is shown to the player."""

    message: str = ""


@dataclass(frozen=True)
class Handled(Outcome):
    pass


@dataclass(frozen=True)
class Unhandled(Outcome):
    pass


@dataclass(frozen=True)
class SetLocation(Outcome):
    location: str


@dataclass(frozen=True)
class MoveObject(Outcome):
    name: str
    destination: Destination = CurrentLocation()


@dataclass(frozen=True)
class ReplaceObject(Outcome):
    old: str
    new: str
