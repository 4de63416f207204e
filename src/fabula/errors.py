"""Exceptions raised while setting up a game.

Nothing here is raised during play: player mistakes become error actions and
bad outcomes degrade to unhandled.
"""


class FabulaError(Exception):
    """Base class for fabula errors."""


class ConfigError(FabulaError):
    pass


class EntityError(FabulaError):
    """An entity cannot be registered."""


class DuplicateEntityError(EntityError):
    def __init__(self, name: str):
        super().__init__(f"duplicate entity name: {name!r}")
        self.name = name


class UnknownLocationError(FabulaError):
    def __init__(self, name: str):
        super().__init__(f"no such location: {name!r}")
        self.name = name
