"""The turn engine.

Game.play(line) runs one turn and returns the text to show the player.
Meta actions and parse errors are answered here; everything else goes to
the Atlas, which routes it to entities and applies their outcomes.
"""

from ..logging import get_logger
from .actions import (
    Action,
    AmbiguousObject,
    Arrive,
    Describe,
    Die,
    Examine,
    Go,
    Help,
    Inventory,
    Leave,
    MissingTarget,
    Quit,
    UnknownAction,
    UnknownDirection,
    UnknownObject,
    Wait,
)
from .atlas import Atlas, Dispatch
from .entity import NOWHERE
from .parser import Token, parse

logger = get_logger(__name__)

DEATH_TEXT = "**That would lead to your untimely demise.**\n\nTry again?"

HELP_TEXT = (
    "Try these commands:\n"
    "LOOK, EXAMINE <thing>\n"
    "GO <direction>, NORTH, SOUTH, IN, OUT\n"
    "TAKE, DROP, OPEN, USE <tool> ON <thing>\n"
    "ATTACK <thing> WITH <tool>\n"
    "INV, WAIT, QUIT"
)

TOO_MANY_WORDS = "That's too many words."
NOTHING_HAPPENS = "Nothing happens."
CANNOT_GO = "You can't go that way."
NOTHING_HERE = "You see nothing of interest."
EMPTY_HANDED = "You are not carrying anything."


class Game:
    """One player's session: an Atlas plus what the player last saw."""

    def __init__(self, atlas: Atlas):
        self.atlas = atlas
        self.last_here = NOWHERE
        self.turns = 0
        self.finished = False

    def start(self) -> str:
        """Render the starting location."""
        logger.info("game_starting", here=self.atlas.here, entities=len(self.atlas))
        return self._render_arrival()

    def play(self, line: str) -> str:
        """Run one turn and return the response text."""
        self.turns += 1
        token, action = parse(line, self.atlas)
        logger.debug("turn_parsed", turn=self.turns, token=token, action=action)

        parts = [self._perform(token, action)]
        if not self.finished:
            parts.append(self._render_arrival())
        return "\n\n".join(p for p in parts if p)

    def _perform(self, token: Token, action: Action) -> str:
        match action:
            case Die():
                return DEATH_TEXT
            case Help():
                return f"{TOO_MANY_WORDS}\n{HELP_TEXT}" if token.overflow else HELP_TEXT
            case Inventory():
                return self._render_inventory()
            case Quit():
                self.finished = True
                logger.info("game_finished", turns=self.turns, here=self.atlas.here)
                return ""
            case Go():
                result = self.atlas.invoke_here(action)
                return result.text if result else CANNOT_GO
            case Wait():
                return _or_fallback(self.atlas.invoke_here(action))
            case Describe(object=None) | Examine(object=None):
                return self._render_location(self.atlas.here)
            case UnknownAction(word=word):
                return f"I don't know how to {word}. Have you tried 'HELP'?"
            case UnknownObject(name=name):
                return f"You don't see any {name} here."
            case UnknownDirection(word=word):
                return f"I don't know which way '{word}' is."
            case MissingTarget(word=word):
                return f"What do you want to {word}?"
            case AmbiguousObject(candidates=names):
                return f"That action could apply to: {', '.join(names)}."
            case _:
                return _or_fallback(self.atlas.dispatch(action))

    # --- Rendering ---

    def _render_location(self, location: str) -> str:
        """Location name, its description, then what's lying around."""
        lines = [location.upper()]
        lines.extend(self.atlas.invoke(Describe(location), location).lines)

        locals_ = self.atlas.locals(location)
        if locals_:
            lines.extend(self.atlas.invoke_all(Describe(), locals_).lines)
        else:
            lines.append(NOTHING_HERE)
        return "\n".join(lines)

    def _render_arrival(self) -> str:
        """Narrate a change of location; empty if the player hasn't moved."""
        if self.atlas.here == self.last_here:
            return ""

        # A room may still redirect the player as they leave it.
        farewell = self.atlas.invoke(Leave(self.last_here), self.last_here)
        here = self.last_here = self.atlas.here
        arrival = self.atlas.invoke_here(Arrive(here))

        lines = farewell.lines + arrival.lines + [self._render_location(here)]
        return "\n\n".join(lines)

    def _render_inventory(self) -> str:
        carried = self.atlas.inventory()
        if not carried:
            return EMPTY_HANDED
        described = self.atlas.invoke_all(Describe(), carried)
        lines = ["You are carrying:"] + (described.lines or carried)
        return "\n".join(lines)


def _or_fallback(result: Dispatch) -> str:
    if not result:
        return NOTHING_HAPPENS
    return result.text
