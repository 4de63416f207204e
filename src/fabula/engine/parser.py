"""Turn a line of player input into an Action.

parse(line, atlas) tokenizes the line, then resolves the verb through fixed
synonym tables. Missing objects are filled in by asking which entities in
scope could handle the action. Nothing here mutates the Atlas.
"""

from collections.abc import Callable
from dataclasses import dataclass

from .actions import (
    Action,
    AmbiguousObject,
    Attack,
    Climb,
    Describe,
    Die,
    Direction,
    Drop,
    Examine,
    Follow,
    Go,
    Help,
    Inventory,
    Light,
    Listen,
    MissingTarget,
    Open,
    Quit,
    Read,
    Take,
    UnknownAction,
    UnknownDirection,
    UnknownObject,
    Use,
    Wait,
)
from .atlas import Atlas

# Filler words dropped before the verb and objects are picked out.
STOP_WORDS = frozenset(
    {"a", "an", "at", "here", "of", "on", "out", "the", "to", "with"}
)

MAX_TOKENS = 3


@dataclass(frozen=True)
class Token:
    """Verb, direct object and indirect object slots (PRSA, PRSO, PRSI)."""

    verb: str
    direct: str | None = None
    indirect: str | None = None
    overflow: bool = False


def tokenize(line: str) -> Token:
    """Split a line into at most three meaningful lowercase words."""
    words = [w for w in line.lower().split() if w not in STOP_WORDS]
    if not words:
        return Token("help")
    if len(words) > MAX_TOKENS:
        return Token("help", overflow=True)
    words += [None] * (MAX_TOKENS - len(words))
    return Token(*words)


DIRECTIONS: dict[str, Direction] = {
    **dict.fromkeys(("north", "n", "forward", "f"), Direction.NORTH),
    **dict.fromkeys(("south", "s", "backward", "b"), Direction.SOUTH),
    **dict.fromkeys(("east", "e", "right", "r"), Direction.EAST),
    **dict.fromkeys(("west", "w", "left", "l"), Direction.WEST),
    **dict.fromkeys(("up", "u", "upstairs"), Direction.UP),
    **dict.fromkeys(("down", "d", "downstairs"), Direction.DOWN),
    **dict.fromkeys(("in", "inside"), Direction.ENTER),
    **dict.fromkeys(("out", "outside"), Direction.EXIT),
}

# Direction words that work on their own, without "go".
BARE_DIRECTIONS = frozenset(
    {"north", "n", "south", "s", "east", "e", "west", "w",
     "up", "down", "d", "in", "inside", "outside"}
)

MOVEMENT_VERBS = frozenset(
    {"g", "go", "ascend", "crawl", "descend", "run", "travel", "turn", "skip", "walk"}
)

META_VERBS: dict[str, Action] = {
    **dict.fromkeys(("i", "inv", "inventory"), Inventory()),
    **dict.fromkeys(("q", "quit"), Quit()),
    **dict.fromkeys(("?", "help", "hint"), Help()),
    **dict.fromkeys(("wait", "z"), Wait()),
    "die": Die(),
    "enter": Go(Direction.ENTER),
    **dict.fromkeys(("leave", "exit"), Go(Direction.EXIT)),
}

SINGLE_TARGET_VERBS: dict[str, Callable[..., Action]] = {
    "climb": Climb,
    **dict.fromkeys(("desc", "describe"), Describe),
    **dict.fromkeys(("follow", "stalk"), Follow),
    **dict.fromkeys(("listen", "play"), Listen),
    **dict.fromkeys(("take", "get", "pick"), Take),
    **dict.fromkeys(("x", "examine", "explore", "inspect", "look", "l"), Examine),
}

DUAL_TARGET_VERBS: dict[str, Callable[..., Action]] = {
    **dict.fromkeys(("attack", "hit", "kick", "kill", "throw", "cut", "slice"), Attack),
    **dict.fromkeys(("ignite", "burn", "light", "switch"), Light),
    "drop": Drop,
    **dict.fromkeys(("r", "read"), Read),
    **dict.fromkeys(("unlock", "open"), Open),
    **dict.fromkeys(("u", "use"), Use),
}


# Verbs whose particle is dropped when it comes straight after them.
PARTICLE_VERBS = {"pick": "up"}


# --- Disambiguation ---


def _matches(atlas: Atlas, probe: Action, names: list[str]) -> list[str]:
    """Names of entities willing to handle the probe action."""
    return sorted(n for n in names if atlas.get(n).can_handle(probe))


def _fill_target(atlas: Atlas, action: Action) -> Action:
    """Pick the direct object from scope, or report why we can't."""
    scope = [n for n in atlas.scope() if n != action.indirect]
    found = _matches(atlas, action, scope)
    if len(found) == 1:
        return action.with_target(found[0])
    if found:
        return AmbiguousObject(tuple(found))
    return MissingTarget(action.verb)


def _fill_indirect(atlas: Atlas, action: Action) -> Action:
    """Pick an optional indirect object; leave it empty if nothing fits."""
    scope = [n for n in atlas.scope() if n != action.target]
    found = _matches(atlas, action, scope)
    if len(found) == 1:
        return action.with_indirect(found[0])
    if found:
        return AmbiguousObject(tuple(found))
    return action


# --- Resolution ---


def _drop_particle(token: Token) -> Token:
    """Drop the particle in phrases like "pick up key"."""
    if token.verb in PARTICLE_VERBS and token.direct == PARTICLE_VERBS[token.verb]:
        return Token(token.verb, token.indirect)
    return token


def _join_name(atlas: Atlas, token: Token) -> Token:
    """Read two object words as one name when that's what the world has."""
    if token.direct is None or token.indirect is None:
        return token
    joined = f"{token.direct} {token.indirect}"
    if joined in atlas and token.direct not in atlas:
        return Token(token.verb, joined)
    return token


def _check_visible(atlas: Atlas, action: Action) -> Action:
    """Named objects must be in scope or be the current location."""
    visible = set(atlas.scope()) | {atlas.here}
    for name in (action.target, action.indirect):
        if name is not None and name not in visible:
            return UnknownObject(name)
    return action


def _resolve_go(token: Token) -> Action:
    word = token.direct
    if word is None:
        # The room decides which way is "out".
        return Go(Direction.EXIT)
    direction = DIRECTIONS.get(word)
    if direction is None:
        return UnknownDirection(word)
    return Go(direction)


def _resolve_dual(atlas: Atlas, verb: str, token: Token) -> Action:
    make = DUAL_TARGET_VERBS[verb]
    if make is Use:
        # "use knife [on] bread": the tool comes first.
        action = Use(token.indirect, token.direct)
    else:
        action = make(token.direct, token.indirect)

    if action.target is None:
        action = _fill_target(atlas, action)
        if action.is_error:
            return action
    if action.indirect is None:
        action = _fill_indirect(atlas, action)
        if action.is_error:
            return action
    return _check_visible(atlas, action)


def resolve(token: Token, atlas: Atlas) -> Action:
    """Map a token to an Action using the synonym tables and current scope."""
    verb = token.verb
    token = _join_name(atlas, _drop_particle(token))

    if verb in META_VERBS:
        return META_VERBS[verb]

    if verb in MOVEMENT_VERBS:
        return _resolve_go(token)

    if verb in BARE_DIRECTIONS and token.direct is None:
        return Go(DIRECTIONS[verb])

    if verb == "climb" and token.direct in DIRECTIONS:
        return _resolve_go(token)

    if verb in SINGLE_TARGET_VERBS:
        action = SINGLE_TARGET_VERBS[verb](token.direct)
        return _check_visible(atlas, action)

    if verb in DUAL_TARGET_VERBS:
        return _resolve_dual(atlas, verb, token)

    return UnknownAction(verb)


def parse(line: str, atlas: Atlas) -> tuple[Token, Action]:
    """Tokenize and resolve one line of input."""
    token = tokenize(line)
    return token, resolve(token, atlas)
