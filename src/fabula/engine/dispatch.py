"""Candidate ordering for dispatch.

The order decides who gets the first chance at an action. With the default
policy a carried tool (the indirect object) can intercept an action before
the passive target or the room sees it.
"""

from enum import Enum

from .actions import Action


class DispatchOrder(Enum):
    INDIRECT_FIRST = "indirect-first"
    DIRECT_FIRST = "direct-first"
    LOCATION_FIRST = "location-first"


DEFAULT_ORDER = DispatchOrder.INDIRECT_FIRST


def candidates(
    action: Action, here: str, order: DispatchOrder = DEFAULT_ORDER,
) -> list[str]:
    """Return the entity names to try, in order, without duplicates."""
    prsi, prso = action.indirect, action.target
    match order:
        case DispatchOrder.INDIRECT_FIRST:
            names = [prsi, prso, here]
        case DispatchOrder.DIRECT_FIRST:
            names = [prso, prsi, here]
        case DispatchOrder.LOCATION_FIRST:
            names = [here, prsi, prso]

    ordered: list[str] = []
    for name in names:
        if name and name not in ordered:
            ordered.append(name)
    return ordered
