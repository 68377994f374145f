from __future__ import annotations
import logging
from typing import List, Protocol, Sequence, TypeVar

from kiiroo.core.event import Events

logger = logging.getLogger(__name__)

TimedAction = TypeVar("TimedAction", covariant=True)

class Algorithm(Protocol[TimedAction]):
    """
    Converts Kiiroo events into timed device actions.

    Implementations live with the protocol layer that defines the action type.
    They must be deterministic for a fixed configuration and must declare
    through ``requires_sorted`` whether ``actions`` expects time-ordered input.
    Events are immutable, so implementations cannot alter what they receive.
    """

    requires_sorted: bool

    def actions(self, events: Events) -> Sequence[TimedAction]: ...

def check_algorithm(algorithm: object) -> None:
    """Raise TypeError unless ``algorithm`` satisfies the Algorithm contract."""
    name = type(algorithm).__name__
    if not callable(getattr(algorithm, "actions", None)):
        raise TypeError(f"{name} has no callable actions(events)")
    requires_sorted = getattr(algorithm, "requires_sorted", None)
    if not isinstance(requires_sorted, bool):
        raise TypeError(f"{name} must declare requires_sorted as a bool")

def apply_algorithm(algorithm: Algorithm[TimedAction], events: Events) -> List[TimedAction]:
    check_algorithm(algorithm)
    if algorithm.requires_sorted and not events.is_sorted():
        events = events.sort()
    logger.debug("applying %s to %d events", type(algorithm).__name__, len(events))
    return list(algorithm.actions(events))
