from .errors import KiirooError, EventFormatError, NoEventsError
from .event import Event, Events, MIN_VALUE, MAX_VALUE
from .algorithm import Algorithm, TimedAction, apply_algorithm, check_algorithm

__all__ = [
    "KiirooError",
    "EventFormatError",
    "NoEventsError",
    "Event",
    "Events",
    "MIN_VALUE",
    "MAX_VALUE",
    "Algorithm",
    "TimedAction",
    "apply_algorithm",
    "check_algorithm",
]
