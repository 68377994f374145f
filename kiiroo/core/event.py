from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Iterator, List, Tuple, Union, overload

from kiiroo.core.errors import EventFormatError, NoEventsError

logger = logging.getLogger(__name__)

MIN_VALUE = 0
MAX_VALUE = 4

_MILLISECOND = timedelta(milliseconds=1)
_SECONDS_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_VALUE_RE = re.compile(r"[+-]?[0-9]+")

Text = Union[str, bytes]

def _as_str(text: Text) -> str:
    if isinstance(text, bytes):
        try:
            return text.decode("ascii")
        except UnicodeDecodeError as e:
            raise EventFormatError(f"non-ASCII event text: {text!r}") from e
    if not isinstance(text, str):
        raise TypeError(f"expected str or bytes, got {type(text).__name__}")
    return text

@dataclass(frozen=True)
class Event:
    """A single control point: an offset from the start and an intensity in [0, 4]."""

    time: timedelta
    value: int

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.time, timedelta):
            raise EventFormatError(f"event time must be a timedelta, got {self.time!r}")
        if self.time < timedelta(0):
            raise EventFormatError(f"event time must not be negative: {self.time}")
        if self.time % _MILLISECOND:
            raise EventFormatError(f"event time must be whole milliseconds: {self.time}")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise EventFormatError(f"event value must be an int, got {self.value!r}")
        if not MIN_VALUE <= self.value <= MAX_VALUE:
            raise EventFormatError(
                f"event value {self.value} outside [{MIN_VALUE}, {MAX_VALUE}]"
            )

    @classmethod
    def from_millis(cls, ms: int, value: int) -> "Event":
        return cls(timedelta(milliseconds=ms), value)

    @property
    def time_ms(self) -> int:
        return self.time // _MILLISECOND

    def to_text(self) -> str:
        # Fields may have been replaced through object.__setattr__.
        self._validate()
        return f"{self.time.total_seconds():.2f}:{self.value}"

    @classmethod
    def from_text(cls, text: Text) -> "Event":
        """
        Parse ``"<seconds>:<value>"``.

        Seconds are converted to milliseconds by truncating ``seconds * 1000``
        toward zero, so precision past the third decimal is dropped rather
        than rounded. Every failure raises EventFormatError.
        """
        s = _as_str(text)
        parts = s.split(":")
        if len(parts) != 2:
            raise EventFormatError(f"expected '<seconds>:<value>', got {s!r}")
        seconds_tok, value_tok = parts
        if not _SECONDS_RE.fullmatch(seconds_tok):
            raise EventFormatError(f"invalid event time {seconds_tok!r}")
        if not _VALUE_RE.fullmatch(value_tok):
            raise EventFormatError(f"invalid event value {value_tok!r}")
        try:
            ms = int(float(seconds_tok) * 1000)
            time = timedelta(milliseconds=ms)
        except (OverflowError, ValueError) as e:
            raise EventFormatError(f"event time out of range: {seconds_tok!r}") from e
        try:
            value = int(value_tok)
        except ValueError as e:
            raise EventFormatError(f"invalid event value {value_tok[:20]!r}") from e
        return cls(time, value)

    def __str__(self) -> str:
        return self.to_text()

class Events:
    """
    Immutable ordered series of Event objects.

    Parsing keeps the order found in the text; call sort() for canonical
    time order.
    """

    __slots__ = ("_events",)

    def __init__(self, events: Iterable[Event] | None = None) -> None:
        items: Tuple[Event, ...] = tuple(events or ())
        for e in items:
            if not isinstance(e, Event):
                raise TypeError(f"Events holds Event objects, got {type(e).__name__}")
        self._events = items

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    @overload
    def __getitem__(self, index: int) -> Event: ...

    @overload
    def __getitem__(self, index: slice) -> "Events": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Events(self._events[index])
        return self._events[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Events):
            return NotImplemented
        return self._events == other._events

    def __hash__(self) -> int:
        return hash(self._events)

    def __repr__(self) -> str:
        return f"Events({list(self._events)!r})"

    def __str__(self) -> str:
        return self.to_text()

    def sort(self) -> "Events":
        """Return a copy ordered by time. Equal times keep their relative order."""
        return Events(sorted(self._events, key=lambda e: e.time))

    def is_sorted(self) -> bool:
        return all(a.time <= b.time for a, b in zip(self._events, self._events[1:]))

    def to_text(self) -> str:
        return "{" + ",".join(e.to_text() for e in self._events) + "}"

    @classmethod
    def from_text(cls, text: Text) -> "Events":
        t = _as_str(text).strip()
        if len(t) < 2 or t[0] != "{" or t[-1] != "}":
            logger.debug("rejecting timeline without {...} wrapper: %r", t[:40])
            raise EventFormatError(f"event list must be wrapped in '{{...}}': {t[:40]!r}")
        body = t[1:-1]
        if not body:
            raise NoEventsError("no events found")

        events: List[Event] = []
        for idx, token in enumerate(body.split(",")):
            try:
                events.append(Event.from_text(token))
            except EventFormatError as e:
                logger.debug("rejecting timeline at event %d: %s", idx, e)
                raise EventFormatError(f"event {idx}: {e}") from e
        return cls(events)
