from __future__ import annotations

class KiirooError(ValueError):
    """Base class for rejected Kiiroo timeline text."""

    kind: str = "kiiroo-error"

class EventFormatError(KiirooError):
    """Text does not follow the single or batch event grammar."""

    kind = "malformed-event-format"

class NoEventsError(KiirooError):
    """Text was well-formed but contained no events."""

    kind = "no-events-found"
