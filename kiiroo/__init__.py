"""
kiiroo: codec and ordering layer for the Kiiroo haptic timeline text format.

This package provides:
- Event and Events values with a byte-exact text codec
  (``1.00:2`` for a single event, ``{0.00:1,0.50:2}`` for a timeline)
- Canonical, stable time ordering of parsed timelines
- The Algorithm contract through which a timeline is turned into timed
  device actions by an external protocol layer
- A JSON/YAML config loader that selects a caller-registered algorithm

Malformed text raises EventFormatError; a timeline with no events raises
NoEventsError.
"""
import logging

__all__ = [
    "__version__",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
