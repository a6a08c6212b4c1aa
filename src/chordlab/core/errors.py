"""
Errors surfaced by the chord engine.

Only two conditions are ever reported to callers: an unregistered scale
pattern and an out-of-range index. Everything else is made total by the
fallback rules in the classifier and the voicing synthesizer.
"""

from __future__ import annotations


class ChordLabError(Exception):
    """Base class for chord engine errors."""


class UnknownScale(ChordLabError, ValueError):
    """The requested scale pattern is not registered."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class IndexOutOfRange(ChordLabError, IndexError):
    """A voicing or sequence index does not exist."""

    def __init__(self, index: int, count: int, message: str):
        super().__init__(message)
        self.index = index
        self.count = count
