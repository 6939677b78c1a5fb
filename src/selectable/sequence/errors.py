"""Exceptions raised by selectable sequences."""

from __future__ import annotations


class SequenceError(Exception):
    """Base class for every error raised by ``selectable.sequence``."""


class SelectionIndexError(SequenceError, IndexError):
    """Raised when ``select`` is given an index outside ``[0, length)``."""

    def __init__(self, message: str, *, index: int, length: int) -> None:
        super().__init__(message)
        self.index = index
        self.length = length


class SelectionLookupError(SequenceError, LookupError):
    """Raised when no element satisfies a selection predicate."""


class SelectionValueError(SequenceError, TypeError):
    """Raised when a selected-side function yields ``None``.

    ``None`` marks an absent selection, so it can never be a selected value.
    """

    def __init__(self, message: str, *, source: str) -> None:
        super().__init__(message)
        self.source = source
