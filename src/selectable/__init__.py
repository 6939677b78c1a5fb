"""Ordered sequences with at most one independently-typed selected item."""

from .sequence import (
    SelectableSequence,
    SelectionIndexError,
    SelectionLookupError,
    SelectionValueError,
    SequenceError,
)

__all__ = [
    "SelectableSequence",
    "SequenceError",
    "SelectionIndexError",
    "SelectionLookupError",
    "SelectionValueError",
    "runtime",
    "sequence",
]

__version__ = "0.1.0"
