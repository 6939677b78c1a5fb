"""Selectable sequence value type and its errors."""

from .errors import (
    SelectionIndexError,
    SelectionLookupError,
    SelectionValueError,
    SequenceError,
)
from .model import Project, Reconstruct, SelectableSequence
from .validation import ensure_index, ensure_selected

__all__ = [
    "SelectableSequence",
    "Reconstruct",
    "Project",
    "SequenceError",
    "SelectionIndexError",
    "SelectionLookupError",
    "SelectionValueError",
    "ensure_index",
    "ensure_selected",
]
