"""Validation helpers shared by sequence operations."""

from __future__ import annotations

import operator
from typing import Optional, TypeVar

from .errors import SelectionIndexError, SelectionValueError

T = TypeVar("T")


def ensure_index(index: int, length: int) -> int:
    """Return ``index`` as an int if it addresses one of ``length`` elements.

    Negative values are rejected rather than counted from the end.
    """

    position = operator.index(index)
    if position < 0 or position >= length:
        raise SelectionIndexError(
            f"Index {position} out of range for {length} element(s)",
            index=position,
            length=length,
        )
    return position


def ensure_selected(value: Optional[T], *, source: str) -> T:
    if value is None:
        raise SelectionValueError(
            f"{source} returned None for the selection", source=source
        )
    return value
