"""Selectable sequence: an ordered collection with at most one focused item.

Unselected items are stored as ``A`` values; the selected item, when present,
is stored as a ``B``. The two types may differ, e.g. a lightweight display
record for the list and an editable form for the focused entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Callable,
    Generic,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from selectable.runtime.telemetry import record_event, span

from .errors import SelectionIndexError, SelectionLookupError
from .validation import ensure_index, ensure_selected

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")

Reconstruct = Callable[[B], A]
Project = Callable[[A], B]


@dataclass(frozen=True, slots=True)
class SelectableSequence(Generic[A, B]):
    """Immutable ``prefix + [selection] + suffix`` triple.

    ``selection`` is ``None`` when nothing is selected. Every operation
    returns a new instance; the prefix and suffix tuples are shared where
    they do not change.
    """

    prefix: Tuple[A, ...] = ()
    selection: Optional[B] = None
    suffix: Tuple[A, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix", tuple(self.prefix))
        object.__setattr__(self, "suffix", tuple(self.suffix))

    @classmethod
    def empty(cls) -> "SelectableSequence[A, B]":
        return cls()

    @classmethod
    def singleton(cls, value: B) -> "SelectableSequence[A, B]":
        return cls(selection=ensure_selected(value, source="singleton"))

    @classmethod
    def from_sequence(cls, items: Iterable[A]) -> "SelectableSequence[A, B]":
        """Wrap ``items`` with nothing selected."""

        return cls(prefix=tuple(items))

    # queries

    def selected(self) -> Optional[B]:
        return self.selection

    def selected_index(self) -> Optional[int]:
        if self.selection is None:
            return None
        return len(self.prefix)

    def length(self) -> int:
        focus = 0 if self.selection is None else 1
        return len(self.prefix) + focus + len(self.suffix)

    def __len__(self) -> int:
        return self.length()

    def is_empty(self) -> bool:
        return self.length() == 0

    # conversion

    def to_sequence(
        self, unselected_map: Callable[[A], C], selected_map: Callable[[B], C]
    ) -> List[C]:
        """Return every element in logical order, converted to a common type."""

        items = [unselected_map(item) for item in self.prefix]
        if self.selection is not None:
            items.append(selected_map(self.selection))
        items.extend(unselected_map(item) for item in self.suffix)
        return items

    def flatten(self) -> List[A]:
        """Return the elements in order; only meaningful when ``A`` is ``B``."""

        return self.to_sequence(_identity, _identity)

    # transformation

    def map(
        self, unselected_fn: Callable[[A], C], selected_fn: Callable[[B], D]
    ) -> "SelectableSequence[C, D]":
        selection: Optional[D] = None
        if self.selection is not None:
            selection = ensure_selected(selected_fn(self.selection), source="map")
        return SelectableSequence(
            prefix=tuple(unselected_fn(item) for item in self.prefix),
            selection=selection,
            suffix=tuple(unselected_fn(item) for item in self.suffix),
        )

    def indexed_map(
        self,
        unselected_fn: Callable[[int, A], C],
        selected_fn: Callable[[int, B], D],
    ) -> "SelectableSequence[C, D]":
        """Like ``map`` but each function also receives the flattened index.

        The selection sits at ``len(prefix)``; suffix indices continue after it.
        """

        offset = len(self.prefix)
        prefix = tuple(unselected_fn(i, item) for i, item in enumerate(self.prefix))
        selection: Optional[D] = None
        if self.selection is not None:
            selection = ensure_selected(
                selected_fn(offset, self.selection), source="indexed_map"
            )
            offset += 1
        suffix = tuple(
            unselected_fn(offset + j, item) for j, item in enumerate(self.suffix)
        )
        return SelectableSequence(prefix=prefix, selection=selection, suffix=suffix)

    def update_selected(self, fn: Callable[[B], B]) -> "SelectableSequence[A, B]":
        if self.selection is None:
            return self
        value = ensure_selected(fn(self.selection), source="update_selected")
        return SelectableSequence(
            prefix=self.prefix, selection=value, suffix=self.suffix
        )

    # selection transitions

    def select(
        self,
        index: int,
        *,
        reconstruct: Reconstruct[B, A],
        project: Project[A, B],
    ) -> "SelectableSequence[A, B]":
        """Select the element at flattened ``index``.

        Any current selection is first turned back into an ``A`` with
        ``reconstruct``; the target is then promoted with ``project``.

        Raises
        ------
        SelectionIndexError
            If ``index`` is negative or not below ``length()``.
        """

        with span(
            "sequence::select",
            component="sequence",
            metadata={"index": index, "length": self.length()},
        ):
            items = self._demoted(reconstruct)
            try:
                position = ensure_index(index, len(items))
            except SelectionIndexError as exc:
                record_event(
                    "sequence.index_rejected",
                    level="warning",
                    data={"index": exc.index, "length": exc.length},
                )
                raise
            return _split(items, position, project)

    def select_first(
        self,
        predicate: Callable[[A], bool],
        *,
        reconstruct: Reconstruct[B, A],
        project: Project[A, B],
    ) -> "SelectableSequence[A, B]":
        """Select the first element, in logical order, matching ``predicate``.

        The predicate sees every element as an ``A``, including the one
        currently selected.
        """

        with span(
            "sequence::select_first",
            component="sequence",
            metadata={"length": self.length()},
        ) as handle:
            items = self._demoted(reconstruct)
            for position, item in enumerate(items):
                if predicate(item):
                    handle.add_metadata("index", position)
                    return _split(items, position, project)
            raise SelectionLookupError(
                f"No element among {len(items)} matches the predicate"
            )

    def select_next(
        self,
        *,
        reconstruct: Reconstruct[B, A],
        project: Project[A, B],
    ) -> "SelectableSequence[A, B]":
        """Move the selection one step forward, stopping at the last element."""

        current = self.selected_index()
        if self.is_empty():
            return self
        if current is None:
            return self.select(0, reconstruct=reconstruct, project=project)
        if current == self.length() - 1:
            return self
        return self.select(current + 1, reconstruct=reconstruct, project=project)

    def select_previous(
        self,
        *,
        reconstruct: Reconstruct[B, A],
        project: Project[A, B],
    ) -> "SelectableSequence[A, B]":
        """Move the selection one step back, stopping at the first element."""

        current = self.selected_index()
        if self.is_empty():
            return self
        if current is None:
            last = self.length() - 1
            return self.select(last, reconstruct=reconstruct, project=project)
        if current == 0:
            return self
        return self.select(current - 1, reconstruct=reconstruct, project=project)

    def unselect(
        self, reconstruct: Reconstruct[B, A]
    ) -> "SelectableSequence[A, B]":
        """Drop the selection, keeping its value in place as an ``A``.

        Returns ``self`` when nothing is selected.
        """

        if self.selection is None:
            return self
        with span(
            "sequence::unselect",
            component="sequence",
            metadata={"index": len(self.prefix), "length": self.length()},
        ):
            demoted = reconstruct(self.selection)
            return SelectableSequence(
                prefix=self.prefix, selection=None, suffix=(demoted,) + self.suffix
            )

    def _demoted(self, reconstruct: Reconstruct[B, A]) -> Sequence[A]:
        if self.selection is None:
            return self.prefix + self.suffix
        return self.prefix + (reconstruct(self.selection),) + self.suffix


def _identity(value: A) -> A:
    return value


def _split(
    items: Sequence[A], position: int, project: Project[A, B]
) -> SelectableSequence[A, B]:
    chosen = ensure_selected(project(items[position]), source="project")
    return SelectableSequence(
        prefix=tuple(items[:position]),
        selection=chosen,
        suffix=tuple(items[position + 1 :]),
    )


__all__ = ["SelectableSequence", "Reconstruct", "Project"]
