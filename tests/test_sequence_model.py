from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from selectable import SelectableSequence, SelectionValueError


def make_sequence(
    prefix: tuple[str, ...] = ("a", "b"),
    selection: str | None = "c",
    suffix: tuple[str, ...] = ("d",),
) -> SelectableSequence[str, str]:
    return SelectableSequence(prefix=prefix, selection=selection, suffix=suffix)


def test_empty_has_no_elements() -> None:
    seq = SelectableSequence.empty()

    assert seq.prefix == ()
    assert seq.selected() is None
    assert seq.suffix == ()
    assert seq.length() == 0
    assert seq.is_empty()


def test_singleton_selects_value() -> None:
    seq = SelectableSequence.singleton("x")

    assert seq.selected() == "x"
    assert seq.selected_index() == 0
    assert seq.length() == 1


def test_singleton_rejects_none() -> None:
    with pytest.raises(SelectionValueError):
        SelectableSequence.singleton(None)


def test_from_sequence_puts_items_in_prefix() -> None:
    seq = SelectableSequence.from_sequence([10, 20, 30])

    assert seq.prefix == (10, 20, 30)
    assert seq.selected() is None
    assert seq.suffix == ()
    assert seq.selected_index() is None
    assert len(seq) == 3


def test_from_sequence_accepts_generators() -> None:
    seq = SelectableSequence.from_sequence(n * 2 for n in range(3))

    assert seq.flatten() == [0, 2, 4]


def test_constructor_normalizes_lists_to_tuples() -> None:
    seq = SelectableSequence(prefix=[1, 2], selection=3, suffix=[4])

    assert seq.prefix == (1, 2)
    assert seq.suffix == (4,)
    assert seq == SelectableSequence(prefix=(1, 2), selection=3, suffix=(4,))


def test_sequence_is_frozen() -> None:
    seq = make_sequence()

    with pytest.raises(FrozenInstanceError):
        seq.selection = "z"  # type: ignore[misc]


def test_length_counts_selection_once() -> None:
    assert make_sequence().length() == 4
    assert make_sequence(selection=None).length() == 3


def test_to_sequence_applies_maps_in_order() -> None:
    seq = make_sequence()

    result = seq.to_sequence(str.upper, lambda value: f"[{value}]")

    assert result == ["A", "B", "[c]", "D"]


def test_to_sequence_preserves_order_without_selection() -> None:
    seq = SelectableSequence.from_sequence(["a0", "a1", "a2"])

    assert seq.to_sequence(lambda v: v, lambda v: v) == ["a0", "a1", "a2"]


def test_flatten_returns_logical_order() -> None:
    assert make_sequence().flatten() == ["a", "b", "c", "d"]


def test_map_keeps_selection_position() -> None:
    seq = make_sequence()

    mapped = seq.map(len, str.upper)

    assert mapped.prefix == (1, 1)
    assert mapped.selected() == "C"
    assert mapped.suffix == (1,)
    assert mapped.selected_index() == seq.selected_index()


def test_map_commutes_with_flatten() -> None:
    seq = SelectableSequence(prefix=(1, 2), selection=3, suffix=(4, 5))

    def double(value: int) -> int:
        return value * 2

    assert seq.map(double, double).flatten() == [double(v) for v in seq.flatten()]


def test_map_without_selection_never_calls_selected_fn() -> None:
    calls: list[str] = []
    seq = SelectableSequence.from_sequence(["a"])

    seq.map(str.upper, lambda value: calls.append(value) or value)

    assert calls == []


def test_map_rejects_selected_fn_returning_none() -> None:
    with pytest.raises(SelectionValueError) as info:
        make_sequence().map(str.upper, lambda value: None)

    assert info.value.source == "map"


def test_indexed_map_uses_flattened_indices() -> None:
    seq = make_sequence()

    mapped = seq.indexed_map(
        lambda index, value: (value, index), lambda index, value: (value, index)
    )

    assert mapped.flatten() == [("a", 0), ("b", 1), ("c", 2), ("d", 3)]
    assert mapped.selected() == ("c", 2)


def test_indexed_map_without_selection_keeps_suffix_contiguous() -> None:
    seq = make_sequence(prefix=("a",), selection=None, suffix=("b", "c"))

    mapped = seq.indexed_map(lambda index, value: index, lambda index, value: index)

    assert mapped.flatten() == [0, 1, 2]
    assert mapped.selected() is None


def test_update_selected_changes_only_selection() -> None:
    seq = make_sequence()

    updated = seq.update_selected(str.upper)

    assert updated.selected() == "C"
    assert updated.prefix is seq.prefix
    assert updated.suffix is seq.suffix
    assert seq.selected() == "c"


def test_update_selected_without_selection_is_noop() -> None:
    seq = make_sequence(selection=None)

    assert seq.update_selected(str.upper) is seq


def test_indexed_map_rejects_selected_fn_returning_none() -> None:
    with pytest.raises(SelectionValueError) as info:
        make_sequence().indexed_map(
            lambda index, value: value, lambda index, value: None
        )

    assert info.value.source == "indexed_map"


def test_update_selected_rejects_none() -> None:
    with pytest.raises(SelectionValueError) as info:
        make_sequence().update_selected(lambda value: None)

    assert info.value.source == "update_selected"
