"""Tests for the shared swap / merge / insertion-sort primitives."""

from __future__ import annotations

import pytest

from sortlab.algorithms import RangeInvariantError, insertion_sort_range, merge, swap


def test_swap_exchanges_elements() -> None:
    a = [1, 2, 3]
    swap(a, 0, 2)
    assert a == [3, 2, 1]


def test_swap_same_index_is_noop() -> None:
    a = [1, 2, 3]
    swap(a, 1, 1)
    assert a == [1, 2, 3]


def test_merge_two_runs() -> None:
    a = [9, 1, 4, 7, 2, 3, 8, 0]
    merge(a, 1, 3, 6)
    assert a == [9, 1, 2, 3, 4, 7, 8, 0]


def test_merge_empty_right_run() -> None:
    a = [1, 5, 6]
    merge(a, 0, 2, 2)
    assert a == [1, 5, 6]


class _Key:
    def __init__(self, key: int, tag: str) -> None:
        self.key = key
        self.tag = tag

    def __le__(self, other: "_Key") -> bool:
        return self.key <= other.key


def test_merge_ties_take_left_run_first() -> None:
    a = [_Key(1, "L1"), _Key(2, "L2"), _Key(1, "R1"), _Key(2, "R2")]
    merge(a, 0, 1, 3)
    assert [x.tag for x in a] == ["L1", "R1", "L2", "R2"]


def test_merge_allocates_fresh_buffer_and_writes_back_in_place() -> None:
    a = [2, 4, 1, 3]
    same = a
    merge(a, 0, 1, 3)
    assert same is a
    assert a == [1, 2, 3, 4]


@pytest.mark.parametrize(
    "left,mid,right",
    [(-1, 0, 1), (0, 1, 4), (2, 1, 3), (0, 3, 2)],
)
def test_merge_rejects_bad_ranges(left: int, mid: int, right: int) -> None:
    with pytest.raises(RangeInvariantError):
        merge([1, 2, 3, 4], left, mid, right)


def test_range_invariant_error_is_assertion() -> None:
    assert issubclass(RangeInvariantError, AssertionError)


def test_insertion_sort_range_only_touches_range() -> None:
    a = [9, 5, 4, 3, 0]
    insertion_sort_range(a, 1, 3)
    assert a == [9, 3, 4, 5, 0]


def test_insertion_sort_range_degenerate_is_noop() -> None:
    a = [3, 2, 1]
    insertion_sort_range(a, 2, 2)
    insertion_sort_range(a, 2, 1)
    assert a == [3, 2, 1]


def test_insertion_sort_range_out_of_bounds() -> None:
    with pytest.raises(RangeInvariantError):
        insertion_sort_range([3, 2, 1], 0, 3)
