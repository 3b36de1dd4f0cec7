"""Tests for the sortedness verifier, permutation checks and oracle."""

from __future__ import annotations

from sortlab.validate import (
    equals_oracle,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_stable_by_key,
    oracle_sort,
    permutation_counter_diff,
)


def test_is_nondecreasing() -> None:
    assert is_nondecreasing([])
    assert is_nondecreasing([1])
    assert is_nondecreasing([1, 1, 2])
    assert not is_nondecreasing([1, 3, 2])


def test_first_violation_index() -> None:
    assert first_nondecreasing_violation_index([1, 2, 2, 1, 0]) == 2
    assert first_nondecreasing_violation_index([0, 1]) is None


def test_permutation_checks() -> None:
    assert is_permutation([3, 1, 1], [1, 3, 1])
    assert not is_permutation([3, 1, 1], [1, 3, 3])
    assert not is_permutation([1], [1, 1])
    assert permutation_counter_diff([3, 1, 1], [1, 3, 3]) == {1: 1, 3: -1}
    assert permutation_counter_diff([1, 2], [2, 1]) == {}


def test_oracle_does_not_mutate() -> None:
    a = [3, 1, 2]
    assert oracle_sort(a) == [1, 2, 3]
    assert a == [3, 1, 2]
    assert equals_oracle(a, [1, 2, 3])
    assert not equals_oracle(a, [3, 2, 1])


def test_is_stable_by_key() -> None:
    a, b, c = (1, "a"), (1, "b"), (0, "c")
    assert is_stable_by_key([a, b, c], [c, a, b], key=lambda x: x[0])
    assert not is_stable_by_key([a, b, c], [c, b, a], key=lambda x: x[0])
