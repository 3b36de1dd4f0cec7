"""
Shared building blocks for the sorting algorithms.

Public API (stable):
    swap(a, i, j) -> None
    merge(a, left, mid, right) -> None
    insertion_sort_range(a, left, right) -> None
    RangeInvariantError

Conventions:
- All ranges are **inclusive** on both ends: [left, right].
- `merge` allocates a fresh temporary list on every call. Merge sort and
  block sort are timed with this allocation pattern, so do not swap in a
  shared scratch buffer here.
- Ties in `merge` favour the left run, which is what makes merge sort stable.
"""

from __future__ import annotations

from typing import List, MutableSequence, TypeVar

T = TypeVar("T")

__all__ = ["RangeInvariantError", "swap", "merge", "insertion_sort_range"]


class RangeInvariantError(AssertionError):
    """An internally computed index range fell outside the sequence.

    This always indicates a bug in an algorithm, never bad user input.
    """


def swap(a: MutableSequence[T], i: int, j: int) -> None:
    """Exchange a[i] and a[j]."""
    a[i], a[j] = a[j], a[i]


def merge(a: MutableSequence[T], left: int, mid: int, right: int) -> None:
    """
    Merge the sorted runs a[left..mid] and a[mid+1..right] in place.

    `mid == right` is allowed (empty right run) so block sort can hand over
    a trailing block without a partner.
    """
    _check_range(a, left, right)
    if not (left <= mid <= right):
        raise RangeInvariantError(
            f"merge midpoint out of range: left={left}, mid={mid}, right={right}"
        )

    temp: List[T] = []
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if a[i] <= a[j]:
            temp.append(a[i])
            i += 1
        else:
            temp.append(a[j])
            j += 1
    while i <= mid:
        temp.append(a[i])
        i += 1
    while j <= right:
        temp.append(a[j])
        j += 1

    for k, v in enumerate(temp):
        a[left + k] = v


def insertion_sort_range(a: MutableSequence[T], left: int, right: int) -> None:
    """Insertion-sort a[left..right] in place using adjacent swaps."""
    if left >= right:
        return
    _check_range(a, left, right)
    for i in range(left + 1, right + 1):
        j = i
        while j > left and a[j - 1] > a[j]:
            swap(a, j - 1, j)
            j -= 1


def _check_range(a: MutableSequence[T], left: int, right: int) -> None:
    n = len(a)
    if left < 0 or right >= n or left > right:
        raise RangeInvariantError(
            f"range [{left}, {right}] invalid for sequence of length {n}"
        )
