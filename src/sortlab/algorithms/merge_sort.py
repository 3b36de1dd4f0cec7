"""
Top-down merge sort.

Stable: the shared merge primitive takes from the left run on ties. Every
merge allocates its own temporary list, so a sort of n elements performs
n - 1 allocations. Depth of recursion is O(log n).
"""

from __future__ import annotations

from typing import Any, Dict, MutableSequence, Optional, TypeVar

from ._primitives import merge

T = TypeVar("T")

__all__ = ["merge_sort", "sort"]


def merge_sort(a: MutableSequence[T]) -> None:
    if len(a) <= 1:
        return
    _merge_sort(a, 0, len(a) - 1)


def _merge_sort(a: MutableSequence[T], left: int, right: int) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort(a, left, mid)
    _merge_sort(a, mid + 1, right)
    merge(a, left, mid, right)


def sort(a: MutableSequence[T], *, config: Optional[Dict[str, Any]] = None) -> None:
    merge_sort(a)
