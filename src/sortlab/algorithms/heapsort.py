"""
Heapsort over an implicit max-heap (children of i live at 2i+1 and 2i+2).
"""

from __future__ import annotations

from typing import Any, Dict, MutableSequence, Optional, TypeVar

from ._primitives import swap

T = TypeVar("T")

__all__ = ["heapsort", "heapify", "sort"]


def heapsort(a: MutableSequence[T]) -> None:
    n = len(a)

    # Build phase: last parent down to the root.
    for i in range(n // 2 - 1, -1, -1):
        heapify(a, n, i)

    # Extraction phase: move the current max behind the shrinking heap.
    for i in range(n - 1, 0, -1):
        swap(a, 0, i)
        heapify(a, i, 0)


def heapify(a: MutableSequence[T], size: int, i: int) -> None:
    """Sift a[i] down until the subtree rooted at i is a max-heap within `size`."""
    largest = i
    left = 2 * i + 1
    right = 2 * i + 2

    if left < size and a[left] > a[largest]:
        largest = left
    if right < size and a[right] > a[largest]:
        largest = right

    if largest != i:
        swap(a, i, largest)
        heapify(a, size, largest)


def sort(a: MutableSequence[T], *, config: Optional[Dict[str, Any]] = None) -> None:
    heapsort(a)
