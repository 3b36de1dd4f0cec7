"""
Quicksort with Hoare-style partitioning around the first element.

Public API (stable):
    quicksort(a, *, pivot="first", rng=None) -> None
    sort(a, *, config=None) -> None

Config keys (all optional):
    pivot : "first" | "random"   (default "first")
    seed  : int                  (only used when pivot == "random")

Sorted and reverse-sorted inputs are the worst case for the first-element
pivot: every partition peels off a single element. Pending ranges are kept
on an explicit stack so that depth never touches the interpreter's
recursion limit.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Tuple, TypeVar

import numpy as np

from ._primitives import swap

T = TypeVar("T")

PIVOT_STRATEGIES = {"first", "random"}

__all__ = ["PIVOT_STRATEGIES", "quicksort", "sort"]


def quicksort(
    a: MutableSequence[T],
    *,
    pivot: str = "first",
    rng: Optional[np.random.Generator] = None,
) -> None:
    """
    Sort `a` in place.

    With pivot="random", a uniformly chosen element of each active range is
    moved to its first slot before partitioning; `rng` defaults to a fresh
    unseeded NumPy generator.
    """
    if pivot not in PIVOT_STRATEGIES:
        raise ValueError(
            f"Unsupported pivot strategy: {pivot!r}. Supported: {sorted(PIVOT_STRATEGIES)}"
        )
    if pivot == "random" and rng is None:
        rng = np.random.default_rng()

    stack: List[Tuple[int, int]] = [(0, len(a) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        if pivot == "random":
            swap(a, low, int(rng.integers(low, high + 1)))
        p = _partition(a, low, high)
        stack.append((p + 1, high))
        stack.append((low, p - 1))


def _partition(a: MutableSequence[T], low: int, high: int) -> int:
    """Partition a[low..high] around a[low]; return the pivot's final index."""
    pivot = a[low]
    left = low + 1
    right = high

    while left <= right:
        while left <= right and a[left] < pivot:
            left += 1
        while left <= right and a[right] > pivot:
            right -= 1
        if left <= right:
            swap(a, left, right)
            left += 1
            right -= 1

    swap(a, low, right)
    return right


def sort(a: MutableSequence[T], *, config: Optional[Dict[str, Any]] = None) -> None:
    """Harness entry point: sort `a` in place according to `config`."""
    config = config or {}
    pivot = config.get("pivot", "first")
    rng = None
    if pivot == "random":
        rng = np.random.default_rng(config.get("seed"))
    quicksort(a, pivot=pivot, rng=rng)
