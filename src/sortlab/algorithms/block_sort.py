"""
Simplified block sort: bottom-up merge sort seeded by insertion-sorted blocks.

This is not the classical in-place block merge sort (no rotations, no
internal buffer). Phase one insertion-sorts fixed-size blocks; phase two
merges neighbouring blocks pairwise, doubling the block size each pass,
until one block spans the whole sequence.

Config keys (all optional):
    block_size : int >= 1   (default 2)
"""

from __future__ import annotations

from typing import Any, Dict, MutableSequence, Optional, TypeVar

from ._primitives import insertion_sort_range, merge

T = TypeVar("T")

DEFAULT_BLOCK_SIZE = 2

__all__ = ["DEFAULT_BLOCK_SIZE", "block_sort", "sort"]


def block_sort(a: MutableSequence[T], *, block_size: int = DEFAULT_BLOCK_SIZE) -> None:
    if not isinstance(block_size, int) or isinstance(block_size, bool) or block_size < 1:
        raise ValueError(f"block_size must be an integer >= 1; got {block_size!r}")

    n = len(a)

    for start in range(0, n, block_size):
        end = min(start + block_size - 1, n - 1)
        insertion_sort_range(a, start, end)

    while block_size < n:
        for start in range(0, n, 2 * block_size):
            # A trailing block without a partner merges with an empty right run.
            mid = min(start + block_size - 1, n - 1)
            end = min(start + 2 * block_size - 1, n - 1)
            merge(a, start, mid, end)
        block_size *= 2


def sort(a: MutableSequence[T], *, config: Optional[Dict[str, Any]] = None) -> None:
    config = config or {}
    block_sort(a, block_size=config.get("block_size", DEFAULT_BLOCK_SIZE))
