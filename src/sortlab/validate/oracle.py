"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth: deterministic, stable,
and correct for any totally ordered element type.

Public API (stable):
    oracle_sort(a) -> list
    equals_oracle(a, out) -> bool

The oracle never mutates its input and always returns a new list.
"""

from __future__ import annotations

from typing import Any, List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any]) -> List[Any]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    return sorted(a)


def equals_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """True iff `out` equals `oracle_sort(a)` element for element."""
    return list(out) == oracle_sort(a)
