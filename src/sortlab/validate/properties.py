"""
Property helpers for validating sorting results.

These back both the test suite and the benchmark harness, which checks every
timed sample after the clock stops.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable_by_key(before, after, key) -> bool

Notes
-----
- Elements only need `<=` / `>` and, for the permutation checks, hashing.
- Stability cannot be seen from values alone when equal keys are
  indistinguishable; `is_stable_by_key` expects items that carry a
  tie-breaker (e.g. objects or (key, id) pairs) and a `key` extractor.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable_by_key",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> Optional[int]:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> Dict[Any, int]:
    """
    Return value -> (count in a) - (count in b), omitting zero entries.

    An empty dict means identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def is_stable_by_key(
    before: Sequence[Any], after: Sequence[Any], key: Callable[[Any], Hashable]
) -> bool:
    """
    Return True iff, for every key, the items sharing it appear in `after`
    in the same relative order as in `before`. Items are matched by identity.
    """
    def groups(xs: Sequence[Any]) -> Dict[Hashable, List[int]]:
        out: Dict[Hashable, List[int]] = defaultdict(list)
        for x in xs:
            out[key(x)].append(id(x))
        return out

    return groups(before) == groups(after)
