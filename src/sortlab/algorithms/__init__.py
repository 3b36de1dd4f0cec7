"""
Sorting algorithms public API.

Every module in this package sorts a mutable sequence **in place** and
exposes a harness entry point with the same signature:

    sort(a: list, *, config: dict | None = None) -> None

The runner resolves algorithms by module name, e.g. "quicksort" ->
sortlab.algorithms.quicksort.sort.
"""

from ._primitives import RangeInvariantError, insertion_sort_range, merge, swap
from .block_sort import block_sort
from .heapsort import heapsort
from .merge_sort import merge_sort
from .quicksort import quicksort
from .tree_sort import tree_sort

ALGORITHM_NAMES = ("quicksort", "heapsort", "merge_sort", "tree_sort", "block_sort")

STABLE_ALGORITHMS = ("merge_sort", "tree_sort")

__all__ = [
    "ALGORITHM_NAMES",
    "STABLE_ALGORITHMS",
    "RangeInvariantError",
    "block_sort",
    "heapsort",
    "insertion_sort_range",
    "merge",
    "merge_sort",
    "quicksort",
    "swap",
    "tree_sort",
]
