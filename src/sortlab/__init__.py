"""
sortlab: classical comparison sorts and a harness that times and verifies them.

    from sortlab import quicksort, heapsort, merge_sort, tree_sort, block_sort

Every algorithm sorts a mutable sequence in place and returns None.
"""

from .algorithms import block_sort, heapsort, merge_sort, quicksort, tree_sort

__version__ = "0.1.0"

__all__ = ["block_sort", "heapsort", "merge_sort", "quicksort", "tree_sort"]
