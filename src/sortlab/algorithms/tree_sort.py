"""
Tree sort: insert everything into an unbalanced binary search tree, then
rewrite the sequence from an in-order walk.

Equal keys descend to the right, so among duplicates the in-order walk
yields them in input order (the sort is stable).

Sorted or reverse-sorted input degenerates the tree into a linked list,
giving O(n^2) comparisons. Both insertion and traversal walk the tree
iteratively, so a degenerate tree of any height is fine.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Iterator, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")

__all__ = ["tree_sort", "sort"]


class _Node(Generic[T]):
    __slots__ = ("value", "left", "right")

    def __init__(self, value: T) -> None:
        self.value = value
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None


def tree_sort(a: MutableSequence[T]) -> None:
    root: Optional[_Node[T]] = None
    for value in a:
        root = _insert(root, value)

    a.clear()
    for value in _inorder(root):
        a.append(value)


def _insert(root: Optional[_Node[T]], value: T) -> _Node[T]:
    """Insert `value` below `root` and return the (possibly new) root."""
    node = _Node(value)
    if root is None:
        return node

    cur = root
    while True:
        if value < cur.value:
            if cur.left is None:
                cur.left = node
                return root
            cur = cur.left
        else:
            if cur.right is None:
                cur.right = node
                return root
            cur = cur.right


def _inorder(root: Optional[_Node[T]]) -> Iterator[T]:
    stack: List[_Node[T]] = []
    cur = root
    while stack or cur is not None:
        while cur is not None:
            stack.append(cur)
            cur = cur.left
        cur = stack.pop()
        yield cur.value
        cur = cur.right


def sort(a: MutableSequence[T], *, config: Optional[Dict[str, Any]] = None) -> None:
    tree_sort(a)
