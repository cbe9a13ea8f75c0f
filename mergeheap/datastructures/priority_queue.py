from __future__ import annotations

import copy as _copy
import logging
import operator
from collections import deque
from typing import Any, Deque, Dict, Generic, Iterable, Optional, TypeVar

from ..exceptions import ContainerIsEmpty
from .leftist_tree import Less, Node, copy_tree, delete_tree, merge_nodes

T = TypeVar("T")

logger = logging.getLogger(__name__)


class PriorityQueue(Generic[T]):
    """A mergeable max-priority queue backed by a leftist tree.

    The top is the largest element under ``less`` (``operator.lt`` by
    default). ``push``, ``pop`` and ``merge`` run in O(log n); ``top``,
    ``size`` and ``empty`` in O(1).

    Every mutating operation gives the strong guarantee: if ``less`` raises,
    the queue (and, for ``merge``, the donor too) is left exactly as it was
    before the call and the comparator's exception propagates unchanged.
    """

    __slots__ = ("_root", "_size", "_less")

    def __init__(self, it: Optional[Iterable[T]] = None, *, less: Optional[Less] = None) -> None:
        self._less: Less = less if less is not None else operator.lt
        self._root: Optional[Node[T]] = None
        self._size = 0
        if it is not None:
            self._root, self._size = self._build(it)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _build(self, it: Iterable[T]):
        """Pairwise-merge singleton trees into one in O(n) comparisons."""
        trees: Deque[Node[T]] = deque(Node(v) for v in it)
        size = len(trees)
        while len(trees) > 1:
            a = trees.popleft()
            b = trees.popleft()
            trees.append(merge_nodes(a, b, self._less))  # type: ignore[arg-type]
        return (trees[0] if trees else None), size

    # -----------------------------
    # Public API
    # -----------------------------
    def top(self) -> T:
        """Return the largest element without removing it (O(1)).

        Raises:
            ContainerIsEmpty: if the queue is empty.
        """
        if self._root is None:
            raise ContainerIsEmpty("top")
        return self._root.data

    def push(self, item: T) -> None:
        """Insert *item* (O(log n))."""
        node = Node(item)
        try:
            root = merge_nodes(self._root, node, self._less)
        except Exception:
            logger.debug("push rolled back, size stays %d", self._size)
            raise
        self._root = root
        self._size += 1

    def pop(self) -> T:
        """Remove and return the largest element (O(log n)).

        Raises:
            ContainerIsEmpty: if the queue is empty.
        """
        old_root = self._root
        if old_root is None:
            raise ContainerIsEmpty("pop")
        old_size = self._size
        try:
            root = merge_nodes(old_root.left, old_root.right, self._less)
        except Exception:
            # The children are still linked under old_root.
            logger.debug("pop rolled back, size stays %d", old_size)
            raise
        self._root = root
        self._size = old_size - 1
        item = old_root.data
        old_root.left = old_root.right = None
        old_root.data = None
        return item

    def merge(self, other: PriorityQueue[T]) -> None:
        """Move every element of *other* into this queue (O(log(n + m))).

        *other* is left empty. Merging a queue with itself does nothing.
        Both queues must share the same comparator object, since *other*'s
        subtrees are moved in without being re-ordered.

        Raises:
            TypeError: if *other* is not a PriorityQueue.
            ValueError: if *other* is non-empty and uses a different comparator.
        """
        if other is self:
            return
        if not isinstance(other, PriorityQueue):
            raise TypeError(f"cannot merge {type(other).__name__!r} into PriorityQueue")
        if other._root is not None and other._less is not self._less:
            raise ValueError("cannot merge priority queues ordered by different comparators")
        root, size = self._root, self._size
        other_root, other_size = other._root, other._size
        try:
            merged = merge_nodes(root, other_root, self._less)
        except Exception:
            logger.debug("merge rolled back, sizes stay %d and %d", size, other_size)
            raise
        self._root = merged
        self._size = size + other_size
        other._root = None
        other._size = 0

    def size(self) -> int:
        """Number of stored elements."""
        return self._size

    def empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Release every node and leave the queue empty (O(n))."""
        root = self._root
        self._root = None
        self._size = 0
        delete_tree(root)

    # -----------------------------
    # Copying
    # -----------------------------
    def copy(self) -> PriorityQueue[T]:
        """Return an independent queue holding the same elements (O(n)).

        The new queue shares element objects and the comparator, but no
        nodes: mutating either queue never affects the other.
        """
        out: PriorityQueue[T] = PriorityQueue(less=self._less)
        out._root = copy_tree(self._root)
        out._size = self._size
        return out

    def assign(self, other: PriorityQueue[T]) -> None:
        """Replace this queue's contents with a copy of *other*.

        The copy is made before anything is swapped in, so a failure while
        copying leaves this queue untouched. The comparator is adopted from
        *other* because the copied tree is ordered by it.
        """
        if other is self:
            return
        root = copy_tree(other._root)
        old = self._root
        self._root, self._size, self._less = root, other._size, other._less
        delete_tree(old)

    def __copy__(self) -> PriorityQueue[T]:
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> PriorityQueue[T]:
        out: PriorityQueue[T] = PriorityQueue(less=self._less)
        memo[id(self)] = out
        out._root = copy_tree(self._root, lambda v: _copy.deepcopy(v, memo))
        out._size = self._size
        return out

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        if self._root is None:
            return "PriorityQueue(size=0)"
        return f"PriorityQueue(size={self._size}, top={self._root.data!r})"
