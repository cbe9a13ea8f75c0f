"""Leftist tree nodes and the structural primitives the queue is built on.

Every function here works on bare :class:`Node` subtrees and knows nothing
about sizes or containers. ``merge_nodes`` is the one primitive that orders
elements; everything else is shape-only.
"""

from __future__ import annotations
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")

Less = Callable[[Any, Any], Any]


class Node(Generic[T]):
    """One element of a leftist tree plus its two owned subtrees.

    ``dist`` is the null-path-length: 0 for a node without a right child,
    otherwise ``right.dist + 1``.
    """

    __slots__ = ("data", "left", "right", "dist")

    def __init__(self, data: T) -> None:
        self.data = data
        self.left: Optional[Node[T]] = None
        self.right: Optional[Node[T]] = None
        self.dist = 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Node({self.data!r}, dist={self.dist})"


def dist_of(node: Optional[Node[Any]]) -> int:
    """Null-path-length of *node*; an empty subtree counts as -1."""
    return node.dist if node is not None else -1


# -----------------------------
# Merge
# -----------------------------
def merge_nodes(a: Optional[Node[T]], b: Optional[Node[T]], less: Less) -> Optional[Node[T]]:
    """Merge two leftist trees and return the new root (O(log n + log m)).

    The larger root under ``less`` wins; on a tie the first operand wins.
    The loser is merged into the winner's right spine.

    Each frame writes to its winner only after the recursive call has
    returned, so if ``less`` raises at any depth no node reachable from
    ``a`` or ``b`` has been touched and the exception propagates cleanly.
    """
    if a is None:
        return b
    if b is None:
        return a

    if less(a.data, b.data):
        winner, loser = b, a
    else:
        winner, loser = a, b

    merged = merge_nodes(winner.right, loser, less)

    # Commit point: nothing below may raise.
    left = winner.left
    if dist_of(left) < dist_of(merged):
        winner.left, winner.right = merged, left
    else:
        winner.right = merged
    winner.dist = dist_of(winner.right) + 1
    return winner


# -----------------------------
# Copy / delete
# -----------------------------
def copy_tree(src: Optional[Node[T]], copy_data: Optional[Callable[[T], T]] = None) -> Optional[Node[T]]:
    """Return an independent copy of the subtree rooted at *src*.

    Shape, ``dist`` and element order are reproduced node for node. With
    *copy_data* each element is passed through it; otherwise the copy shares
    element references with the source.

    Walks with an explicit stack since a leftist tree can have a left spine
    as long as the tree itself. If ``copy_data`` raises midway, the nodes
    built so far are released before the error propagates.
    """
    if src is None:
        return None

    root: Optional[Node[T]] = None
    try:
        root = Node(copy_data(src.data) if copy_data else src.data)
        root.dist = src.dist
        stack: List[Tuple[Node[T], Node[T]]] = [(src, root)]
        while stack:
            s, d = stack.pop()
            if s.left is not None:
                d.left = Node(copy_data(s.left.data) if copy_data else s.left.data)
                d.left.dist = s.left.dist
                stack.append((s.left, d.left))
            if s.right is not None:
                d.right = Node(copy_data(s.right.data) if copy_data else s.right.data)
                d.right.dist = s.right.dist
                stack.append((s.right, d.right))
    except BaseException:
        delete_tree(root)
        raise
    return root


def delete_tree(node: Optional[Node[Any]]) -> None:
    """Release every node under *node*, children before their parent.

    Links and element references are wiped so nothing outlives the tree
    through a stray reference to one of its nodes. Never raises.
    """
    stack: List[Node[Any]] = [node] if node is not None else []
    while stack:
        n = stack[-1]
        if n.left is not None:
            stack.append(n.left)
            n.left = None
        elif n.right is not None:
            stack.append(n.right)
            n.right = None
        else:
            stack.pop()
            n.data = None
            n.dist = 0


def count_nodes(node: Optional[Node[Any]]) -> int:
    """Number of nodes reachable from *node* (O(n))."""
    count = 0
    stack: List[Node[Any]] = [node] if node is not None else []
    while stack:
        n = stack.pop()
        count += 1
        if n.left is not None:
            stack.append(n.left)
        if n.right is not None:
            stack.append(n.right)
    return count
