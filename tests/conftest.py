import operator
import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mergeheap.datastructures.leftist_tree import dist_of


class ComparatorFailure(Exception):
    """Raised by FlakyLess when it reaches its failing call."""


class FlakyLess:
    """``operator.lt`` that counts its calls and raises on a chosen one.

    ``fail_at`` is the 1-based call number that raises; ``arm(k)`` makes the
    k-th call from now raise instead.
    """

    def __init__(self, fail_at=None):
        self.calls = 0
        self.fail_at = fail_at

    def arm(self, k=1):
        self.fail_at = self.calls + k

    def disarm(self):
        self.fail_at = None

    def __call__(self, a, b):
        self.calls += 1
        if self.fail_at is not None and self.calls == self.fail_at:
            raise ComparatorFailure(f"comparator failed on call {self.calls}")
        return a < b


def check_tree(root, less=operator.lt):
    """Assert heap order, the leftist property and dist consistency.

    Returns the number of nodes reachable from *root*.
    """
    count = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        count += 1
        assert dist_of(node.left) >= dist_of(node.right)
        assert node.dist == dist_of(node.right) + 1
        assert (node.dist == 0) == (node.right is None)
        for child in (node.left, node.right):
            if child is not None:
                assert not less(node.data, child.data)
                stack.append(child)
    return count


def snapshot(pq):
    """Capture the exact node layout of a queue, identities included."""
    layout = []
    stack = [pq._root] if pq._root is not None else []
    while stack:
        n = stack.pop()
        layout.append((id(n), n.data, n.dist, id(n.left), id(n.right)))
        if n.right is not None:
            stack.append(n.right)
        if n.left is not None:
            stack.append(n.left)
    return pq._root, pq._size, tuple(layout)


def drain(pq):
    out = []
    while not pq.empty():
        out.append(pq.pop())
    return out


@pytest.fixture
def flaky_less():
    return FlakyLess()
