"""Mergeable max-priority queue built on a leftist tree."""

from .datastructures import PriorityQueue
from .exceptions import ContainerIsEmpty, PriorityQueueError

__all__ = [
    "PriorityQueue",
    "ContainerIsEmpty",
    "PriorityQueueError",
]

__version__ = "0.1.0"
