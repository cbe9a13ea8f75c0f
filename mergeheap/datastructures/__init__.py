from .leftist_tree import Node, copy_tree, count_nodes, delete_tree, dist_of, merge_nodes
from .priority_queue import PriorityQueue

__all__ = [
    "Node",
    "copy_tree",
    "count_nodes",
    "delete_tree",
    "dist_of",
    "merge_nodes",
    "PriorityQueue",
]
