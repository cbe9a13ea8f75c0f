"""Exception types shared by the mergeheap containers."""


class PriorityQueueError(Exception):
    """Base class for errors raised by the containers themselves.

    Errors coming out of a user-supplied comparator are never wrapped in
    this type; they propagate with their original identity.
    """


class ContainerIsEmpty(PriorityQueueError, IndexError):
    """Raised by ``top()`` and ``pop()`` when the queue holds no elements.

    Subclasses :class:`IndexError` so code written against the builtin
    convention (``list.pop`` on an empty list) keeps working.
    """

    def __init__(self, operation: str = "access") -> None:
        self.operation = operation
        super().__init__(f"{operation} from empty priority queue")
