import typing as t
from enum import Enum

from .errors import EmptyCollectionError, InvalidArgumentError
from .logger import logger
from .snapshot import HeapEntry

__all__ = ["Order", "Heap", "min_heap", "max_heap", "natural_compare"]

T = t.TypeVar("T")

# NOTE: negative when a sorts before b, 0 when equal, positive otherwise
Comparator = t.Callable[[T, T], int]


class Order(Enum):
    # the value is the sign a comparison must have for the left side to win
    MIN = -1
    MAX = 1


def natural_compare(a, b) -> int:
    try:
        return (a > b) - (a < b)
    except TypeError as e:
        raise InvalidArgumentError(f"Elements are not comparable: {a=}, {b=}") from e


def parent(idx: int) -> int:
    return (idx - 1) // 2


def left(idx: int) -> int:
    return 2 * idx + 1


def right(idx: int) -> int:
    return 2 * idx + 2


class Heap(t.Generic[T]):
    """
    Array backed binary heap, either min or max depending on `order`.

    >>> h = Heap(Order.MAX)
    >>> h.push_all([4, 9, 1])
    >>> h.pop()
    9
    >>> h.size()
    2

    Without a `compare` function the elements' natural order (`<`, `>`) is
    used and InvalidArgumentError is raised on the first pair that has none.
    """

    order: Order
    data: list[T]

    def __init__(self, order: Order = Order.MIN, compare: Comparator | None = None):
        self.order = order
        self.compare = compare or natural_compare
        self.data = []

    @classmethod
    def natural(cls, order: Order = Order.MIN) -> "Heap[T]":
        return cls(order)

    def _favors(self, a: T, b: T) -> bool:
        """True when `a` has to sit above `b`."""
        return self.compare(a, b) * self.order.value > 0

    def _swap(self, i: int, j: int):
        self.data[i], self.data[j] = self.data[j], self.data[i]

    def push(self, item: T):
        self.data.append(item)

        # go from bottom up and place the new item in the correct place
        curr = len(self.data) - 1
        while curr >= 1:
            p = parent(curr)
            if not self._favors(self.data[curr], self.data[p]):
                break

            self._swap(curr, p)
            curr = p

        logger.debug(f"[push] {item=} settled at index {curr}, size={len(self.data)}")

    def push_all(self, items: t.Iterable[T]):
        for item in items:
            self.push(item)

    def pop(self) -> T:
        if not self.data:
            logger.debug("[pop] called on an empty heap")
            raise EmptyCollectionError("Trying to pop from an empty heap")

        root = self.data[0]
        self._swap(0, len(self.data) - 1)
        self.data.pop()

        size = len(self.data)
        curr = 0
        while (lo := left(curr)) < size:
            nxt = lo
            hi = right(curr)
            if hi < size and self._favors(self.data[hi], self.data[lo]):
                nxt = hi

            if not self._favors(self.data[nxt], self.data[curr]):
                break

            self._swap(nxt, curr)
            curr = nxt

        logger.debug(f"[pop] {root=}, size={size}")
        return root

    def peek(self) -> T:
        if not self.data:
            raise EmptyCollectionError("Trying to peek into an empty heap")

        return self.data[0]

    def size(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        return not self.data

    def snapshot(self) -> list[HeapEntry]:
        n = len(self.data)
        label = lambda idx: str(self.data[idx]) if idx < n else None
        return [
            HeapEntry(str(item), label(left(i)), label(right(i)))
            for i, item in enumerate(self.data)
        ]

    def __len__(self):
        return len(self.data)

    def __bool__(self):
        return bool(self.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self.order.name}, data={self.data})"


def min_heap(compare: Comparator | None = None) -> Heap:
    return Heap(Order.MIN, compare)


def max_heap(compare: Comparator | None = None) -> Heap:
    return Heap(Order.MAX, compare)
