"""Fixed-capacity ring storage that overwrites its oldest items when full."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Iterable, Iterator, List, Optional


class RingStorage:
    """A sequence with a fixed capacity.

    Appending to a full storage drops the first item, prepending to a full
    storage drops the last item, and inserting into a full storage pushes
    the earliest items out.  A storage with zero capacity silently ignores
    every addition.
    """

    __slots__ = ("_items",)

    def __init__(self, capacity: Optional[int] = None, values: Iterable[Any] = ()) -> None:
        items = list(values)
        if capacity is None:
            capacity = len(items)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if len(items) > capacity:
            raise ValueError("size is greater than capacity")
        self._items: Deque[Any] = deque(items, maxlen=capacity)

    # -- size information -------------------------------------------------

    @property
    def capacity(self) -> int:
        """Maximum number of items the storage holds."""
        maxlen = self._items.maxlen
        return 0 if maxlen is None else maxlen

    @property
    def free_size(self) -> int:
        """Number of items that can be added before the oldest are dropped."""
        return self.capacity - len(self._items)

    @property
    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    @property
    def is_empty(self) -> bool:
        return not self._items

    # -- adding items -----------------------------------------------------

    def append(self, value: Any) -> None:
        """Add a value at the end, dropping the first item if full."""
        self._items.append(value)

    def prepend(self, value: Any) -> None:
        """Add a value at the front, dropping the last item if full."""
        self._items.appendleft(value)

    def insert(self, index: int, value: Any, count: int = 1) -> None:
        """Insert ``count`` copies of ``value`` before position ``index``.

        When the storage overflows, the earliest items are pushed out first;
        if even the inserted copies do not fit, only as many as fit remain.
        """
        size = len(self._items)
        if not 0 <= index <= size:
            raise IndexError("index out of range")
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return
        items = list(self._items)
        merged = items[:index] + [value] * count + items[index:]
        self._items = deque(merged, maxlen=self.capacity)

    # -- removing items ---------------------------------------------------

    def remove(self, index: int, count: int = 1) -> None:
        """Remove ``count`` items starting at position ``index``."""
        if index < 0 or count <= 0 or index + count > len(self._items):
            raise IndexError("index out of range")
        self._items.rotate(-index)
        for _ in range(count):
            self._items.popleft()
        self._items.rotate(index)

    def pop_back(self) -> Any:
        """Remove and return the last item."""
        if not self._items:
            raise IndexError("pop from empty storage")
        return self._items.pop()

    def pop_front(self) -> Any:
        """Remove and return the first item."""
        if not self._items:
            raise IndexError("pop from empty storage")
        return self._items.popleft()

    def clear(self) -> None:
        """Remove all items, keeping the capacity."""
        self._items.clear()

    # -- bulk changes -----------------------------------------------------

    def fill(self, value: Any, count: Optional[int] = None) -> "RingStorage":
        """Replace the contents with ``count`` copies of ``value``.

        Without a count (or with a negative one) the current size is kept.
        """
        if count is not None and count > self.capacity:
            raise ValueError("size is greater than capacity")
        size = len(self._items) if count is None or count < 0 else count
        self._items = deque([value] * size, maxlen=self.capacity)
        return self

    def resize(self, size: int) -> None:
        """Shrink from the end, or grow at the end with ``None`` items."""
        if not 0 <= size <= self.capacity:
            raise ValueError("size out of range")
        current = len(self._items)
        if size < current:
            self.remove(size, current - size)
        elif size > current:
            self.insert(current, None, size - current)

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity, keeping as many leading items as fit."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity == self.capacity:
            return
        kept = list(self._items)[:capacity]
        self._items = deque(kept, maxlen=capacity)

    def squeeze(self) -> None:
        """Shrink the capacity to the current size."""
        self.set_capacity(len(self._items))

    def to_list(self) -> List[Any]:
        return list(self._items)

    # -- sequence protocol ------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return list(self._items)[index]
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, values={list(self._items)!r})"