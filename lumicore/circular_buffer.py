"""Circular buffer with search, comparison and concatenation helpers."""

from __future__ import annotations

from typing import Any, Iterable

from lumicore.ring_storage import RingStorage


class CircularBuffer(RingStorage):
    """A fixed-capacity ring storage with list-like queries.

    Buffers compare by their contents only; their capacities play no part
    in equality or ordering.
    """

    __slots__ = ()

    __hash__ = None  # type: ignore[assignment]

    # -- bulk addition ----------------------------------------------------

    def extend(self, values: Iterable[Any]) -> "CircularBuffer":
        """Append values, keeping only as many trailing ones as can fit."""
        items = list(values)
        capacity = self.capacity
        if capacity == 0:
            return self
        for item in items[max(0, len(items) - capacity):]:
            self.append(item)
        return self

    # -- element access ---------------------------------------------------

    def first(self) -> Any:
        """Return the first item."""
        if self.is_empty:
            raise IndexError("buffer is empty")
        return self[0]

    def last(self) -> Any:
        """Return the last item."""
        if self.is_empty:
            raise IndexError("buffer is empty")
        return self[-1]

    def starts_with(self, value: Any) -> bool:
        return not self.is_empty and self.first() == value

    def ends_with(self, value: Any) -> bool:
        return not self.is_empty and self.last() == value

    def value(self, index: int, default: Any = None) -> Any:
        """Return the item at ``index``, or ``default`` if out of range."""
        if index < 0 or index >= len(self):
            return default
        return self[index]

    # -- searching --------------------------------------------------------

    def _clamp_start(self, start: int) -> int:
        size = len(self)
        if start < 0:
            return max(start + size, 0)
        if start >= size:
            return size - 1
        return start

    def index_of(self, value: Any, start: int = 0) -> int:
        """Position of the first match at or after ``start``, or -1."""
        start = self._clamp_start(start)
        for position in range(max(start, 0), len(self)):
            if self[position] == value:
                return position
        return -1

    def last_index_of(self, value: Any, start: int = -1) -> int:
        """Position of the last match at or before ``start``, or -1."""
        start = self._clamp_start(start)
        for position in range(start, -1, -1):
            if self[position] == value:
                return position
        return -1

    def count(self, value: Any) -> int:
        """Number of items equal to ``value``."""
        return sum(1 for item in self if item == value)

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    # -- comparison -------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        if other is self:
            return True
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        return self.to_list() < other.to_list()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        return not other.to_list() < self.to_list()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        return other.to_list() < self.to_list()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        return not self.to_list() < other.to_list()

    # -- concatenation ----------------------------------------------------

    def __add__(self, other: object) -> "CircularBuffer":
        """A new buffer just large enough for both buffers' items."""
        if not isinstance(other, CircularBuffer):
            return NotImplemented
        items = self.to_list() + other.to_list()
        return type(self)(len(items), items)

    def __iadd__(self, other: Any) -> "CircularBuffer":
        """Extend by a buffer, list or tuple; append any other value."""
        if isinstance(other, (RingStorage, list, tuple)):
            return self.extend(other)
        self.append(other)
        return self