"""Small fixed-capacity containers used by the geometry routines."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Deque(Generic[T]):
    """Double-ended queue over a buffer of ``2 * size`` slots.

    The queue starts in the middle of the buffer and grows toward index 0
    at the front and toward the end of the buffer at the back. The buffer
    positions of the ends are exposed by :meth:`front` and :meth:`back`.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("deque size must not be negative")
        self._data: list[T | None] = [None] * (size * 2)
        self._front = size
        self._back = size - 1

    def __len__(self) -> int:
        return self._back - self._front + 1

    def push_front(self, x: T) -> None:
        """Push an item to the front, growing toward buffer index 0."""
        if self._front == 0:
            raise IndexError("deque front is full")
        self._front -= 1
        self._data[self._front] = x

    def push_back(self, x: T) -> None:
        """Push an item to the back, growing toward the end of the buffer."""
        if self._back + 1 >= len(self._data):
            raise IndexError("deque back is full")
        self._back += 1
        self._data[self._back] = x

    def _at(self, index: int) -> T:
        if not self._front <= index <= self._back:
            raise IndexError("deque index out of range")
        return self._data[index]  # type: ignore[return-value]

    def peek_front(self, i: int) -> T:
        """Return the i-th item counting from the front, starting at 1."""
        return self._at(self._front + i - 1)

    def peek_back(self, i: int) -> T:
        """Return the i-th item counting from the back, starting at 1."""
        return self._at(self._back - i + 1)

    def pop_front(self) -> T:
        item = self._at(self._front)
        self._front += 1
        return item

    def pop_back(self) -> T:
        item = self._at(self._back)
        self._back -= 1
        return item

    def front(self) -> int:
        """Buffer index of the front item."""
        return self._front

    def back(self) -> int:
        """Buffer index of the back item."""
        return self._back


def new_mat(n: int) -> list[list[Any]]:
    """Create an n-by-n matrix filled with None. A negative n is treated as 0."""
    n = max(n, 0)
    return [[None] * n for _ in range(n)]