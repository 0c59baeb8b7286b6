"""Stack containers: a plain LIFO stack and one that tracks its minimum."""

from __future__ import annotations


class ListStack:
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, x: int) -> None:
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top item; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> int:
        """Return the top item; IndexError if empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class MinStack:
    """A stack that reports its smallest item in constant time."""

    def __init__(self) -> None:
        self._data: list[int] = []
        self._mins: list[int] = []

    def push(self, val: int) -> None:
        self._data.append(val)
        if not self._mins or val <= self._mins[-1]:
            self._mins.append(val)

    def pop(self) -> int:
        """Remove and return the top item; IndexError if empty."""
        if not self._data:
            raise IndexError("pop from empty stack")
        val = self._data.pop()
        if val == self._mins[-1]:
            self._mins.pop()
        return val

    def top(self) -> int:
        """Return the top item; IndexError if empty."""
        if not self._data:
            raise IndexError("top of empty stack")
        return self._data[-1]

    def get_min(self) -> int:
        """Return the smallest item; IndexError if empty."""
        if not self._mins:
            raise IndexError("minimum of empty stack")
        return self._mins[-1]

    def __len__(self) -> int:
        return len(self._data)