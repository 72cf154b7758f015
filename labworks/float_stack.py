"""A LIFO stack of floating-point numbers."""

from __future__ import annotations

from collections.abc import Iterator


class FloatStack:
    """Stack of floats; iteration and formatting run from bottom to top."""

    def __init__(self) -> None:
        self._items: list[float] = []

    def push(self, value: float) -> None:
        self._items.append(float(value))

    def pop(self) -> float:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> float:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._items))

    def format(self) -> str:
        """Render bottom to top with three decimals, joined by left arrows."""
        return " <- ".join(f"{value:.3f}" for value in self._items)