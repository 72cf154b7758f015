"""A growable list of floating-point numbers with bounds-checked access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class FloatList:
    """Ordered sequence of floats; indices outside the filled range are errors."""

    def __init__(self, values: Iterable[float] | None = None) -> None:
        self._items: list[float] = [float(v) for v in values] if values is not None else []

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise IndexError(f"index {index} out of range for list of size {len(self._items)}")

    def add(self, value: float) -> None:
        """Append a value at the end."""
        self._items.append(float(value))

    def insert(self, index: int, value: float) -> None:
        """Insert before an existing position, shifting the rest right."""
        self._check_index(index)
        self._items.insert(index, float(value))

    def remove_at(self, index: int) -> None:
        """Remove the value at an existing position, shifting the rest left."""
        self._check_index(index)
        del self._items[index]

    def remove(self, value: float) -> None:
        """Remove the first occurrence of value."""
        self.remove_at(self.index_of(value))

    def index_of(self, value: float) -> int:
        """Return the position of the first occurrence of value."""
        for index, item in enumerate(self._items):
            if item == value:
                return index
        raise ValueError(f"{value} is not in the list")

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> float:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: float) -> None:
        self._check_index(index)
        self._items[index] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._items))

    def format(self) -> str:
        """Render the values with three decimals, joined by arrows."""
        return " -> ".join(f"{value:.3f}" for value in self._items)

    def move_large_to_front(self) -> None:
        """Move values whose magnitude exceeds ten to the front, keeping relative order."""
        front = [v for v in self._items if abs(v) > 10]
        rest = [v for v in self._items if not abs(v) > 10]
        self._items = front + rest