"""A growable circular FIFO queue of integers."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence


class RingQueue:
    """Circular buffer that grows by five slots whenever it fills up."""

    GROWTH = 5

    def __init__(self, capacity: int = 4) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._items: list[int | None] = [None] * capacity
        self._first = 0
        self._last = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def enqueue(self, value: int) -> None:
        """Add a value at the back of the queue."""
        self._items[self._last] = value
        self._last = (self._last + 1) % self.capacity
        self._size += 1
        if self._size == self.capacity:
            self._grow()

    def _grow(self) -> None:
        # Free slots are opened in front of the oldest element, so the
        # occupied run from first to the end of the buffer shifts right.
        gap: list[int | None] = [None] * self.GROWTH
        self._items[self._first:self._first] = gap
        self._first += self.GROWTH

    def dequeue(self) -> int:
        """Remove and return the value at the front of the queue."""
        if self._size == 0:
            raise IndexError("dequeue from empty queue")
        value = self._items[self._first]
        self._items[self._first] = None
        self._first = (self._first + 1) % self.capacity
        self._size -= 1
        assert value is not None
        return value

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __iter__(self) -> Iterator[int]:
        for offset in range(self._size):
            value = self._items[(self._first + offset) % self.capacity]
            assert value is not None
            yield value

    def format(self) -> str:
        """Describe the queue state and list its values front to back."""
        header = (
            f"Size: {self._size}\nCap: {self.capacity}\n"
            f"First: {self._first}\nLast: {self._last}\n"
        )
        return header + "".join(f"{value} <- " for value in self) + "\n"


def _read_number(prompt: str) -> int | None:
    while True:
        try:
            return int(input(prompt))
        except ValueError:
            print("Please enter an integer.")
        except EOFError:
            return None


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers; a zero removes up to three values; stop once the queue empties."""
    queue = RingQueue()
    prompt = "Input your number: "
    number = _read_number(prompt)
    while number is not None:
        queue.enqueue(number)
        if number == 0:
            for _ in range(3):
                if queue.is_empty():
                    break
                queue.dequeue()
        if queue.is_empty():
            print("Queue is empty!")
            break
        print(queue.format(), end="")
        number = _read_number(prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())