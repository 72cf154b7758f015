"""An array-backed binary min-heap of integers."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator, Sequence


class MinHeap:
    """Binary min-heap stored level by level in a list."""

    def __init__(self, items: Iterable[int] | None = None) -> None:
        self._tree: list[int] = list(items) if items is not None else []
        self.heapify()

    def _sift_down(self, index: int) -> bool:
        tree = self._tree
        moved = False
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < len(tree) and tree[left] < tree[smallest]:
                smallest = left
            if right < len(tree) and tree[right] < tree[smallest]:
                smallest = right
            if smallest == index:
                return moved
            tree[index], tree[smallest] = tree[smallest], tree[index]
            index = smallest
            moved = True

    def heapify(self) -> bool:
        """Restore the heap order; return True if anything had to move."""
        changed = False
        for index in reversed(range(len(self._tree))):
            if self._sift_down(index):
                changed = True
        return changed

    def insert(self, key: int) -> None:
        """Add a key and sift it up to its place."""
        tree = self._tree
        tree.append(key)
        index = len(tree) - 1
        while index > 0:
            parent = (index - 1) // 2
            if tree[parent] <= tree[index]:
                break
            tree[index], tree[parent] = tree[parent], tree[index]
            index = parent

    def find_min(self) -> int:
        if not self._tree:
            raise IndexError("heap is empty")
        return self._tree[0]

    def extract_min(self) -> int:
        """Remove and return the smallest key."""
        value = self.find_min()
        self.delete(value)
        return value

    def delete(self, key: int) -> int:
        """Remove the first occurrence of key and return the position it held."""
        try:
            index = self._tree.index(key)
        except ValueError:
            raise ValueError(f"{key} is not in the heap") from None
        del self._tree[index]
        self.heapify()
        return index

    def __len__(self) -> int:
        return len(self._tree)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._tree))

    def format_table(self) -> str:
        """Render positions and keys as a two-row table."""
        rule = "-" + "------" * len(self._tree)
        positions = "|" + "".join(f" {i:3d} |" for i in range(len(self._tree)))
        values = "|" + "".join(f" {v:3d} |" for v in self._tree)
        return "\n".join([rule, positions, rule, values, rule])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="min-heap", description="Demonstrate insertion, heapify and deletion."
    )
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    count = 12

    print("-----------INSERTING-----------")
    values = [rng.randint(1, 999) for _ in range(count)]
    print("Massive: " + " ".join(map(str, values)))
    heap = MinHeap()
    for value in values:
        heap.insert(value)
        print(f"Inserted: {value}\n\tHeap:\t" + " ".join(map(str, heap)))
    print(heap.format_table())

    print("\n-----------HEAPIFY-----------")
    values = [rng.randint(1, 999) for _ in range(count)]
    print("Massive: " + " ".join(map(str, values)))
    heap2 = MinHeap()
    heap2._tree.extend(values)
    if heap2.heapify():
        print("Not a minimal binary heap; heapified.")
    print(heap2.format_table())

    print("\n-----------DELETING-----------")
    key = list(heap2)[3]
    print(f"Delete element: {key}")
    heap2.delete(key)
    print(heap2.format_table())
    return 0


if __name__ == "__main__":
    sys.exit(main())