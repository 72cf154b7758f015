"""A key-sorted list of string pairs and a string-to-string map built on it."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator, Mapping


def _key_of(pair: tuple[str, str]) -> str:
    return pair[0]


class SortedKeyValueList:
    """Pairs kept in ascending key order; equal keys stay in insertion order."""

    def __init__(self) -> None:
        self._items: list[tuple[str, str]] = []

    def add(self, key: str, value: str) -> None:
        """Insert a pair after every pair whose key is not greater."""
        index = bisect.bisect_right(self._items, key, key=_key_of)
        self._items.insert(index, (key, value))

    def index_of(self, key: str) -> int:
        """Position of a pair with this key, found by binary search."""
        index = bisect.bisect_left(self._items, key, key=_key_of)
        if index < len(self._items) and self._items[index][0] == key:
            return index
        raise KeyError(key)

    def remove(self, key: str) -> None:
        """Remove a pair with this key; a missing key is ignored."""
        try:
            index = self.index_of(key)
        except KeyError:
            return
        del self._items[index]

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise IndexError(f"index {index} out of range for list of size {len(self._items)}")

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        del self._items[index]

    def replace(self, index: int, key: str, value: str) -> None:
        """Replace the pair at index; the key must equal the one stored there."""
        self._check_index(index)
        if self._items[index][0] != key:
            raise ValueError(f"key {key!r} does not match {self._items[index][0]!r}")
        self._items[index] = (key, value)

    def __getitem__(self, index: int) -> tuple[str, str]:
        self._check_index(index)
        return self._items[index]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        try:
            self.index_of(key)
        except KeyError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._items))

    def clear(self) -> None:
        self._items.clear()


class StrStrMap:
    """Map from strings to strings, stored as a sorted list of pairs.

    Assignment only replaces the value of a key that is already present;
    new keys are added with add.
    """

    def __init__(
        self, items: Mapping[str, str] | Iterable[tuple[str, str]] | None = None
    ) -> None:
        self._list = SortedKeyValueList()
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.add(key, value)

    def add(self, key: str, value: str) -> None:
        self._list.add(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._list

    def __getitem__(self, key: str) -> str:
        return self._list[self._list.index_of(key)][1]

    def __setitem__(self, key: str, value: str) -> None:
        self._list.replace(self._list.index_of(key), key, value)

    def remove(self, key: str) -> str:
        """Remove a key and return the value it held."""
        index = self._list.index_of(key)
        old = self._list[index][1]
        self._list.remove_at(index)
        return old

    def __len__(self) -> int:
        return len(self._list)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._list)

    def clear(self) -> None:
        self._list.clear()