"""A binary search tree of records keyed by their integer id."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def record_key(value: Any) -> int:
    """Integer read from the leading digits of the record's id, or 0 if there are none."""
    match = _INT_PREFIX.match(value["id"])
    return int(match.group(1)) if match else 0


@dataclass
class _Node:
    key: int
    value: Any
    left: _Node | None = None
    right: _Node | None = None


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: _Node | None, key: int) -> tuple[_Node | None, Any]:
    if node is None:
        raise KeyError(key)
    if key < node.key:
        node.left, removed = _delete(node.left, key)
        return node, removed
    if key > node.key:
        node.right, removed = _delete(node.right, key)
        return node, removed
    if node.left is None:
        return node.right, node.value
    if node.right is None:
        return node.left, node.value
    smallest = _min_node(node.right)
    node.right, _ = _delete(node.right, smallest.key)
    return _Node(smallest.key, smallest.value, node.left, node.right), node.value


class BSTree:
    """Unbalanced binary search tree; every key may appear only once."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, value: Mapping[str, str] | Any) -> None:
        """Add a record under its key; a duplicate key is an error."""
        new = _Node(record_key(value), value)
        if self._root is None:
            self._root = new
            self._size += 1
            return
        node = self._root
        while True:
            if new.key == node.key:
                raise ValueError(f"{new.key} already exists")
            if new.key < node.key:
                if node.left is None:
                    node.left = new
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    break
                node = node.right
        self._size += 1

    def _find(self, key: int) -> _Node | None:
        node = self._root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self._find(key) is not None

    def search(self, key: int) -> Any | None:
        """Record stored under key, or None."""
        node = self._find(key)
        return node.value if node is not None else None

    def delete(self, key: int) -> Any:
        """Remove the record under key and return it."""
        self._root, removed = _delete(self._root, key)
        self._size -= 1
        return removed

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Sideways drawing: right subtree above, left below, four dots per level."""
        lines: list[str] = []

        def walk(node: _Node | None, pos: str, level: int) -> None:
            has_children = node is not None and (node.left is not None or node.right is not None)
            if has_children:
                walk(node.right, "R", level + 1)
            label = "NULL" if node is None else f" {node.key}"
            lines.append(f"{'....' * level}||{pos}: {label}\n")
            if has_children:
                walk(node.left, "L", level + 1)

        walk(self._root, "+", 0)
        return "".join(lines)