"""Language records kept as string maps, optionally mirrored in a search tree."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from labworks.bstree import BSTree, record_key
from labworks.csv_table import format_lines, format_quoted, parse_quoted
from labworks.sorted_map import StrStrMap

FIELDS = ("id", "name", "type", "author")


def make_language_map(language_id: int, name: str, kind: str, author: str) -> StrStrMap:
    """Build a record map with the keys id, name, type and author."""
    return StrStrMap(
        {"id": str(language_id), "name": name, "type": kind, "author": author}
    )


def default_maps() -> list[StrStrMap]:
    """The built-in records used when no input file is given."""
    return [
        make_language_map(34, "PHP", "J ", "f"),
        make_language_map(831, "Python", "Object-oriented", "gsdf"),
        make_language_map(12, "Java", "Object-oriented", "sada"),
        make_language_map(1023, "Ruby on Rails", "Dynamic", "Yukihiro Matsumoto"),
        make_language_map(2, "Perl", "Multi-paradigm", "Larry Wall"),
    ]


def maps_from_table(table: Sequence[Sequence[str]]) -> list[StrStrMap]:
    """Build records from parsed rows, skipping the header row and blank lines."""
    maps = []
    for number, row in enumerate(table[1:], start=2):
        if len(row) == 1 and row[0] == "":
            continue
        if len(row) < 4:
            raise ValueError(f"row {number} has {len(row)} fields, expected 4")
        maps.append(
            make_language_map(record_key({"id": row[0]}), row[1], row[2], row[3])
        )
    return maps


def _to_row(record: StrStrMap) -> list[str]:
    return [record[field] for field in FIELDS]


class _UsageError(Exception):
    pass


@dataclass
class _Options:
    input_path: str | None = None
    limit: int | None = None
    output: str | None = None
    tree: bool = False


def _parse_args(args: Sequence[str]) -> _Options:
    options = _Options()
    it = iter(args)
    for arg in it:
        if arg == "data.csv":
            options.input_path = arg
        elif arg == "-n":
            value = next(it, None)
            if value is None:
                raise _UsageError("No num!")
            if not all(ch in "0123456789" for ch in value):
                raise _UsageError("Not int with -n!")
            options.limit = int(value) if value else 0
        elif arg == "-o":
            value = next(it, None)
            if value is None:
                raise _UsageError("No name!")
            if not all((ch.isascii() and ch.isalnum()) or ch == "." for ch in value):
                raise _UsageError("Not name -o!")
            options.output = value
        elif arg == "-b":
            options.tree = True
    return options


def main(argv: Sequence[str] | None = None) -> int:
    """Options: data.csv to read input, -n ID to filter, -o NAME to write, -b to show the tree."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = _parse_args(args)
    except _UsageError as exc:
        print(exc)
        return 1

    if options.input_path is not None:
        try:
            with open(options.input_path, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except OSError as exc:
            print(f"Cannot open {options.input_path}: {exc}", file=sys.stderr)
            return 1
        try:
            maps = maps_from_table(parse_quoted(text))
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
    else:
        maps = default_maps()

    if options.tree:
        tree = BSTree()
        try:
            for record in maps:
                tree.insert(record)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
        print("\nFirst BinTree:")
        sys.stdout.write(tree.format())
        if options.limit is not None:
            for record in maps:
                key = record_key(record)
                if key > options.limit:
                    tree.delete(key)
        print("\nNew BinTree:")
        sys.stdout.write(tree.format())

    if options.limit is not None:
        limit = options.limit
        maps = [record for record in maps if record_key(record) <= limit]
    table = [_to_row(record) for record in maps]

    if options.output is not None:
        with open(options.output, "w", encoding="utf-8", newline="") as handle:
            handle.write(format_quoted(table))
    else:
        sys.stdout.write(format_lines(table))
    return 0


if __name__ == "__main__":
    sys.exit(main())