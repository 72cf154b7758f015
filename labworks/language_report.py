"""Filter a table of programming languages by year and print or save it as CSV."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from labworks.csv_table import format_lines, format_table, parse_plain

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class LanguageEntry:
    """One row of the language table."""

    year: int
    name: str
    kind: str
    author: str


def default_languages() -> list[LanguageEntry]:
    """The built-in table used when no input file is given."""
    return [
        LanguageEntry(19, "PHP", "J ", "f"),
        LanguageEntry(83, "Python", "Object-oriented", "gsdf"),
        LanguageEntry(10, "Java", "Object-oriented", "sada"),
        LanguageEntry(0, "Ruby on Rails", "Dynamic", "Yukihiro Matsumoto"),
        LanguageEntry(2, "Perl", "Multi-paradigm", "Larry Wall"),
    ]


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def load_languages(table: Sequence[Sequence[str]]) -> list[LanguageEntry]:
    """Build entries from parsed rows, skipping the header row and blank lines."""
    languages = []
    for number, row in enumerate(table[1:], start=2):
        if len(row) == 1 and row[0] == "":
            continue
        if len(row) < 4:
            raise ValueError(f"row {number} has {len(row)} fields, expected 4")
        languages.append(LanguageEntry(_leading_int(row[0]), row[1], row[2], row[3]))
    return languages


def filter_by_year(languages: Iterable[LanguageEntry], year: int) -> list[LanguageEntry]:
    """Keep the entries whose year does not exceed the given one."""
    return [entry for entry in languages if entry.year <= year]


def to_table(languages: Iterable[LanguageEntry]) -> list[list[str]]:
    """Turn entries into CSV rows."""
    return [[str(e.year), e.name, e.kind, e.author] for e in languages]


class _UsageError(Exception):
    pass


@dataclass
class _Options:
    input_path: str | None = None
    year: int | None = None
    output: str | None = None


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
            options.year = int(value) if value else 0
        elif arg == "-o":
            value = next(it, None)
            if value is None:
                raise _UsageError("No name!")
            if not all((ch.isascii() and ch.isalnum()) or ch == "." for ch in value):
                raise _UsageError("Not name -o!")
            options.output = value
    return options


def main(argv: Sequence[str] | None = None) -> int:
    """Options: data.csv to read input, -n YEAR to filter, -o NAME to write a file."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = _parse_args(args)
    except _UsageError as exc:
        print(exc)
        return 1

    if options.input_path is not None:
        try:
            with open(options.input_path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            print(f"Cannot open {options.input_path}: {exc}", file=sys.stderr)
            return 1
        try:
            languages = load_languages(parse_plain(text))
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
    else:
        languages = default_languages()

    if options.year is not None:
        languages = filter_by_year(languages, options.year)
    table = to_table(languages)

    if options.output is not None:
        with open(options.output, "w", encoding="utf-8", newline="") as handle:
            handle.write(format_table(table))
    else:
        sys.stdout.write(format_lines(table))
    return 0


if __name__ == "__main__":
    sys.exit(main())