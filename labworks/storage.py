"""CSV-backed storage of languages and programmers."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from labworks.csv_table import format_table, parse_plain

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

LANGUAGES_FILE = "lang.csv"
PROGRAMMERS_FILE = "prog.csv"


@dataclass(frozen=True)
class Language:
    id: int = 0
    name: str = ""
    kind: str = ""
    author: str = ""


@dataclass(frozen=True)
class Programmer:
    id: int = 0
    name: str = ""
    stage: str = ""
    date_of_start: str = ""


_R = TypeVar("_R", Language, Programmer)


def _parse_id(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid id: {text!r}")
    return int(match.group(1))


def _read_rows(path: Path) -> list[list[str]]:
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    if text and not text.endswith("\n"):
        text += "\n"
    rows = parse_plain(text, complete_lines_only=True)
    for number, row in enumerate(rows, start=1):
        if len(row) < 4:
            raise ValueError(f"{path}: line {number} has {len(row)} fields, expected 4")
    return rows


def _write(path: Path, rows: list[list[str]]) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(format_table(rows))


def _find(records: list[_R], record_id: int) -> _R | None:
    return next((r for r in records if r.id == record_id), None)


def _update(records: list[_R], record: _R) -> bool:
    found = False
    for index, current in enumerate(records):
        if current.id == record.id:
            records[index] = record
            found = True
    return found


def _remove(records: list[_R], record_id: int) -> bool:
    for index in reversed(range(len(records))):
        if records[index].id == record_id:
            del records[index]
            return True
    return False


def _insert(records: list[_R], record: _R) -> int:
    new_id = max([0, *(r.id for r in records)]) + 1
    records.append(dataclasses.replace(record, id=new_id))
    return new_id


class Storage:
    """Languages and programmers kept in memory and saved to a directory."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)
        self._languages: list[Language] = []
        self._programmers: list[Programmer] = []

    def load(self) -> None:
        """Read both tables from the directory, replacing what is held."""
        self._languages = [
            Language(_parse_id(r[0]), r[1], r[2], r[3])
            for r in _read_rows(self.directory / LANGUAGES_FILE)
        ]
        self._programmers = [
            Programmer(_parse_id(r[0]), r[1], r[2], r[3])
            for r in _read_rows(self.directory / PROGRAMMERS_FILE)
        ]

    def save(self) -> None:
        """Write both tables to the directory."""
        _write(
            self.directory / LANGUAGES_FILE,
            [[str(l.id), l.name, l.kind, l.author] for l in self._languages],
        )
        _write(
            self.directory / PROGRAMMERS_FILE,
            [[str(p.id), p.name, p.stage, p.date_of_start] for p in self._programmers],
        )

    def languages(self) -> list[Language]:
        return list(self._languages)

    def language(self, language_id: int) -> Language | None:
        return _find(self._languages, language_id)

    def update_language(self, language: Language) -> bool:
        """Replace every language with the same id; report whether any matched."""
        return _update(self._languages, language)

    def remove_language(self, language_id: int) -> bool:
        """Remove the last language with this id; report whether one was found."""
        return _remove(self._languages, language_id)

    def insert_language(self, language: Language) -> int:
        """Store a copy under a fresh id, one above the largest, and return that id."""
        return _insert(self._languages, language)

    def programmers(self) -> list[Programmer]:
        return list(self._programmers)

    def programmer(self, programmer_id: int) -> Programmer | None:
        return _find(self._programmers, programmer_id)

    def update_programmer(self, programmer: Programmer) -> bool:
        """Replace every programmer with the same id; report whether any matched."""
        return _update(self._programmers, programmer)

    def remove_programmer(self, programmer_id: int) -> bool:
        """Remove the last programmer with this id; report whether one was found."""
        return _remove(self._programmers, programmer_id)

    def insert_programmer(self, programmer: Programmer) -> int:
        """Store a copy under a fresh id, one above the largest, and return that id."""
        return _insert(self._programmers, programmer)