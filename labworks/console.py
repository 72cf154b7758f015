"""Interactive text menus for browsing and editing the stored tables."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from labworks.storage import Language, Programmer, Storage

MAIN_MENU = "Menu:\n1 - Language storage\n2 - Programmers storage\n0 - Exit\nInput command: "
SECTION_MENU = (
    "Menu:\n1 - Print all elements\n2 - Work with one of elements\n"
    "3 - New element\n0 - Exit\nInput command: "
)
ITEM_MENU = "Menu:\n1 - Information\n2 - Update\n3 - Delete\n0 - Exit\nInput command: "
CLEAR = "\033[H\033[2J"


@dataclass(frozen=True)
class _Entity:
    title: str
    record: Callable[..., Any]
    fields: tuple[str, str, str]
    prompts: tuple[str, str, str]
    records: Callable[[Storage], list[Any]]
    find: Callable[[Storage, int], Any]
    update: Callable[[Storage, Any], bool]
    remove: Callable[[Storage, int], bool]
    insert: Callable[[Storage, Any], int]


_ENTITIES = {
    1: _Entity(
        "Language",
        Language,
        ("name", "kind", "author"),
        ("Name: ", "Type: ", "Author: "),
        Storage.languages,
        Storage.language,
        Storage.update_language,
        Storage.remove_language,
        Storage.insert_language,
    ),
    2: _Entity(
        "Programmer",
        Programmer,
        ("name", "stage", "date_of_start"),
        ("Name: ", "Stage: ", "Date of start (XX.XX.XXXX): "),
        Storage.programmers,
        Storage.programmer,
        Storage.update_programmer,
        Storage.remove_programmer,
        Storage.insert_programmer,
    ),
}


class _EndOfInput(Exception):
    pass


class Console:
    """Menu-driven editor over a storage; tables are saved when a section is left."""

    def __init__(
        self,
        storage: Storage,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._storage = storage
        self._input = input_func or input
        self._output = output or sys.stdout

    def _write(self, text: str) -> None:
        self._output.write(text)

    def _clear(self) -> None:
        isatty = getattr(self._output, "isatty", None)
        if isatty is not None and isatty():
            self._write(CLEAR)

    def _ask(self, prompt: str) -> str:
        try:
            return self._input(prompt).strip()
        except EOFError:
            raise _EndOfInput from None

    def _ask_int(self, prompt: str) -> int | None:
        try:
            return int(self._ask(prompt))
        except ValueError:
            return None

    def _format(self, entity: _Entity, record: Any) -> str:
        values = [str(record.id), *(getattr(record, f) for f in entity.fields)]
        return ",".join(values) + "\n"

    def show(self) -> None:
        """Run the main menu until the user exits or input ends."""
        self._clear()
        try:
            while True:
                command = self._ask_int(MAIN_MENU)
                if command == 0:
                    return
                entity = _ENTITIES.get(command) if command is not None else None
                if entity is not None:
                    self._clear()
                    self._section(entity)
                    self._storage.save()
                self._clear()
        except _EndOfInput:
            return

    def _section(self, entity: _Entity) -> None:
        while True:
            command = self._ask_int(SECTION_MENU)
            if command == 0:
                return
            if command == 1:
                self._clear()
                for record in entity.records(self._storage):
                    self._write(self._format(entity, record))
            elif command == 2:
                record_id = self._ask_int("Input id: ")
                self._clear()
                if record_id is not None:
                    self._item(entity, record_id)
                self._clear()
            elif command == 3:
                self._clear()
                self._create(entity)

    def _item(self, entity: _Entity, record_id: int) -> None:
        while True:
            command = self._ask_int(ITEM_MENU)
            if command == 1:
                self._clear()
                record = entity.find(self._storage, record_id)
                if record is None:
                    self._write(f"No element with id {record_id}\n")
                else:
                    self._write(self._format(entity, record))
            elif command == 2:
                self._clear()
                self._write("Updating, input new information: \n")
                values = [self._ask(prompt) for prompt in entity.prompts]
                entity.update(self._storage, entity.record(record_id, *values))
            elif command == 3:
                entity.remove(self._storage, record_id)
                return
            elif command == 0:
                return

    def _create(self, entity: _Entity) -> None:
        self._write(f"Hello, input new {entity.title}: \n")
        values = [self._ask(prompt) for prompt in entity.prompts]
        entity.insert(self._storage, entity.record(0, *values))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="storage-console", description="Browse and edit languages and programmers."
    )
    parser.add_argument("directory", nargs="?", default="./data/", help="data directory")
    args = parser.parse_args(argv)
    storage = Storage(args.directory)
    try:
        storage.load()
    except (OSError, ValueError) as exc:
        print(f"Can`t open file: {exc}", file=sys.stderr)
        return 1
    Console(storage).show()
    return 0


if __name__ == "__main__":
    sys.exit(main())