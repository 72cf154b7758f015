"""Flight reservations kept in an open-addressing hash table."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

INITIAL_CAPACITY = 7
MAX_LOAD = 0.5
BASE_NUMBER = 232900

_T = TypeVar("_T")


def _wrap32(value: int) -> int:
    """Reduce value to a signed 32-bit integer, wrapping on overflow."""
    return (value + 2**31) % 2**32 - 2**31


def _c_rem(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend, as integer division truncating to zero gives."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def hash_int(n: int, capacity: int) -> int:
    """Hash a reservation number by its distance from the base number."""
    if capacity < 1:
        raise ValueError("capacity must be positive")
    return _c_rem(n - BASE_NUMBER, capacity)


def hash_char(text: str, capacity: int) -> int:
    """Hash a name; only its last character counts, weighted by a power of five."""
    if capacity < 2:
        raise ValueError("capacity must be at least 2")
    value = 0
    weight = 5
    for ch in text:
        value = _wrap32((ord(ch) - ord("a") + 1) * weight)
        weight = _wrap32(weight * weight)
    return _c_rem(value, capacity - 1)


@dataclass(frozen=True)
class Reservation:
    """Key of the table: a reservation number and the passenger's last name."""

    number: int
    last_name: str


@dataclass(frozen=True)
class Booking:
    """Value of the table: the details of one booked seat."""

    passport_id: int
    flight_code: str
    seat: int
    priority_boarding: int


@dataclass
class _Slot:
    key: Reservation | None
    value: Booking | None

    @property
    def deleted(self) -> bool:
        return self.key is None


def _first_free(slots: list[_T | None], start: int) -> int:
    size = len(slots)
    for offset in range(size):
        index = (start + offset) % size
        if slots[index] is None:
            return index
    raise RuntimeError("table is full")


def make_key(last_name: str, rng: random.Random | None = None) -> Reservation:
    """Create a reservation with a random number just above the base number."""
    rng = rng or random.Random()
    return Reservation(BASE_NUMBER + rng.randint(1, 200), last_name)


def _format_entry(key: Reservation, value: Booking) -> str:
    return (
        f"LAST NAME: {key.last_name}\tRESERVATION NUMBER: {key.number}\n\t"
        f"INFORMATION:\n\t\tPassportID: {value.passport_id}\t"
        f"Flight code: {value.flight_code}\n\t\t"
        f"Seat: {value.seat}\tPriority: {value.priority_boarding}\n"
    )


class ReservationTable:
    """Linear-probing hash table that doubles once half its slots are used.

    Removed entries leave a tombstone behind that keeps its slot occupied,
    so the load factor counts every slot ever filled since the last clear.
    """

    def __init__(self) -> None:
        self._slots: list[_Slot | None] = [None] * INITIAL_CAPACITY
        self._size = 0
        self._used = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def hash_code(self, key: Reservation) -> int:
        """Home slot of a key in the current table."""
        cap = self.capacity
        return (7 + hash_int(key.number, cap) + hash_char(key.last_name, cap)) % cap

    def _locate(self, key: Reservation) -> int | None:
        for index, slot in enumerate(self._slots):
            if slot is not None and not slot.deleted and slot.key == key:
                return index
        return None

    def insert(self, key: Reservation, value: Booking) -> None:
        """Store a booking; an existing key has its booking replaced."""
        index = self._locate(key)
        if index is not None:
            self._slots[index] = _Slot(key, value)
            return
        index = _first_free(self._slots, self.hash_code(key))
        self._slots[index] = _Slot(key, value)
        self._size += 1
        self._used += 1
        if self.load() >= MAX_LOAD:
            self._slots.extend([None] * self.capacity)

    def remove(self, key: Reservation) -> Booking:
        """Delete a reservation and return its booking."""
        index = self._locate(key)
        if index is None:
            raise KeyError(key)
        slot = self._slots[index]
        assert slot is not None and slot.value is not None
        self._slots[index] = _Slot(None, None)
        self._size -= 1
        return slot.value

    def find(self, key: Reservation) -> Booking:
        """Return the booking stored for a reservation."""
        index = self._locate(key)
        if index is None:
            raise KeyError(key)
        slot = self._slots[index]
        assert slot is not None and slot.value is not None
        return slot.value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, Reservation) and self._locate(key) is not None

    def __len__(self) -> int:
        return self._size

    def load(self) -> float:
        """Share of slots that are occupied, tombstones included."""
        return self._used / self.capacity

    def clear(self) -> None:
        """Drop every entry and tombstone, keeping the current capacity."""
        self._slots = [None] * self.capacity
        self._size = 0
        self._used = 0

    def same_flight_passengers(self, flight_code: str) -> list[str]:
        """Last names of passengers on a flight, in the order a name table keyed by flight holds them."""
        names: list[str | None] = [None] * INITIAL_CAPACITY
        count = 0
        for slot in self._slots:
            if slot is None or slot.deleted:
                continue
            assert slot.key is not None and slot.value is not None
            if slot.value.flight_code != flight_code:
                continue
            start = hash_char(flight_code, len(names)) % len(names)
            names[_first_free(names, start)] = slot.key.last_name
            count += 1
            if count / len(names) >= MAX_LOAD:
                names.extend([None] * len(names))
        return [name for name in names if name is not None]

    def format(self) -> str:
        """Describe every occupied slot, tombstones included."""
        parts = []
        for index, slot in enumerate(self._slots):
            if slot is None:
                continue
            if slot.deleted:
                parts.append(f"\nNUM: {index}\n\tRESERVATION DELETED!\n")
            else:
                assert slot.key is not None and slot.value is not None
                parts.append(f"\nNUM: {index}\n\t" + _format_entry(slot.key, slot.value))
        return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="reservations", description="Demonstrate the reservation hash table."
    )
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    table = ReservationTable()
    print("------WORK 1------")
    print(f"\nInputing of 5 elements. Starting capacity = {INITIAL_CAPACITY}")
    entries = [
        (make_key("Shapovalov", rng), Booking(459632, "NC-31", 93, 0)),
        (make_key("Lahman", rng), Booking(341094, "NC-53", 45, 1)),
        (make_key("Romanenko", rng), Booking(459632, "NC-11", 62, 1)),
        (make_key("Voronin", rng), Booking(123049, "NC-11", 23, 0)),
        (make_key("Bodichelly", rng), Booking(450213, "NC-31", 10, 1)),
    ]
    for key, value in entries:
        before = table.capacity
        table.insert(key, value)
        print(f"Key: {key.number}, slot -> {table.hash_code(key)}")
        if table.capacity != before:
            print("\n.---------.\n|Rehashing|\n'---------'")

    print("\n------WORK 2------")
    print("\nFinding of elements 1 and 5")
    for key in (entries[4][0], entries[3][0]):
        print("\n" + _format_entry(key, table.find(key)), end="")

    print("\n------WORK 3------")
    print('\nDeleting of element "Shapovalov" and "Lahman" elements')
    table.remove(entries[0][0])
    table.remove(entries[1][0])
    print(table.format(), end="")

    print("\n------WORK 4------")
    print("\nAll races 'NC-11'")
    flight = "NC-11"
    for name in table.same_flight_passengers(flight):
        print(f"\nRace: {flight}\tLast name: {name}", end="")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())