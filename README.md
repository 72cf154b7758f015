# labworks

Small, self-contained data structures and the console programs built around
them: a diagonal insertion sort, a ring-buffer queue, a min-heap, an
open-addressing hash table of flight reservations, a float list and stack,
CSV parsing and formatting, a sorted string map, a binary search tree and a
CSV-backed storage with an interactive menu. The package has no dependencies
outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from labworks.ring_queue import RingQueue
from labworks.min_heap import MinHeap
from labworks.csv_table import parse_plain, format_table
from labworks.sorted_map import StrStrMap
from labworks.bstree import BSTree

queue = RingQueue(4)
queue.enqueue(13)
queue.enqueue(-42)
assert queue.dequeue() == 13

heap = MinHeap([5, 3, 8])
heap.insert(1)
assert heap.find_min() == 1

table = parse_plain("a,b\nc,d")
assert format_table(table) == "a,b\nc,d"

record = StrStrMap({"id": "7", "name": "Perl"})
tree = BSTree()
tree.insert(record)
assert tree.search(7)["name"] == "Perl"
```

Modules:

- `labworks.diagonal_sort` – `insertion_sort`, `random_matrix`,
  `sort_diagonals` (sorts the main and anti-diagonal of a square matrix top to
  bottom, leaving the centre of an odd matrix alone) and `format_matrix`.
- `labworks.ring_queue` – `RingQueue`, a circular queue of integers that grows
  by five slots when it fills up.
- `labworks.min_heap` – `MinHeap` with `insert`, `find_min`, `extract_min`,
  `delete` and `heapify`.
- `labworks.float_list` – `FloatList`, a bounds-checked list of floats with
  `move_large_to_front` for values whose magnitude exceeds ten.
- `labworks.float_stack` – `FloatStack`, a stack of floats.
- `labworks.numbers_app` – `parse_numbers` and `run`: reorders numbers, splits
  them by position into two stacks and merges them back.
- `labworks.csv_table` – `parse_plain`, `parse_quoted`, `format_table`,
  `format_quoted` and `format_lines`.
- `labworks.language_report` – `LanguageEntry` rows, `load_languages`,
  `filter_by_year` and `to_table`.
- `labworks.reservations` – `ReservationTable`, a linear-probing hash table of
  `Reservation` keys and `Booking` values that doubles at half load.
- `labworks.storage` – `Storage` of `Language` and `Programmer` records kept in
  `lang.csv` and `prog.csv` inside a directory.
- `labworks.sorted_map` – `SortedKeyValueList` and `StrStrMap`; assigning to a
  `StrStrMap` key only replaces an existing value, new keys go through `add`.
- `labworks.bstree` – `BSTree` of records keyed by the integer in their `id`
  field; duplicate keys raise `ValueError`.
- `labworks.tree_report` – language records as `StrStrMap`s, optionally
  mirrored in a `BSTree`.
- `labworks.console` – `Console`, an interactive menu over a `Storage`.

## Commands

```
labworks-diagonal-sort [--max N] [--min N] [--size N] [--seed N]
labworks-ring-queue
labworks-min-heap [--seed N]
labworks-numbers [PATH]
labworks-language-report [data.csv] [-n YEAR] [-o OUTPUT]
labworks-reservations [--seed N]
labworks-tree-report [data.csv] [-n ID] [-o OUTPUT] [-b]
labworks-console [DIRECTORY]
```

- `labworks-diagonal-sort` asks for any of max, min and size not given as
  options, then prints a random matrix before and after sorting its diagonals.
- `labworks-ring-queue` reads integers; a zero removes up to three values, and
  the program stops once the queue is empty or input ends.
- `labworks-numbers` reads space-separated numbers from `PATH` (default
  `data.txt`).
- `labworks-language-report` and `labworks-tree-report` read their input only
  when the argument `data.csv` is given literally; otherwise they use a
  built-in table. `-n` keeps rows whose year (or id) does not exceed the
  number, `-o` writes the CSV to a file whose name holds only letters, digits
  and dots; without `-o` the rows are printed. `labworks-tree-report` reads and
  writes quoted CSV, and `-b` prints the search tree before and after filtering.
- `labworks-console` loads `lang.csv` and `prog.csv` from `DIRECTORY`
  (default `./data/`); both files must exist. Changes are saved when a section
  of the menu is left.