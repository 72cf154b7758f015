"""Random square matrices whose two diagonals are sorted in place."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator, Sequence

BLUE = "\033[1;34m"
RESET = "\033[0m"


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by insertion."""
    result: list[int] = []
    for value in values:
        pos = len(result)
        while pos > 0 and result[pos - 1] > value:
            pos -= 1
        result.insert(pos, value)
    return result


def random_matrix(
    size: int, low: int, high: int, rng: random.Random | None = None
) -> list[list[int]]:
    """Build a size x size matrix of integers drawn from [low, high]."""
    if size < 0:
        raise ValueError("size must not be negative")
    if low > high:
        raise ValueError("low must not exceed high")
    rng = rng or random.Random()
    return [[rng.randint(low, high) for _ in range(size)] for _ in range(size)]


def _diagonal_rows(size: int) -> Iterator[int]:
    """Rows whose diagonal cells take part in sorting; the centre of an odd matrix is skipped."""
    center = size // 2
    for row in range(size):
        if size % 2 == 1 and row == center:
            continue
        yield row


def sort_diagonals(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy of the matrix with its main and anti-diagonal each sorted top to bottom."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    result = [list(row) for row in matrix]
    rows = list(_diagonal_rows(size))
    main_diag = insertion_sort(result[i][i] for i in rows)
    anti_diag = insertion_sort(result[i][size - 1 - i] for i in rows)
    for row, main_value, anti_value in zip(rows, main_diag, anti_diag):
        result[row][row] = main_value
        result[row][size - 1 - row] = anti_value
    return result


def format_matrix(matrix: Sequence[Sequence[int]], color: bool = False) -> str:
    """Render the matrix row by row, optionally highlighting both diagonals."""
    size = len(matrix)
    lines = []
    for i, row in enumerate(matrix):
        cells = []
        for j, value in enumerate(row):
            cell = f"{value:3d} "
            if color and (i == j or i == size - 1 - j):
                cell = f"{BLUE}{cell}{RESET}"
            cells.append(cell)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def _ask(parser: argparse.ArgumentParser, prompt: str) -> int:
    try:
        return int(input(prompt))
    except ValueError:
        parser.error("an integer was expected")
    except EOFError:
        parser.error("input ended unexpectedly")
    raise AssertionError("unreachable")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="diagonal-sort",
        description="Fill a square matrix with random numbers and sort its diagonals.",
    )
    parser.add_argument("--max", type=int, dest="high", help="largest value")
    parser.add_argument("--min", type=int, dest="low", help="smallest value")
    parser.add_argument("--size", type=int, help="matrix dimension")
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)

    high = args.high if args.high is not None else _ask(parser, "Input max: ")
    low = args.low if args.low is not None else _ask(parser, "and min(<max): ")
    size = args.size if args.size is not None else _ask(parser, "Input dimension (>3): ")
    if size < 2:
        parser.error("dimension must be at least 2")
    if low > high:
        parser.error("min must not exceed max")

    color = sys.stdout.isatty()
    matrix = random_matrix(size, low, high, random.Random(args.seed))
    print("Non sorted:")
    print(format_matrix(matrix, color), end="")
    print("Sorted:")
    print(format_matrix(sort_diagonals(matrix), color), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())