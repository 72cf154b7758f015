"""Read numbers, move large ones to the front, split them into two stacks and merge."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

from labworks.float_list import FloatList
from labworks.float_stack import FloatStack

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)


def _leading_float(token: str) -> float:
    """Value of the longest numeric prefix of token, or 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(token)
    return float(match.group(1)) if match else 0.0


def parse_numbers(text: str) -> list[float]:
    """Split on single spaces and read the numeric prefix of every non-empty token."""
    return [_leading_float(token) for token in text.split(" ") if token]


def run(text: str) -> str:
    """Process the numbers in text and return the full report."""
    numbers = FloatList(parse_numbers(text))
    parts = ["\nFirst list:\n", numbers.format(), "\n"]
    numbers.move_large_to_front()
    parts += ["\nAll over ten by module numbers at HEAD:\n", numbers.format(), "\n"]

    odd_positions = FloatStack()
    even_positions = FloatStack()
    for position, value in enumerate(numbers):
        (odd_positions if position % 2 == 0 else even_positions).push(value)

    parts += ["\nStack of pare positions:\n", even_positions.format(), "\n"]
    parts += ["\nStack of non pare positions:\n", odd_positions.format(), "\n"]

    numbers.clear()
    for stack in (odd_positions, even_positions):
        while len(stack):
            numbers.add(stack.pop())
    parts += ["\nMerged stacks:\n", numbers.format(), "\n"]
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numbers", description="Reorder numbers from a file through two stacks."
    )
    parser.add_argument("path", nargs="?", default="data.txt", help="input file")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"Cannot open {args.path}: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(run(text))
    return 0


if __name__ == "__main__":
    sys.exit(main())