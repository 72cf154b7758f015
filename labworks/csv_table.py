"""Reading and writing comma-separated tables held as lists of string rows."""

from __future__ import annotations

from collections.abc import Sequence

Row = list[str]
Table = list[Row]

_SPECIAL = ('"', ",", "\n")


def parse_plain(text: str, complete_lines_only: bool = False) -> Table:
    """Split text into rows on newlines and into fields on commas, with no quoting.

    Every line becomes a row, so text ending in a newline yields a final row
    holding one empty field. With complete_lines_only only lines closed by a
    newline are kept and any unterminated tail is dropped.
    """
    lines = text.split("\n")
    if complete_lines_only:
        lines = lines[:-1]
    return [line.split(",") for line in lines]


def parse_quoted(text: str) -> Table:
    """Parse text in which fields may be quoted and quotes doubled inside them.

    Inside an open quote commas and newlines belong to the field. A pair of
    quote characters always stands for one literal quote. If the text ends
    inside an open quote, the unfinished row is discarded.
    """
    table: Table = []
    row: Row = []
    field: list[str] = []
    opened = closed = False
    i = 0
    n = len(text)
    while True:
        ch = text[i] if i < n else None
        nxt = text[i + 1] if i + 1 < n else None
        if ch in (",", "\n", None) and opened == closed:
            row.append("".join(field))
            field = []
            opened = closed = False
            if ch != ",":
                table.append(row)
                row = []
            if ch is None:
                break
        elif ch is None:
            break
        elif ch == '"' and nxt == '"':
            field.append('"')
            i += 1
        elif ch == '"':
            if opened:
                closed = True
            else:
                opened = True
        else:
            field.append(ch)
        i += 1
    return table


def format_table(table: Sequence[Sequence[str]]) -> str:
    """Join fields with commas and rows with newlines, without a trailing newline."""
    return "\n".join(",".join(row) for row in table)


def _quote(value: str) -> str:
    if any(ch in value for ch in _SPECIAL):
        return '"' + value.replace('"', '""') + '"'
    return value


def format_quoted(table: Sequence[Sequence[str]]) -> str:
    """Like format_table, but quote fields holding a quote, comma or newline."""
    return "\n".join(",".join(_quote(value) for value in row) for row in table)


def format_lines(table: Sequence[Sequence[str]]) -> str:
    """Render every row as comma-joined fields followed by a newline."""
    return "".join(",".join(row) + "\n" for row in table)