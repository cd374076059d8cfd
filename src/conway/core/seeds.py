"""Reading and writing the plain-text seed format.

A seed is a rectangular table of 0/1 tokens, one row per line, with tokens
separated by whitespace::

    0 1 0
    0 1 0
    0 1 0

Blank lines are ignored. The grid's dimensions come from the table's shape.
"""

from pathlib import Path
from typing import List, Union

from .automaton import Cell, ConwayGrid


class SeedFormatError(ValueError):
    """Raised when seed text cannot be turned into a grid."""

    def __init__(self, message: str, line: int) -> None:
        self.line = line
        super().__init__(f"line {line}: {message}")


def parse_seed(text: str) -> ConwayGrid:
    """Parse seed text into a grid.

    Args:
        text: Seed table, one row per line

    Returns:
        New ConwayGrid with the table's dimensions

    Raises:
        SeedFormatError: On a non-integer token, a value other than 0 or 1,
            or a row whose length differs from the first row
    """
    rows: List[List[int]] = []
    width = None

    for line_number, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue

        row = []
        for token in tokens:
            try:
                value = int(token)
            except ValueError:
                raise SeedFormatError(f"invalid token '{token}'", line_number) from None
            try:
                Cell.from_token(value)
            except ValueError as e:
                raise SeedFormatError(str(e), line_number) from None
            row.append(value)

        if width is None:
            width = len(row)
        elif len(row) != width:
            raise SeedFormatError(f"expected {width} cells, found {len(row)}", line_number)

        rows.append(row)

    return ConwayGrid.from_table(rows)


def load_seed(path: Union[str, Path]) -> ConwayGrid:
    """Load a seed file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        SeedFormatError: If the file contents are malformed
    """
    with open(path, "r") as f:
        return parse_seed(f.read())


def dump_seed(grid: ConwayGrid) -> str:
    """Convert a grid back to seed text."""
    lines = []
    for row in range(grid.height):
        lines.append(" ".join(str(grid.get((col, row)).value) for col in range(grid.width)))
    return "\n".join(lines) + "\n" if lines else ""
