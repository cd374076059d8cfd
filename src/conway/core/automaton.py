"""Conway's Game of Life over a bounded grid."""

from enum import Enum
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np
import torch
import torch.nn.functional as F

from .grid import Coord, Grid

# Moore neighbourhood, diagonals included
NEIGHBOUR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

_NEIGHBOUR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class Cell(Enum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1

    @classmethod
    def from_token(cls, token: int) -> "Cell":
        """Map a 0/1 token to a cell state.

        Args:
            token: 0 for dead, 1 for alive

        Returns:
            The matching Cell

        Raises:
            ValueError: If the token is anything other than the integers 0 or 1
        """
        if isinstance(token, (bool, np.bool_)) or not isinstance(token, (int, np.integer)):
            raise ValueError(f"Cell token must be the integer 0 or 1, got {token!r}")
        if token == 0:
            return cls.DEAD
        if token == 1:
            return cls.ALIVE
        raise ValueError(f"Cell token must be 0 or 1, got {token}")


def next_state(cell: Cell, alive_neighbours: int) -> Cell:
    """Apply Conway's rules to a single cell.

    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """
    if cell is Cell.ALIVE and alive_neighbours in (2, 3):
        return Cell.ALIVE
    if cell is Cell.DEAD and alive_neighbours == 3:
        return Cell.ALIVE
    return Cell.DEAD


class ConwayGrid:
    """Conway's Game of Life simulation over a Grid of cells.

    Edges do not wrap: neighbours that would fall outside the grid count as
    dead. Each step reads from a snapshot of the previous generation and
    writes into a fresh grid, which then replaces the current one.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize an all-dead grid.

        Args:
            width: Number of columns
            height: Number of rows
        """
        self._grid: Grid[Cell] = Grid(width, height, Cell.DEAD)
        self._generation = 0

    @classmethod
    def from_table(cls, rows: Union[Sequence[Sequence[int]], np.ndarray]) -> "ConwayGrid":
        """Create a grid from rows of 0/1 integers.

        Args:
            rows: Row-major table, ``rows[row][col]``; 0 is dead, 1 is alive

        Returns:
            New ConwayGrid with the table's dimensions

        Raises:
            ValueError: If rows are ragged, values are not integers, or any
                value is outside {0, 1}
        """
        if len(rows) == 0:
            return cls(0, 0)

        try:
            table = np.asarray(rows)
        except ValueError as e:
            raise ValueError(f"Cell table rows must all have the same length: {e}") from e

        if table.ndim != 2 or table.dtype == object:
            raise ValueError("Cell table rows must all have the same length")
        if table.size and not np.issubdtype(table.dtype, np.integer):
            raise ValueError(f"Cell table must hold integers, got {table.dtype}")

        invalid = ~np.isin(table, (0, 1))
        if invalid.any():
            row, col = (int(i) for i in np.argwhere(invalid)[0])
            raise ValueError(f"Cell value {table[row, col]} at ({col}, {row}) is not 0 or 1")

        height, width = table.shape
        automaton = cls(width, height)
        for row, col in np.argwhere(table == 1):
            automaton.set((int(col), int(row)), Cell.ALIVE)
        return automaton

    @classmethod
    def from_alive(cls, width: int, height: int, coords: Iterable[Coord]) -> "ConwayGrid":
        """Create a grid with the given cells alive and the rest dead.

        Raises:
            IndexOutOfBounds: If any coordinate is outside the grid
        """
        automaton = cls(width, height)
        for coord in coords:
            automaton.set(coord, Cell.ALIVE)
        return automaton

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def area(self) -> int:
        return self._grid.area

    @property
    def shape(self) -> Tuple[int, int]:
        return self._grid.shape

    @property
    def generation(self) -> int:
        """Number of steps taken since construction."""
        return self._generation

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return sum(1 for cell in self._grid if cell is Cell.ALIVE)

    def get(self, coord: Coord) -> Cell:
        return self._grid.get(coord)

    def set(self, coord: Coord, cell: Cell) -> None:
        self._grid.set(coord, cell)

    def is_valid_coord(self, coord: Coord) -> bool:
        return self._grid.is_valid_coord(coord)

    def count_alive_neighbours(self, coord: Coord) -> int:
        """Count living neighbours of a cell.

        Neighbours outside the grid are treated as dead.

        Args:
            coord: (column, row) coordinate

        Returns:
            Number of living neighbours (0-8)
        """
        return self._count_alive_neighbours(self._grid, coord)

    @staticmethod
    def _count_alive_neighbours(grid: Grid[Cell], coord: Coord) -> int:
        col, row = coord
        count = 0
        for dx, dy in NEIGHBOUR_OFFSETS:
            neighbour = (col + dx, row + dy)
            if grid.is_valid_coord(neighbour) and grid.get(neighbour) is Cell.ALIVE:
                count += 1
        return count

    def neighbour_counts(self) -> np.ndarray:
        """Count neighbours for all cells using a zero-padded convolution.

        Returns:
            (height, width) int8 array; ``counts[row, col]`` matches
            ``count_alive_neighbours((col, row))``
        """
        if self.area == 0:
            return np.zeros((self.height, self.width), dtype=np.int8)

        cells = torch.from_numpy(self.to_array().astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbours = F.conv2d(cells, _NEIGHBOUR_KERNEL, padding=1)
        return neighbours[0, 0].numpy().astype(np.int8)

    def step(self) -> None:
        """Advance the simulation by one generation.

        Raises:
            IndexOutOfBounds: If any cell update fails; the current
                generation is left untouched in that case
        """
        snapshot = self._grid.copy()
        next_grid: Grid[Cell] = Grid(snapshot.width, snapshot.height, Cell.DEAD)

        for coord in snapshot.coords():
            alive_neighbours = self._count_alive_neighbours(snapshot, coord)
            next_grid.set(coord, next_state(snapshot.get(coord), alive_neighbours))

        self._grid = next_grid
        self._generation += 1

    def alive_cells(self) -> List[Coord]:
        """Get coordinates of living cells in row-major order."""
        return [coord for coord in self._grid.coords() if self._grid.get(coord) is Cell.ALIVE]

    def to_array(self) -> np.ndarray:
        """Convert to a (height, width) int8 array with 1 for living cells."""
        array = np.zeros((self.height, self.width), dtype=np.int8)
        for col, row in self.alive_cells():
            array[row, col] = 1
        return array

    def copy(self) -> "ConwayGrid":
        """Return an independent copy, including the generation counter."""
        clone = ConwayGrid.__new__(ConwayGrid)
        clone._grid = self._grid.copy()
        clone._generation = self._generation
        return clone

    def __eq__(self, other: object) -> bool:
        """Check if two automata hold the same cells."""
        if not isinstance(other, ConwayGrid):
            return False
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"ConwayGrid(width={self.width}, height={self.height}, generation={self._generation})"
