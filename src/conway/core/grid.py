"""Generic fixed-size grid data structure."""

import copy
from typing import Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")

# (column, row), both zero-indexed
Coord = Tuple[int, int]


class IndexOutOfBounds(IndexError):
    """Raised when a coordinate falls outside a grid."""

    def __init__(self, coord: Coord, shape: Tuple[int, int]) -> None:
        self.coord = coord
        self.shape = shape
        super().__init__(f"Coordinates {coord} out of bounds for {shape[0]}x{shape[1]} grid")


class Grid(Generic[T]):
    """Represents a fixed-size 2D grid of values.

    Cells live in a flat row-major list, so the cell at ``(col, row)`` is
    stored at ``col + width * row``. The grid never changes size after
    construction and there is no wraparound: every access outside
    ``0 <= col < width`` and ``0 <= row < height`` raises IndexOutOfBounds.
    """

    def __init__(self, width: int, height: int, default: T) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
            default: Value every cell starts with

        Raises:
            ValueError: If width or height is negative
        """
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")

        self._width = width
        self._height = height
        self._data: List[T] = [default] * (width * height)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def area(self) -> int:
        """Total number of cells."""
        return self._width * self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    def is_valid_coord(self, coord: Coord) -> bool:
        """Check whether a coordinate lies inside the grid."""
        col, row = coord
        return 0 <= col < self._width and 0 <= row < self._height

    def _flatten(self, coord: Coord) -> int:
        if not self.is_valid_coord(coord):
            raise IndexOutOfBounds(coord, self.shape)
        col, row = coord
        return col + self._width * row

    def get(self, coord: Coord) -> T:
        """Get the value stored at a coordinate.

        Args:
            coord: (column, row) coordinate

        Returns:
            The stored value

        Raises:
            IndexOutOfBounds: If the coordinate is outside the grid
        """
        return self._data[self._flatten(coord)]

    def set(self, coord: Coord, value: T) -> None:
        """Store a value at a coordinate.

        Args:
            coord: (column, row) coordinate
            value: New value for the cell

        Raises:
            IndexOutOfBounds: If the coordinate is outside the grid
        """
        self._data[self._flatten(coord)] = value

    def coords(self) -> Iterator[Coord]:
        """Yield every coordinate in row-major order."""
        for row in range(self._height):
            for col in range(self._width):
                yield (col, row)

    def copy(self) -> "Grid[T]":
        """Return an independent copy of this grid."""
        clone: Grid[T] = Grid.__new__(Grid)
        clone._width = self._width
        clone._height = self._height
        clone._data = copy.deepcopy(self._data)
        return clone

    def to_list(self) -> List[List[T]]:
        """Convert grid to nested rows, indexed as ``rows[row][col]``."""
        return [self._data[row * self._width:(row + 1) * self._width] for row in range(self._height)]

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and self._data == other._data

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"
