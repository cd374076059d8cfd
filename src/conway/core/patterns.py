"""Common Conway's Game of Life patterns."""

from typing import Dict, List, Optional, Tuple

from .automaton import ConwayGrid
from .grid import Coord


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Coord], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (col, row) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_col, min_row, max_col, max_row)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        cols, rows = zip(*self.cells)
        return (min(cols), min(rows), max(cols), max(rows))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_col, min_row, max_col, max_row = self.get_bounding_box()
        return (max_col - min_col + 1, max_row - min_row + 1)

    def to_grid(self, width: int, height: int, offset_x: int = 0, offset_y: int = 0) -> ConwayGrid:
        """Place this pattern on a fresh grid.

        Args:
            width: Grid width
            height: Grid height
            offset_x: Horizontal offset
            offset_y: Vertical offset

        Returns:
            New ConwayGrid with the pattern's cells alive

        Raises:
            IndexOutOfBounds: If any cell lands outside the grid
        """
        return ConwayGrid.from_alive(width, height, [(x + offset_x, y + offset_y) for x, y in self.cells])

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern(
                "Beehive",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
                "Beehive still life",
            )
        )

        self.add_pattern(
            Pattern(
                "Loaf",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (3, 2), (2, 3)],
                "Loaf still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)],
                "Smallest spaceship, period-4",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Blinker", "Toad", "Beacon"],
            "Spaceships": ["Glider"],
            "Custom": [],
        }

        builtin = {name for names in categories.values() for name in names}
        categories["Custom"] = [name for name in self._patterns if name not in builtin]

        return {cat: names for cat, names in categories.items() if names}
