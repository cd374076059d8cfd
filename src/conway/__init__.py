"""Conway's Game of Life over a bounded grid."""

__version__ = "0.1.0"

from .core.grid import Grid, IndexOutOfBounds
from .core.automaton import Cell, ConwayGrid
from .core.patterns import Pattern, PatternLibrary
from .core.seeds import load_seed, parse_seed

__all__ = [
    "Grid",
    "IndexOutOfBounds",
    "Cell",
    "ConwayGrid",
    "Pattern",
    "PatternLibrary",
    "load_seed",
    "parse_seed",
]
