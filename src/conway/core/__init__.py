"""Core grid and automaton logic."""

from .grid import Coord, Grid, IndexOutOfBounds
from .automaton import Cell, ConwayGrid
from .patterns import Pattern, PatternLibrary
from .seeds import SeedFormatError, dump_seed, load_seed, parse_seed

__all__ = [
    "Coord",
    "Grid",
    "IndexOutOfBounds",
    "Cell",
    "ConwayGrid",
    "Pattern",
    "PatternLibrary",
    "SeedFormatError",
    "dump_seed",
    "load_seed",
    "parse_seed",
]
