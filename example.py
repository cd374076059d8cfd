#!/usr/bin/env python3
"""
Example usage of the conway package.
"""

from conway import PatternLibrary
from conway.frontends.cli import format_grid


def main():
    """Demonstrate programmatic usage of the conway package."""
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    # Place the glider near the top-left corner of a 12x12 grid
    grid = glider.to_grid(12, 12, offset_x=1, offset_y=1)

    print("Initial state:")
    print(format_grid(grid))
    print(f"Population: {grid.population}")
    print()

    for _ in range(8):
        grid.step()
        print(f"Generation {grid.generation}:")
        print(format_grid(grid))
        print(f"Population: {grid.population}")
        print()

    print("Neighbour counts:")
    print(grid.neighbour_counts())


if __name__ == "__main__":
    main()
