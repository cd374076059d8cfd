"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from typing import Callable, Optional

from ..core.automaton import Cell, ConwayGrid
from ..core.patterns import PatternLibrary
from ..core.seeds import load_seed

CLEAR_SCREEN = "\033[H\033[2J"


def format_grid(grid: ConwayGrid, alive: str = "#", dead: str = ".") -> str:
    """Format a grid as text, one line per row and one glyph per cell.

    Args:
        grid: Grid to format
        alive: Glyph for living cells
        dead: Glyph for dead cells

    Returns:
        String representation of the grid
    """
    lines = []
    for row in range(grid.height):
        lines.append("".join(alive if grid.get((col, row)) is Cell.ALIVE else dead for col in range(grid.width)))
    return "\n".join(lines)


def run_animation(
    grid: ConwayGrid,
    generations: Optional[int] = None,
    delay: float = 1.0,
    clear_screen: bool = True,
    alive: str = "#",
    dead: str = ".",
    out: Callable[[str], None] = print,
) -> int:
    """Show a grid and keep stepping it.

    Args:
        grid: Grid to animate, advanced in place
        generations: Number of steps to run, or None to run until interrupted
        delay: Seconds to wait between steps
        clear_screen: Clear the terminal before each frame
        alive: Glyph for living cells
        dead: Glyph for dead cells
        out: Output function for frames

    Returns:
        Number of steps taken
    """

    def show() -> None:
        prefix = CLEAR_SCREEN if clear_screen else ""
        out(f"{prefix}Generation {grid.generation} (population {grid.population})")
        out(format_grid(grid, alive, dead))

    show()
    steps = 0
    while generations is None or steps < generations:
        if grid.population == 0:
            break
        time.sleep(delay)
        grid.step()
        steps += 1
        show()

    return steps


def list_patterns(library: PatternLibrary) -> None:
    """Print the available patterns by category."""
    print("Available patterns:")
    for category, names in library.get_patterns_by_category().items():
        print(f"\n{category}:")
        for name in names:
            pattern = library.get_pattern(name)
            width, height = pattern.get_size()
            print(f"  {name:<10} {width}x{height}  {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Animate Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Animate a seed file forever, one generation per second
  conway-cli seeds/oscillate.txt

  # Run 20 generations of a glider on a 12x12 grid without delay
  conway-cli --pattern Glider -W 12 -H 12 -g 20 -d 0

  # Use block glyphs and keep every frame on screen
  conway-cli seeds/tryout.txt --alive "#" --dead " " --no-clear

  # List available patterns
  conway-cli --list-patterns
        """,
    )

    parser.add_argument("seed", nargs="?", help="Seed file of whitespace-separated 0/1 rows")

    # Pattern configuration
    parser.add_argument("--pattern", type=str, help="Start from a named pattern instead of a seed file")

    parser.add_argument("-W", "--width", type=int, default=20, help="Grid width for --pattern (default: 20)")

    parser.add_argument("-H", "--height", type=int, default=20, help="Grid height for --pattern (default: 20)")

    parser.add_argument("--pattern-x", type=int, help="Pattern column offset (default: centred)")

    parser.add_argument("--pattern-y", type=int, help="Pattern row offset (default: centred)")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    # Animation configuration
    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        help="Number of generations to run (default: until interrupted)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=1.0,
        help="Seconds between generations (default: 1.0)",
    )

    parser.add_argument("--alive", type=str, default="#", help="Glyph for living cells (default: '#')")

    parser.add_argument("--dead", type=str, default=".", help="Glyph for dead cells (default: '.')")

    parser.add_argument("--no-clear", action="store_true", help="Don't clear the screen between generations")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress details")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.seed and args.pattern:
        errors.append("Give either a seed file or --pattern, not both")

    if not args.seed and not args.pattern:
        errors.append("A seed file or --pattern is required")

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.pattern_x is not None and args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y is not None and args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if args.generations is not None and args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if len(args.alive) != 1 or len(args.dead) != 1:
        errors.append("Glyphs must be single characters")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def build_grid(args: argparse.Namespace, library: PatternLibrary) -> ConwayGrid:
    """Create the starting grid from validated arguments.

    Raises:
        ValueError: If the named pattern doesn't exist
    """
    if args.seed:
        if args.verbose:
            print(f"Loading seed file '{args.seed}'")
        return load_seed(args.seed)

    pattern = library.get_pattern(args.pattern)
    if pattern is None:
        raise ValueError(
            f"Pattern '{args.pattern}' not found. Available patterns: {', '.join(library.list_patterns())}"
        )

    width, height = pattern.get_size()
    offset_x = args.pattern_x if args.pattern_x is not None else max(0, (args.width - width) // 2)
    offset_y = args.pattern_y if args.pattern_y is not None else max(0, (args.height - height) // 2)
    if args.verbose:
        print(f"Placing pattern '{pattern.name}' at ({offset_x}, {offset_y})")
    return pattern.to_grid(args.width, args.height, offset_x, offset_y)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    library = PatternLibrary()

    if args.list_patterns:
        list_patterns(library)
        return 0

    if not validate_args(args):
        return 1

    try:
        grid = build_grid(args, library)
        if args.verbose:
            print(f"Grid: {grid.width}x{grid.height}, initial population: {grid.population}")

        start_time = time.time()
        steps = run_animation(
            grid,
            generations=args.generations,
            delay=args.delay,
            clear_screen=not args.no_clear,
            alive=args.alive,
            dead=args.dead,
        )

        if args.verbose:
            reason = "extinction" if grid.population == 0 else "generation limit"
            print(f"Stopped after {steps} generations ({reason}) in {time.time() - start_time:.2f}s")

        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
