"""User interface frontends."""

from .cli import format_grid, main, run_animation

__all__ = ["format_grid", "main", "run_animation"]
