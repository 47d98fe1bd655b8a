"""Grid-world primitives: cells, the world grid, and the shared game.

Kept free of any I/O so it can be reused by the CLI entry point and tests.
"""

from gridworld.errors import (
    CoordinateOutOfBoundsError,
    GridWorldError,
    InvalidCellNameError,
    InvalidDimensionError,
    MissingCellNameError,
)
from gridworld.game import Game
from gridworld.models import DEFAULT_CELL_NAME, Cell
from gridworld.world import World

__all__ = [
    "DEFAULT_CELL_NAME",
    "Cell",
    "CoordinateOutOfBoundsError",
    "Game",
    "GridWorldError",
    "InvalidCellNameError",
    "InvalidDimensionError",
    "MissingCellNameError",
    "World",
]
