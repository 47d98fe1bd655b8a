from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from gridworld.errors import CoordinateOutOfBoundsError, InvalidDimensionError
from gridworld.models import DEFAULT_CELL_NAME, Cell
from gridworld.validators import READ_PIPELINE, WRITE_PIPELINE, CellRequest, GridBounds


def _require_positive(parameter: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimensionError(parameter, value)
    return value


class World:
    """A fixed-size 2D grid of cells.

    Every slot is populated at construction with a cell named
    `DEFAULT_CELL_NAME`. The grid is stored row-major, so `grid[y][x]` is the
    cell at `(x, y)`. Dimensions never change after construction.
    """

    __slots__ = ("_bounds", "_rows")

    def __init__(self, width: int, height: int) -> None:
        # Width is checked first so the reported parameter is deterministic.
        width = _require_positive("width", width)
        height = _require_positive("height", height)

        self._bounds = GridBounds(width=width, height=height)
        self._rows: tuple[tuple[Cell, ...], ...] = tuple(
            tuple(Cell(name=DEFAULT_CELL_NAME, x=x, y=y) for x in range(width)) for y in range(height)
        )

    @property
    def width(self) -> int:
        return self._bounds.width

    @property
    def height(self) -> int:
        return self._bounds.height

    @property
    def grid(self) -> tuple[tuple[Cell, ...], ...]:
        return self._rows

    def __len__(self) -> int:
        return self.width * self.height

    def __repr__(self) -> str:
        return f"World(width={self.width}, height={self.height})"

    def in_bounds(self, x: int, y: int) -> bool:
        try:
            READ_PIPELINE.validate(req=CellRequest(x=x, y=y), bounds=self._bounds)
        except CoordinateOutOfBoundsError:
            return False
        return True

    def cells(self) -> Iterator[Cell]:
        for row in self._rows:
            yield from row

    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell at `(x, y)`.

        The cell is returned by reference; renaming it is visible through the
        world. Raises `CoordinateOutOfBoundsError` outside the grid.
        """

        READ_PIPELINE.validate(req=CellRequest(x=x, y=y), bounds=self._bounds)
        return self._rows[y][x]

    def set_cell_name(self, x: int, y: int, name: str) -> None:
        """Rename the cell at `(x, y)` in place.

        Validation order: x, y, missing name, blank name. Nothing is mutated
        unless every check passes.
        """

        WRITE_PIPELINE.validate(req=CellRequest(x=x, y=y, name=name), bounds=self._bounds)
        self._rows[y][x].name = name
