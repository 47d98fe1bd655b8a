from __future__ import annotations

from typing import Any


class GridWorldError(Exception):
    """Base class for every error raised by the grid-world model."""


class InvalidDimensionError(GridWorldError, ValueError):
    def __init__(self, parameter: str, value: Any) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter.capitalize()} must be greater than zero (got {value!r}).")


class CoordinateOutOfBoundsError(GridWorldError, IndexError):
    def __init__(self, axis: str, value: Any, limit: int) -> None:
        self.axis = axis
        self.value = value
        self.limit = limit
        super().__init__(f"Coordinate {axis}={value!r} is out of bounds (expected 0 <= {axis} < {limit}).")


class MissingCellNameError(GridWorldError, TypeError):
    def __init__(self) -> None:
        super().__init__("Cell name is required.")


class InvalidCellNameError(GridWorldError, ValueError):
    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"Cell name must be a non-blank string (got {name!r}).")
