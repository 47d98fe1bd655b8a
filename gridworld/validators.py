from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from gridworld.errors import CoordinateOutOfBoundsError, InvalidCellNameError, MissingCellNameError


@dataclass(frozen=True, slots=True)
class GridBounds:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class CellRequest:
    """Inputs available to validators.

    `name` is only meaningful for writes; reads leave it unset.
    """

    x: Any
    y: Any
    name: Any = None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class CellValidator(ABC):
    """A small, composable validation unit for an incoming cell read or write."""

    @abstractmethod
    def validate(self, *, req: CellRequest, bounds: GridBounds) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class BoundsValidator(CellValidator):
    """x is checked before y so the reported axis is deterministic."""

    def validate(self, *, req: CellRequest, bounds: GridBounds) -> None:
        if not (_is_int(req.x) and 0 <= req.x < bounds.width):
            raise CoordinateOutOfBoundsError("x", req.x, bounds.width)
        if not (_is_int(req.y) and 0 <= req.y < bounds.height):
            raise CoordinateOutOfBoundsError("y", req.y, bounds.height)


@dataclass(frozen=True, slots=True)
class NameValidator(CellValidator):
    """Rejects a missing name, then a non-string or blank one."""

    def validate(self, *, req: CellRequest, bounds: GridBounds) -> None:
        if req.name is None:
            raise MissingCellNameError()
        if not isinstance(req.name, str) or not req.name.strip():
            raise InvalidCellNameError(req.name)


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[CellValidator, ...]

    def validate(self, *, req: CellRequest, bounds: GridBounds) -> None:
        for v in self.validators:
            v.validate(req=req, bounds=bounds)


# Coordinates always come first: a bad position wins over a bad name.
READ_PIPELINE = ValidatorPipeline(validators=(BoundsValidator(),))
WRITE_PIPELINE = ValidatorPipeline(validators=(BoundsValidator(), NameValidator()))
