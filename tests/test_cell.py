from __future__ import annotations

import pytest
from pydantic import ValidationError

from gridworld.models import DEFAULT_CELL_NAME, Cell


def test_cell_constructor_sets_fields() -> None:
    cell = Cell(name="Mountain", x=5, y=10)

    assert cell.name == "Mountain"
    assert cell.x == 5
    assert cell.y == 10


def test_cell_defaults_to_empty_name() -> None:
    assert Cell(x=0, y=0).name == DEFAULT_CELL_NAME == "Empty"


def test_cell_name_can_be_modified() -> None:
    cell = Cell(name="Initial", x=0, y=0)
    cell.name = "Updated"
    assert cell.name == "Updated"


@pytest.mark.parametrize("field", ["x", "y"])
def test_cell_coordinates_are_frozen(field: str) -> None:
    cell = Cell(name="Initial", x=1, y=2)

    with pytest.raises(ValidationError):
        setattr(cell, field, 7)

    assert (cell.x, cell.y) == (1, 2)


@pytest.mark.parametrize("bad", ["", "   ", None])
def test_cell_rejects_blank_or_missing_name_on_assignment(bad: object) -> None:
    cell = Cell(name="Initial", x=0, y=0)

    with pytest.raises(ValidationError):
        cell.name = bad  # type: ignore[assignment]

    assert cell.name == "Initial"


def test_cell_rejects_negative_coordinates() -> None:
    with pytest.raises(ValidationError):
        Cell(name="Nowhere", x=-1, y=0)
