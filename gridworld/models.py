from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CELL_NAME = "Empty"


class Cell(BaseModel):
    """A single grid position.

    `name` is a mutable label; `x` and `y` are fixed at creation and always
    match the cell's slot in its owning world.
    """

    model_config = ConfigDict(validate_assignment=True, strict=True)

    name: str = DEFAULT_CELL_NAME
    x: int = Field(..., ge=0, frozen=True)
    y: int = Field(..., ge=0, frozen=True)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty or whitespace")
        return v
