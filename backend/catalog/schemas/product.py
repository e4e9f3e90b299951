"""Product Schema: the catalog record as published by the products endpoint.

Invariants:
    - id is required and positive, name non-empty, categories non-empty
    - price is non-negative
    - Wire names are camelCase (inStock); Python attributes are snake_case

Design Decisions:
    - Used for advisory validation only: the loader keeps the raw row even
      when model_validate fails, so nothing is dropped silently
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    """A single catalog record."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int = Field(gt=0)
    categories: list[str] = Field(min_length=1)
    name: str = Field(min_length=1)
    image: str | None = None
    in_stock: bool = Field(False, alias="inStock")
    price: float = Field(0, ge=0)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


def missing_required_fields(row: object) -> list[str]:
    """Required fields that are absent or falsy in a raw payload row."""
    if not isinstance(row, dict):
        return ["id", "name", "categories"]
    return [key for key in ("id", "name", "categories") if not row.get(key)]
