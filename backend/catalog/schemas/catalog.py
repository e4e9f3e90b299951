"""Catalog API Schemas: response and request bodies of the catalog routes.

Invariants:
    - CatalogSnapshot mirrors InteractionState.snapshot() key for key
    - DisplayErrorReport carries only what the Display Surface can observe
"""

from pydantic import BaseModel, Field


class CatalogSnapshot(BaseModel):
    """Read model of the interaction controller."""
    rows: list[dict]
    loading: bool
    error: str | None
    phase: str
    active_filter_value: str
    active_sort: list[dict]


class DisplayErrorReport(BaseModel):
    """A rendering fault raised by the grid."""
    name: str = Field("Error", max_length=200)
    message: str = Field(max_length=2000)
    stack: str | None = Field(None, max_length=20_000)
