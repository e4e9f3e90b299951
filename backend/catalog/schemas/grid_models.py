"""Grid Models: filter and sort payloads raised by the Display Surface.

Invariants:
    - FilterModel.effective_value is items[0].value, or "" when absent/empty
    - SortModel is carried verbatim; the controller consumes only its occurrence
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class FilterItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    field: str | None = None
    operator: str | None = None
    value: Any = None


class FilterModel(BaseModel):
    """Grid filter state. Only the first item's value is consumed."""
    model_config = ConfigDict(extra="allow")

    items: list[FilterItem] = Field(default_factory=list)

    @property
    def effective_value(self) -> str:
        if not self.items:
            return ""
        value = self.items[0].value
        if value is None:
            return ""
        if isinstance(value, list):
            return ", ".join(str(v) for v in value)
        return str(value)


class SortItem(BaseModel):
    field: str
    sort: Literal["asc", "desc"] | None = None


class SortModel(BaseModel):
    """Grid sort state."""
    items: list[SortItem] = Field(default_factory=list)
