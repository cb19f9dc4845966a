"""Filter schema models displayed by the host."""

from pydantic import BaseModel, Field


class FilterOption(BaseModel):
    label: str
    value: str = ""


class FilterDefinition(BaseModel):
    """A dropdown filter: its label and selectable options."""

    label: str
    options: list[FilterOption] = Field(default_factory=list)
