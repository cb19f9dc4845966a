"""Host-facing search result models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SearchResultItem(BaseModel):
    """One image in a result page."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Shutterstock image id")
    preview: str = Field(default="", description="Preview image URL")


class SearchResult(BaseModel):
    """Normalized result of any search-like operation."""

    page: int = 1
    total_count: int = Field(default=0, ge=0)
    data: list[SearchResultItem] = Field(default_factory=list)
    disabled_filters: list[str] = Field(
        default_factory=list,
        description="Filters the host must disable, including 'q' for the search input",
    )
    success: bool = True
    message: str | None = None
    search: dict[str, Any] = Field(
        default_factory=dict, description="Normalized query that produced this result"
    )

    def to_host_dict(self) -> dict[str, Any]:
        """Serialize using the host's field names."""
        return {
            "search": self.search,
            "page": self.page,
            "totalCount": self.total_count,
            "data": [item.model_dump() for item in self.data],
            "disabledFilters": list(self.disabled_filters),
            "success": self.success,
            "message": self.message,
        }
