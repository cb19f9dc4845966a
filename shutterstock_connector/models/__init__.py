"""Pydantic models for host-facing results and upstream responses."""

from shutterstock_connector.models.filters import FilterDefinition, FilterOption
from shutterstock_connector.models.license import AssetMetadata, LicensedAsset
from shutterstock_connector.models.search import SearchResult, SearchResultItem

__all__ = [
    "AssetMetadata",
    "FilterDefinition",
    "FilterOption",
    "LicensedAsset",
    "SearchResult",
    "SearchResultItem",
]
