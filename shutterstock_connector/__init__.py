"""Shutterstock image search and licensing connector for CMS asset managers."""

from shutterstock_connector.connectors import ImageProviderConnector, ShutterstockConnector
from shutterstock_connector.models import LicensedAsset, SearchResult, SearchResultItem

__version__ = "1.0.0"

__all__ = [
    "ImageProviderConnector",
    "LicensedAsset",
    "SearchResult",
    "SearchResultItem",
    "ShutterstockConnector",
    "__version__",
]
