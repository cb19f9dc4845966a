"""Capability interface implemented by every image provider connector."""

from abc import ABC, abstractmethod
from typing import Any

from shutterstock_connector.models.filters import FilterDefinition
from shutterstock_connector.models.license import LicensedAsset
from shutterstock_connector.models.search import SearchResult


class ImageProviderConnector(ABC):
    """Operations the host's asset manager calls on a stock image provider.

    Implementations must not raise past these methods for upstream failures;
    they degrade to empty values and report through the returned objects.
    """

    # Provider name for logging
    name: str = "base"

    @abstractmethod
    def search(self, params: dict[str, Any]) -> SearchResult:
        """Run a search for the host's filter values.

        Args:
            params: Filter name to value, including the free-text ``q`` and ``page``

        Returns:
            One page of results
        """

    @abstractmethod
    def get_file_url_and_extension(self, image_id: str) -> LicensedAsset:
        """License an image and return where to download it from."""

    @abstractmethod
    def get_add_button_label(self) -> str:
        pass

    @abstractmethod
    def get_add_button_icon(self) -> str:
        pass

    @abstractmethod
    def get_add_button_attributes(self) -> dict[str, str]:
        pass

    @abstractmethod
    def get_available_filters(self) -> dict[str, FilterDefinition]:
        """Filter schema shown next to the search input, keyed by filter name."""
