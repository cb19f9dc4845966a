"""Upstream endpoint table."""

from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://api.shutterstock.com/v2/"


class Endpoints(BaseModel):
    """Base URL plus the path suffixes of every Shutterstock endpoint in use."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL)

    search: str = "images/search"
    # Current subscriptions decide which assets may be licensed in HD
    subscriptions: str = "user/subscriptions"
    licenses: str = "images/licenses"
    categories: str = "images/categories"
    collections: str = "images/collections"
    collection_items: str = "images/collections/{id}/items"
    images: str = "images"

    def collection_items_for(self, collection_id: str) -> str:
        """Path listing the members of one collection."""
        return self.collection_items.format(id=quote(collection_id, safe=""))

    def image(self, image_id: str) -> str:
        """Path of a single image detail record."""
        return f"{self.images}/{quote(image_id, safe='')}"
