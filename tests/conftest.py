"""Pytest fixtures for testing."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from unittest.mock import MagicMock

from shutterstock_connector.config.endpoints import Endpoints
from shutterstock_connector.config.settings import Settings
from shutterstock_connector.connectors.shutterstock import ShutterstockConnector
from shutterstock_connector.models.upstream import (
    CategoryList,
    CollectionItemList,
    CollectionList,
    Image,
    ImageList,
    LicenseResponse,
    SubscriptionList,
)
from shutterstock_connector.services.shutterstock import ShutterstockClient

BASE_URL = "https://api.shutterstock.com/v2/"


def image_payload(
    image_id: str = "1001",
    preview_url: str | None = None,
    description: str = "Mountain lake at dawn",
    contributor_id: str | None = "250738318",
    huge: tuple[int, int] | None = (5000, 3333),
) -> dict[str, Any]:
    """Create an image record shaped like the Shutterstock API returns it."""
    assets: dict[str, Any] = {
        "preview": {"url": preview_url or f"https://image.shutterstock.com/display_pic/{image_id}.jpg"},
    }
    if huge:
        assets["huge_jpg"] = {"width": huge[0], "height": huge[1]}
    payload: dict[str, Any] = {
        "id": image_id,
        "description": description,
        "assets": assets,
    }
    if contributor_id:
        payload["contributor"] = {"id": contributor_id}
    return payload


def search_payload(count: int = 3, page: int = 1, total_count: int | None = 1200) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "page": page,
        "per_page": 20,
        "data": [image_payload(str(1000 + i)) for i in range(count)],
    }
    if total_count is not None:
        payload["total_count"] = total_count
    return payload


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode(), headers={"Content-Type": "application/json"})


@pytest.fixture
def mock_settings():
    """Create settings for testing."""
    return Settings(
        shutterstock_consumer_key="test-key",
        shutterstock_consumer_secret="test-secret",
        shutterstock_token="test-token",
        shutterstock_base_url=BASE_URL,
    )


@pytest.fixture
def mock_client():
    """Create mock Shutterstock client with empty successful responses."""
    client = MagicMock(spec=ShutterstockClient)
    client.search_images.return_value = ImageList()
    client.get_subscriptions.return_value = SubscriptionList()
    client.license_image.return_value = LicenseResponse()
    client.get_image.return_value = Image()
    client.get_images.return_value = ImageList()
    client.get_categories.return_value = CategoryList()
    client.get_collections.return_value = CollectionList()
    client.get_collection_items.return_value = CollectionItemList()
    return client


@pytest.fixture
def connector(mock_settings, mock_client):
    """Create connector backed by the mock client."""
    return ShutterstockConnector(settings=mock_settings, client=mock_client)


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], ShutterstockClient]:
    """Build a real client whose traffic goes to a request handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ShutterstockClient:
        return ShutterstockClient(
            consumer_key="test-key",
            consumer_secret="test-secret",
            token="test-token",
            endpoints=Endpoints(base_url=BASE_URL),
            transport=httpx.MockTransport(handler),
        )

    return _make
