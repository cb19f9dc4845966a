"""Shutterstock API client."""

from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from shutterstock_connector.config.endpoints import Endpoints
from shutterstock_connector.models.upstream import (
    CategoryList,
    CollectionItemList,
    CollectionList,
    Image,
    ImageList,
    LicenseResponse,
    SubscriptionList,
    UpstreamModel,
)
from shutterstock_connector.services.base_client import BaseHTTPClient
from shutterstock_connector.utils.exceptions import ExternalServiceError
from shutterstock_connector.utils.logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=UpstreamModel)


class ShutterstockClient(BaseHTTPClient):
    """Client for the Shutterstock v2 API.

    Catalogue endpoints (search, bulk image lookup, categories) authenticate
    with the consumer key and secret. Account endpoints (subscriptions,
    licenses, collections, image details) use the bearer token.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        token: str,
        endpoints: Endpoints | None = None,
        timeout: float = 5.0,
        max_attempts: int = 1,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize Shutterstock client.

        Args:
            consumer_key: Application consumer key
            consumer_secret: Application consumer secret
            token: OAuth bearer token of the licensing account
            endpoints: Endpoint table, defaults to the public v2 API
            timeout: Request timeout
            max_attempts: Attempts per request on transport errors
            transport: Optional transport override
        """
        self.endpoints = endpoints or Endpoints()
        super().__init__(
            base_url=self.endpoints.base_url,
            timeout=timeout,
            max_attempts=max_attempts,
            service_name="shutterstock",
            transport=transport,
        )
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self.token = token

    @property
    def _basic_auth(self) -> tuple[str, str]:
        return (self.consumer_key, self.consumer_secret)

    @property
    def _bearer(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def _parse(self, model: type[ModelT], payload: Any) -> ModelT:
        """Validate a JSON payload into an upstream model."""
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.error(
                "unexpected_response_shape",
                service=self.service_name,
                model=model.__name__,
                error=str(e),
            )
            raise ExternalServiceError(
                message=f"Unexpected response from {self.service_name}",
                service=self.service_name,
                details={"model": model.__name__, "error": str(e)},
            ) from e

    def search_images(self, params: dict[str, Any]) -> ImageList:
        """Keyword search.

        Args:
            params: Query parameters as accepted by images/search

        Returns:
            One page of images with paging information
        """
        payload = self.get(self.endpoints.search, params=params, auth=self._basic_auth)
        return self._parse(ImageList, payload)

    def get_subscriptions(self) -> SubscriptionList:
        payload = self.get(self.endpoints.subscriptions, headers=self._bearer)
        return self._parse(SubscriptionList, payload)

    def license_image(self, subscription_id: str, image_id: str) -> LicenseResponse:
        """License one image under a subscription.

        Args:
            subscription_id: Subscription the license is charged to
            image_id: Image to license

        Returns:
            License results plus any per-image errors
        """
        payload = self.post(
            self.endpoints.licenses,
            json_data={"images": [{"image_id": image_id}]},
            params={"subscription_id": subscription_id},
            headers=self._bearer,
        )
        return self._parse(LicenseResponse, payload)

    def get_image(self, image_id: str) -> Image:
        payload = self.get(self.endpoints.image(image_id), headers=self._bearer)
        return self._parse(Image, payload)

    def get_images(self, image_ids: list[str], view: str = "minimal") -> ImageList:
        """Fetch several images in one request (repeated ``id`` parameters)."""
        params: list[tuple[str, Any]] = [("id", image_id) for image_id in image_ids]
        params.append(("view", view))
        payload = self.get(self.endpoints.images, params=params, auth=self._basic_auth)
        return self._parse(ImageList, payload)

    def get_categories(self) -> CategoryList:
        payload = self.get(self.endpoints.categories, auth=self._basic_auth)
        return self._parse(CategoryList, payload)

    def get_collections(self) -> CollectionList:
        payload = self.get(self.endpoints.collections, headers=self._bearer)
        return self._parse(CollectionList, payload)

    def get_collection_items(self, collection_id: str) -> CollectionItemList:
        payload = self.get(
            self.endpoints.collection_items_for(collection_id), headers=self._bearer
        )
        return self._parse(CollectionItemList, payload)
