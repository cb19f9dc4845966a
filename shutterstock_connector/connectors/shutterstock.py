"""Shutterstock implementation of the image provider connector."""

from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlparse

from shutterstock_connector.config.endpoints import Endpoints
from shutterstock_connector.config.settings import Settings, get_settings
from shutterstock_connector.connectors.base import ImageProviderConnector
from shutterstock_connector.connectors.filters import (
    CATEGORY_FILTER,
    COLLECTION_FILTER,
    FILTER_NAMES,
    QUERY_FIELD,
    any_option,
    disabled_in_collection_mode,
    filter_label,
    static_filter,
)
from shutterstock_connector.connectors.localization import Translator, default_translator
from shutterstock_connector.models.filters import FilterDefinition, FilterOption
from shutterstock_connector.models.license import AssetMetadata, LicensedAsset
from shutterstock_connector.models.search import SearchResult, SearchResultItem
from shutterstock_connector.models.upstream import Image, ImageList
from shutterstock_connector.services.shutterstock import ShutterstockClient
from shutterstock_connector.utils.exceptions import ExternalServiceError
from shutterstock_connector.utils.logging import get_logger

PAGE_SIZE = 20
SORT_ORDER = "relevance"

ADD_BUTTON_ICON = (
    '<span class="t3js-icon icon icon-size-small icon-state-default icon-actions-online-media-add"'
    ' data-identifier="actions-shutterstock-media-add">'
    '<span class="icon-markup">'
    '<svg class="icon-color" role="img">'
    '<use xlink:href="/typo3/sysext/core/Resources/Public/Icons/T3Icons/sprites/actions.svg#actions-cloud" />'
    "</svg>"
    "</span>"
    "</span>"
)


def _is_empty(value: Any) -> bool:
    return value == "0" or not value


def normalize_query(params: dict[str, Any]) -> dict[str, Any]:
    """Turn the host's filter values into images/search parameters.

    The free-text field ``q`` becomes ``query``, sort order and page size are
    fixed, and filters left empty are dropped.
    """
    query = dict(params)
    text = query.pop(QUERY_FIELD, None)
    query["query"] = text.strip() if isinstance(text, str) else text
    query["sort"] = SORT_ORDER
    query["per_page"] = PAGE_SIZE
    return {key: value for key, value in query.items() if not _is_empty(value)}


def page_number(query: dict[str, Any]) -> int:
    """Requested page; absent or unparseable means the first page."""
    try:
        return int(query.get("page", 1))
    except (TypeError, ValueError):
        return 1


def extension_from_url(url: str | None) -> str:
    """File extension of the URL path without the dot, or an empty string."""
    if not url:
        return ""
    return PurePosixPath(urlparse(url).path).suffix.lstrip(".")


class ShutterstockConnector(ImageProviderConnector):
    """Search, browse collections of, and license Shutterstock images."""

    name = "shutterstock"

    def __init__(
        self,
        settings: Settings | None = None,
        client: ShutterstockClient | None = None,
        translate: Translator | None = None,
    ):
        """Initialize the connector.

        Args:
            settings: Connector settings, read from the environment when omitted
            client: API client, built from the settings when omitted
            translate: Label translator supplied by the host
        """
        self.settings = settings or get_settings()
        self.client = client or ShutterstockClient(
            consumer_key=self.settings.shutterstock_consumer_key.get_secret_value(),
            consumer_secret=self.settings.shutterstock_consumer_secret.get_secret_value(),
            token=self.settings.shutterstock_token.get_secret_value(),
            endpoints=Endpoints(base_url=self.settings.shutterstock_base_url),
            timeout=self.settings.http_timeout_seconds,
            max_attempts=self.settings.http_max_attempts,
        )
        self.translate = translate or default_translator
        self.logger = get_logger(__name__).bind(provider=self.name)

    def search(self, params: dict[str, Any]) -> SearchResult:
        """Keyword search, or the content of a collection when one is selected.

        Collections are not paginated: only the first page triggers a fetch,
        and the result disables every other filter so the host stops paging.
        Upstream failures are reported through ``success`` and ``message``.
        """
        query = normalize_query(params)
        page = page_number(query)
        result = SearchResult(page=page, search=query)

        try:
            collection_id = query.get(COLLECTION_FILTER)
            if not collection_id:
                raw = self.client.search_images(query)
                result = self.format_results(raw, query)
                result.data = result.data[:PAGE_SIZE]
            elif page == 1:
                result = self.get_images_from_collection(str(collection_id))
                result.search = query
                result.disabled_filters = disabled_in_collection_mode()
            else:
                self.logger.debug(
                    "collection_page_skipped",
                    collection=collection_id,
                    page=page,
                )
        except ExternalServiceError as e:
            self.logger.critical("search_failed", error=e.message, details=e.details)
            result.success = False
            result.message = e.message

        return result

    def get_images_from_collection(self, collection_id: str) -> SearchResult:
        """List every image of a collection.

        Membership comes first, then the details of all members in one bulk
        request.

        Raises:
            ExternalServiceError: If either request fails
        """
        members = self.client.get_collection_items(collection_id)
        image_ids = [item.id for item in members.data if item.id]
        if not image_ids:
            return SearchResult()

        images = self.client.get_images(image_ids, view="minimal")
        return self.format_results(images)

    def format_results(
        self,
        raw: ImageList,
        params: dict[str, Any] | None = None,
    ) -> SearchResult:
        """Convert an upstream image list into a SearchResult."""
        return SearchResult(
            search=params or {},
            page=raw.page if raw.page is not None else 1,
            total_count=raw.total_count if raw.total_count is not None else len(raw.data),
            data=[
                SearchResultItem(id=image.id, preview=image.assets.preview.url)
                for image in raw.data
            ],
        )

    def get_subscription(self) -> str | None:
        """First subscription id of the account, or None.

        The subscription determines which assets may be downloaded in HD; a
        failed lookup only means no license can be requested.
        """
        try:
            subscriptions = self.client.get_subscriptions()
        except ExternalServiceError as e:
            self.logger.critical("subscription_lookup_failed", error=e.message)
            return None

        if not subscriptions.data:
            return None
        return subscriptions.data[0].id or None

    def get_file_url_and_extension(self, image_id: str) -> LicensedAsset:
        asset = LicensedAsset(id=image_id)

        subscription_id = self.get_subscription()
        if subscription_id:
            try:
                license_response = self.client.license_image(subscription_id, image_id)
            except ExternalServiceError as e:
                self.logger.critical(
                    "license_request_failed",
                    image_id=image_id,
                    subscription_id=subscription_id,
                    error=e.message,
                )
            else:
                url = license_response.data[0].download.url if license_response.data else ""
                asset.url = url or None
                asset.extension = extension_from_url(asset.url)
                asset.errors = [
                    error.message for error in license_response.errors if error.message
                ]
        else:
            self.logger.warning("license_skipped_no_subscription", image_id=image_id)

        asset.metadata = self._build_metadata(self._get_image_details(image_id))
        return asset

    def _get_image_details(self, image_id: str) -> Image | None:
        try:
            return self.client.get_image(image_id)
        except ExternalServiceError as e:
            self.logger.error("image_details_failed", image_id=image_id, error=e.message)
            return None

    def _build_metadata(self, image: Image | None) -> AssetMetadata:
        if image is None:
            return AssetMetadata()

        contributor_id = image.contributor.id
        huge = image.assets.huge_jpg
        return AssetMetadata(
            title=image.description,
            description=f"Shutterstock #{contributor_id}" if contributor_id else "",
            width=huge.width,
            height=huge.height,
        )

    def get_add_button_label(self) -> str:
        return self.translate("button.add_media")

    def get_add_button_icon(self) -> str:
        return ADD_BUTTON_ICON

    def get_add_button_attributes(self) -> dict[str, str]:
        """Attributes of the "Add media" button, read by the host's JavaScript."""
        return {
            "title": self.translate("button.add_media"),
            "data-btn-submit": self.translate("button.submit"),
            "data-placeholder": self.translate("placeholder.search"),
            "data-btn-cancel": self.translate("button.cancel"),
        }

    def get_categories_filter(self) -> list[FilterOption]:
        """Category options fetched live; empty when the fetch fails."""
        try:
            categories = self.client.get_categories()
        except ExternalServiceError as e:
            self.logger.error("categories_fetch_failed", error=e.message)
            return []

        return [any_option(CATEGORY_FILTER, self.translate)] + [
            FilterOption(label=category.name, value=category.id)
            for category in categories.data
        ]

    def get_available_collections(self) -> list[FilterOption]:
        """Collections of the account, labeled with their size."""
        try:
            collections = self.client.get_collections()
        except ExternalServiceError as e:
            self.logger.critical("collections_fetch_failed", error=e.message)
            return []

        if not collections.data:
            return []
        return [any_option(COLLECTION_FILTER, self.translate)] + [
            FilterOption(
                label=f"{collection.name} ({collection.total_item_count})",
                value=collection.id,
            )
            for collection in collections.data
        ]

    def get_available_filters(self) -> dict[str, FilterDefinition]:
        filters: dict[str, FilterDefinition] = {}
        for name in FILTER_NAMES:
            if name == COLLECTION_FILTER:
                options = self.get_available_collections()
            elif name == CATEGORY_FILTER:
                options = self.get_categories_filter()
            else:
                filters[name] = static_filter(name, self.translate)
                continue
            filters[name] = FilterDefinition(
                label=filter_label(name, self.translate), options=options
            )
        return filters
