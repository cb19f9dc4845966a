"""Shutterstock API response models.

Every field has a default and explicit nulls are treated as absent, so a
sparse or partially populated response parses into a fully usable object.
Unknown fields are ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UpstreamModel(BaseModel):
    """Base for lenient upstream structures."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ImageAsset(UpstreamModel):
    """One rendition of an image (preview, huge_jpg, ...)."""

    url: str = ""
    width: int = 0
    height: int = 0


class ImageAssets(UpstreamModel):
    preview: ImageAsset = Field(default_factory=ImageAsset)
    huge_jpg: ImageAsset = Field(default_factory=ImageAsset)


class Contributor(UpstreamModel):
    id: str = ""


class Image(UpstreamModel):
    """Image record as returned by search, bulk lookup and detail endpoints."""

    id: str = ""
    description: str = ""
    contributor: Contributor = Field(default_factory=Contributor)
    assets: ImageAssets = Field(default_factory=ImageAssets)


class ImageList(UpstreamModel):
    """Paged (search) or unpaged (bulk lookup) list of images."""

    page: int | None = None
    per_page: int | None = None
    total_count: int | None = None
    data: list[Image] = Field(default_factory=list)


class Subscription(UpstreamModel):
    id: str = ""


class SubscriptionList(UpstreamModel):
    data: list[Subscription] = Field(default_factory=list)


class LicenseDownload(UpstreamModel):
    url: str = ""


class LicenseResult(UpstreamModel):
    image_id: str = ""
    download: LicenseDownload = Field(default_factory=LicenseDownload)


class ApiErrorEntry(UpstreamModel):
    """Application level error reported inside a successful response body."""

    code: str = ""
    message: str = ""
    path: str = ""


class LicenseResponse(UpstreamModel):
    data: list[LicenseResult] = Field(default_factory=list)
    errors: list[ApiErrorEntry] = Field(default_factory=list)


class Category(UpstreamModel):
    id: str = ""
    name: str = ""


class CategoryList(UpstreamModel):
    data: list[Category] = Field(default_factory=list)


class Collection(UpstreamModel):
    id: str = ""
    name: str = ""
    total_item_count: int = 0


class CollectionList(UpstreamModel):
    data: list[Collection] = Field(default_factory=list)


class CollectionItem(UpstreamModel):
    id: str = ""


class CollectionItemList(UpstreamModel):
    data: list[CollectionItem] = Field(default_factory=list)
