"""Tests for result and upstream models."""

import pytest
from pydantic import ValidationError

from shutterstock_connector.models.license import AssetMetadata, LicensedAsset
from shutterstock_connector.models.search import SearchResult, SearchResultItem
from shutterstock_connector.models.upstream import (
    Collection,
    Image,
    ImageList,
    LicenseResponse,
)
from tests.conftest import image_payload


class TestUpstreamModels:
    """Tests for lenient parsing of API responses."""

    def test_image_with_all_fields(self):
        """Test a complete image record."""
        image = Image.model_validate(image_payload("42"))

        assert image.id == "42"
        assert image.assets.preview.url.endswith("/42.jpg")
        assert image.contributor.id == "250738318"
        assert image.assets.huge_jpg.width == 5000

    def test_image_missing_fields_use_defaults(self):
        """Test that absent nested fields resolve to empty values."""
        image = Image.model_validate({"id": "7"})

        assert image.description == ""
        assert image.contributor.id == ""
        assert image.assets.preview.url == ""
        assert image.assets.huge_jpg.width == 0
        assert image.assets.huge_jpg.height == 0

    def test_explicit_nulls_treated_as_absent(self):
        """Test that null values fall back to defaults."""
        image = Image.model_validate(
            {"id": "7", "description": None, "contributor": None, "assets": {"preview": None}}
        )

        assert image.description == ""
        assert image.contributor.id == ""
        assert image.assets.preview.url == ""

    def test_numeric_ids_become_strings(self):
        """Test that numeric ids are accepted."""
        collection = Collection.model_validate({"id": 126351027, "name": "Lakes", "total_item_count": 3})

        assert collection.id == "126351027"

    def test_unknown_fields_ignored(self):
        """Test that extra upstream fields do not break parsing."""
        images = ImageList.model_validate(
            {"data": [{"id": "1", "aspect": 1.5, "media_type": "image"}], "search_id": "abc"}
        )

        assert len(images.data) == 1
        assert images.page is None
        assert images.total_count is None

    def test_license_response_errors(self):
        """Test license errors are parsed alongside results."""
        response = LicenseResponse.model_validate(
            {
                "data": [{"image_id": "1", "download": {"url": "https://download.shutterstock.com/1.jpg"}}],
                "errors": [{"code": "403", "message": "No downloads remaining"}],
            }
        )

        assert response.data[0].download.url.endswith(".jpg")
        assert response.errors[0].message == "No downloads remaining"

    def test_wrong_type_rejected(self):
        """Test that a structurally wrong body fails validation."""
        with pytest.raises(ValidationError):
            ImageList.model_validate({"data": "not-a-list"})


class TestSearchResult:
    """Tests for SearchResult."""

    def test_defaults(self):
        """Test an untouched result is an empty successful page."""
        result = SearchResult()

        assert result.page == 1
        assert result.total_count == 0
        assert result.data == []
        assert result.disabled_filters == []
        assert result.success is True
        assert result.message is None

    def test_item_is_immutable(self):
        """Test that result items cannot be modified."""
        item = SearchResultItem(id="1", preview="https://example.com/1.jpg")

        with pytest.raises(ValidationError):
            item.preview = "https://example.com/2.jpg"

    def test_to_host_dict(self):
        """Test serialization with host field names."""
        result = SearchResult(
            page=2,
            total_count=40,
            data=[SearchResultItem(id="1", preview="https://example.com/1.jpg")],
            disabled_filters=["q"],
        )

        data = result.to_host_dict()

        assert data["totalCount"] == 40
        assert data["disabledFilters"] == ["q"]
        assert data["data"] == [{"id": "1", "preview": "https://example.com/1.jpg"}]


class TestLicensedAsset:
    """Tests for LicensedAsset."""

    def test_to_host_dict(self):
        """Test the host import shape."""
        asset = LicensedAsset(
            id="1",
            url="https://download.shutterstock.com/1.jpg",
            extension="jpg",
            metadata=AssetMetadata(title="Lake", description="Shutterstock #9", width=10, height=20),
        )

        assert asset.to_host_dict() == {
            "url": "https://download.shutterstock.com/1.jpg",
            "extension": "jpg",
            "metadata": {"title": "Lake", "description": "Shutterstock #9", "width": 10, "height": 20},
            "errors": [],
        }
        assert asset.is_downloadable is True

    def test_not_downloadable_without_url(self):
        """Test an asset without URL."""
        asset = LicensedAsset(id="1")

        assert asset.is_downloadable is False
        assert asset.extension == ""
