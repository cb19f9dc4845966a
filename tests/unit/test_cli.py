"""Tests for the command-line entry point."""

import json
from unittest.mock import MagicMock, patch

import pytest

from shutterstock_connector.__main__ import build_parser, main
from shutterstock_connector.models.license import LicensedAsset
from shutterstock_connector.models.search import SearchResult, SearchResultItem


@pytest.fixture
def fake_connector():
    connector = MagicMock()
    with patch("shutterstock_connector.__main__.ShutterstockConnector", return_value=connector), patch(
        "shutterstock_connector.__main__.setup_logging"
    ):
        yield connector


class TestCli:
    """Tests for the CLI."""

    def test_search_arguments(self):
        args = build_parser().parse_args(["search", "lake", "--people-age", "20s", "--page", "2"])

        assert args.q == "lake"
        assert args.people_age == "20s"
        assert args.page == 2

    def test_search_prints_result(self, fake_connector, capsys):
        fake_connector.search.return_value = SearchResult(
            total_count=1, data=[SearchResultItem(id="1", preview="https://example.com/1.jpg")]
        )

        exit_code = main(["search", "lake", "--color", "0000FF"])

        params = fake_connector.search.call_args.args[0]
        assert params["q"] == "lake"
        assert params["color"] == "0000FF"
        assert params["page"] == 1
        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["totalCount"] == 1

    def test_failed_license_exit_code(self, fake_connector, capsys):
        fake_connector.get_file_url_and_extension.return_value = LicensedAsset(
            id="42", errors=["No downloads remaining"]
        )

        exit_code = main(["license", "42"])

        assert exit_code == 1
        assert json.loads(capsys.readouterr().out)["errors"] == ["No downloads remaining"]
