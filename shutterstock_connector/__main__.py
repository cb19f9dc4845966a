"""
CLI for checking the connector against the live Shutterstock API.

Credentials are read from the environment (or .env):
SHUTTERSTOCK_CONSUMER_KEY, SHUTTERSTOCK_CONSUMER_SECRET, SHUTTERSTOCK_TOKEN.

Usage:
    python -m shutterstock_connector search "mountain lake" --orientation horizontal
    python -m shutterstock_connector search --collection 126351027
    python -m shutterstock_connector filters
    python -m shutterstock_connector license 1234567890
"""

import argparse
import json
import sys

from shutterstock_connector.config.settings import get_settings
from shutterstock_connector.connectors.filters import FILTER_NAMES
from shutterstock_connector.connectors.shutterstock import ShutterstockConnector
from shutterstock_connector.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shutterstock_connector",
        description="Search, browse and license Shutterstock images",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search images or list a collection")
    search.add_argument("q", nargs="?", default="", help="Free-text query")
    search.add_argument("--page", type=int, default=1)
    for name in FILTER_NAMES:
        search.add_argument(f"--{name.replace('_', '-')}", dest=name, default="")

    subparsers.add_parser("filters", help="Print the filter schema")

    license_cmd = subparsers.add_parser("license", help="License an image")
    license_cmd.add_argument("image_id")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(log_level=settings.log_level, log_format=settings.log_format)
    connector = ShutterstockConnector(settings=settings)

    if args.command == "search":
        params = {name: getattr(args, name) for name in FILTER_NAMES}
        params.update(q=args.q, page=args.page)
        result = connector.search(params)
        output = result.to_host_dict()
        exit_code = 0 if result.success else 1
    elif args.command == "filters":
        output = {
            name: definition.model_dump()
            for name, definition in connector.get_available_filters().items()
        }
        exit_code = 0
    else:
        asset = connector.get_file_url_and_extension(args.image_id)
        output = asset.to_host_dict()
        exit_code = 0 if asset.is_downloadable else 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
