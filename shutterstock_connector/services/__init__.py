"""External service clients."""

from shutterstock_connector.services.base_client import BaseHTTPClient
from shutterstock_connector.services.shutterstock import ShutterstockClient

__all__ = [
    "BaseHTTPClient",
    "ShutterstockClient",
]
