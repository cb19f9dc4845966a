"""Utility modules."""

from shutterstock_connector.utils.exceptions import (
    ConnectorError,
    ExternalServiceError,
    RateLimitError,
)
from shutterstock_connector.utils.logging import get_logger, setup_logging

__all__ = [
    "ConnectorError",
    "ExternalServiceError",
    "RateLimitError",
    "get_logger",
    "setup_logging",
]
