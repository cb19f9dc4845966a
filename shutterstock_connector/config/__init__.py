"""Configuration."""

from shutterstock_connector.config.endpoints import DEFAULT_BASE_URL, Endpoints
from shutterstock_connector.config.settings import Settings, get_settings

__all__ = ["DEFAULT_BASE_URL", "Endpoints", "Settings", "get_settings"]
