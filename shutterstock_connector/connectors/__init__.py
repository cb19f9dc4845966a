"""Image provider connectors."""

from shutterstock_connector.connectors.base import ImageProviderConnector
from shutterstock_connector.connectors.localization import Translator, default_translator
from shutterstock_connector.connectors.shutterstock import ShutterstockConnector

__all__ = [
    "ImageProviderConnector",
    "ShutterstockConnector",
    "Translator",
    "default_translator",
]
