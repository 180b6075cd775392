"""Configuration loading and validation."""

from .models import (
    AppConfig,
    ApiConfig,
    BackendConfig,
    LoggingConfig,
    PortalConfig,
    DEFAULT_PORTAL_ORIGIN,
)
from .selectors import (
    DETAIL_SELECTORS,
    DOCUMENT_KEYWORDS,
    LISTING_SELECTORS,
    DetailSelectors,
    ListingSelectors,
)
from .loader import ConfigError, load_app_config

__all__ = [
    # Config models
    "AppConfig",
    "ApiConfig",
    "BackendConfig",
    "LoggingConfig",
    "PortalConfig",
    "DEFAULT_PORTAL_ORIGIN",
    # Selector table
    "ListingSelectors",
    "DetailSelectors",
    "LISTING_SELECTORS",
    "DETAIL_SELECTORS",
    "DOCUMENT_KEYWORDS",
    # Loaders
    "ConfigError",
    "load_app_config",
]
