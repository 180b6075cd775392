"""
Pydantic configuration models for TenderWatch.

These models provide type-safe configuration with validation for:
- Portal location and page paths
- Backend (HTTP transport) preferences
- JSON API settings
- Logging
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .selectors import DetailSelectors, ListingSelectors


DEFAULT_PORTAL_ORIGIN = "https://epms.ppra.gov.pk"


# =============================================================================
# Backend Configuration
# =============================================================================


class BackendConfig(BaseModel):
    """HTTP transport settings."""

    timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Request timeout in seconds",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Maximum fetch attempts on transient failure",
    )
    user_agent: str | None = Field(
        default=None,
        description="Custom user agent (default: common desktop browser)",
    )


# =============================================================================
# Portal Configuration
# =============================================================================


class PortalConfig(BaseModel):
    """Location of the tender portal and the shape of its markup."""

    name: str = Field(
        default="epms",
        min_length=1,
        description="Portal identifier used in logs",
    )
    origin: str = Field(
        default=DEFAULT_PORTAL_ORIGIN,
        description="Scheme and host that relative links are resolved against",
    )
    listing_path: str = Field(
        default="/public/tenders/active-tenders",
        description="Path of the active tenders listing page",
    )
    detail_path: str = Field(
        default="/public/tenders/tender-details/{tender_no}",
        description="Path template of a tender detail page",
    )
    backend: BackendConfig = Field(default_factory=BackendConfig)
    listing_selectors: ListingSelectors = Field(default_factory=ListingSelectors)
    detail_selectors: DetailSelectors = Field(default_factory=DetailSelectors)

    @field_validator("origin")
    @classmethod
    def origin_is_http(cls, v: str) -> str:
        """Require an http(s) origin and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("origin must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("detail_path")
    @classmethod
    def detail_path_has_placeholder(cls, v: str) -> str:
        """Ensure the detail path can carry the tender identifier."""
        if "{tender_no}" not in v:
            raise ValueError("detail_path must contain the {tender_no} placeholder")
        return v

    @property
    def listing_url(self) -> str:
        return f"{self.origin}{self.listing_path}"


# =============================================================================
# API Configuration
# =============================================================================


class ApiConfig(BaseModel):
    """JSON API server settings."""

    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=3000, ge=1, le=65535, description="Bind port")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )


# =============================================================================
# Logging Configuration
# =============================================================================


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    json_format: bool = Field(
        default=True,
        description="Use JSON format for file logs",
    )
    rich_console: bool = Field(
        default=True,
        description="Use Rich for console output",
    )

    @field_validator("level")
    @classmethod
    def level_is_known(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


# =============================================================================
# Application Configuration
# =============================================================================


class AppConfig(BaseModel):
    """Root application configuration.
    
    This is the main configuration object loaded from app.yaml.
    """

    portal: PortalConfig = Field(default_factory=PortalConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
