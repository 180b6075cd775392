"""
Backend base classes and data structures.

Defines the interface contract for fetching portal pages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class RequestSpec:
    """Specification for an HTTP request."""
    
    url: str
    
    # Metadata for logging/debugging
    portal_name: str | None = None
    page_type: str | None = None  # "listing" or "detail"


@dataclass
class FetchResult:
    """Result of a fetch operation."""
    
    url: str
    status_code: int
    html: str
    
    elapsed_ms: float
    retry_count: int = 0


class Backend(ABC):
    """Abstract base class for page fetching backends."""
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier."""
        pass
    
    @abstractmethod
    async def fetch(self, request: RequestSpec) -> FetchResult:
        """Fetch a URL and return the response.
        
        Args:
            request: Request specification
            
        Returns:
            FetchResult with response data
            
        Raises:
            BackendError: On unrecoverable fetch failure
        """
        pass
    
    async def close(self) -> None:
        """Clean up backend resources."""
        pass
    
    async def __aenter__(self) -> "Backend":
        return self
    
    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


class BackendError(Exception):
    """Base exception for backend errors."""
    
    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class FetchError(BackendError):
    """Error during fetch operation."""
    pass


class RateLimitError(BackendError):
    """Rate limit hit (429)."""
    
    def __init__(
        self,
        message: str,
        url: str | None = None,
        retry_after: float | None = None,
    ):
        super().__init__(message, url, status_code=429)
        self.retry_after = retry_after


class ServerError(BackendError):
    """Transient upstream failure (5xx)."""
    pass


class BlockedError(BackendError):
    """Request refused by the portal."""
    pass
