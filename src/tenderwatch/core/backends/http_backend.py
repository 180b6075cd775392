"""
HTTP Backend implementation using httpx.

Provides async HTTP fetching with:
- Connection pooling and redirect following
- Automatic retry with exponential backoff
- Rate limit and block detection
"""

from __future__ import annotations

import time

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from tenderwatch.core.logging import get_logger
from .base import (
    Backend,
    BlockedError,
    FetchError,
    FetchResult,
    RateLimitError,
    RequestSpec,
    ServerError,
)


logger = get_logger("backends.http")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Status codes that indicate blocking
BLOCKED_STATUS_CODES = {403, 406, 418, 451}

# Status codes that should trigger retry (429 handled separately)
RETRY_STATUS_CODES = {500, 502, 503, 504}


class HttpBackend(Backend):
    """HTTP backend using httpx for async requests."""
    
    def __init__(
        self,
        timeout: float = 30.0,
        max_retries: int = 3,
        user_agent: str | None = None,
        default_headers: dict[str, str] | None = None,
        retry_wait_min: float = 1.0,
        retry_wait_max: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize HTTP backend.
        
        Args:
            timeout: Default request timeout in seconds
            max_retries: Maximum fetch attempts
            user_agent: Custom user agent
            default_headers: Default headers for all requests
            retry_wait_min: Minimum backoff between attempts in seconds
            retry_wait_max: Maximum backoff between attempts in seconds
            transport: Custom httpx transport (mainly for tests)
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_wait_min = retry_wait_min
        self.retry_wait_max = retry_wait_max
        self.transport = transport
        
        self.default_headers = {
            "User-Agent": user_agent or DEFAULT_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
            **(default_headers or {}),
        }
        
        self._client: httpx.AsyncClient | None = None
    
    @property
    def name(self) -> str:
        return "http"
    
    async def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers=self.default_headers,
                transport=self.transport,
                limits=httpx.Limits(
                    max_connections=20,
                    max_keepalive_connections=10,
                ),
            )
        return self._client
    
    def _check_response(self, response: httpx.Response) -> None:
        """Raise for rate limiting, blocking and failed responses."""
        url = str(response.url)
        status = response.status_code
        
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = None
            if retry_after:
                try:
                    retry_seconds = float(retry_after)
                except ValueError:
                    retry_seconds = None
            raise RateLimitError("Rate limit exceeded", url=url, retry_after=retry_seconds)
        
        if status in BLOCKED_STATUS_CODES:
            raise BlockedError(f"Request blocked with status {status}", url=url, status_code=status)
        
        if status in RETRY_STATUS_CODES:
            raise ServerError(f"Server error {status}", url=url, status_code=status)
        
        if not 200 <= status < 300:
            raise FetchError(f"Unexpected status {status}", url=url, status_code=status)
    
    async def fetch(self, request: RequestSpec) -> FetchResult:
        """Fetch a URL with automatic retry.
        
        Args:
            request: Request specification
            
        Returns:
            FetchResult with response data
            
        Raises:
            FetchError: On transport failure or non-2xx response
            RateLimitError: If still rate limited after all attempts
            BlockedError: If the portal refuses the request
        """
        client = await self._ensure_client()
        retry_count = 0
        
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=1, min=self.retry_wait_min, max=self.retry_wait_max),
                retry=retry_if_exception_type((httpx.TransportError, RateLimitError, ServerError)),
                reraise=True,
            ):
                with attempt:
                    retry_count = attempt.retry_state.attempt_number - 1
                    if retry_count:
                        logger.info(
                            "Retrying %s fetch (attempt %d)",
                            request.page_type or "page",
                            retry_count + 1,
                            extra={"url": request.url, "portal": request.portal_name},
                        )
                    
                    start = time.perf_counter()
                    response = await client.get(request.url)
                    elapsed_ms = (time.perf_counter() - start) * 1000
                    
                    self._check_response(response)
                    
                    return FetchResult(
                        url=request.url,
                        status_code=response.status_code,
                        html=response.text,
                        elapsed_ms=elapsed_ms,
                        retry_count=retry_count,
                    )
        except (BlockedError, RateLimitError, FetchError):
            raise
        except ServerError as e:
            raise FetchError(
                f"{e} after {retry_count + 1} attempts",
                url=request.url,
                status_code=e.status_code,
                cause=e,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(
                f"Transport error after {retry_count + 1} attempts: {e}",
                url=request.url,
                cause=e,
            ) from e
        
        # AsyncRetrying with reraise=True always returns or raises above
        raise FetchError("Fetch failed", url=request.url)
    
    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
