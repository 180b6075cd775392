"""
PPRA e-procurement portal client.

The single place where transport and extraction meet: builds listing
and detail URLs, fetches the HTML through a backend and hands it to
the shared extractors. Every entry point (API, CLI) goes through here.
"""

from __future__ import annotations

from typing import Any, Mapping, TYPE_CHECKING
from urllib.parse import quote

from tenderwatch.core.backends.base import RequestSpec
from tenderwatch.core.backends.http_backend import HttpBackend
from tenderwatch.core.config.models import PortalConfig
from tenderwatch.core.extract import (
    DetailExtractor,
    ListingExtractor,
    ListingResult,
    TenderDetails,
    validate_tender_no,
)
from tenderwatch.core.logging import get_logger
from tenderwatch.core.normalize.filters import TenderFilters, normalize_filters

if TYPE_CHECKING:
    from tenderwatch.core.backends.base import Backend


logger = get_logger("portals.epms")


class EpmsPortal:
    """Client for the active tenders and tender detail pages."""
    
    def __init__(self, config: PortalConfig | None = None, backend: Backend | None = None) -> None:
        """Initialize the portal client.
        
        Args:
            config: Portal configuration (default: public PPRA portal)
            backend: Fetch backend (default: HttpBackend from config)
        """
        self.config = config or PortalConfig()
        self.backend = backend or HttpBackend(
            timeout=self.config.backend.timeout_seconds,
            max_retries=self.config.backend.max_retries,
            user_agent=self.config.backend.user_agent,
        )
        self.listing_extractor = ListingExtractor(
            selectors=self.config.listing_selectors,
            origin=self.config.origin,
        )
        self.detail_extractor = DetailExtractor(
            selectors=self.config.detail_selectors,
            origin=self.config.origin,
        )
    
    def listing_url(self, filters: TenderFilters) -> str:
        return f"{self.config.listing_url}?{filters.query_string}"
    
    def detail_url(self, tender_no: str) -> str:
        path = self.config.detail_path.format(tender_no=quote(tender_no, safe=""))
        return f"{self.config.origin}{path}"
    
    async def list_tenders(
        self,
        filters: Mapping[str, Any] | TenderFilters | None = None,
        **overrides: Any,
    ) -> ListingResult:
        """Fetch and extract one listing page.
        
        Raises:
            InvalidFilterError: If the filters cannot be normalized
            BackendError: If the page cannot be fetched
        """
        query = normalize_filters(filters, **overrides)
        url = self.listing_url(query)
        
        logger.info(
            "Fetching listing page %s",
            query.page,
            extra={"portal": self.config.name, "url": url, "page": query.page},
        )
        html = await self._fetch(url, "listing", page=query.page)
        return self.listing_extractor.extract(html)
    
    async def get_tender_details(self, tender_no: str | None) -> TenderDetails:
        """Fetch and extract one tender's detail page.
        
        Raises:
            InvalidTenderIdError: If tender_no is empty or missing
            BackendError: If the page cannot be fetched
        """
        tender_no = validate_tender_no(tender_no)
        url = self.detail_url(tender_no)
        
        logger.info(
            "Fetching tender details",
            extra={"portal": self.config.name, "url": url, "tender_no": tender_no},
        )
        html = await self._fetch(url, "detail", tender_no=tender_no)
        return self.detail_extractor.extract(html, tender_no)
    
    async def _fetch(self, url: str, page_type: str, **context: Any) -> str:
        result = await self.backend.fetch(
            RequestSpec(url=url, portal_name=self.config.name, page_type=page_type)
        )
        logger.debug(
            "Fetched %s page in %.0f ms (%d retries)",
            page_type,
            result.elapsed_ms,
            result.retry_count,
            extra={
                "portal": self.config.name,
                "url": url,
                "elapsed_ms": round(result.elapsed_ms, 1),
                "retry_count": result.retry_count,
                **context,
            },
        )
        return result.html
    
    async def close(self) -> None:
        await self.backend.close()
    
    async def __aenter__(self) -> "EpmsPortal":
        return self
    
    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
