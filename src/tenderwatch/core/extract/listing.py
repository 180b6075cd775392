"""
Listing page extraction.

Turns the portal's active-tenders table into Tender records plus the
pagination state. Each field is read from its own structural anchor in
the row, so a missing cell only blanks that field.
"""

from __future__ import annotations

import re

from lxml.html import HtmlElement

from tenderwatch.core.config.models import DEFAULT_PORTAL_ORIGIN
from tenderwatch.core.config.selectors import LISTING_SELECTORS, ListingSelectors
from tenderwatch.core.logging import get_logger
from .base import ListingResult, Pagination, Tender, first_text, parse_html, resolve_url, text_of


logger = get_logger("extract.listing")

# Leading integer, the way the page number is written in the active control
PAGE_NUMBER_PATTERN = re.compile(r"^\s*([+-]?\d+)")


class ListingExtractor:
    """Extract tender summaries from a listing page.
    
    Stateless: an instance only holds its selector table and origin,
    so one instance can serve any number of concurrent calls.
    """
    
    def __init__(
        self,
        selectors: ListingSelectors | None = None,
        origin: str = DEFAULT_PORTAL_ORIGIN,
    ):
        """Initialize extractor.
        
        Args:
            selectors: Listing selector table (default: portal markup)
            origin: Portal origin for resolving detail links
        """
        self.selectors = selectors or LISTING_SELECTORS
        self.origin = origin.rstrip("/")
    
    @property
    def name(self) -> str:
        return "listing"
    
    def extract(self, html: str | bytes | None) -> ListingResult:
        """Extract tenders and pagination from listing HTML.
        
        Args:
            html: Raw listing page HTML
            
        Returns:
            ListingResult; empty with page 1 when the input is not markup
        """
        doc = parse_html(html)
        if doc is None:
            logger.warning("Listing page is empty or not parseable")
            return ListingResult()
        
        pagination = self._extract_pagination(doc)
        context = {"page": pagination.current_page}
        
        tenders: list[Tender] = []
        for row_index, row in enumerate(self._find_rows(doc)):
            tender = self._extract_row(row)
            if tender is None:
                logger.debug("Dropped row %d without a tender number", row_index, extra=context)
                continue
            tenders.append(tender)
        
        logger.debug(
            "Extracted %d tenders (more=%s)",
            len(tenders),
            pagination.has_more,
            extra=context,
        )
        return ListingResult(tenders=tuple(tenders), pagination=pagination)
    
    def _find_rows(self, doc: HtmlElement) -> list[HtmlElement]:
        """Table rows in document order."""
        rows = doc.cssselect(self.selectors.rows)
        if not rows:
            rows = doc.cssselect(self.selectors.rows_fallback)
        return rows
    
    def _extract_row(self, row: HtmlElement) -> Tender | None:
        """Build a Tender from one row, or None if it has no tender number."""
        s = self.selectors
        
        tender_no = text_of(row.cssselect(s.tender_no))
        if not tender_no:
            return None
        
        closing_date = text_of(row.cssselect(s.closing_date))
        closing_time = text_of(row.cssselect(s.closing_time))
        
        return Tender(
            tender_no=tender_no,
            title=first_text(row.cssselect(s.title)),
            category=first_text(row.cssselect(s.category)),
            organization=text_of(row.cssselect(s.organization)),
            location=self._extract_location(row),
            type=text_of(row.cssselect(s.tender_type)),
            published_date=text_of(row.cssselect(s.published_date)),
            closing_date=closing_date,
            closing_time=closing_time,
            details_link=self._extract_details_link(row),
        )
    
    def _extract_location(self, row: HtmlElement) -> str:
        """Full text of the element holding the map-pin icon."""
        icons = row.cssselect(self.selectors.location_icon)
        if not icons:
            return ""
        parent = icons[0].getparent()
        if parent is None:
            return ""
        return parent.text_content().strip()
    
    def _extract_details_link(self, row: HtmlElement) -> str | None:
        links = row.cssselect(self.selectors.details_link)
        if not links:
            return None
        return resolve_url(links[0].get("href"), self.origin)
    
    def _extract_pagination(self, doc: HtmlElement) -> Pagination:
        """Read the active page number and whether a next page exists."""
        s = self.selectors
        
        current_page = 1
        active_text = text_of(doc.cssselect(s.active_page))
        match = PAGE_NUMBER_PATTERN.match(active_text)
        if match:
            page = int(match.group(1))
            if page >= 1:
                current_page = page
        
        has_more = any(
            s.next_label in text and text.strip()
            for text in (link.text_content() for link in doc.cssselect(s.pagination_links))
        )
        
        return Pagination(current_page=current_page, has_more=has_more)


def parse_listing(
    html: str | bytes | None,
    origin: str = DEFAULT_PORTAL_ORIGIN,
    selectors: ListingSelectors | None = None,
) -> ListingResult:
    """Extract tenders and pagination from listing HTML.
    
    Convenience wrapper around ListingExtractor.
    """
    return ListingExtractor(selectors=selectors, origin=origin).extract(html)
