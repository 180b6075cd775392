"""
Extraction data structures and shared HTML helpers.

Records produced by the extractors are immutable and serialize to the
camelCase JSON shapes consumed by the client UI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable
from urllib.parse import urljoin

from lxml import etree
from lxml import html as lxml_html
from lxml.html import HtmlElement


class InvalidTenderIdError(ValueError):
    """Detail extraction requested without a usable tender identifier."""


@dataclass(frozen=True)
class Tender:
    """A single row of the tender listing."""
    
    tender_no: str
    title: str = ""
    category: str = ""
    organization: str = ""
    location: str = ""
    type: str = ""
    published_date: str = ""
    closing_date: str = ""
    closing_time: str = ""
    details_link: str | None = None  # Absolute URL
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to the listing JSON shape."""
        return {
            "tenderNo": self.tender_no,
            "title": self.title,
            "category": self.category,
            "organization": self.organization,
            "location": self.location,
            "type": self.type,
            "publishedDate": self.published_date,
            "closingDate": self.closing_date,
            "closingTime": self.closing_time,
            "detailsLink": self.details_link,
        }


@dataclass(frozen=True)
class Pagination:
    """Pagination state of a listing page."""
    
    current_page: int = 1
    has_more: bool = False
    
    def to_dict(self) -> dict[str, Any]:
        return {"currentPage": self.current_page, "hasMore": self.has_more}


@dataclass(frozen=True)
class ListingResult:
    """Tenders of one listing page, in document order."""
    
    tenders: tuple[Tender, ...] = ()
    pagination: Pagination = field(default_factory=Pagination)
    
    def to_dict(self) -> dict[str, Any]:
        return {
            "tenders": [tender.to_dict() for tender in self.tenders],
            "pagination": self.pagination.to_dict(),
        }


@dataclass(frozen=True)
class TenderDocuments:
    """Downloadable documents attached to a tender."""
    
    tender_document: str | None = None
    advertisement: str | None = None
    
    def to_dict(self) -> dict[str, str]:
        """Only documents that were found are included."""
        data = {}
        if self.tender_document:
            data["tenderDocument"] = self.tender_document
        if self.advertisement:
            data["advertisement"] = self.advertisement
        return data


@dataclass(frozen=True)
class TenderDetails:
    """Everything the detail page says about one tender."""
    
    tender_no: str
    title: str = ""
    organization: dict[str, str] = field(default_factory=dict)
    tender_info: dict[str, str] = field(default_factory=dict)
    dates: dict[str, str] = field(default_factory=dict)
    has_corrigendum: bool = False
    documents: TenderDocuments = field(default_factory=TenderDocuments)
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to the detail JSON shape."""
        return {
            "tenderNo": self.tender_no,
            "title": self.title,
            "organization": dict(self.organization),
            "tenderInfo": dict(self.tender_info),
            "dates": dict(self.dates),
            "hasCorrigendum": self.has_corrigendum,
            "documents": self.documents.to_dict(),
        }


# =============================================================================
# HTML Helpers
# =============================================================================


def parse_html(html: str | bytes | None) -> HtmlElement | None:
    """Parse an HTML document.
    
    Returns:
        Root element, or None when the input is empty or not markup at all
    """
    if html is None:
        return None
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")
    if not html.strip():
        return None
    
    try:
        return lxml_html.fromstring(html)
    except ValueError:
        # str input with an encoding declaration has to go through bytes
        pass
    except (etree.ParserError, etree.XMLSyntaxError):
        return None

    try:
        return lxml_html.fromstring(html.encode("utf-8"), parser=lxml_html.HTMLParser(encoding="utf-8"))
    except (etree.ParserError, etree.XMLSyntaxError, ValueError):
        return None


def text_of(elements: Iterable[HtmlElement]) -> str:
    """Concatenated text of all elements, trimmed."""
    return "".join(element.text_content() for element in elements).strip()


def first_text(elements: list[HtmlElement]) -> str:
    """Trimmed text of the first element, or empty string."""
    if not elements:
        return ""
    return elements[0].text_content().strip()


def resolve_url(href: str | None, origin: str) -> str | None:
    """Resolve an href against the portal origin.
    
    Args:
        href: Raw href attribute value
        origin: Portal origin (scheme and host)
        
    Returns:
        Absolute URL or None if href is empty
    """
    if not href or not href.strip():
        return None
    href = href.strip()
    if href.startswith(("http://", "https://")):
        return href
    return urljoin(origin + "/", href)
