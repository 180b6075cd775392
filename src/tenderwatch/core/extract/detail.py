"""
Detail page extraction.

The detail page is a set of titled cards. Each card is dispatched on its
title to a handler that collects label/value pairs into one of three
maps: organization, tender information and important dates. Document
links and the corrigendum badge are read from the whole page.

Duplicate labels within a section keep the last value seen, and each
document slot keeps the first link that fills it.
"""

from __future__ import annotations

from lxml.html import HtmlElement

from tenderwatch.core.config.models import DEFAULT_PORTAL_ORIGIN
from tenderwatch.core.config.selectors import DETAIL_SELECTORS, DetailSelectors
from tenderwatch.core.logging import get_logger
from .base import (
    InvalidTenderIdError,
    TenderDetails,
    TenderDocuments,
    parse_html,
    resolve_url,
    text_of,
)
from .documents import DocumentSlot, classify_document_link


logger = get_logger("extract.detail")


class DetailExtractor:
    """Extract a tender's full record from its detail page."""
    
    def __init__(
        self,
        selectors: DetailSelectors | None = None,
        origin: str = DEFAULT_PORTAL_ORIGIN,
    ):
        """Initialize extractor.
        
        Args:
            selectors: Detail selector table (default: portal markup)
            origin: Portal origin for resolving document links
        """
        self.selectors = selectors or DETAIL_SELECTORS
        self.origin = origin.rstrip("/")
    
    @property
    def name(self) -> str:
        return "detail"
    
    def extract(self, html: str | bytes | None, tender_no: str | None) -> TenderDetails:
        """Extract tender details from detail page HTML.
        
        Args:
            html: Raw detail page HTML
            tender_no: Identifier the page was requested with
            
        Returns:
            TenderDetails; all fields empty when the input is not markup
            
        Raises:
            InvalidTenderIdError: If tender_no is empty or missing
        """
        tender_no = validate_tender_no(tender_no)
        
        doc = parse_html(html)
        if doc is None:
            logger.warning(
                "Detail page is empty or not parseable",
                extra={"tender_no": tender_no},
            )
            return TenderDetails(tender_no=tender_no, tender_info=self._empty_notes())
        
        organization: dict[str, str] = {}
        tender_info: dict[str, str] = {}
        dates: dict[str, str] = {}
        notes = self._empty_notes()
        
        s = self.selectors
        for card in doc.cssselect(s.card):
            title = text_of(card.cssselect(s.card_title))
            
            if s.organization_section in title:
                self._collect_pairs(card, s.list_item, s.list_label, s.list_value, organization, strip_colon=True)
            elif s.tender_info_section in title:
                self._collect_pairs(card, s.group_item, s.group_label, s.group_value, tender_info)
                notes = self._extract_notes(card)
            elif s.dates_section in title:
                self._collect_pairs(card, s.group_item, s.group_label, s.group_value, dates)
            else:
                logger.debug("Ignoring section %r", title, extra={"tender_no": tender_no})
        
        # Note and Remarks are always present so the output shape is stable
        tender_info.update(notes)
        
        details = TenderDetails(
            tender_no=tender_no,
            title=text_of(doc.cssselect(s.title)),
            organization=organization,
            tender_info=tender_info,
            dates=dates,
            has_corrigendum=bool(doc.cssselect(s.corrigendum_badge)),
            documents=self._extract_documents(doc),
        )
        logger.debug(
            "Extracted %d organization, %d information and %d date fields, %d documents",
            len(organization),
            len(tender_info),
            len(dates),
            len(details.documents.to_dict()),
            extra={"tender_no": tender_no},
        )
        return details
    
    def _collect_pairs(
        self,
        card: HtmlElement,
        item_selector: str,
        label_selector: str,
        value_selector: str,
        target: dict[str, str],
        strip_colon: bool = False,
    ) -> None:
        """Record label/value pairs of a section; later labels overwrite earlier ones."""
        for item in card.cssselect(item_selector):
            label = text_of(item.cssselect(label_selector))
            value = text_of(item.cssselect(value_selector))
            if strip_colon and label.endswith(":"):
                label = label[:-1].rstrip()
            if label and value:
                target[label] = value
    
    def _empty_notes(self) -> dict[str, str]:
        return {self.selectors.note_label: "", self.selectors.remarks_label: ""}
    
    def _extract_notes(self, card: HtmlElement) -> dict[str, str]:
        """Text following the Note and Remarks headings of a section."""
        s = self.selectors
        notes = self._empty_notes()
        
        for label in (s.note_label, s.remarks_label):
            for heading in card.cssselect(s.note_heading):
                if heading.text_content().strip() != label:
                    continue
                sibling = heading.getnext()
                # Skip comments and processing instructions
                while sibling is not None and not isinstance(sibling.tag, str):
                    sibling = sibling.getnext()
                notes[label] = sibling.text_content().strip() if sibling is not None else ""
                break
        
        return notes
    
    def _extract_documents(self, doc: HtmlElement) -> TenderDocuments:
        """First tender document and first advertisement link on the page."""
        found: dict[DocumentSlot, str] = {}
        
        for anchor in doc.cssselect(self.selectors.document_link):
            href = anchor.get("href")
            slot = classify_document_link(
                anchor.text_content(), href, self.selectors.document_keywords
            )
            if slot is DocumentSlot.NONE or slot in found:
                continue
            url = resolve_url(href, self.origin)
            if url:
                found[slot] = url
        
        return TenderDocuments(
            tender_document=found.get(DocumentSlot.TENDER_DOCUMENT),
            advertisement=found.get(DocumentSlot.ADVERTISEMENT),
        )


def validate_tender_no(tender_no: str | None) -> str:
    """Return the trimmed tender identifier.
    
    Raises:
        InvalidTenderIdError: If the identifier is missing or blank
    """
    if not isinstance(tender_no, str) or not tender_no.strip():
        raise InvalidTenderIdError("Invalid tender ID")
    return tender_no.strip()


def parse_detail(
    html: str | bytes | None,
    tender_no: str | None,
    origin: str = DEFAULT_PORTAL_ORIGIN,
    selectors: DetailSelectors | None = None,
) -> TenderDetails:
    """Extract tender details from detail page HTML.
    
    Convenience wrapper around DetailExtractor.
    """
    return DetailExtractor(selectors=selectors, origin=origin).extract(html, tender_no)
