"""
Document link classification for tender detail pages.

Maps a download anchor to the named document slot it fills, using
case-insensitive keyword containment on the anchor's visible text.
"""

from __future__ import annotations

from enum import Enum

from ..config.selectors import DOCUMENT_KEYWORDS


class DocumentSlot(str, Enum):
    """Named document slots of a tender."""

    TENDER_DOCUMENT = "tenderDocument"
    ADVERTISEMENT = "advertisement"
    NONE = "none"


def classify_document_link(
    text: str | None,
    href: str | None,
    keywords: tuple[tuple[str, str], ...] = DOCUMENT_KEYWORDS,
) -> DocumentSlot:
    """Classify a download anchor by its visible text.
    
    Keywords are tried in order, so a text mentioning both a tender
    document and an advertisement is a tender document.
    
    Args:
        text: Visible anchor text
        href: Anchor href; anchors without one never fill a slot
        keywords: (slot, keyword) pairs in priority order
        
    Returns:
        Matching DocumentSlot, or DocumentSlot.NONE
    """
    if not href or not href.strip() or not text:
        return DocumentSlot.NONE
    
    lowered = text.strip().lower()
    for slot, keyword in keywords:
        if keyword.lower() in lowered:
            return DocumentSlot(slot)
    
    return DocumentSlot.NONE
