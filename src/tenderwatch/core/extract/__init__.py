"""Extraction of tender records from portal HTML."""

from .base import (
    InvalidTenderIdError,
    ListingResult,
    Pagination,
    Tender,
    TenderDetails,
    TenderDocuments,
)
from .detail import DetailExtractor, parse_detail, validate_tender_no
from .documents import DocumentSlot, classify_document_link
from .listing import ListingExtractor, parse_listing

__all__ = [
    "InvalidTenderIdError",
    "ListingResult",
    "Pagination",
    "Tender",
    "TenderDetails",
    "TenderDocuments",
    "ListingExtractor",
    "DetailExtractor",
    "DocumentSlot",
    "classify_document_link",
    "parse_listing",
    "parse_detail",
    "validate_tender_no",
]
