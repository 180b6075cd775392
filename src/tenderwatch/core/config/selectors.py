"""
Selector table for the PPRA e-procurement portal markup.

Every structural assumption the extractors make about the portal's
listing and detail pages lives here: CSS selectors, column positions,
href markers and the text keywords used to classify document links.
When the portal changes its markup, this is the one place to edit.
The defaults can also be overridden per portal from YAML.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Listing Page
# =============================================================================


class ListingSelectors(BaseModel):
    """Selectors for the active-tenders listing table."""

    model_config = ConfigDict(frozen=True)

    rows: str = Field(
        default="table tbody tr",
        description="Rows of the listing table",
    )
    rows_fallback: str = Field(
        default="table tr",
        description="Rows when the table has no explicit tbody",
    )
    tender_no: str = Field(
        default=".tender-no strong",
        description="Emphasized tender number inside the tender-number cell",
    )
    title: str = Field(
        default="td:nth-child(3) strong",
        description="Title column; the first match is used",
    )
    category: str = Field(
        default=".badge",
        description="Badge-style category node; the first match is used",
    )
    organization: str = Field(
        default=".tender-org",
        description="Procuring organization node",
    )
    location_icon: str = Field(
        default="i.ri-map-pin-line",
        description="Map-pin icon whose parent holds the location text",
    )
    tender_type: str = Field(
        default=".tender-badge",
        description="Tender type badge",
    )
    published_date: str = Field(
        default="td:nth-child(5)",
        description="Published date column",
    )
    closing_date: str = Field(
        default="td:nth-child(6) strong",
        description="Closing date inside the closing column",
    )
    closing_time: str = Field(
        default="td:nth-child(6) small",
        description="Closing time inside the closing column",
    )
    details_link: str = Field(
        default='a[href*="tender-details"]',
        description="Anchor pointing at the tender detail page",
    )
    active_page: str = Field(
        default=".pagination-custom .active",
        description="Active page control of the pagination bar",
    )
    pagination_links: str = Field(
        default=".pagination-custom a",
        description="Anchors of the pagination bar",
    )
    next_label: str = Field(
        default="Next",
        description="Text identifying the next-page control",
    )


# =============================================================================
# Detail Page
# =============================================================================

# Document slots a download link can fill
DOCUMENT_SLOTS: tuple[str, ...] = ("tenderDocument", "advertisement")

# Checked in order; the first slot whose keyword occurs in the anchor text wins
DOCUMENT_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("tenderDocument", "tender document"),
    ("advertisement", "advertisement"),
)


class DetailSelectors(BaseModel):
    """Selectors for a single tender's detail page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default="h1", description="Page heading with the tender title")
    card: str = Field(default=".detail-card", description="Titled section card")
    card_title: str = Field(default=".section-title", description="Title node of a card")

    # Section titles, matched by substring containment
    organization_section: str = Field(default="Organization")
    tender_info_section: str = Field(default="Tender Information")
    dates_section: str = Field(default="Important Dates")

    # Plain list items (organization section)
    list_item: str = Field(default="li")
    list_label: str = Field(default=".detail-label")
    list_value: str = Field(default=".detail-value")

    # List-group items (tender information and dates sections)
    group_item: str = Field(default=".list-group-item")
    group_label: str = Field(default=".detail-label")
    group_value: str = Field(default=".flex-grow-1")

    # Headings whose next sibling holds free text in the tender information section
    note_heading: str = Field(default="h6")
    note_label: str = Field(default="Note")
    remarks_label: str = Field(default="Remarks")

    document_link: str = Field(
        default='a[href*="/pdf?file="]',
        description="PDF download anchors",
    )
    corrigendum_badge: str = Field(
        default=".badge-corrigendum",
        description="Marker present when the tender carries a corrigendum",
    )
    document_keywords: tuple[tuple[str, str], ...] = Field(
        default=DOCUMENT_KEYWORDS,
        description="(slot, keyword) pairs used to classify document links",
    )

    @field_validator("document_keywords")
    @classmethod
    def slots_are_known(cls, v: tuple[tuple[str, str], ...]) -> tuple[tuple[str, str], ...]:
        for slot, keyword in v:
            if slot not in DOCUMENT_SLOTS:
                raise ValueError(f"Unknown document slot: {slot}")
            if not keyword.strip():
                raise ValueError(f"Empty keyword for document slot: {slot}")
        return v


LISTING_SELECTORS = ListingSelectors()
DETAIL_SELECTORS = DetailSelectors()
