"""Tests for detail page extraction."""

import json

import pytest

from tenderwatch.core.config import DetailSelectors
from tenderwatch.core.extract import DetailExtractor, InvalidTenderIdError, parse_detail

from .pages import ORIGIN, detail_page


def test_extracts_sections():
    details = parse_detail(detail_page(), "TS123E")

    assert details.tender_no == "TS123E"
    assert details.title == "Supply of Hospital Beds"
    assert details.organization == {
        "Name": "Health Department Punjab",
        "City": "Lahore",
    }
    assert details.tender_info["Tender Type"] == "Open Competitive Bidding"
    assert details.tender_info["Procurement Category"] == "Goods"
    assert details.dates == {
        "Published": "01-05-2025",
        "Closing": "20-05-2025 11:00 AM",
    }


def test_unknown_sections_are_ignored():
    details = parse_detail(detail_page(), "TS123E")
    all_labels = {**details.organization, **details.tender_info, **details.dates}
    assert "Officer" not in all_labels


def test_pairs_with_empty_label_or_value_are_skipped():
    details = parse_detail(detail_page(), "TS123E")
    assert "Phone" not in details.organization
    assert "orphan value" not in details.tender_info.values()


def test_only_organization_labels_lose_their_colon():
    items = '<li class="list-group-item"><span class="detail-label">Reference:</span><span class="flex-grow-1">R-1</span></li>'
    details = parse_detail(detail_page(extra_info_items=items), "TS123E")
    assert details.tender_info["Reference:"] == "R-1"
    assert "Name" in details.organization


def test_duplicate_label_keeps_last_value():
    items = '<li class="list-group-item"><span class="detail-label">Tender Type</span><span class="flex-grow-1">Two Stage</span></li>'
    details = parse_detail(detail_page(extra_info_items=items), "TS123E")
    assert details.tender_info["Tender Type"] == "Two Stage"


def test_note_and_remarks():
    details = parse_detail(detail_page(), "TS123E")
    assert details.tender_info["Note"] == "Bidders must submit original docs"
    assert details.tender_info["Remarks"] == "Bid security 2%"


def test_missing_note_and_remarks_are_empty():
    details = parse_detail(detail_page(note=None, remarks=None), "TS123E")
    assert details.tender_info["Note"] == ""
    assert details.tender_info["Remarks"] == ""


def test_note_heading_must_match_exactly():
    html = detail_page(note=None).replace("<h6>Remarks</h6>", "<h6>Remarks and Notes</h6>")
    details = parse_detail(html, "TS123E")
    assert details.tender_info["Note"] == ""
    assert details.tender_info["Remarks"] == ""


def test_comments_between_heading_and_value_are_skipped():
    html = detail_page().replace("<h6>Note</h6>\n", "<h6>Note</h6>\n<!-- value follows -->")
    assert "<!-- value follows --><p>" in html
    details = parse_detail(html, "TS123E")
    assert details.tender_info["Note"] == "Bidders must submit original docs"


def test_note_keys_present_without_tender_information_section():
    html = "<html><body><h1>Title</h1></body></html>"
    details = parse_detail(html, "TS123E")
    assert details.tender_info == {"Note": "", "Remarks": ""}


def test_documents_are_absolute_urls():
    details = parse_detail(detail_page(), "TS123E")
    assert details.documents.tender_document == f"{ORIGIN}/public/pdf?file=tenders/TS123E.pdf"
    assert details.documents.advertisement == f"{ORIGIN}/public/pdf?file=ads/TS123E.jpg"


def test_first_document_link_wins():
    documents = """
        <a href="/public/pdf?file=first.pdf">Tender Document</a>
        <a href="/public/pdf?file=second.pdf">Tender Document (revised)</a>
        <a href="/public/pdf?file=ad1.pdf">ADVERTISEMENT</a>
        <a href="/public/pdf?file=ad2.pdf">Advertisement 2</a>"""
    details = parse_detail(detail_page(documents=documents), "TS123E")
    assert details.documents.tender_document == f"{ORIGIN}/public/pdf?file=first.pdf"
    assert details.documents.advertisement == f"{ORIGIN}/public/pdf?file=ad1.pdf"


def test_document_keywords_come_from_selectors():
    documents = """
        <a href="/public/pdf?file=bidding.pdf">Bidding Documents</a>
        <a href="/public/pdf?file=ad.pdf">Advertisement</a>"""
    selectors = DetailSelectors(document_keywords=[["tenderDocument", "bidding documents"]])
    details = parse_detail(detail_page(documents=documents), "TS123E", selectors=selectors)
    assert details.documents.tender_document == f"{ORIGIN}/public/pdf?file=bidding.pdf"
    assert details.documents.advertisement is None


def test_links_outside_pdf_path_are_not_documents():
    documents = '<a href="/files/tender.pdf">Tender Document</a>'
    details = parse_detail(detail_page(documents=documents), "TS123E")
    assert details.documents.tender_document is None
    assert details.to_dict()["documents"] == {}


def test_corrigendum_flag():
    assert parse_detail(detail_page(corrigendum=True), "TS123E").has_corrigendum is True
    assert parse_detail(detail_page(corrigendum=False), "TS123E").has_corrigendum is False


@pytest.mark.parametrize("tender_no", ["", "   ", None])
def test_invalid_tender_id(tender_no):
    with pytest.raises(InvalidTenderIdError):
        parse_detail(detail_page(), tender_no)


def test_tender_id_is_trimmed():
    assert parse_detail(detail_page(), "  TS123E ").tender_no == "TS123E"


def test_empty_input_returns_empty_details():
    details = parse_detail("", "TS123E")
    assert details.to_dict() == {
        "tenderNo": "TS123E",
        "title": "",
        "organization": {},
        "tenderInfo": {"Note": "", "Remarks": ""},
        "dates": {},
        "hasCorrigendum": False,
        "documents": {},
    }


def test_empty_input_still_checks_identifier():
    with pytest.raises(InvalidTenderIdError):
        parse_detail("", "")


def test_document_with_encoding_declaration():
    html = '<?xml version="1.0" encoding="utf-8"?>\n' + detail_page(title="Größe")
    assert parse_detail(html, "TS123E").title == "Größe"


def test_parsing_is_deterministic():
    html = detail_page(corrigendum=True)
    extractor = DetailExtractor()
    first = json.dumps(extractor.extract(html, "TS123E").to_dict())
    second = json.dumps(extractor.extract(html, "TS123E").to_dict())
    assert first == second
