"""Tests for document link classification."""

import pytest

from tenderwatch.core.extract import DocumentSlot, classify_document_link


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Download Tender Document", DocumentSlot.TENDER_DOCUMENT),
        ("TENDER DOCUMENTS (zip)", DocumentSlot.TENDER_DOCUMENT),
        ("View Advertisement", DocumentSlot.ADVERTISEMENT),
        ("advertisement", DocumentSlot.ADVERTISEMENT),
        ("Bid Evaluation Report", DocumentSlot.NONE),
        ("", DocumentSlot.NONE),
    ],
)
def test_classification_by_text(text, expected):
    assert classify_document_link(text, "/public/pdf?file=x.pdf") is expected


def test_tender_document_wins_tie():
    text = "Tender Document and Advertisement"
    assert classify_document_link(text, "/public/pdf?file=x.pdf") is DocumentSlot.TENDER_DOCUMENT


@pytest.mark.parametrize("href", [None, "", "   "])
def test_anchor_without_href_fills_no_slot(href):
    assert classify_document_link("Tender Document", href) is DocumentSlot.NONE


def test_slot_values_match_json_keys():
    assert DocumentSlot.TENDER_DOCUMENT.value == "tenderDocument"
    assert DocumentSlot.ADVERTISEMENT.value == "advertisement"
