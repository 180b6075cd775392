"""Tests for listing filter normalization."""

import pytest
from pydantic import ValidationError

from tenderwatch.core.normalize import (
    InvalidFilterError,
    ProcurementCategory,
    TenderNature,
    TenderType,
    build_query,
    describe_options,
    normalize_filters,
)


EMPTY_QUERY = (
    "page=1&keyword=&tender_no=&closing_date=&tender_type="
    "&procurement_category=&tender_nature="
)


def test_defaults_populate_every_option():
    filters = normalize_filters()
    assert filters.to_params() == {
        "page": "1",
        "keyword": "",
        "tender_no": "",
        "closing_date": "",
        "tender_type": "",
        "procurement_category": "",
        "tender_nature": "",
    }
    assert filters.query_string == EMPTY_QUERY


def test_equal_intents_produce_identical_queries():
    variants = [
        {"page": 2, "tender_type": 3, "keyword": " road repair "},
        {"keyword": "road repair", "tender_type": "RFP", "page": "2", "tender_nature": None},
        {"tender_type": TenderType.RFP, "page": "02", "keyword": "road repair", "unknown": "x"},
    ]
    queries = {build_query(v) for v in variants}
    assert queries == {
        "page=2&keyword=road+repair&tender_no=&closing_date=&tender_type=3"
        "&procurement_category=&tender_nature="
    }


def test_same_input_same_output():
    config = {"keyword": "beds", "procurement_category": "goods", "tender_nature": "0"}
    assert build_query(config) == build_query(dict(config))


@pytest.mark.parametrize(
    "field,value,expected",
    [
        ("tender_type", "pq", "2"),
        ("tender_type", "Pre-qualification", "2"),
        ("tender_type", "eoi", "4"),
        ("tender_type", "notice", "1"),
        ("procurement_category", "Works", "2"),
        ("procurement_category", "non-consultancy", "4"),
        ("procurement_category", ProcurementCategory.CONSULTANCY, "3"),
        ("tender_nature", "international", "1"),
        ("tender_nature", 0, "0"),
        ("tender_nature", "", ""),
    ],
)
def test_enumerated_options(field, value, expected):
    assert getattr(normalize_filters({field: value}), field) == expected


@pytest.mark.parametrize(
    "config",
    [
        {"tender_type": "9"},
        {"procurement_category": "food"},
        {"tender_nature": "2"},
        {"page": "0"},
        {"page": "-1"},
        {"page": "two"},
    ],
)
def test_invalid_values_raise(config):
    with pytest.raises(InvalidFilterError):
        normalize_filters(config)


def test_empty_page_defaults_to_first():
    assert normalize_filters(page="").page == "1"
    assert normalize_filters(page=None).page == "1"


def test_overrides_take_precedence():
    filters = normalize_filters({"page": "4", "keyword": "a"}, keyword="b")
    assert filters.page == "4"
    assert filters.keyword == "b"


def test_accepts_existing_filters():
    original = normalize_filters(keyword="beds")
    assert normalize_filters(original) == original
    assert normalize_filters(original, page=3).page == "3"


def test_describe_options_lists_codes_and_labels():
    assert describe_options(TenderNature) == "0=Local, 1=International"
    assert describe_options(TenderType).startswith("1=Tender Notice, 2=Pre-qualification (PQ)")


def test_filters_are_immutable():
    filters = normalize_filters()
    with pytest.raises(ValidationError):
        filters.page = "5"
