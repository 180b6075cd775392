"""Normalization of caller input into canonical portal queries."""

from .filters import (
    OPTION_LABELS,
    QUERY_KEYS,
    InvalidFilterError,
    ProcurementCategory,
    TenderFilters,
    TenderNature,
    TenderType,
    build_query,
    describe_options,
    normalize_filters,
)

__all__ = [
    "OPTION_LABELS",
    "QUERY_KEYS",
    "InvalidFilterError",
    "ProcurementCategory",
    "TenderFilters",
    "TenderNature",
    "TenderType",
    "build_query",
    "describe_options",
    "normalize_filters",
]
