"""
Listing filter normalization.

Canonicalizes loose filter input (missing keys, None, integers, enum
names, stray whitespace) into a fully populated query so that equal
filter intents always produce the same query string.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


# =============================================================================
# Enumerated Options
# =============================================================================


class TenderType(str, Enum):
    """Kind of procurement notice."""

    NOTICE = "1"
    PRE_QUALIFICATION = "2"
    RFP = "3"
    EOI = "4"


class ProcurementCategory(str, Enum):
    """What is being procured."""

    GOODS = "1"
    WORKS = "2"
    CONSULTANCY = "3"
    NON_CONSULTANCY = "4"


class TenderNature(str, Enum):
    """Whether bidding is restricted to local bidders."""

    LOCAL = "0"
    INTERNATIONAL = "1"


# Human-readable labels, as the portal shows them
OPTION_LABELS: dict[Enum, str] = {
    TenderType.NOTICE: "Tender Notice",
    TenderType.PRE_QUALIFICATION: "Pre-qualification (PQ)",
    TenderType.RFP: "Request for Proposal (RFP)",
    TenderType.EOI: "Expression of Interest (EOI)",
    ProcurementCategory.GOODS: "Goods",
    ProcurementCategory.WORKS: "Works",
    ProcurementCategory.CONSULTANCY: "Consultancy Services",
    ProcurementCategory.NON_CONSULTANCY: "Non-consultancy Services",
    TenderNature.LOCAL: "Local",
    TenderNature.INTERNATIONAL: "International",
}


def describe_options(option_type: type[Enum]) -> str:
    """One-line "code=label" listing of an option set, for help texts."""
    return ", ".join(f"{option.value}={OPTION_LABELS[option]}" for option in option_type)


# Alternate spellings accepted for enum names
OPTION_ALIASES: dict[str, str] = {
    "TENDER_NOTICE": "NOTICE",
    "PQ": "PRE_QUALIFICATION",
    "PREQUALIFICATION": "PRE_QUALIFICATION",
    "REQUEST_FOR_PROPOSAL": "RFP",
    "EXPRESSION_OF_INTEREST": "EOI",
    "CONSULTANCY_SERVICES": "CONSULTANCY",
    "NON_CONSULTANCY_SERVICES": "NON_CONSULTANCY",
    "NONCONSULTANCY": "NON_CONSULTANCY",
}

# Canonical key order of the listing query
QUERY_KEYS: tuple[str, ...] = (
    "page",
    "keyword",
    "tender_no",
    "closing_date",
    "tender_type",
    "procurement_category",
    "tender_nature",
)


class InvalidFilterError(ValueError):
    """A filter value cannot be mapped to a listing query parameter."""


def _match_option(enum_cls: type[Enum], value: str) -> str:
    """Map a code or member name to the option's code.
    
    Empty string means "all" and is kept as is.
    """
    if value == "":
        return ""
    
    codes = {member.value for member in enum_cls}
    if value in codes:
        return value
    
    key = value.upper().replace("-", "_").replace(" ", "_")
    key = OPTION_ALIASES.get(key, key)
    if key in enum_cls.__members__:
        return enum_cls.__members__[key].value
    
    allowed = ", ".join(sorted(codes))
    raise ValueError(f"unknown option {value!r} (expected one of {allowed} or a name)")


# =============================================================================
# Filter Model
# =============================================================================


class TenderFilters(BaseModel):
    """Canonical listing filters; every option is always present."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    page: str = "1"
    keyword: str = ""
    tender_no: str = ""
    closing_date: str = ""
    tender_type: str = ""
    procurement_category: str = ""
    tender_nature: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> str:
        """None means unset; numbers and enums become their text."""
        if v is None:
            return ""
        if isinstance(v, Enum):
            v = v.value
        if isinstance(v, bool):
            raise ValueError("booleans are not valid filter values")
        return str(v).strip()

    @field_validator("page")
    @classmethod
    def page_is_positive(cls, v: str) -> str:
        if v == "":
            return "1"
        if not v.isdigit() or int(v) < 1:
            raise ValueError(f"page must be a positive integer, got {v!r}")
        return str(int(v))

    @field_validator("tender_type")
    @classmethod
    def tender_type_is_known(cls, v: str) -> str:
        return _match_option(TenderType, v)

    @field_validator("procurement_category")
    @classmethod
    def category_is_known(cls, v: str) -> str:
        return _match_option(ProcurementCategory, v)

    @field_validator("tender_nature")
    @classmethod
    def nature_is_known(cls, v: str) -> str:
        return _match_option(TenderNature, v)

    def to_params(self) -> dict[str, str]:
        """Query parameters in canonical order."""
        return {key: getattr(self, key) for key in QUERY_KEYS}

    @property
    def query_string(self) -> str:
        return urlencode(self.to_params())


def normalize_filters(
    filters: Mapping[str, Any] | TenderFilters | None = None,
    **overrides: Any,
) -> TenderFilters:
    """Canonicalize loose filter input.
    
    Args:
        filters: Mapping of filter options (unknown keys are ignored)
        **overrides: Options that take precedence over the mapping
        
    Returns:
        Fully populated TenderFilters
        
    Raises:
        InvalidFilterError: If a value cannot be mapped to a query parameter
    """
    if isinstance(filters, TenderFilters):
        data: dict[str, Any] = filters.to_params()
    else:
        data = dict(filters or {})
    data.update(overrides)
    
    try:
        return TenderFilters.model_validate(data)
    except ValidationError as e:
        messages = []
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            messages.append(f"{loc}: {error['msg']}")
        raise InvalidFilterError("; ".join(messages)) from e


def build_query(filters: Mapping[str, Any] | TenderFilters | None = None, **overrides: Any) -> str:
    """Canonical, URL-encoded listing query string."""
    return normalize_filters(filters, **overrides).query_string
