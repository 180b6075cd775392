"""
TenderWatch - Public procurement notice scraper and JSON republisher.

Fetches server-rendered tender listings and detail pages from the
PPRA e-procurement portal and turns them into structured JSON records.
"""

__version__ = "0.1.0"
__app_name__ = "tenderwatch"
