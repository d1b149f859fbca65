"""Listing discovery framework.

This module collects commercial space listings from several classified and
commercial real estate sites through a shared headless browser.

Main Components:
    - ListingSource: Base class for all site adapters
    - ListingCollector: Orchestrator that runs sources and merges results
    - KijijiSource, SpacelistSource, CraigslistSource: Site adapters
    - BrowserSession: Playwright Chromium session shared by the sources

Example usage:
    from studiospace.collectors import ListingCollector

    collector = ListingCollector()
    listings = await collector.collect(postal_code="L5A 4E6")
"""

from .base import ListingSource, SearchQuery
from .browser import BrowserPage, BrowserSession
from .collector import ListingCollector, deduplicate_listings
from .craigslist import CraigslistSource
from .detail import DetailPage, apply_detail, enrich_from_page
from .errors import BrowserSessionError, DataSourceError, ExtractionError, NavigationError
from .kijiji import KijijiSource
from .normalizer import normalize_row, to_listing
from .spacelist import SpacelistSource

__all__ = [
    "BrowserPage",
    "BrowserSession",
    "BrowserSessionError",
    "CraigslistSource",
    "DataSourceError",
    "DetailPage",
    "ExtractionError",
    "KijijiSource",
    "ListingCollector",
    "ListingSource",
    "NavigationError",
    "SearchQuery",
    "SpacelistSource",
    "apply_detail",
    "deduplicate_listings",
    "enrich_from_page",
    "normalize_row",
    "to_listing",
]
