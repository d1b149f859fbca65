"""Listing discovery orchestrator.

This module provides the ListingCollector class which runs every configured
listing source against one shared browser session, isolates failures per
source, and merges the results into a single list unique by listing URL.
"""

import asyncio
import logging
from typing import Callable, Iterable, Optional

from ..config import Settings, config
from ..models.listing import Listing
from .base import ListingSource
from .browser import BrowserSession
from .craigslist import CraigslistSource
from .errors import BrowserSessionError
from .kijiji import KijijiSource
from .spacelist import SpacelistSource

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], BrowserSession]


def deduplicate_listings(listings: Iterable[Listing]) -> list[Listing]:
    """Keep the first listing seen for each URL, preserving order."""
    unique: dict[str, Listing] = {}
    for listing in listings:
        if listing.listing_url not in unique:
            unique[listing.listing_url] = listing
    return list(unique.values())


class ListingCollector:
    """Runs listing sources and aggregates their results.

    Sources run in registration order. A source that raises contributes no
    listings and the remaining sources still run; only a browser session
    failure (or cancellation) aborts the whole collection.

    Example:
        collector = ListingCollector()
        listings = await collector.collect(postal_code="L5A 4E6")

        # Or with explicit sources
        collector = ListingCollector(sources=[SpacelistSource()])
    """

    def __init__(
        self,
        sources: Optional[list[ListingSource]] = None,
        settings: Optional[Settings] = None,
        session_factory: Optional[SessionFactory] = None,
    ):
        """Initialize the ListingCollector.

        Args:
            sources: Sources to run. Defaults to Kijiji, Spacelist and Craigslist.
            settings: Application settings (uses the global config if None)
            session_factory: Creates the browser session (a Playwright
                             Chromium session if None)
        """
        self.settings = settings or config
        self._session_factory = session_factory or self._default_session
        self._sources: list[ListingSource] = []

        if sources is None:
            sources = [
                KijijiSource(self.settings),
                SpacelistSource(self.settings),
                CraigslistSource(self.settings),
            ]
        for source in sources:
            self.add_source(source)

    def _default_session(self) -> BrowserSession:
        return BrowserSession(
            headless=self.settings.headless,
            user_agent=self.settings.user_agent,
            timeout_seconds=self.settings.page_timeout_seconds,
        )

    def add_source(self, source: ListingSource) -> None:
        """Register a source; it runs after those already registered."""
        if source not in self._sources:
            self._sources.append(source)
            logger.debug(f"Added source: {source.name}")

    def get_source(self, name: str) -> Optional[ListingSource]:
        """Get a registered source by name."""
        for source in self._sources:
            if source.name == name:
                return source
        return None

    @property
    def source_names(self) -> list[str]:
        return [s.name for s in self._sources]

    async def collect(self, postal_code: Optional[str] = None) -> list[Listing]:
        """Search every source and return the combined listings.

        Args:
            postal_code: Postal code to search near (defaults to settings)

        Returns:
            Listings unique by URL; the first source to find a URL keeps it.
            An empty list means nothing suitable was found.

        Raises:
            BrowserSessionError: If the shared browser fails
        """
        postal_code = postal_code or self.settings.postal_code
        logger.info(f"Starting search for photography studio space near {postal_code}")

        async with self._session_factory() as session:
            if self.settings.parallel_sources:
                per_source = await self._collect_parallel(session, postal_code)
            else:
                per_source = []
                for source in self._sources:
                    per_source.append(await self._collect_source(source, session, postal_code))

        all_listings = deduplicate_listings(
            listing for listings in per_source for listing in listings
        )
        logger.info(f"Found {len(all_listings)} total listings across all sources")
        return all_listings

    async def _collect_parallel(
        self, session: BrowserSession, postal_code: str
    ) -> list[list[Listing]]:
        """Run all sources at once, each in its own browser context."""

        async def run(source: ListingSource) -> list[Listing]:
            child = await session.spawn()
            async with child:
                return await self._collect_source(source, child, postal_code)

        tasks = [asyncio.ensure_future(run(s)) for s in self._sources]
        try:
            # gather keeps results in source order
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _collect_source(
        self, source: ListingSource, session: BrowserSession, postal_code: str
    ) -> list[Listing]:
        """Run one source, turning any failure but a session failure into no results."""
        try:
            listings = await source.collect(session, postal_code)
        except BrowserSessionError:
            raise
        except Exception as e:
            logger.warning(f"{source.name} search failed, continuing with others: {e}")
            return []

        logger.info(f"{source.name}: found {len(listings)} listings")
        return listings
