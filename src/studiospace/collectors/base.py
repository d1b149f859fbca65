"""Abstract base class for listing sources.

This module defines the ListingSource base class shared by every site
adapter (Kijiji, Spacelist, Craigslist). A source only declares what is
specific to its site: how to build search URLs, the page script that pulls
listing cards out of a results page, which filters apply, and the fallback
address. The search loop, classification, deduplication and detail
enrichment are shared.

Example usage:
    class MySource(ListingSource):
        name = "MySite"
        base_url = "https://www.mysite.example"
        card_script = "() => [...]"

        def build_queries(self, postal_code):
            return [SearchQuery(url=f"{self.base_url}/search?q=studio",
                                base_url=self.base_url)]

        def default_address(self, postal_code):
            return f"Near {postal_code}"
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..config import Settings, config
from ..filters import ClassificationPolicy, is_residential_listing, is_studio_suitable, load_policy
from ..models.listing import Listing, TransactionType
from .browser import BrowserPage, BrowserSession
from .detail import enrich_from_page
from .errors import BrowserSessionError, ExtractionError
from .normalizer import normalize_row, to_listing

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchQuery:
    """One search results page to visit."""

    url: str
    base_url: str
    transaction_type: TransactionType = TransactionType.RENT


class ListingSource(ABC):
    """Base class for a classified/commercial listing site.

    Attributes:
        name: Source name stored on every listing (e.g., "Kijiji")
        base_url: Origin relative card links are resolved against
        card_script: Page script returning a list of card field maps
        check_residential: Apply the residential filter to cards
        check_suitability: Apply the studio suitability filter to cards
        detail_limit: How many listings get detail page enrichment
        settle_ms: Wait after navigation before extracting
    """

    name: str
    base_url: str
    card_script: str
    check_residential: bool = True
    check_suitability: bool = True
    detail_limit: int = 8
    settle_ms: int = 3000
    detail_settle_ms: int = 2000

    def __init__(
        self,
        settings: Optional[Settings] = None,
        policy: Optional[ClassificationPolicy] = None,
    ):
        """Initialize the source.

        Args:
            settings: Application settings (uses the global config if None)
            policy: Classification keywords (loaded from settings.policy_file if None)
        """
        self.settings = settings or config
        self.policy = policy or load_policy(self.settings.policy_file)
        self.max_listings = self.settings.max_listings
        self.query_timeout_ms = self.settings.query_timeout_seconds * 1000
        self.detail_timeout_ms = self.settings.detail_timeout_seconds * 1000
        self.debug_dir: Optional[Path] = (
            self.settings.debug_dir if self.settings.debug_screenshots else None
        )

    @abstractmethod
    def build_queries(self, postal_code: str) -> list[SearchQuery]:
        """Return the search pages to visit, in order."""

    @abstractmethod
    def default_address(self, postal_code: str) -> str:
        """Address used when a card carries no location text."""

    async def collect(self, session: BrowserSession, postal_code: str) -> list[Listing]:
        """Search this source and enrich its first ``detail_limit`` listings.

        Args:
            session: Shared browser session
            postal_code: Target postal code

        Returns:
            Listings unique by URL, in discovery order

        Raises:
            BrowserSessionError: If the browser itself fails
        """
        logger.info(f"Searching {self.name}...")
        listings = await self.fetch_candidates(session, postal_code)

        for listing in listings[: self.detail_limit]:
            try:
                await self.enrich_listing(session, listing)
            except BrowserSessionError:
                raise
            except Exception as e:
                logger.debug(f"Could not scrape {self.name} detail for {listing.listing_url}: {e}")

        return listings

    async def fetch_candidates(
        self, session: BrowserSession, postal_code: str
    ) -> list[Listing]:
        """Visit every search page and turn accepted cards into listings.

        A failing search page is logged and skipped; the remaining pages are
        still visited.

        Args:
            session: Shared browser session
            postal_code: Target postal code

        Returns:
            Listings unique by URL, in discovery order
        """
        found: dict[str, Listing] = {}
        page = await session.new_page()
        try:
            for index, query in enumerate(self.build_queries(postal_code), start=1):
                try:
                    rows = await self._search_page(page, query, index)
                except BrowserSessionError:
                    raise
                except Exception as e:
                    logger.warning(f"{self.name} URL {query.url} failed: {e}")
                    continue

                logger.info(
                    f"{self.name} ({query.transaction_type.value}) returned {len(rows)} card results"
                )
                for row in rows[: self.max_listings]:
                    listing = self._accept(row, query, postal_code)
                    if listing and listing.listing_url not in found:
                        found[listing.listing_url] = listing
        finally:
            await page.close()

        return list(found.values())

    async def enrich_listing(self, session: BrowserSession, listing: Listing) -> Listing:
        """Add images, missing prices and a real address from the detail page."""
        page = await session.new_page()
        try:
            return await enrich_from_page(
                page,
                listing,
                timeout_ms=self.detail_timeout_ms,
                settle_ms=self.detail_settle_ms,
            )
        finally:
            await page.close()

    async def _search_page(
        self, page: BrowserPage, query: SearchQuery, index: int
    ) -> list[Any]:
        """Navigate to one results page and run the card script."""
        await page.navigate(query.url, timeout_ms=self.query_timeout_ms)
        await page.settle(self.settle_ms)

        if self.debug_dir is not None:
            slug = self.name.lower().replace(".", "_")
            await page.screenshot(self.debug_dir / f"{slug}_{index}.png")

        rows = await page.evaluate(self.card_script)
        if not isinstance(rows, list):
            raise ExtractionError(self.name, f"card script returned {type(rows).__name__}")
        return rows

    def _accept(
        self, row: Any, query: SearchQuery, postal_code: str
    ) -> Optional[Listing]:
        """Normalize and classify one card, or return None to drop it."""
        candidate = normalize_row(row, source=self.name, base_url=query.base_url)
        if candidate is None:
            return None

        if self.check_residential and is_residential_listing(
            candidate.title, candidate.url, self.policy
        ):
            logger.debug(f"Skipping residential listing: {candidate.title}")
            return None

        if self.check_suitability and not is_studio_suitable(candidate.title, self.policy):
            logger.debug(f"Skipping non-photography {self.name} listing: {candidate.title}")
            return None

        return to_listing(
            candidate,
            default_address=self.default_address(postal_code),
            transaction_type=query.transaction_type,
        )
