"""Pytest fixtures and test utilities.

FakeSession/FakePage stand in for the Playwright-backed BrowserSession: each
URL maps to the payload the page script would return, or to an exception
raised on navigation.
"""

from pathlib import Path
from typing import Any, Optional

import pytest

from studiospace.collectors import ListingSource, NavigationError, SearchQuery
from studiospace.config import Settings
from studiospace.models.listing import Listing


class FakePage:
    """In-memory browser tab."""

    def __init__(self, session: "FakeSession"):
        self.session = session
        self.url = ""
        self.closed = False

    async def navigate(self, url: str, timeout_ms: int) -> None:
        self.session.visited.append(url)
        payload = self.session.pages.get(url)
        if isinstance(payload, Exception):
            raise payload
        self.url = url

    async def settle(self, ms: int) -> None:
        pass

    async def evaluate(self, script: str) -> Any:
        payload = self.session.pages.get(self.url, self.session.default)
        if isinstance(payload, Exception):
            raise payload
        return payload

    async def screenshot(self, path: Path) -> None:
        self.session.screenshots.append(path)

    async def close(self) -> None:
        self.closed = True


class FakeSession:
    """In-memory browser session."""

    def __init__(self, pages: Optional[dict[str, Any]] = None, default: Any = None):
        self.pages = pages or {}
        self.default = [] if default is None else default
        self.visited: list[str] = []
        self.screenshots: list[Path] = []
        self.spawned = 0
        self.entered = False
        self.closed = False

    async def new_page(self) -> FakePage:
        return FakePage(self)

    async def spawn(self) -> "FakeSession":
        self.spawned += 1
        return self

    def is_connected(self) -> bool:
        return not self.closed

    async def __aenter__(self) -> "FakeSession":
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        pass


class StubSource(ListingSource):
    """Source with fixed search URLs under https://stub.example."""

    name = "Stub"
    base_url = "https://stub.example"
    card_script = "() => []"
    check_residential = True
    check_suitability = True
    detail_limit = 2
    settle_ms = 0
    detail_settle_ms = 0

    def __init__(self, settings: Settings, urls: list[str], name: str = "Stub"):
        super().__init__(settings)
        self.name = name
        self.urls = urls

    def build_queries(self, postal_code: str) -> list[SearchQuery]:
        return [SearchQuery(url=u, base_url=self.base_url) for u in self.urls]

    def default_address(self, postal_code: str) -> str:
        return f"Near {postal_code}"


class BrokenSource(StubSource):
    """Source whose whole search blows up."""

    def __init__(self, settings: Settings, error: Exception, name: str = "Broken"):
        super().__init__(settings, urls=[], name=name)
        self.error = error

    def build_queries(self, postal_code: str) -> list[SearchQuery]:
        raise self.error


def card(title: str, href: str, price: str = "", location: str = "", image: str = "") -> dict:
    """Card field map in the short-key form the page scripts return."""
    return {"t": title, "u": href, "p": price, "l": location, "i": image}


@pytest.fixture
def settings() -> Settings:
    """Settings independent of the environment and any .env file."""
    return Settings(_env_file=None, max_listings=20, debug_screenshots=False)


@pytest.fixture
def unreachable() -> NavigationError:
    """Navigation failure for a search page."""
    return NavigationError("https://stub.example/down", "Timed out after 20000ms")


@pytest.fixture
def sample_listing() -> Listing:
    """Listing as created from a card with no location text."""
    return Listing(
        address="Near L5A 4E6",
        address_is_placeholder=True,
        rental_cost="$2,000/month",
        listing_url="https://stub.example/listing/1",
        source="Stub",
        description="Bright Photography Studio Warehouse Unit",
        image_urls=["https://img.stub.example/thumb.jpg"],
    )
