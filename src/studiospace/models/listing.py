"""Listing data models."""

from enum import Enum
from urllib.parse import urlsplit

from pydantic import BaseModel, Field

# Maximum remote images kept per listing
MAX_IMAGES = 8


def is_http_url(url: str | None) -> bool:
    """Return True for absolute http:// or https:// URLs with a host."""
    if not url:
        return False
    try:
        parts = urlsplit(url.strip())
        # Raises ValueError for a malformed port
        parts.port
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


class TransactionType(str, Enum):
    """Kind of deal a search query or price refers to."""

    RENT = "rent"
    SALE = "sale"


class ListingCandidate(BaseModel):
    """Raw card extracted from a search results page, before classification."""

    title: str = Field(..., description="Card title text")
    price_text: str = Field(default="", description="Price as displayed on the card")
    location_text: str = Field(default="", description="Location as displayed on the card")
    url: str = Field(..., description="Absolute detail page URL")
    image_url: str = Field(default="", description="Thumbnail image URL")
    source: str = Field(..., description="Source name (Kijiji, Craigslist, etc.)")

    model_config = {
        "str_strip_whitespace": True,
    }


class Listing(BaseModel):
    """Commercial space listing returned by the discovery pipeline.

    Created from a ListingCandidate that passed classification. Only the
    detail enrichment step adds images, fills empty costs, or refines a
    placeholder address; the image downloader fills ``local_image_paths``.
    """

    address: str = Field(default="", description="Free text address, best effort")
    rental_cost: str | None = Field(default=None, description="Rent as displayed")
    purchase_cost: str | None = Field(default=None, description="Sale price as displayed")
    listing_url: str = Field(..., min_length=1, description="Detail page URL, unique per run")
    source: str = Field(..., description="Source name")
    description: str = Field(default="", description="Listing title")
    image_urls: list[str] = Field(
        default_factory=list, description="Remote image URLs in discovery order"
    )
    local_image_paths: list[str] = Field(
        default_factory=list, description="Downloaded image paths relative to the output dir"
    )
    address_is_placeholder: bool = Field(
        default=False,
        exclude=True,
        description="True when the address is the source's fallback text",
    )

    model_config = {
        "validate_assignment": True,
    }

    def add_image_url(self, url: str | None) -> bool:
        """Append an image URL if absolute, new, and under the cap.

        Returns:
            True if the URL was added
        """
        if not is_http_url(url):
            return False
        url = url.strip()
        if url in self.image_urls or len(self.image_urls) >= MAX_IMAGES:
            return False
        self.image_urls.append(url)
        return True
