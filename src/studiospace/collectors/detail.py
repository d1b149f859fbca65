"""Listing detail page enrichment.

Search result cards carry one thumbnail at best and often no price or
address. The detail page script collects gallery photos, a prefix of the
page text (scanned for prices) and the text of an address-like element.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..filters import extract_address, extract_price
from ..models.listing import MAX_IMAGES, Listing, TransactionType, is_http_url

if TYPE_CHECKING:
    from .browser import BrowserPage

logger = logging.getLogger(__name__)

MAX_ADDRESS_LENGTH = 150
BODY_TEXT_CHARS = 5000

DETAIL_SCRIPT = """() => {
    const images = [];
    const blocked = ['logo', 'icon', 'favicon', 'pixel', 'tracking',
                     'google', 'facebook', 'analytics', 'badge'];
    for (const img of document.querySelectorAll('img[src*="http"]')) {
        const src = img.getAttribute('src') || '';
        const w = img.naturalWidth || img.width || 0;
        const h = img.naturalHeight || img.height || 0;
        if (w > 80 && h > 80 && src.startsWith('http')) {
            const lower = src.toLowerCase();
            if (!blocked.some(k => lower.includes(k)) && !images.includes(src)) {
                images.push(src);
            }
        }
    }
    const galleries = document.querySelectorAll(
        '[class*="gallery"] img, [class*="photo"] img, [class*="image"] img, ' +
        '[class*="slider"] img, [class*="carousel"] img, [class*="hero"] img');
    for (const img of galleries) {
        const src = img.getAttribute('src') || img.getAttribute('data-src') || '';
        if (src.startsWith('http') && !images.includes(src)) images.push(src);
    }
    const bodyText = document.body ? document.body.innerText.substring(0, %(chars)d) : '';
    const addrEl = document.querySelector(
        '[class*="address"], [itemprop="address"], [data-testid*="address"], address, [class*="Address"]');
    const address = addrEl ? (addrEl.innerText || '').trim() : '';
    return { images: images.slice(0, %(max_images)d), bodyText: bodyText, address: address };
}""" % {"chars": BODY_TEXT_CHARS, "max_images": MAX_IMAGES}


@dataclass
class DetailPage:
    """Data pulled from a listing detail page."""

    images: list[str] = field(default_factory=list)
    body_text: str = ""
    address: str = ""

    @classmethod
    def from_payload(cls, payload: Any) -> "DetailPage":
        """Build from the detail script result, ignoring malformed parts."""
        if not isinstance(payload, dict):
            return cls()

        images = payload.get("images")
        if not isinstance(images, list):
            images = []
        body = payload.get("bodyText")
        address = payload.get("address")
        return cls(
            images=[img for img in images if isinstance(img, str)],
            body_text=body if isinstance(body, str) else "",
            address=address.strip() if isinstance(address, str) else "",
        )


def apply_detail(listing: Listing, detail: DetailPage) -> Listing:
    """Merge detail page data into ``listing`` in place.

    Images are appended up to the cap, costs are only filled when empty, and
    the address is only replaced when it is the source's placeholder.
    """
    added = sum(1 for url in detail.images if listing.add_image_url(url))

    if not listing.rental_cost:
        listing.rental_cost = extract_price(detail.body_text, TransactionType.RENT)
    if not listing.purchase_cost:
        listing.purchase_cost = extract_price(detail.body_text, TransactionType.SALE)

    if listing.address_is_placeholder:
        address = detail.address or extract_address(detail.body_text, default="")
        if address:
            listing.address = address[:MAX_ADDRESS_LENGTH]
            listing.address_is_placeholder = False

    logger.debug(f"Enriched {listing.listing_url}: +{added} images")
    return listing


async def enrich_from_page(
    page: "BrowserPage",
    listing: Listing,
    timeout_ms: int,
    settle_ms: int = 2000,
) -> Listing:
    """Visit the listing's detail page and merge what it shows.

    Args:
        page: Open browser page to navigate
        listing: Listing to enrich in place
        timeout_ms: Navigation timeout
        settle_ms: Wait after navigation before extracting

    Returns:
        The same listing

    Raises:
        NavigationError: If the detail page cannot be loaded
        ExtractionError: If the detail script fails
    """
    if not is_http_url(listing.listing_url):
        return listing

    await page.navigate(listing.listing_url, timeout_ms=timeout_ms)
    await page.settle(settle_ms)
    payload = await page.evaluate(DETAIL_SCRIPT)
    return apply_detail(listing, DetailPage.from_payload(payload))
