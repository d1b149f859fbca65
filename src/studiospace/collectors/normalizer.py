"""Conversion of raw card field maps into listings.

Each source's card script returns its own short keys ("t", "p", "l", ...).
FIELD_ALIASES maps every key spelling seen in the scripts onto the
ListingCandidate fields.
"""

import logging
from typing import Any, Optional
from urllib.parse import urljoin

from pydantic import ValidationError

from ..models.listing import Listing, ListingCandidate, TransactionType, is_http_url

logger = logging.getLogger(__name__)

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("t", "title", "name"),
    "price_text": ("p", "price"),
    "location_text": ("l", "a", "location", "address"),
    "url": ("u", "href", "url", "link"),
    "image_url": ("i", "image", "img", "src"),
}


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _first(row: dict[str, Any], keys: tuple[str, ...]) -> str:
    for key in keys:
        value = _text(row.get(key))
        if value:
            return value
    return ""


def normalize_row(
    row: Any, source: str, base_url: str
) -> Optional[ListingCandidate]:
    """Map one card field map to a ListingCandidate.

    Args:
        row: Item returned by a card script
        source: Source name
        base_url: Origin relative hrefs are resolved against

    Returns:
        ListingCandidate, or None if the row is not a mapping, has a blank
        title, or has no usable link
    """
    if not isinstance(row, dict):
        logger.debug(f"Dropping malformed {source} card: {row!r}")
        return None

    fields = {name: _first(row, keys) for name, keys in FIELD_ALIASES.items()}
    if not fields["title"]:
        return None

    href = fields["url"]
    if not href:
        logger.debug(f"Dropping {source} card without link: {fields['title']}")
        return None
    url = href if is_http_url(href) else urljoin(base_url, href)
    if not is_http_url(url):
        return None
    fields["url"] = url

    try:
        return ListingCandidate(source=source, **fields)
    except ValidationError as e:
        logger.debug(f"Dropping invalid {source} card: {e}")
        return None


def to_listing(
    candidate: ListingCandidate,
    default_address: str,
    transaction_type: TransactionType = TransactionType.RENT,
) -> Listing:
    """Build a Listing from a candidate that passed classification.

    Args:
        candidate: Normalized card
        default_address: Used (and flagged as placeholder) when the card has
            no location text
        transaction_type: Whether the card price is a rent or a sale price

    Returns:
        New Listing with at most one thumbnail image
    """
    has_location = bool(candidate.location_text)
    price = candidate.price_text or None

    listing = Listing(
        address=candidate.location_text if has_location else default_address,
        address_is_placeholder=not has_location,
        listing_url=candidate.url,
        source=candidate.source,
        description=candidate.title,
        rental_cost=price if transaction_type == TransactionType.RENT else None,
        purchase_cost=price if transaction_type == TransactionType.SALE else None,
    )
    listing.add_image_url(candidate.image_url)
    return listing
