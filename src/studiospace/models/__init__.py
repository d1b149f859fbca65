"""Data models for StudioSpace."""

from studiospace.models.listing import (
    MAX_IMAGES,
    Listing,
    ListingCandidate,
    TransactionType,
    is_http_url,
)

__all__ = [
    "MAX_IMAGES",
    "Listing",
    "ListingCandidate",
    "TransactionType",
    "is_http_url",
]
