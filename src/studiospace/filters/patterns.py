"""Regular-expression extraction of prices and street addresses from page text."""

import re
from typing import Optional

from ..models.listing import TransactionType

_AMOUNT = r"\$[\d,]+(?:\.\d{2})?"

# Ordered most specific first; the first pattern that matches wins.
RENT_PATTERNS = [
    re.compile(_AMOUNT + r"\s*/\s*(?:mo(?:nth)?|yr|year)", re.IGNORECASE),
    re.compile(_AMOUNT + r"\s*/\s*(?:sf|sqft|sq\.?\s*ft)", re.IGNORECASE),
    re.compile(_AMOUNT + r"\s*(?:per\s+(?:month|year|sf|sqft))", re.IGNORECASE),
    re.compile(r"(?:rent|lease)[:\s]*" + _AMOUNT, re.IGNORECASE),
    re.compile(_AMOUNT + r"\s*/mo", re.IGNORECASE),
]

SALE_PATTERNS = [
    re.compile(_AMOUNT + r"\s*(?:asking|sale|purchase)", re.IGNORECASE),
    re.compile(r"(?:price|asking|sale)[:\s]*" + _AMOUNT, re.IGNORECASE),
    # Two or more comma groups: $500,000 or $1,200,000
    re.compile(r"\$\d{1,3}(?:,\d{3}){2,}", re.IGNORECASE),
]

STREET_ADDRESS_PATTERN = re.compile(
    r"\d+\s+\w+\s+(St|Ave|Rd|Dr|Blvd|Cres|Way|Ct|Ln|Pl|Street|Avenue|Road|Drive|Boulevard)",
    re.IGNORECASE,
)

_LINE_SPLIT = re.compile(r"[\n\r·|]+")

MAX_ADDRESS_LINE = 120


def extract_price(
    text: Optional[str], kind: TransactionType | str
) -> Optional[str]:
    """Find the first rent or sale price in free text.

    Args:
        text: Page body text
        kind: TransactionType.RENT or TransactionType.SALE (or "rent"/"sale")

    Returns:
        The matched price text, trimmed, or None
    """
    if not text or not text.strip():
        return None

    patterns = RENT_PATTERNS if TransactionType(kind) == TransactionType.RENT else SALE_PATTERNS
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return match.group(0).strip()
    return None


def extract_address(text: Optional[str], default: str) -> str:
    """Return the first line of ``text`` that looks like a street address.

    Lines are split on newlines, middle dots and pipes. Matches longer than
    120 characters are truncated.

    Args:
        text: Free text to scan
        default: Returned when nothing looks like an address

    Returns:
        The address line or ``default``
    """
    if not text or not text.strip():
        return default

    for line in _LINE_SPLIT.split(text):
        trimmed = line.strip()
        if trimmed and STREET_ADDRESS_PATTERN.search(trimmed):
            return trimmed[:MAX_ADDRESS_LINE]
    return default
