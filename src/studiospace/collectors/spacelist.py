"""Spacelist.ca commercial real estate source.

Spacelist only lists commercial space, so the residential filter is skipped.
Lease and sale searches are separate: the card price becomes the rental cost
for lease results and the purchase cost for sale results.
"""

from urllib.parse import urlencode

from ..models.listing import TransactionType
from .base import ListingSource, SearchQuery

# (transaction type, location, keywords)
SPACELIST_SEARCHES: list[tuple[TransactionType, str, str]] = [
    (TransactionType.RENT, "Toronto ON", "photography studio"),
    (TransactionType.SALE, "Toronto ON", "photography studio"),
    (TransactionType.RENT, "Toronto ON", "studio"),
    (TransactionType.RENT, "Mississauga ON", "photography studio"),
    (TransactionType.SALE, "Mississauga ON", "photography studio"),
    (TransactionType.RENT, "Mississauga ON", "studio"),
    (TransactionType.RENT, "Hamilton ON", "studio"),
    (TransactionType.RENT, "Markham ON", "studio"),
    (TransactionType.RENT, "Vaughan ON", "studio"),
    (TransactionType.RENT, "Brampton ON", "studio"),
    (TransactionType.RENT, "Oakville ON", "studio"),
    (TransactionType.RENT, "Kitchener ON", "studio"),
]

# Spacelist's own name for each transaction type
SEARCH_TYPES = {
    TransactionType.RENT: "lease",
    TransactionType.SALE: "sale",
}

CARD_SCRIPT = """() => {
    const results = [];
    const cards = document.querySelectorAll('[class*="listing"], [class*="property"], [class*="card"], article, .search-result');
    for (const card of cards) {
        try {
            const link = card.querySelector('a[href*="/l/"], a[href*="/listing"], a[href]');
            const title = card.querySelector('h2, h3, [class*="title"], [class*="name"]');
            const price = card.querySelector('[class*="price"], [class*="rate"], [class*="Price"]');
            const addr = card.querySelector('[class*="address"], [class*="location"], [class*="Address"]');
            const img = card.querySelector('img[src*="http"]');
            if (!link && !title) continue;
            results.push({
                u: link ? (link.getAttribute('href') || '') : '',
                t: (title ? title.innerText : '').trim(),
                p: (price ? price.innerText : '').trim(),
                a: (addr ? addr.innerText : '').trim(),
                i: img ? (img.getAttribute('src') || '') : ''
            });
        } catch (e) {}
    }
    return results;
}"""


class SpacelistSource(ListingSource):
    """Spacelist.ca lease and sale search."""

    name = "Spacelist.ca"
    base_url = "https://www.spacelist.ca"
    card_script = CARD_SCRIPT
    check_residential = False
    check_suitability = True
    detail_limit = 6
    settle_ms = 3000

    def build_queries(self, postal_code: str) -> list[SearchQuery]:
        queries = []
        for transaction_type, location, keywords in SPACELIST_SEARCHES:
            params = urlencode({
                "type": SEARCH_TYPES[transaction_type],
                "location": location,
                "keywords": keywords,
            })
            queries.append(SearchQuery(
                url=f"{self.base_url}/search?{params}",
                base_url=self.base_url,
                transaction_type=transaction_type,
            ))
        return queries

    def default_address(self, postal_code: str) -> str:
        return f"Near {postal_code}"
