"""Craigslist offices & commercial source (Toronto and Hamilton)."""

from urllib.parse import urlencode

from .base import ListingSource, SearchQuery

# (site, query)
CRAIGSLIST_SEARCHES: list[tuple[str, str]] = [
    ("toronto", "photography studio"),
    ("toronto", "photo studio"),
    ("toronto", "creative studio"),
    ("toronto", "studio space"),
    ("toronto", "warehouse space"),
    ("toronto", "industrial unit"),
    ("toronto", "loft space"),
    ("toronto", "commercial space"),
    ("hamilton", "studio space"),
    ("hamilton", "warehouse space"),
    ("hamilton", "commercial space"),
]

CARD_SCRIPT = """() => {
    const results = [];
    const rows = document.querySelectorAll('.cl-search-result, li.result-row, .result-info');
    for (const row of rows) {
        try {
            const link = row.querySelector('a[href*="craigslist"], a.posting-title, a.result-title, a[href]');
            const titleEl = row.querySelector('.posting-title .label, .result-title, a .label, .title');
            const priceEl = row.querySelector('.priceinfo, .result-price, .price');
            const locEl = row.querySelector('.meta .subreddit, .result-hood, .nearby');
            const imgEl = row.querySelector('img[src*="http"]');
            if (!link && !titleEl) continue;
            const title = titleEl ? (titleEl.innerText || titleEl.textContent || '') : (link ? link.innerText : '');
            results.push({
                u: link ? (link.getAttribute('href') || '') : '',
                t: title.trim(),
                p: priceEl ? priceEl.innerText.trim() : '',
                l: locEl ? locEl.innerText.trim() : '',
                i: imgEl ? (imgEl.getAttribute('src') || '') : ''
            });
        } catch (e) {}
    }
    return results;
}"""


class CraigslistSource(ListingSource):
    """Craigslist "off" (offices & commercial) search."""

    name = "Craigslist"
    base_url = "https://toronto.craigslist.org"
    card_script = CARD_SCRIPT
    check_residential = True
    check_suitability = True
    detail_limit = 8
    settle_ms = 2000

    def build_queries(self, postal_code: str) -> list[SearchQuery]:
        queries = []
        for site, query in CRAIGSLIST_SEARCHES:
            origin = f"https://{site}.craigslist.org"
            queries.append(SearchQuery(
                url=f"{origin}/search/off?{urlencode({'query': query})}",
                base_url=origin,
            ))
        return queries

    def default_address(self, postal_code: str) -> str:
        return "GTA, Ontario"
