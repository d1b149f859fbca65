"""Kijiji.ca commercial & office space source.

Searches the Commercial & Office Space category (c40) with photography,
studio and open-space keywords across the Greater Toronto Area regions and
Ontario as a whole. The category also surfaces apartments and every kind of
storefront, so both the residential and the suitability filters apply.
"""

from urllib.parse import quote_plus

from .base import ListingSource, SearchQuery

# (region slug, location code, keywords)
KIJIJI_SEARCHES: list[tuple[str, str, tuple[str, ...]]] = [
    ("city-of-toronto", "l1700273", (
        "photography studio", "photo studio", "photography",
        "creative studio", "studio space", "studio rental", "studio for rent",
        "warehouse", "loft", "industrial unit", "production space", "commercial unit",
    )),
    ("mississauga-peel-region", "l1700276", (
        "photography studio", "studio space", "warehouse", "industrial unit", "commercial unit",
    )),
    ("markham-york-region", "l1700274", (
        "photography studio", "studio space", "warehouse", "industrial unit", "commercial unit",
    )),
    ("oakville-halton-region", "l1700277", ("studio space", "warehouse", "commercial unit")),
    ("hamilton", "l1700242", ("studio space", "warehouse", "industrial unit", "commercial unit")),
    ("oshawa-durham-region", "l1700275", ("studio space", "warehouse", "commercial unit")),
    ("kitchener-waterloo", "l1700212", ("studio space", "warehouse")),
    ("ontario", "l9004", (
        "photography studio", "photo studio", "creative studio", "warehouse space", "industrial unit",
    )),
]

CARD_SCRIPT = """() => {
    const results = [];
    const cards = document.querySelectorAll('[data-testid="listing-card"], [data-listing-id], li.regular-ad');
    for (const card of cards) {
        try {
            const link = card.querySelector('a[href*="/v-"]') || card.querySelector('a[href]');
            const titleEl = card.querySelector('h3, [data-testid="listing-title"], a[class*="title"]');
            const priceEl = card.querySelector('[data-testid="listing-price"], p[class*="price"], span[class*="price"]');
            const locEl = card.querySelector('[data-testid="listing-location"], span[class*="location"], p[class*="location"]');
            const imgEl = card.querySelector('img[src*="http"]');
            const title = titleEl ? (titleEl.innerText || '') : '';
            const price = priceEl ? (priceEl.innerText || '') : '';
            if (title.length === 0 && price.length === 0) continue;
            results.push({
                u: link ? (link.getAttribute('href') || '') : '',
                t: title.trim(),
                p: price.trim(),
                l: locEl ? (locEl.innerText || '').trim() : '',
                i: imgEl ? (imgEl.getAttribute('src') || '') : ''
            });
        } catch (e) {}
    }
    return results;
}"""


class KijijiSource(ListingSource):
    """Kijiji commercial & office space search."""

    name = "Kijiji"
    base_url = "https://www.kijiji.ca"
    card_script = CARD_SCRIPT
    check_residential = True
    check_suitability = True
    detail_limit = 8
    settle_ms = 3000

    def build_queries(self, postal_code: str) -> list[SearchQuery]:
        queries = []
        for region, location, keywords in KIJIJI_SEARCHES:
            for keyword in keywords:
                url = (
                    f"{self.base_url}/b-commercial-office-space/{region}/"
                    f"{quote_plus(keyword)}/k0c40{location}"
                )
                queries.append(SearchQuery(url=url, base_url=self.base_url))
        return queries

    def default_address(self, postal_code: str) -> str:
        return "Mississauga / Peel Region, ON"
