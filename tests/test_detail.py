"""Tests for detail page enrichment."""

import asyncio

from conftest import FakeSession

from studiospace.collectors import DetailPage, apply_detail, enrich_from_page
from studiospace.models import MAX_IMAGES, Listing


class TestDetailPayload:
    """Test parsing of the detail script result."""

    def test_full_payload(self):
        """All three parts are read."""
        detail = DetailPage.from_payload({
            "images": ["https://i.example/1.jpg", 42],
            "bodyText": "Rent $1,000/mo",
            "address": " 12 King St W ",
        })
        assert detail.images == ["https://i.example/1.jpg"]
        assert detail.body_text == "Rent $1,000/mo"
        assert detail.address == "12 King St W"

    def test_unexpected_shape(self):
        """Anything but an object gives an empty detail page."""
        assert DetailPage.from_payload([1, 2]) == DetailPage()
        assert DetailPage.from_payload({"images": "nope"}).images == []


class TestApplyDetail:
    """Test merging detail data into a listing."""

    def test_never_overwrites_costs(self, sample_listing: Listing):
        """A cost found during discovery is kept."""
        detail = DetailPage(body_text="Lease: $5,000 per month. Asking price: $1,250,000")
        apply_detail(sample_listing, detail)

        assert sample_listing.rental_cost == "$2,000/month"
        assert sample_listing.purchase_cost == "price: $1,250,000"

    def test_fills_empty_rent(self, sample_listing: Listing):
        """An empty rental cost is filled from the page text."""
        sample_listing.rental_cost = None
        apply_detail(sample_listing, DetailPage(body_text="Only $1,800/month"))
        assert sample_listing.rental_cost == "$1,800/month"
        assert sample_listing.purchase_cost is None

    def test_images_capped_and_unique(self, sample_listing: Listing):
        """Images never exceed the cap and never repeat."""
        images = [f"https://i.example/{n}.jpg" for n in range(12)]
        images.insert(1, "https://img.stub.example/thumb.jpg")
        images.append("https://i.example/0.jpg")
        apply_detail(sample_listing, DetailPage(images=images))

        assert len(sample_listing.image_urls) == MAX_IMAGES
        assert len(set(sample_listing.image_urls)) == MAX_IMAGES
        assert sample_listing.image_urls[0] == "https://img.stub.example/thumb.jpg"
        assert sample_listing.image_urls[1] == "https://i.example/0.jpg"

    def test_relative_images_ignored(self, sample_listing: Listing):
        """Only absolute HTTP(S) image URLs are added."""
        apply_detail(sample_listing, DetailPage(images=["/img/a.jpg", "data:image/png;base64,xx"]))
        assert sample_listing.image_urls == ["https://img.stub.example/thumb.jpg"]

    def test_placeholder_address_refined(self, sample_listing: Listing):
        """A placeholder address is replaced by the page's address element."""
        apply_detail(sample_listing, DetailPage(address="55 Industrial Rd, Mississauga"))
        assert sample_listing.address == "55 Industrial Rd, Mississauga"
        assert not sample_listing.address_is_placeholder

    def test_placeholder_address_from_body(self, sample_listing: Listing):
        """Without an address element, a street line in the text is used."""
        apply_detail(sample_listing, DetailPage(body_text="Studio\n88 Dundas Street West\nCall"))
        assert sample_listing.address == "88 Dundas Street West"

    def test_address_truncated(self, sample_listing: Listing):
        """Refined addresses are capped at 150 characters."""
        apply_detail(sample_listing, DetailPage(address="A" * 400))
        assert len(sample_listing.address) == 150

    def test_real_address_kept(self, sample_listing: Listing):
        """An address found on the card is never replaced."""
        sample_listing.address = "Hamilton"
        sample_listing.address_is_placeholder = False
        apply_detail(sample_listing, DetailPage(address="1 Other St"))
        assert sample_listing.address == "Hamilton"


class TestEnrichFromPage:
    """Test the detail page visit."""

    def test_visits_listing_url(self, sample_listing: Listing):
        """The detail page is loaded and its payload merged."""
        session = FakeSession(pages={
            sample_listing.listing_url: {
                "images": ["https://i.example/big.jpg"],
                "bodyText": "",
                "address": "",
            },
        })

        async def run():
            page = await session.new_page()
            return await enrich_from_page(page, sample_listing, timeout_ms=1000, settle_ms=0)

        listing = asyncio.run(run())

        assert session.visited == [sample_listing.listing_url]
        assert listing.image_urls[-1] == "https://i.example/big.jpg"
