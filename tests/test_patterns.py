"""Tests for price and address extraction."""

from studiospace.filters import extract_address, extract_price
from studiospace.models import TransactionType


class TestExtractRentPrice:
    """Test rent price patterns."""

    def test_rent_per_month(self):
        """Explicit rent with a monthly period is found."""
        text = "Available now, rent: $2,500/month, great space"
        price = extract_price(text, TransactionType.RENT)
        assert price is not None
        assert "$2,500" in price
        assert "/month" in price

    def test_same_text_has_no_sale_price(self):
        """A rent-only text yields nothing for the sale hint."""
        text = "Available now, rent: $2,500/month, great space"
        assert extract_price(text, TransactionType.SALE) is None

    def test_per_square_foot(self):
        """Area-based rates are recognized."""
        assert extract_price("Net rent $18.50 / sq ft plus TMI", "rent") == "$18.50 / sq ft"

    def test_per_period_words(self):
        """'per month' form is recognized."""
        assert extract_price("Only $1,200 per month all in", "rent") == "$1,200 per month"

    def test_lease_prefix(self):
        """'lease: $X' form is found when no period is given."""
        assert extract_price("Lease: $3,000 negotiable", "rent") == "Lease: $3,000"

    def test_specific_pattern_wins(self):
        """Period patterns are tried before the 'rent: $X' pattern."""
        text = "Rent $900 for parking, unit $2,100/mo"
        assert extract_price(text, "rent") == "$2,100/mo"

    def test_empty_text(self):
        """Blank text yields None."""
        assert extract_price("", "rent") is None
        assert extract_price(None, "sale") is None


class TestExtractSalePrice:
    """Test sale price patterns."""

    def test_asking_prefix(self):
        """'Asking: $X' form is found."""
        assert extract_price("Asking: $875,000 firm", TransactionType.SALE) == "Asking: $875,000"

    def test_large_amount(self):
        """Amounts with two comma groups look like purchase prices."""
        assert extract_price("Yours for $1,200,000 today", "sale") == "$1,200,000"

    def test_small_amount_ignored(self):
        """A single comma group is not a purchase price on its own."""
        assert extract_price("Deposit $5,000 required", "sale") is None


class TestExtractAddress:
    """Test street address extraction."""

    def test_finds_street_line(self):
        """The first line that looks like a street address is returned."""
        text = "Great studio\n123 King Street West, Toronto\nCall now"
        assert extract_address(text, "Near L5A 4E6") == "123 King Street West, Toronto"

    def test_splits_on_separators(self):
        """Middle dots and pipes separate lines too."""
        text = "Studio · 45 Queen St E | Toronto"
        assert extract_address(text, "x") == "45 Queen St E"

    def test_default_when_missing(self):
        """The default is returned when nothing matches."""
        assert extract_address("No address here", "Near L5A 4E6") == "Near L5A 4E6"
        assert extract_address("", "GTA") == "GTA"

    def test_truncates_long_line(self):
        """Matches are truncated to 120 characters."""
        text = "10 Main Street " + "x" * 200
        assert len(extract_address(text, "")) == 120
